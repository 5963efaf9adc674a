#!/usr/bin/env python3
import argparse
import os
import sys
from collector.services.branch_discoverer import BRANCHES_URL
from collector.services.edgex_collection_service import EdgeXCollectionService
from collector.utils.logging import setup_logger

ROOT_DIR = os.path.dirname(os.path.abspath(__file__))


def main():
    parser = argparse.ArgumentParser(description="EdgeX Version Collector")
    parser.add_argument('--dry-run', action='store_true', help='Run in dry-run mode without writing any file')
    parser.add_argument('--repo', default=os.environ.get("TARGET_REPOSITORY", "openyurt"),
                        help='Repository prefix the collected images are rewritten to')
    args = parser.parse_args()
    logger = setup_logger("EdgeXCollector")
    try:
        config_dir = os.environ.get("EDGEX_CONFIG_DIR", f"{ROOT_DIR}/EdgeXConfig")
        image_list_dir = os.environ.get("IMAGE_LIST_DIR", f"{ROOT_DIR}/config")
        branches_url = os.environ.get("EDGEX_BRANCHES_URL", BRANCHES_URL)
        logger.info(f"Starting EdgeX collection into {config_dir}, image lists in {image_list_dir}, repository {args.repo}")
        service = EdgeXCollectionService(config_dir, image_list_dir, args.repo, branches_url, args.dry_run)
        service.run()
        logger.info("EdgeX collection completed successfully")
        return 0
    except Exception as e:
        logger.error(f"EdgeX collection failed: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
