import os
import shutil

import pytest
from collector.models import Manifest
from collector.repositories import ManifestRepository

ASSETS_DIR = os.path.join(os.path.dirname(os.path.dirname(__file__)), "assets")


@pytest.fixture
def manifest_file(tmp_path):
    source_file = os.path.join(ASSETS_DIR, "manifest.yaml")
    dest_file = tmp_path / "manifest.yaml"
    shutil.copy(source_file, dest_file)
    return dest_file

def test_manifest_repository_find_file_not_exists():
    manifest = ManifestRepository("notexistingfile").find()
    assert manifest == Manifest()
    assert manifest.count == 0
    assert manifest.latest_version == ""

def test_manifest_repository_find(manifest_file):
    manifest = ManifestRepository(str(manifest_file)).find()
    assert manifest.versions == ["hanoi", "ireland"]
    assert manifest.latest_version == "ireland"
    assert manifest.count == 2
    assert manifest.updated is False

def test_manifest_repository_save(manifest_file):
    repo = ManifestRepository(str(manifest_file))
    new_manifest = Manifest(versions=["hanoi", "ireland", "jakarta"], latest_version="jakarta", count=3, updated=True)

    assert repo.save(new_manifest)

    assert repo.find() == new_manifest
    content = manifest_file.read_text()
    assert "latestVersion: jakarta" in content
    assert "updated: 'true'" in content

def test_invalid_manifest_file_schema(tmp_path):
    bad_file = tmp_path / "manifest.yaml"
    bad_file.write_text("versions:\n  - hanoi\ncount: many\n")

    repo = ManifestRepository(str(bad_file))
    with pytest.raises(ValueError, match="Invalid manifest.yaml"):
        repo.find()
