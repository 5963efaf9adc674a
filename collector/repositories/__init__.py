from .edgex_config_repository import EdgeXConfigRepository
from .image_list_repository import ImageListRepository
from .manifest_repository import ManifestRepository

__all__ = [
    'EdgeXConfigRepository',
    'ImageListRepository',
    'ManifestRepository'
]
