from .base import BulletinSource, BulletinSourceError
from .directory import DirectorySource

__all__ = [
    'BulletinSource',
    'BulletinSourceError',
    'DirectorySource',
]
