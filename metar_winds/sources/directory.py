import logging
from pathlib import Path
from typing import List, Union

from .base import BulletinSource, BulletinSourceError

logger = logging.getLogger(__name__)


class DirectorySource(BulletinSource):
    """
    Source reading every file of a directory as one bulletin text.

    The directory is not searched recursively. Files are read in name order
    as UTF-8, undecodable bytes being replaced rather than rejected.
    """

    def __init__(self, directory: Union[str, Path], encoding: str = 'utf-8'):
        """
        Initialize the directory source.

        Args:
            directory: Directory containing the bulletin files
            encoding: Text encoding of the files
        """
        self.directory = Path(directory).resolve()
        self.encoding = encoding

    def _files(self) -> List[Path]:
        if not self.directory.exists():
            raise BulletinSourceError(f"Bulletin directory not found: {self.directory}", str(self.directory))
        if not self.directory.is_dir():
            raise BulletinSourceError(f"Not a directory: {self.directory}", str(self.directory))
        return sorted(p for p in self.directory.iterdir() if p.is_file())

    def find_available_files(self) -> List[str]:
        return [p.name for p in self._files()]

    def read_blobs(self) -> List[str]:
        blobs = []
        for path in self._files():
            try:
                blobs.append(path.read_text(encoding=self.encoding, errors='replace'))
            except OSError as e:
                raise BulletinSourceError(f"Cannot read bulletin file {path}: {e}", str(path)) from e
        logger.info(f"Read {len(blobs)} bulletin files from {self.directory}")
        return blobs
