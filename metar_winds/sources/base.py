from abc import ABC, abstractmethod
from typing import List


class BulletinSourceError(Exception):
    """Exception raised when bulletin input cannot be read."""

    def __init__(self, message: str, path: str = None):
        """
        Initialize source error.

        Args:
            message: Error message
            path: Optional path of the offending file or directory
        """
        super().__init__(message)
        self.path = path


class BulletinSource(ABC):
    """
    Base interface for all bulletin sources.

    A source supplies a finite, known-count list of raw bulletin texts,
    one per input file. Any failure to read an input is fatal and raised
    as BulletinSourceError; the wind pipeline never sees partial input.
    """

    @abstractmethod
    def read_blobs(self) -> List[str]:
        """
        Read every bulletin this source provides.

        Returns:
            List of raw bulletin texts, one per input file

        Raises:
            BulletinSourceError: If any input cannot be read
        """
        pass

    def find_available_files(self) -> List[str]:
        """
        Find the names of the inputs this source would read.

        Sources that cannot enumerate their inputs return an empty list.
        """
        return []

    def get_source_name(self) -> str:
        """
        Get the name of this source.

        Returns:
            String identifier for this source
        """
        return self.__class__.__name__.lower()
