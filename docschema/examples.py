"""
Example corpus index.

The example corpus is a separate checkout of runnable example pages. Example
links in the API reference are checked against the file names it contains.
The corpus is optional: when it is not present, example checks are skipped.
"""

import logging
from pathlib import Path
from typing import Iterable, Optional, Set

logger = logging.getLogger(__name__)


class ExampleCorpus:
    """Set of example file names gathered from the corpus subdirectories."""

    SUBDIRECTORIES = ('welcomes', 'options', 'column-options', 'methods')

    def __init__(self, root: Path, files: Iterable[str]):
        self.root = Path(root)
        self.files: Set[str] = set(files)

    def __contains__(self, file_name: str) -> bool:
        return file_name in self.files

    def __len__(self) -> int:
        return len(self.files)

    @classmethod
    def load(cls, root: Path) -> Optional["ExampleCorpus"]:
        """
        Index the corpus rooted at `root`.

        Args:
            root: Example corpus checkout directory

        Returns:
            ExampleCorpus, or None if the directory does not exist
        """
        root = Path(root)
        if not root.is_dir():
            logger.debug(f"Example corpus not found at {root}")
            return None

        files = []
        for subdir in cls.SUBDIRECTORIES:
            directory = root / subdir
            if not directory.is_dir():
                logger.warning(f"Example corpus has no '{subdir}' directory: {directory}")
                continue
            files.extend(item.name for item in directory.iterdir())

        logger.info(f"Indexed {len(files)} example files from {root}")
        return cls(root, files)
