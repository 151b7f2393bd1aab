"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

services/file_service.py
File removal for duplicate targets: permanent deletion or the system trash.
"""
import os
import logging
from pathlib import Path
from send2trash import send2trash

from refdedup.core.models import DeletionMethod

logger = logging.getLogger(__name__)


class FileService:
    """
    Cross-platform file removal.
    Errors are raised as OSError so callers handle a single failure kind.
    """

    @staticmethod
    def delete_file(file_path: str):
        """Permanently removes a file."""
        os.remove(file_path)
        logger.debug(f"Deleted {file_path}")

    @staticmethod
    def move_to_trash(file_path: str):
        """Moves a file to the system trash."""
        path = Path(file_path).resolve()

        if not path.exists():
            raise FileNotFoundError(f"File not found: {path}")

        try:
            send2trash(str(path))
        except OSError:
            raise
        except Exception as e:
            raise OSError(f"Failed to move to trash: {e}") from e
        logger.debug(f"Moved to trash {path}")

    @classmethod
    def remove(cls, file_path: str, method: DeletionMethod = DeletionMethod.DELETE):
        """Removes a file with the given method."""
        if method == DeletionMethod.TRASH:
            cls.move_to_trash(file_path)
        else:
            cls.delete_file(file_path)
