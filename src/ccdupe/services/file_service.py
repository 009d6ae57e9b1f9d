"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

services/file_service.py
File deletion for both resolution modes: permanent removal or the system trash.
"""
import os
import logging
from send2trash import send2trash

from ccdupe.core.errors import NotFoundError, ReadError, translate_os_error

logger = logging.getLogger(__name__)


class FileService:
    """
    Deletes single files. Symlinks are removed themselves, never their targets.
    All failures are raised as CcdupeError subclasses.
    """

    @staticmethod
    def delete_file(file_path: str, use_trash: bool = False) -> None:
        """Deletes a file permanently, or moves it to the trash when `use_trash` is set."""
        if use_trash:
            FileService.move_to_trash(file_path)
        else:
            FileService.remove(file_path)

    @staticmethod
    def remove(file_path: str) -> None:
        """Permanently removes a file."""
        if not file_path:
            raise ValueError("File path is required")
        try:
            os.remove(file_path)
        except IsADirectoryError as e:
            raise ReadError(f"Not a file: {file_path}", file_path) from e
        except OSError as e:
            raise translate_os_error(e, file_path) from e
        logger.info(f"Deleted file: {file_path}")

    @staticmethod
    def move_to_trash(file_path: str) -> None:
        """Moves a file to the system trash."""
        if not file_path:
            raise ValueError("File path is required")
        # lexists: a dangling symlink is still a file that can be trashed
        if not os.path.lexists(file_path):
            raise NotFoundError(f"File not found: {file_path}", file_path)

        try:
            send2trash(os.path.abspath(file_path))
        except OSError as e:
            raise translate_os_error(e, file_path) from e
        logger.info(f"Moved file to trash: {file_path}")

