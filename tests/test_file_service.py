"""
Tests for FileService: permanent removal and trash moves.
"""
import os
from unittest import mock

import pytest

from ccdupe.core.errors import CcdupeError, NotFoundError
from ccdupe.services.file_service import FileService


class TestRemove:

    def test_remove_deletes_file(self, hello_world_tree):
        FileService.delete_file(str(hello_world_tree["a"]))

        assert not hello_world_tree["a"].exists()
        assert hello_world_tree["b"].exists()

    def test_remove_missing_file_raises_not_found(self, temp_dir):
        with pytest.raises(NotFoundError) as exc_info:
            FileService.remove(str(temp_dir / "gone.txt"))

        assert "not found" in str(exc_info.value).lower()
        assert exc_info.value.path == str(temp_dir / "gone.txt")

    def test_remove_directory_is_refused(self, temp_dir):
        (temp_dir / "sub").mkdir()

        with pytest.raises(CcdupeError):
            FileService.remove(str(temp_dir / "sub"))
        assert (temp_dir / "sub").is_dir()

    def test_empty_path_is_rejected(self):
        with pytest.raises(ValueError):
            FileService.remove("")

    @pytest.mark.usefixtures("requires_symlinks")
    def test_removing_symlink_keeps_target(self, hello_world_tree):
        link = hello_world_tree["a"].parent / "link"
        os.symlink(hello_world_tree["a"], link)

        FileService.remove(str(link))

        assert not os.path.lexists(link)
        assert hello_world_tree["a"].read_bytes() == b"hello"


class TestMoveToTrash:

    def test_trash_calls_send2trash_with_absolute_path(self, hello_world_tree):
        with mock.patch("ccdupe.services.file_service.send2trash") as trash:
            FileService.delete_file(str(hello_world_tree["a"]), use_trash=True)

        trash.assert_called_once_with(os.path.abspath(str(hello_world_tree["a"])))

    def test_trash_missing_file_raises_not_found(self, temp_dir):
        with mock.patch("ccdupe.services.file_service.send2trash") as trash:
            with pytest.raises(NotFoundError):
                FileService.move_to_trash(str(temp_dir / "gone.txt"))

        trash.assert_not_called()

    def test_trash_failure_is_translated(self, hello_world_tree):
        with mock.patch(
                "ccdupe.services.file_service.send2trash",
                side_effect=PermissionError(13, "Permission denied"),
        ):
            with pytest.raises(CcdupeError) as exc_info:
                FileService.move_to_trash(str(hello_world_tree["a"]))

        assert "Permission denied" in str(exc_info.value)
