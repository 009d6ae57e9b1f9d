"""
Tests for the resolution drivers: pairwise interactive prompts and JSON output.
"""
import io
import json
from unittest import mock

import pytest

from ccdupe.core.errors import AccessDeniedError, MarshalError
from ccdupe.core.models import Choice, DuplicateGroup, ScanResult
from ccdupe.services.resolution import (
    InteractiveResolver,
    TerminalHandler,
    build_report,
    render_json,
)


class ScriptedHandler:
    """ResolutionHandler with canned answers; records prompts, deletions and errors."""

    def __init__(self, answers, failing=()):
        self.answers = list(answers)
        self.failing = set(failing)
        self.prompts = []
        self.deleted = []
        self.errors = []

    def choose(self, first, second):
        self.prompts.append((first, second))
        return self.answers.pop(0)

    def delete(self, path):
        if path in self.failing:
            raise AccessDeniedError(f"Permission denied: {path}", path)
        self.deleted.append(path)

    def report_error(self, message):
        self.errors.append(message)


def group(*paths):
    return DuplicateGroup(paths=tuple(paths), fingerprint="fp")


class TestInteractiveResolver:

    def test_delete_second(self):
        handler = ScriptedHandler([Choice.DELETE_SECOND])

        report = InteractiveResolver(handler).resolve([group("/a", "/b")])

        assert handler.prompts == [("/a", "/b")]
        assert handler.deleted == ["/b"]
        assert report.deleted == ["/b"]
        assert report.prompts == 1

    def test_keep_both_deletes_nothing(self):
        handler = ScriptedHandler([Choice.KEEP_BOTH])

        report = InteractiveResolver(handler).resolve([group("/a", "/b")])

        assert handler.deleted == []
        assert report.deleted == []

    def test_three_files_keep_all_prompts_every_pair(self):
        handler = ScriptedHandler([Choice.KEEP_BOTH] * 3)

        InteractiveResolver(handler).resolve([group("/a", "/b", "/c")])

        assert handler.prompts == [("/a", "/b"), ("/a", "/c"), ("/b", "/c")]

    def test_pairs_with_deleted_file_are_skipped(self):
        handler = ScriptedHandler([Choice.DELETE_SECOND, Choice.DELETE_FIRST])

        InteractiveResolver(handler).resolve([group("/a", "/b", "/c")])

        # /b deleted on the first prompt, /a on the second: (/b, /c) is never asked
        assert handler.prompts == [("/a", "/b"), ("/a", "/c")]
        assert handler.deleted == ["/b", "/a"]

    def test_deleting_first_moves_on_to_next_row(self):
        handler = ScriptedHandler([Choice.DELETE_FIRST, Choice.KEEP_BOTH])

        InteractiveResolver(handler).resolve([group("/a", "/b", "/c")])

        assert handler.prompts == [("/a", "/b"), ("/b", "/c")]

    def test_failed_delete_is_reported_and_resolution_continues(self):
        handler = ScriptedHandler([Choice.DELETE_FIRST, Choice.DELETE_SECOND], failing={"/a"})

        report = InteractiveResolver(handler).resolve([group("/a", "/b"), group("/x", "/y")])

        assert handler.prompts == [("/a", "/b"), ("/x", "/y")]
        assert handler.deleted == ["/y"]
        assert report.failed == [("/a", "Permission denied: /a")]
        assert len(handler.errors) == 1
        assert "/a" in handler.errors[0]

    def test_file_that_failed_to_delete_is_still_offered(self):
        handler = ScriptedHandler([Choice.DELETE_FIRST, Choice.KEEP_BOTH, Choice.KEEP_BOTH], failing={"/a"})

        InteractiveResolver(handler).resolve([group("/a", "/b", "/c")])

        assert handler.prompts == [("/a", "/b"), ("/a", "/c"), ("/b", "/c")]

    def test_no_groups_no_prompts(self):
        handler = ScriptedHandler([])

        report = InteractiveResolver(handler).resolve([])

        assert report.prompts == 0
        assert "Files deleted: 0" in report.summary()


class TestTerminalHandler:

    def make_handler(self, answers, **kwargs):
        out, err = io.StringIO(), io.StringIO()
        inputs = iter(answers)

        def fake_input(prompt):
            try:
                return next(inputs)
            except StopIteration:
                raise EOFError

        return TerminalHandler(input_func=fake_input, out=out, err=err, **kwargs), out, err

    def test_choose_shows_both_paths(self):
        handler, out, _ = self.make_handler(["2"])

        assert handler.choose("/a", "/b") == Choice.DELETE_SECOND
        text = out.getvalue()
        assert "/a|/b" in text
        assert "Which file should be deleted?" in text
        assert "3) Keep both files" in text

    def test_invalid_answer_reprompts(self):
        handler, out, _ = self.make_handler(["x", "", " 1 "])

        assert handler.choose("/a", "/b") == Choice.DELETE_FIRST
        assert out.getvalue().count("Please answer 1, 2 or 3.") == 2

    def test_end_of_input_keeps_both(self):
        handler, _, _ = self.make_handler([])

        assert handler.choose("/a", "/b") == Choice.KEEP_BOTH

    def test_delete_removes_file(self, hello_world_tree):
        handler, out, _ = self.make_handler([])

        handler.delete(str(hello_world_tree["b"]))

        assert not hello_world_tree["b"].exists()
        assert f"Deleted: {hello_world_tree['b']}" in out.getvalue()

    def test_delete_with_trash(self, hello_world_tree):
        handler, out, _ = self.make_handler([], use_trash=True)

        with mock.patch("ccdupe.services.file_service.send2trash") as trash:
            handler.delete(str(hello_world_tree["b"]))

        trash.assert_called_once()
        assert "Moved to trash:" in out.getvalue()

    def test_report_error_goes_to_err(self):
        handler, out, err = self.make_handler([])

        handler.report_error("Error deleting file /a: Permission denied: /a")

        assert "Permission denied" in err.getvalue()
        assert out.getvalue() == ""

    def test_defaults_to_builtin_input(self):
        with mock.patch("builtins.input", return_value="3"):
            handler = TerminalHandler(out=io.StringIO())
            assert handler.choose("/a", "/b") == Choice.KEEP_BOTH

    def test_full_session_on_real_files(self, hello_world_tree):
        handler, _, _ = self.make_handler(["2"])
        dup = group(str(hello_world_tree["a"]), str(hello_world_tree["b"]))

        report = InteractiveResolver(handler).resolve([dup])

        assert hello_world_tree["a"].exists()
        assert not hello_world_tree["b"].exists()
        assert hello_world_tree["c"].exists()
        assert report.deleted == [str(hello_world_tree["b"])]


class TestStructuredOutput:

    def test_build_report_shape(self):
        result = ScanResult(groups=(group("/a", "/b"),), total_files=3)

        assert build_report(result) == {
            "duplicate_groups": [{"files": ["/a", "/b"], "hash": "fp"}],
            "total_files": 3,
            "total_duplicates": 2,
        }

    def test_render_json_is_parseable(self):
        result = ScanResult(groups=(group("/a", "/b"), group("/x", "/y", "/z")), total_files=10)

        data = json.loads(render_json(result))

        assert data["total_files"] == 10
        assert data["total_duplicates"] == 5
        assert [g["files"] for g in data["duplicate_groups"]] == [["/a", "/b"], ["/x", "/y", "/z"]]

    def test_render_json_empty_result(self):
        data = json.loads(render_json(ScanResult()))

        assert data == {"duplicate_groups": [], "total_files": 0, "total_duplicates": 0}

    def test_unserializable_result_raises_marshal_error(self):
        bad = DuplicateGroup(paths=("/a", "/b"), fingerprint=object())

        with pytest.raises(MarshalError):
            render_json(ScanResult(groups=(bad,), total_files=2))
