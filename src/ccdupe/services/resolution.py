"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

services/resolution.py
Turns verified duplicate groups into user-facing actions.

Two drivers share the same upstream ScanResult:
- InteractiveResolver: pairwise "which file should be deleted?" prompts with
  synchronous deletion, through a ResolutionHandler capability
- build_report / render_json: structured output, never deletes anything
"""
import json
import logging
import sys
from typing import Callable, Iterable, Optional, TextIO

from ccdupe.core.errors import CcdupeError, MarshalError
from ccdupe.core.interfaces import ResolutionHandler
from ccdupe.core.models import Choice, DuplicateGroup, ResolutionReport, ScanResult
from ccdupe.services.file_service import FileService

logger = logging.getLogger(__name__)


class InteractiveResolver:
    """
    Walks confirmed groups and asks the handler about every pair.
    Groups of more than two files are decomposed into sequential pairwise
    prompts; pairs with an already deleted member are skipped.
    """

    def __init__(self, handler: ResolutionHandler):
        self.handler = handler

    def resolve(self, groups: Iterable[DuplicateGroup]) -> ResolutionReport:
        report = ResolutionReport()
        for group in groups:
            self._resolve_group(group, report)
        return report

    def _resolve_group(self, group: DuplicateGroup, report: ResolutionReport) -> None:
        paths = group.paths
        deleted = set()

        for i in range(len(paths) - 1):
            for j in range(i + 1, len(paths)):
                first, second = paths[i], paths[j]
                if first in deleted:
                    break
                if second in deleted:
                    continue

                logger.info(f"Found duplicates: {first} {second}")
                report.prompts += 1
                choice = self.handler.choose(first, second)

                if choice == Choice.DELETE_FIRST:
                    target = first
                elif choice == Choice.DELETE_SECOND:
                    target = second
                else:
                    continue

                if self._delete(target, report):
                    deleted.add(target)

    def _delete(self, path: str, report: ResolutionReport) -> bool:
        try:
            self.handler.delete(path)
        except CcdupeError as e:
            logger.error(f"Error deleting file {path}: {e}")
            report.failed.append((path, str(e)))
            self.handler.report_error(f"Error deleting file {path}: {e}")
            return False
        report.deleted.append(path)
        return True


class TerminalHandler(ResolutionHandler):
    """
    ResolutionHandler backed by stdin/stdout.
    End of input on stdin is treated as "keep both".
    """

    PROMPT = "Which file should be deleted?"

    def __init__(
            self,
            use_trash: bool = False,
            input_func: Optional[Callable[[str], str]] = None,
            out: Optional[TextIO] = None,
            err: Optional[TextIO] = None,
    ):
        self.use_trash = use_trash
        self.input_func = input_func or input
        self.out = out or sys.stdout
        self.err = err or sys.stderr

    def choose(self, first: str, second: str) -> Choice:
        print(f"\nDuplicates: {first}|{second}", file=self.out)
        print(self.PROMPT, file=self.out)
        print(f"  1) {first}", file=self.out)
        print(f"  2) {second}", file=self.out)
        print("  3) Keep both files", file=self.out)

        while True:
            try:
                answer = self.input_func("Select [1/2/3]: ")
            except EOFError:
                print("", file=self.out)
                return Choice.KEEP_BOTH
            try:
                return Choice(answer.strip())
            except ValueError:
                print("Please answer 1, 2 or 3.", file=self.out)

    def delete(self, path: str) -> None:
        FileService.delete_file(path, use_trash=self.use_trash)
        verb = "Moved to trash" if self.use_trash else "Deleted"
        print(f"{verb}: {path}", file=self.out)

    def report_error(self, message: str) -> None:
        print(f"❌ {message}", file=self.err)


def build_report(result: ScanResult) -> dict:
    """Structured view of a scan: groups with their fingerprint plus summary counts."""
    return result.to_dict()


def render_json(result: ScanResult, indent: int = 2) -> str:
    """
    Serialize a scan result for machine consumption.
    Raises MarshalError if the result cannot be encoded.
    """
    try:
        return json.dumps(build_report(result), indent=indent)
    except (TypeError, ValueError) as e:
        logger.error(f"Error marshaling JSON: {e}")
        raise MarshalError(f"Error marshaling JSON: {e}") from e
