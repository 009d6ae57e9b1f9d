from .file_service import FileService
from .resolution import InteractiveResolver, TerminalHandler, build_report, render_json

__all__ = ["FileService", "InteractiveResolver", "TerminalHandler", "build_report", "render_json"]
