"""
Console helper used by the scenarios.

Wraps everything a scenario does with the terminal:
- Progress messages while a request is in flight
- Printing API objects as indented JSON
- Reading required and optional input
- Reporting errors
"""

import dataclasses
import json
import sys
from collections.abc import Callable
from enum import Enum
from typing import Any, TextIO

INDENT = "  "


def _dict_factory(items: list[tuple[str, Any]]) -> dict[str, Any]:
    # "raw" holds the original payload; printing it would duplicate every field
    return {key: value.value if isinstance(value, Enum) else value for key, value in items if key != "raw"}


def to_jsonable(obj: Any) -> Any:
    """Convert dataclasses (and lists of them) into plain JSON-friendly data."""
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return dataclasses.asdict(obj, dict_factory=_dict_factory)
    if isinstance(obj, (list, tuple)):
        return [to_jsonable(item) for item in obj]
    if isinstance(obj, Enum):
        return obj.value
    return obj


class ConsoleHelper:
    """Terminal input/output for interactive scenarios."""

    def __init__(
        self,
        input_func: Callable[[str], str] = input,
        stdout: TextIO | None = None,
        stderr: TextIO | None = None,
    ):
        self._input = input_func
        self._stdout = stdout
        self._stderr = stderr
        self._progress: str | None = None

    @property
    def out(self) -> TextIO:
        """Stream for scenario output."""
        return self._stdout or sys.stdout

    @property
    def err(self) -> TextIO:
        """Stream for progress and errors."""
        return self._stderr or sys.stderr

    # =========================================================================
    # Output
    # =========================================================================

    def header(self, title: str) -> None:
        """Print a scenario title."""
        print(file=self.out)
        print(title, file=self.out)
        print("=" * len(title), file=self.out)

    def write_object(self, obj: Any, title: str | None = None, indent: int = 0) -> None:
        """Print an object as indented JSON, optionally under a title."""
        prefix = INDENT * indent
        if title:
            print(f"{prefix}{title}:", file=self.out)
            prefix += INDENT
        text = json.dumps(to_jsonable(obj), indent=2, default=str)
        for line in text.splitlines():
            print(f"{prefix}{line}", file=self.out)
        print(file=self.out)

    def success(self, message: str) -> None:
        """Print an informational message."""
        print(message, file=self.out)

    def error(self, message: str) -> None:
        """Report an error to the user, marking any open progress line as failed."""
        if self._progress:
            self.stop_progress("failed")
        print(f"Error: {message}", file=self.err)

    # =========================================================================
    # Progress
    # =========================================================================

    def start_progress(self, message: str) -> None:
        """Show that a request is running."""
        self._progress = message
        print(f"{message}...", end="", file=self.err, flush=True)

    def stop_progress(self, status: str = "done") -> None:
        """Mark the running request as finished."""
        if self._progress is None:
            return
        self._progress = None
        print(f" {status}", file=self.err, flush=True)

    # =========================================================================
    # Input
    # =========================================================================

    def read_non_empty_string(self, prompt: str, error_message: str) -> str:
        """Read a required value, asking again until something other than whitespace is entered."""
        while True:
            value = self._input(f"{prompt}: ").strip()
            if value:
                return value
            self.error(error_message)

    def read_optional_string(self, prompt: str) -> str:
        """Read a value that may be left blank."""
        return self._input(f"{prompt}: ").strip()
