"""Logging formatter implementations for labelenum outputs."""

import logging
import os
import sys
import textwrap
from datetime import datetime
from pathlib import Path


class LabelEnumFormatter(logging.Formatter):
    """Single-line log formatter with timestamp, level, and source context."""

    def format(self, record: logging.LogRecord) -> str:
        """
        Format a :class:`logging.LogRecord` into a single-line message.

        Args:
            record (logging.LogRecord): Log record to format.

        Returns:
            str: Formatted log line.

        """
        timestamp = datetime.fromtimestamp(record.created).strftime("%H:%M:%S")
        level = record.levelname.ljust(8)
        location = f"{record.module}:{record.lineno}"
        message = record.getMessage()

        return f"[{timestamp}] {level} {location} | {message}"


class WarningFormatter(LabelEnumFormatter):
    """
    Formatter for labelenum warnings using a banner-style layout.

    Warnings are rendered as visually distinct blocks with top and bottom
    separators. Separator lines are colored red when supported by the
    terminal.
    """

    def __init__(self, *, max_width: int = 88) -> None:
        """
        Initialize the warning formatter.

        Args:
            max_width (int):
                Maximum line width for wrapped text.

        """
        super().__init__()
        self.max_width = max_width

    def _wrap(self, text: str, *, indent: int = 1) -> list[str]:
        """Wrap `text` to the banner width, preserving explicit newlines."""
        pad = " " * indent
        width = self.max_width - 2 * indent
        result: list[str] = []
        for line in text.split("\n"):
            if not line.strip():
                result.append(pad)
                continue
            result.extend(pad + part for part in textwrap.wrap(line.strip(), width=width))
        return result

    def _supports_color(self) -> bool:
        """Return True if ANSI color output is supported."""
        return sys.stderr.isatty() and os.environ.get("TERM") not in (None, "dumb")

    def _red(self, text: str) -> str:
        if not self._supports_color():
            return text
        return f"\033[31m{text}\033[0m"

    def _separator(self, label: str | None = None) -> str:
        """Return a banner separator line optionally labeled with `label`."""
        if label:
            core = f" {label} "
            side = (self.max_width - len(core)) // 2
            line = "─" * side + core + "─" * (self.max_width - side - len(core))
        else:
            line = "─" * self.max_width
        return self._red(line)

    def format(self, record: logging.LogRecord) -> str:
        """
        Format a warning log record.

        Expected `record.extra` fields:
            - warning_category
            - warning_filename
            - warning_lineno
            - warning_message
            - warning_hints

        Records emitted without those fields fall back to the plain
        single-line format.

        Args:
            record (logging.LogRecord): Log record to format.

        Returns:
            str: Banner-rendered warning string.

        """
        category = getattr(record, "warning_category", None)
        if category is None:
            return super().format(record)

        filename = record.warning_filename
        lineno = record.warning_lineno
        message = record.warning_message
        hints = record.warning_hints

        lines: list[str] = [self._separator(category.__name__)]
        lines.append(f" Location: {Path(filename).name}:{lineno}")
        lines.append("")
        lines.extend(self._wrap(message))

        if hints:
            lines.append("")
            hint_list = [hints] if isinstance(hints, str) else list(hints)
            for hint in hint_list:
                lines.extend(self._wrap(hint))

        lines.append(self._separator())
        return "\n".join(lines)
