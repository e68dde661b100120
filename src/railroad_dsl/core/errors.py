"""
Error types for railroad DSL compilation and rendering.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace


class RailroadDslError(Exception):
    """Base exception for all railroad-dsl errors."""

    def __init__(self, message: str, context: ErrorContext | None = None):
        self.message = message
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with context if available."""
        if self.context:
            return f"{self.context.format()}\n{self.message}"
        return self.message


class DiagramSyntaxError(RailroadDslError):
    """
    Raised when diagram source text cannot be recognized.

    Examples:
    - Unexpected character
    - Unterminated quoted text
    - Missing diagram (empty input)
    - Trailing input after the last diagram
    """

    @property
    def expected(self) -> list[str]:
        """Constructs that would have been accepted at the failure point."""
        if self.context:
            return list(self.context.expected)
        return []

    def with_path(self, name: str) -> DiagramSyntaxError:
        """
        Return a copy of this error labelled with a source name.

        Used by callers to prefix error output with the offending file
        or ``<stdin>``.
        """
        if self.context is None:
            return DiagramSyntaxError(f"{name}: {self.message}")
        return DiagramSyntaxError(self.message, replace(self.context, file=name))


@dataclass(frozen=True)
class ErrorContext:
    """
    Context information for an error, including source location.

    Attributes:
        line: Line number (1-indexed)
        column: Column number (1-indexed, in characters)
        offset: Character offset into the source (0-indexed)
        byte_offset: UTF-8 byte offset into the source (0-indexed)
        snippet: Optional source lines surrounding the error
        expected: Constructs the recognizer would have accepted
        file: Optional source label (file path or ``<stdin>``)
    """

    line: int
    column: int
    offset: int = 0
    byte_offset: int = 0
    snippet: str | None = None
    expected: tuple[str, ...] = field(default_factory=tuple)
    file: str | None = None

    def format(self) -> str:
        """
        Format error context as a human-readable string.

        Returns:
            Formatted string like: "diagram.txt:10:5" followed by the snippet
        """
        location = f"{self.line}:{self.column}"
        if self.file:
            location = f"{self.file}:{location}"

        if self.snippet:
            return f"{location}\n{self._format_snippet()}"
        return location

    def _format_snippet(self) -> str:
        """Format code snippet with line numbers and error marker."""
        if not self.snippet:
            return ""

        lines = self.snippet.split("\n")
        formatted = []

        # Snippet shows up to 2 lines before the error line
        start_line = max(1, self.line - 2)

        for i, line in enumerate(lines):
            line_num = start_line + i
            prefix = f"{line_num:4d} | "
            formatted.append(prefix + line)

            if line_num == self.line:
                marker_pos = len(prefix) + self.column - 1
                formatted.append(" " * marker_pos + "^^^")

        return "\n".join(formatted)


def make_syntax_error(
    message: str,
    source: str,
    offset: int,
    expected: list[str] | tuple[str, ...] = (),
) -> DiagramSyntaxError:
    """
    Helper to create a DiagramSyntaxError positioned at a source offset.

    Args:
        message: Error description
        source: Full source text being recognized
        offset: Character offset of the failure
        expected: Constructs that would have been accepted there

    Returns:
        DiagramSyntaxError with context attached
    """
    line, column = line_and_column(source, offset)
    context = ErrorContext(
        line=line,
        column=column,
        offset=offset,
        byte_offset=len(source[:offset].encode("utf-8")),
        snippet=_snippet(source, line),
        expected=tuple(expected),
    )
    return DiagramSyntaxError(message, context)


def line_and_column(source: str, offset: int) -> tuple[int, int]:
    """Return the 1-indexed (line, column) of a character offset."""
    line = source.count("\n", 0, offset) + 1
    line_start = source.rfind("\n", 0, offset) + 1
    return line, offset - line_start + 1


def _snippet(source: str, line: int) -> str:
    lines = source.split("\n")
    start = max(1, line - 2)
    return "\n".join(lines[start - 1 : line])
