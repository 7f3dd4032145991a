# bundle_tool/core/diagnostics.py
"""Compile diagnostic formatting

Diagnostics are first assembled into a :class:`DiagnosticReport` of plain
blocks, then printed by :func:`print_diagnostics`, which is the only place
terminal styling is applied.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Optional

from rich.console import Console
from rich.syntax import Syntax
from rich.text import Text

from ..constants import CARET, CARET_FILL, CONTEXT_LINES, LINE_NUMBER_SEPARATOR
from ..models.diagnostic import DiagnosticEntry, SourceLocation
from ..utils.formatting import pad_left

logger = logging.getLogger(__name__)

SYNTAX_THEME = "monokai"


@dataclass
class ContextLine:
    number: int
    code: Text


@dataclass
class ContextWindow:
    """Source lines around an error position"""

    before: List[ContextLine]
    after: List[ContextLine]
    column: int
    width: int

    @property
    def caret(self) -> str:
        offset = self.width + len(LINE_NUMBER_SEPARATOR) + self.column - 1
        return CARET_FILL * offset + CARET

    def render_lines(self) -> List[Text]:
        rendered = [self._render_line(line) for line in self.before]
        rendered.append(Text(self.caret, style="bold red"))
        rendered.extend(self._render_line(line) for line in self.after)
        return rendered

    def _render_line(self, line: ContextLine) -> Text:
        return Text.assemble(
            (pad_left(line.number, self.width), "dim"),
            (LINE_NUMBER_SEPARATOR, "dim"),
            line.code
        )


@dataclass
class DiagnosticBlock:
    message: str
    origin: Optional[str] = None
    context: Optional[ContextWindow] = None


@dataclass
class DiagnosticReport:
    summary: str
    blocks: List[DiagnosticBlock] = field(default_factory=list)


def highlight_source(source: str, file_name: str) -> List[Text]:
    """Highlight a whole source file and split it into lines"""
    plain_lines = source.split("\n")
    lexer = Syntax.guess_lexer(file_name, code=source)
    highlighted = Syntax(source, lexer, theme=SYNTAX_THEME).highlight(source)
    lines = list(highlighted.split("\n", allow_blank=True))

    # Lexers may normalise trailing newlines; keep numbering exact
    if len(lines) < len(plain_lines):
        return [Text(line) for line in plain_lines]
    return lines[:len(plain_lines)]


def build_context_window(lines: List[Text], location: SourceLocation) -> ContextWindow:
    """Select up to four lines ending at the error line and four after it

    Args:
        lines: Highlighted source lines
        location: 1-based error position

    Returns:
        ContextWindow clamped to the bounds of the file
    """
    line = location.line
    start = max(line - CONTEXT_LINES, 0)

    before = [ContextLine(number=start + index + 1, code=code)
              for index, code in enumerate(lines[start:line])]
    after = [ContextLine(number=line + index + 1, code=code)
             for index, code in enumerate(lines[line:line + CONTEXT_LINES])]

    numbers = [item.number for item in before + after] or [line]
    width = max(len(str(number)) for number in numbers)

    return ContextWindow(before=before, after=after, column=location.column, width=width)


def load_context_window(entry: DiagnosticEntry) -> Optional[ContextWindow]:
    """Read the entry's source file; None when it cannot be read"""
    try:
        source = Path(entry.file).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.debug(f"Cannot read {entry.file} for context: {e}")
        return None

    try:
        lines = highlight_source(source, entry.file)
    except Exception as e:
        logger.debug(f"Highlighting {entry.file} failed, using plain text: {e}")
        lines = [Text(line) for line in source.split("\n")]

    return build_context_window(lines, entry.location)


def format_entry(entry: DiagnosticEntry) -> DiagnosticBlock:
    if entry.has_source_position:
        return DiagnosticBlock(
            message=entry.message,
            origin=entry.file,
            context=load_context_window(entry)
        )
    if entry.file:
        return DiagnosticBlock(message=entry.message, origin=entry.file)
    if entry.module:
        return DiagnosticBlock(message=entry.message, origin=entry.module)
    return DiagnosticBlock(message=entry.message)


def format_diagnostics(summary: str, entries: Iterable[DiagnosticEntry]) -> DiagnosticReport:
    """Build a report for a summary line and an ordered list of entries"""
    return DiagnosticReport(summary=summary, blocks=[format_entry(entry) for entry in entries])


def print_diagnostics(report: DiagnosticReport, console: Console) -> None:
    """Print a report with terminal styling"""
    console.print(Text(report.summary, style="red"))
    console.print()

    for block in report.blocks:
        if block.origin:
            console.print(Text(f"Error in {block.origin}"))

        console.print(Text(block.message))
        console.print()

        if block.context:
            for line in block.context.render_lines():
                console.print(line, no_wrap=True, overflow="ignore", crop=False)
            console.print()


def print_errors(summary: str, entries: Iterable[DiagnosticEntry], console: Console) -> None:
    print_diagnostics(format_diagnostics(summary, entries), console)
