"""Compile diagnostic models"""

import re
from dataclasses import dataclass
from typing import Any, Dict, Optional, Union

LOC_PATTERN = re.compile(r"^(?P<line>\d+):(?P<column>\d+)")


@dataclass(frozen=True)
class SourceLocation:
    """1-based line and column inside a source file"""

    line: int
    column: int = 1

    @classmethod
    def parse(cls, value: Any) -> Optional['SourceLocation']:
        """Parse a location from the shapes bundlers report

        Accepts ``"12:5"``, ``"12:5-9"``, ``{"line": 12, "character": 5}``
        and webpack's ``{"start": {"line": 12, "column": 4}}``.
        """
        if not value:
            return None

        if isinstance(value, str):
            match = LOC_PATTERN.match(value)
            if not match:
                return None
            # webpack formats columns 0-based
            return cls._from_numbers(match.group("line"), int(match.group("column")) + 1)

        if isinstance(value, dict):
            if "start" in value and isinstance(value["start"], dict):
                start = value["start"]
                # webpack columns are 0-based
                return cls._from_numbers(start.get("line"), _plus_one(start.get("column")))
            return cls._from_numbers(
                value.get("line"),
                value.get("character", value.get("column"))
            )

        return None

    @classmethod
    def _from_numbers(cls, line, column) -> Optional['SourceLocation']:
        try:
            line = int(line)
        except (TypeError, ValueError):
            return None
        try:
            column = int(column)
        except (TypeError, ValueError):
            column = 1
        if line < 1:
            return None
        return cls(line=line, column=max(column, 1))


def _plus_one(value):
    return value + 1 if isinstance(value, int) else value


@dataclass(frozen=True)
class DiagnosticEntry:
    """A single compile error or warning"""

    message: str
    file: Optional[str] = None
    location: Optional[SourceLocation] = None
    module: Optional[str] = None
    tool: Optional[str] = None

    @property
    def has_source_position(self) -> bool:
        return bool(self.file) and self.location is not None

    @classmethod
    def from_exception(cls, error: BaseException) -> 'DiagnosticEntry':
        return cls(message=str(error) or error.__class__.__name__)

    @classmethod
    def from_stats(cls, item: Union[str, Dict[str, Any]]) -> 'DiagnosticEntry':
        """Create from an entry of the bundler's stats ``errors``/``warnings`` list"""
        if isinstance(item, str):
            return cls(message=item)

        if not isinstance(item, dict):
            return cls(message=str(item))

        location = SourceLocation.parse(item.get("location")) or SourceLocation.parse(item.get("loc"))
        module = item.get("moduleName") or item.get("moduleIdentifier")

        return cls(
            message=item.get("message") or "",
            file=item.get("file") or None,
            location=location,
            module=module or None,
            tool=item.get("loaderSource") or None
        )
