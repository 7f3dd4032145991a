"""Build operation models"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Dict, List, Optional, Any

from .diagnostic import DiagnosticEntry


class CompileKind(Enum):
    """Outcome of a bundler run"""
    HARD_ERROR = "hard_error"
    ERRORS = "errors"
    WARNINGS = "warnings"
    SUCCESS = "success"


@dataclass(frozen=True)
class AssetInfo:
    """An artifact emitted by the bundler"""

    name: str
    size: int = 0

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'AssetInfo':
        return cls(name=data["name"], size=int(data.get("size") or 0))


@dataclass
class BuildStats:
    """Statistics reported by the bundler after a compilation"""

    assets: List[AssetInfo] = field(default_factory=list)
    hash: Optional[str] = None
    version: Optional[str] = None
    time: Optional[int] = None
    raw: Dict[str, Any] = field(default_factory=dict, repr=False)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'BuildStats':
        """Create from the bundler's JSON stats output"""
        assets = [AssetInfo.from_dict(item) for item in data.get("assets") or []
                  if isinstance(item, dict) and item.get("name")]
        return cls(
            assets=assets,
            hash=data.get("hash"),
            version=data.get("version"),
            time=data.get("time"),
            raw=data
        )


@dataclass
class FileSizeSnapshot:
    """Gzip sizes of output files keyed by hash-stripped relative path"""

    root: Path
    sizes: Dict[str, int] = field(default_factory=dict)

    def get(self, name: str) -> Optional[int]:
        return self.sizes.get(name)

    def __len__(self) -> int:
        return len(self.sizes)


@dataclass(frozen=True)
class CompileResult:
    """Tagged result of a single bundler invocation"""

    kind: CompileKind
    errors: List[DiagnosticEntry] = field(default_factory=list)
    warnings: List[DiagnosticEntry] = field(default_factory=list)
    stats: Optional[BuildStats] = None
    cause: Optional[BaseException] = None

    @classmethod
    def hard_error(cls, cause: BaseException) -> 'CompileResult':
        return cls(kind=CompileKind.HARD_ERROR, cause=cause)

    @classmethod
    def from_stats(cls, data: Dict[str, Any]) -> 'CompileResult':
        """Classify a stats document; errors win over warnings"""
        errors = [DiagnosticEntry.from_stats(item) for item in data.get("errors") or []]
        warnings = [DiagnosticEntry.from_stats(item) for item in data.get("warnings") or []]
        stats = BuildStats.from_dict(data)

        if errors:
            kind = CompileKind.ERRORS
        elif warnings:
            kind = CompileKind.WARNINGS
        else:
            kind = CompileKind.SUCCESS

        return cls(kind=kind, errors=errors, warnings=warnings, stats=stats)

    @property
    def is_success(self) -> bool:
        return self.kind == CompileKind.SUCCESS
