"""Finding and report data structures for leakscan."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple


class Severity(Enum):
    """Coarse ranking assigned per pattern rule."""

    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"
    CRITICAL = "CRITICAL"

    @property
    def rank(self) -> int:
        return _SEVERITY_RANKS[self]

    @classmethod
    def parse(cls, value: Any) -> "Severity":
        """Accept a Severity or a case-insensitive severity name."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().upper())
        except ValueError:
            raise ValueError(
                f"Unknown severity {value!r}; expected one of "
                + ", ".join(s.value for s in cls)
            ) from None


_SEVERITY_RANKS = {
    Severity.LOW: 0,
    Severity.MEDIUM: 1,
    Severity.HIGH: 2,
    Severity.CRITICAL: 3,
}

# Highest first, the order used by summaries and reports.
SEVERITY_ORDER: Tuple[Severity, ...] = tuple(
    sorted(Severity, key=lambda s: s.rank, reverse=True)
)


@dataclass(frozen=True)
class Finding:
    """Represents a secret or credential found in a file."""

    file_path: str  # root-relative posix path
    line_number: int  # 1-based
    matched_text: str  # redacted hint, never the full secret
    pattern_name: str  # PatternRule.name
    severity: Severity
    column: int = 1  # 1-based start column of the match

    def to_dict(self) -> Dict[str, Any]:
        """Convert Finding to dictionary format."""
        return {
            "file_path": self.file_path,
            "line_number": self.line_number,
            "column": self.column,
            "matched_text": self.matched_text,
            "pattern_name": self.pattern_name,
            "severity": self.severity.value,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Finding":
        return cls(
            file_path=str(data["file_path"]),
            line_number=int(data["line_number"]),
            column=int(data.get("column", 1)),
            matched_text=str(data["matched_text"]),
            pattern_name=str(data["pattern_name"]),
            severity=Severity.parse(data["severity"]),
        )


@dataclass(frozen=True)
class ScanReport:
    """Aggregate result of one scan invocation.

    The severity summary is derived from ``findings`` every time it is read,
    so it can never drift from the findings it describes.
    """

    root_path: str
    files_scanned_count: int
    findings: Tuple[Finding, ...] = ()
    warnings: Tuple[str, ...] = field(default=())

    @property
    def summary_counts_by_severity(self) -> Dict[Severity, int]:
        counts = Counter(f.severity for f in self.findings)
        return {sev: counts.get(sev, 0) for sev in SEVERITY_ORDER}

    @property
    def max_severity(self) -> Optional[Severity]:
        if not self.findings:
            return None
        return max((f.severity for f in self.findings), key=lambda s: s.rank)

    def findings_by_file(self) -> Dict[str, List[Finding]]:
        grouped: Dict[str, List[Finding]] = {}
        for finding in self.findings:
            grouped.setdefault(finding.file_path, []).append(finding)
        return grouped

    def to_dict(self) -> Dict[str, Any]:
        return {
            "root_path": self.root_path,
            "files_scanned": self.files_scanned_count,
            "summary": {
                sev.value: count
                for sev, count in self.summary_counts_by_severity.items()
            },
            "findings": [f.to_dict() for f in self.findings],
            "warnings": list(self.warnings),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ScanReport":
        findings = tuple(Finding.from_dict(f) for f in data.get("findings", []))
        return cls(
            root_path=str(data["root_path"]),
            files_scanned_count=int(data["files_scanned"]),
            findings=findings,
            warnings=tuple(str(w) for w in data.get("warnings", [])),
        )
