# SPDX-License-Identifier: MIT
"""
Scanner: walks a tree, runs every pattern rule over each line of text and
collects the resulting findings into a ScanReport.
"""
from __future__ import annotations

import logging
import re
import sys
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping, Optional, Pattern, Sequence, Tuple

from leakscan.core.exceptions import PathNotFoundError
from leakscan.core.findings import Finding, ScanReport
from leakscan.core.redaction import redact_secret
from leakscan.detectors import PatternRule, RuleRegistry, build_registry
from leakscan.scanner.config import (
    DEFAULT_EXCLUDE_DIRS,
    DEFAULT_MAX_FILE_SIZE,
    load_scanner_config,
)
from leakscan.scanner.walk import FileEntry, SNIFF_BYTES, is_binary_path, iter_files, looks_binary

logger = logging.getLogger(__name__)

IGNORE_MARKER = "leakscan:ignore"

# Whole-value template forms only: ${VAR}, {{ var }}, <var>, %(var)s, xxxxxx, ******.
_PLACEHOLDER = re.compile(
    r"(?i)^(?:\$\{[^}]*\}|\{\{[^}]*\}\}|<[^>]*>|%\([^)]*\)s|x{6,}|\*{6,})$"
)


@dataclass(frozen=True)
class _FileResult:
    scanned: bool
    findings: Tuple[Finding, ...] = ()
    skipped: Optional[str] = None  # reason a file was not scanned
    warning: Optional[str] = None


@dataclass
class Scanner:
    """
    Scanner runs all rules of a registry against the files under a root
    and returns a ScanReport.
    """

    registry: RuleRegistry
    exclude_dirs: Sequence[str] = field(default_factory=lambda: list(DEFAULT_EXCLUDE_DIRS))
    exclude_globs: Sequence[str] = field(default_factory=list)
    max_file_size: int = DEFAULT_MAX_FILE_SIZE
    allowlist: Sequence[Pattern[str]] = field(default_factory=list)
    jobs: int = 1

    @classmethod
    def from_config(cls, config: Mapping[str, Any]) -> "Scanner":
        return cls(
            registry=build_registry(config, config.get("source")),
            exclude_dirs=list(config.get("exclude_dirs", DEFAULT_EXCLUDE_DIRS)),
            exclude_globs=list(config.get("exclude_globs", [])),
            max_file_size=int(config.get("max_file_size", DEFAULT_MAX_FILE_SIZE)),
            allowlist=[re.compile(p) if isinstance(p, str) else p for p in config.get("allowlist", [])],
            jobs=int(config.get("jobs", 1)),
        )

    # -- scanning -----------------------------------------------------
    def scan(self, root_path: str | Path, verbose: bool = False) -> ScanReport:
        """
        Scan *root_path* (a directory, or a single file).

        Raises:
            PathNotFoundError: if root_path does not exist
        """
        root = Path(root_path)
        if not root.exists():
            raise PathNotFoundError(str(root_path))
        root = root.resolve()

        warnings: List[str] = []

        def record_warning(message: str) -> None:
            warnings.append(message)
            logger.warning("skipped %s", message)

        entries = list(
            iter_files(
                root,
                exclude_dirs=self.exclude_dirs,
                exclude_globs=self.exclude_globs,
                on_error=record_warning,
            )
        )

        findings: List[Finding] = []
        files_scanned = 0
        for entry, result in zip(entries, self._scan_entries(entries)):
            if verbose:
                status = f" (skipped: {result.skipped})" if result.skipped else ""
                print(f"[leakscan] scanning {entry.rel_path}{status}", file=sys.stderr)
            if result.warning:
                record_warning(result.warning)
            if result.scanned:
                files_scanned += 1
                findings.extend(result.findings)

        return ScanReport(
            root_path=str(root),
            files_scanned_count=files_scanned,
            findings=tuple(findings),
            warnings=tuple(warnings),
        )

    def _scan_entries(self, entries: List[FileEntry]) -> Iterable[_FileResult]:
        # Results come back in walk order either way.
        if self.jobs > 1 and len(entries) > 1:
            with ThreadPoolExecutor(max_workers=self.jobs) as pool:
                yield from pool.map(self._scan_entry, entries)
        else:
            yield from map(self._scan_entry, entries)

    def _scan_entry(self, entry: FileEntry) -> _FileResult:
        if is_binary_path(entry.path):
            return _FileResult(scanned=False, skipped="binary")
        try:
            if entry.path.stat().st_size > self.max_file_size:
                return _FileResult(scanned=False, skipped="too large")
            data = entry.path.read_bytes()
        except PermissionError:
            return _FileResult(scanned=False, skipped="unreadable", warning=f"{entry.rel_path}: permission denied")
        except OSError as e:
            return _FileResult(scanned=False, skipped="unreadable", warning=f"{entry.rel_path}: {e.strerror or e}")

        if looks_binary(data[:SNIFF_BYTES]):
            return _FileResult(scanned=False, skipped="binary")

        text = data.decode("utf-8", errors="ignore")
        return _FileResult(scanned=True, findings=tuple(self.scan_text(text, entry.rel_path)))

    def scan_text(self, text: str, path: str) -> List[Finding]:
        """Run every rule over each line of *text*."""
        findings: List[Finding] = []
        for line_number, line in enumerate(text.split("\n"), start=1):
            line = line.rstrip("\r")
            if not line.strip() or IGNORE_MARKER in line:
                continue
            findings.extend(self._scan_line(line, line_number, path))
        return findings

    def _scan_line(self, line: str, line_number: int, path: str) -> List[Finding]:
        candidates = []
        for position, rule in enumerate(self.registry):
            for match in rule.regex.finditer(line):
                value, value_start = rule.secret_value(match)
                if not value.strip() or self._is_ignored_value(value):
                    continue
                candidates.append((rule, position, match.start(), match.end(), value, value_start))

        # One secret, one finding: keep the highest-severity rule for any
        # overlapping span; registry order breaks ties.
        candidates.sort(key=lambda c: (-c[0].default_severity.rank, c[1], c[2]))
        accepted: List[Tuple[PatternRule, int, int, str, int]] = []
        for rule, _position, start, end, value, value_start in candidates:
            if any(start < a_end and a_start < end for _r, a_start, a_end, _v, _vs in accepted):
                continue
            accepted.append((rule, start, end, value, value_start))

        accepted.sort(key=lambda a: a[1])
        return [
            Finding(
                file_path=path,
                line_number=line_number,
                column=value_start + 1,
                matched_text=redact_secret(value),
                pattern_name=rule.name,
                severity=rule.default_severity,
            )
            for rule, _start, _end, value, value_start in accepted
        ]

    def _is_ignored_value(self, value: str) -> bool:
        stripped = value.strip()
        if _PLACEHOLDER.match(stripped):
            return True
        return any(pattern.search(stripped) for pattern in self.allowlist)


def scan(
    root_path: str | Path,
    verbose: bool = False,
    config: Optional[Dict[str, Any]] = None,
) -> ScanReport:
    """
    Scan *root_path* with the config found at its root (or the defaults).

    Raises:
        PathNotFoundError: if root_path does not exist
        ConfigError: if a config file is present but invalid
    """
    if not Path(root_path).exists():
        raise PathNotFoundError(str(root_path))
    if config is None:
        config = load_scanner_config(repo_root=str(root_path))
    return Scanner.from_config(config).scan(root_path, verbose=verbose)
