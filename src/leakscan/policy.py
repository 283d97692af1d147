# SPDX-License-Identifier: MIT
"""
Exit-code policy.

The process exit code is a pure function of the worst severity in a report:

    no findings, or LOW/MEDIUM only  -> 0
    HIGH is the worst                -> 1
    CRITICAL is the worst            -> 2

Fatal errors (missing path, bad config, unwritable output) use 3.
"""
from __future__ import annotations

from typing import Optional

from leakscan.core.findings import ScanReport, Severity

EXIT_CLEAN = 0
EXIT_HIGH = 1
EXIT_CRITICAL = 2
EXIT_ERROR = 3

SEVERITY_EXIT_CODES = {
    Severity.CRITICAL: EXIT_CRITICAL,
    Severity.HIGH: EXIT_HIGH,
}


def exit_code_for_severity(severity: Optional[Severity]) -> int:
    if severity is None:
        return EXIT_CLEAN
    return SEVERITY_EXIT_CODES.get(severity, EXIT_CLEAN)


def exit_code_for(report: ScanReport) -> int:
    """Exit code for *report*, driven by its highest severity."""
    return exit_code_for_severity(report.max_severity)
