# SPDX-License-Identifier: MIT
"""Human-readable text report."""

from __future__ import annotations

from typing import List

from leakscan import __version__
from leakscan.core.findings import ScanReport, SEVERITY_ORDER

NO_FINDINGS_MESSAGE = "No secrets or vulnerabilities detected!"

SEVERITY_ICONS = {
    "CRITICAL": "🔴",
    "HIGH": "🟠",
    "MEDIUM": "🟡",
    "LOW": "🔵",
}


def render_text(report: ScanReport) -> str:
    """Render *report* as the console text report."""
    lines: List[str] = []
    lines.append("")
    lines.append(f"🔍 leakscan {__version__} - Secret Scan Report")
    lines.append("=" * 50)
    lines.append(f"Root: {report.root_path}")
    lines.append(f"Files scanned: {report.files_scanned_count}")
    if report.warnings:
        lines.append(f"Files skipped with warnings: {len(report.warnings)}")

    lines.append("")
    lines.append("Summary by severity:")
    for severity, count in report.summary_counts_by_severity.items():
        lines.append(f"  {SEVERITY_ICONS[severity.value]} {severity.value:<8} {count}")

    lines.append("")
    if not report.findings:
        lines.append(f"✅ {NO_FINDINGS_MESSAGE}")
        return "\n".join(lines)

    lines.append(f"Findings ({len(report.findings)}):")
    for path, findings in report.findings_by_file().items():
        lines.append("")
        lines.append(f"  {path}")
        for f in findings:
            lines.append(
                f"    [{f.severity.value}] line {f.line_number}:{f.column}  "
                f"{f.pattern_name}  {f.matched_text}"
            )

    worst = report.max_severity
    lines.append("")
    lines.append(f"Highest severity: {worst.value if worst else 'none'}")
    return "\n".join(lines)


def render_rules(rules) -> str:
    """Table of active rules for `leakscan rules`."""
    ordered = sorted(rules, key=lambda r: SEVERITY_ORDER.index(r.default_severity))
    width = max((len(r.name) for r in ordered), default=0)
    lines = [
        f"{r.default_severity.value:<8}  {r.name:<{width}}  {r.description}"
        for r in ordered
    ]
    lines.append("")
    lines.append(f"{len(ordered)} rules")
    return "\n".join(lines)
