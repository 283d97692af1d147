from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Dict, Union

from leakscan import __version__
from leakscan.core.exceptions import ReportWriteError
from leakscan.core.findings import ScanReport, Severity
from leakscan.detectors import RuleRegistry, get_default_registry

INFORMATION_URI = "https://pypi.org/project/leakscan/"

SARIF_LEVELS = {
    Severity.CRITICAL: "error",
    Severity.HIGH: "error",
    Severity.MEDIUM: "warning",
    Severity.LOW: "note",
}


def build_sarif(report: ScanReport, registry: RuleRegistry = None) -> Dict[str, Any]:
    registry = registry or get_default_registry()

    # Collect rules in order of first appearance
    rule_ids: Dict[str, int] = {}
    rules = []
    for f in report.findings:
        name = f.pattern_name
        if name in rule_ids:
            continue
        rule_ids[name] = len(rules)
        description = registry.get(name).description if name in registry else name
        rules.append(
            {
                "id": name,
                "name": name,
                "shortDescription": {"text": description},
                "fullDescription": {"text": f"leakscan rule {name}: {description}"},
                "defaultConfiguration": {"level": SARIF_LEVELS[f.severity]},
                "properties": {"severity": f.severity.value},
                "helpUri": INFORMATION_URI,
            }
        )

    results = []
    for f in report.findings:
        results.append(
            {
                "ruleId": f.pattern_name,
                "ruleIndex": rule_ids[f.pattern_name],
                "level": SARIF_LEVELS[f.severity],
                "message": {"text": f"{f.pattern_name} detected: {f.matched_text}"},
                "locations": [
                    {
                        "physicalLocation": {
                            "artifactLocation": {"uri": f.file_path, "uriBaseId": "SRCROOT"},
                            "region": {
                                "startLine": max(1, f.line_number),
                                "startColumn": max(1, f.column),
                            },
                        }
                    }
                ],
                "properties": {"severity": f.severity.value},
            }
        )

    # Make this upload unique per job by setting automationDetails.id
    auto_id = "leakscan-{run}-{job}-{attempt}".format(
        run=os.getenv("GITHUB_RUN_ID", "local"),
        job=os.getenv("GITHUB_JOB", "job"),
        attempt=os.getenv("GITHUB_RUN_ATTEMPT", "1"),
    )

    run: Dict[str, Any] = {
        "automationDetails": {"id": auto_id},
        "tool": {
            "driver": {
                "name": "leakscan",
                "version": __version__,
                "informationUri": INFORMATION_URI,
                "rules": rules,
            }
        },
        "results": results,
    }
    root = Path(report.root_path)
    if root.is_absolute():
        run["originalUriBaseIds"] = {"SRCROOT": {"uri": root.as_uri().rstrip("/") + "/"}}

    return {
        "version": "2.1.0",
        "$schema": "https://json.schemastore.org/sarif-2.1.0.json",
        "runs": [run],
    }


def export_sarif(report: ScanReport, path: Union[str, Path], registry: RuleRegistry = None) -> None:
    try:
        Path(path).write_text(json.dumps(build_sarif(report, registry), indent=2) + "\n", encoding="utf-8")
    except OSError as e:
        raise ReportWriteError(str(path), e.strerror or str(e)) from e
