# SPDX-License-Identifier: MIT
"""JSON export of scan reports."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Union

from leakscan import __version__
from leakscan.core.exceptions import ReportWriteError
from leakscan.core.findings import ScanReport

PathLike = Union[str, Path]


def report_to_dict(report: ScanReport) -> Dict[str, Any]:
    data: Dict[str, Any] = {"tool": "leakscan", "version": __version__}
    data.update(report.to_dict())
    return data


def report_to_json(report: ScanReport) -> str:
    return json.dumps(report_to_dict(report), indent=2, ensure_ascii=False)


def export_json(report: ScanReport, path: PathLike) -> None:
    """
    Write *report* as JSON to *path*.

    Raises:
        ReportWriteError: if the file cannot be written
    """
    try:
        Path(path).write_text(report_to_json(report) + "\n", encoding="utf-8")
    except OSError as e:
        raise ReportWriteError(str(path), e.strerror or str(e)) from e


def load_json(path: PathLike) -> ScanReport:
    """Read a report previously written by :func:`export_json`."""
    with open(path, "r", encoding="utf-8") as f:
        return ScanReport.from_dict(json.load(f))
