"""Report rendering and export."""

from leakscan.report.json_export import export_json, load_json, report_to_json
from leakscan.report.text import render_text

__all__ = ["export_json", "load_json", "render_text", "report_to_json"]
