from leakscan.sarif.export import build_sarif, export_sarif

__all__ = ["build_sarif", "export_sarif"]
