"""Public API for the leakscan scanner.

    from leakscan.scanner import scan, Scanner

    report = scan("path/to/repo")
"""

from leakscan.scanner.core import Scanner, scan

__all__ = ["Scanner", "scan"]
