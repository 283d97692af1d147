"""leakscan custom exceptions."""

from __future__ import annotations

from typing import Optional


class LeakScanError(Exception):
    """Base class for leakscan errors."""


class PathNotFoundError(LeakScanError):
    """Raised when the scan root does not exist."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"Path not found: {path}")


class ConfigError(LeakScanError):
    """Raised when configuration is missing or invalid."""

    def __init__(self, message: str, config_path: Optional[str] = None, section: Optional[str] = None):
        self.config_path = config_path
        self.section = section
        super().__init__(message)

    def __str__(self):
        msg = super().__str__()
        if self.config_path:
            msg += f" (config: {self.config_path})"
        if self.section:
            msg += f" (section: {self.section})"
        return msg


class ReportWriteError(OSError):
    """Raised when a report file cannot be written."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot write report to {path}: {reason}")

    def __str__(self):
        return f"Cannot write report to {self.path}: {self.reason}"
