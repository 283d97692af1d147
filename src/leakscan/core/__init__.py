"""Core data model, exceptions and redaction helpers."""
