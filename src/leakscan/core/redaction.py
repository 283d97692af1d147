# SPDX-License-Identifier: MIT
"""
Central redaction utilities for leakscan.

Every matched value passes through here before it is stored on a Finding,
so console, JSON and SARIF output never carry a full secret.
"""

from __future__ import annotations


def redact_secret(secret: str) -> str:
    """
    Redact secret showing first 6 + last 4 characters.

    For secrets <= 10 characters, shows only ****.
    For secrets > 10 characters, shows first6****last4.

    Args:
        secret: The secret string to redact

    Returns:
        Redacted string
    """
    secret = secret.strip()
    if len(secret) <= 10:
        return "****"
    return secret[:6] + "****" + secret[-4:]
