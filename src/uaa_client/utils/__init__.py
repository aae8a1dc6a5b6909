"""Utility helpers for the UAA client."""

from uaa_client.utils.sanitization import sanitize_token, sanitize_url

__all__ = [
    "sanitize_token",
    "sanitize_url",
]
