"""
Core pure functions for the Bionic Reading client.
"""

from .remote import (
    build_form_fields,
    build_multipart,
    build_headers,
    resolve_host,
    decode_body,
)

__all__ = [
    "build_form_fields",
    "build_multipart",
    "build_headers",
    "resolve_host",
    "decode_body",
]
