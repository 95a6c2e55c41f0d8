"""
Pure functions for building convert requests and reading responses.

Kept free of I/O so the wire format can be checked without a network.
"""

import ipaddress
from typing import Dict, Optional, Tuple

import httpx

from ..models import ConversionRequest
from ..secret import Secret

BASE_URL_DOMAIN = "bionic-reading1.p.rapidapi.com"

CONTENT_KEY = "content"
REQUEST_TYPE_KEY = "request_type"
REQUEST_TYPE = "html"
RESPONSE_TYPE_KEY = "response_type"
RESPONSE_TYPE = "html"
FIXATION_KEY = "fixation"
SACCADE_KEY = "saccade"

HEADER_RAPID_API_KEY = "X-RapidAPI-Key"
HEADER_RAPID_API_HOST = "X-RapidAPI-Host"
# The API expects this exact (non-standard) header alongside the multipart body
CONTENT_TYPE_KEY = "content_type"
CONTENT_TYPE = "application/x-www-form-urlencoded"


def build_form_fields(request: ConversionRequest) -> Dict[str, str]:
    """Build the form fields for a conversion request."""
    return {
        CONTENT_KEY: request.input,
        REQUEST_TYPE_KEY: REQUEST_TYPE,
        RESPONSE_TYPE_KEY: RESPONSE_TYPE,
        FIXATION_KEY: str(request.fixation.code),
        SACCADE_KEY: str(request.saccade.code),
    }


def build_multipart(
    request: ConversionRequest,
) -> Dict[str, Tuple[None, str]]:
    """Build multipart parts for httpx; no filename, so each is a plain field."""
    return {
        name: (None, value) for name, value in build_form_fields(request).items()
    }


def resolve_host(url: httpx.URL) -> str:
    """Domain of the URL, or the default API domain when it has none."""
    host = url.host
    if not host:
        return BASE_URL_DOMAIN
    try:
        ipaddress.ip_address(host)
    except ValueError:
        return host
    return BASE_URL_DOMAIN


def build_headers(api_key: Secret, url: httpx.URL) -> Dict[str, str]:
    """Build RapidAPI authentication headers."""
    return {
        HEADER_RAPID_API_KEY: api_key.reveal(),
        HEADER_RAPID_API_HOST: resolve_host(url),
        CONTENT_TYPE_KEY: CONTENT_TYPE,
    }


def decode_body(response: httpx.Response) -> Optional[str]:
    """Decode the response body, or None if it is not valid text."""
    try:
        return response.content.decode(response.charset_encoding or "utf-8")
    except (UnicodeDecodeError, LookupError):
        return None
