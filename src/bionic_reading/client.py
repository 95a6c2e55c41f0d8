"""
Client used to call the Bionic Reading API.

Requires an API key from the Bionic Reading RapidAPI listing.

Example:
    >>> client = Client.create("api_key")
    >>> result = await client.convert("Lorem ipsum dolor sit amet").send()
    >>> print(result.html_text())
"""

from dataclasses import dataclass, field, replace
from typing import Optional, Union

import httpx

from .builder import ConvertBuilder
from .config import (
    DEFAULT_BASE_URL,
    Settings,
    get_logger,
    get_settings,
    setup_logging,
)
from .core.remote import BASE_URL_DOMAIN
from .models import ConversionRequest
from .secret import Secret

CONVERT_PATH = "convert"

__all__ = ["Client", "BASE_URL_DOMAIN", "DEFAULT_BASE_URL", "CONVERT_PATH"]

logger = get_logger("client")


@dataclass(frozen=True)
class Client:
    """
    Immutable API configuration: credential plus base endpoint.

    Attributes:
        api_key: RapidAPI key, redacted in every rendering
        url: Endpoint requests are sent to
        transport: Optional httpx transport used for requests (defaults
            to the network)
    """

    api_key: Secret
    url: httpx.URL
    transport: Optional[httpx.AsyncBaseTransport] = field(
        default=None, repr=False, compare=False
    )

    @classmethod
    def create(
        cls,
        api_key: str,
        base_url: Union[str, httpx.URL] = DEFAULT_BASE_URL,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> "Client":
        """
        Create a client for the given RapidAPI key.

        Args:
            api_key: Bionic Reading RapidAPI key
            base_url: API base URL, the public RapidAPI host by default
            transport: Optional httpx transport, e.g. ``httpx.MockTransport``

        Returns:
            A new Client
        """
        return cls(
            api_key=Secret.from_plaintext(api_key),
            url=httpx.URL(base_url),
            transport=transport,
        )

    @classmethod
    def from_settings(
        cls,
        settings: Optional[Settings] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> "Client":
        """
        Create a client from ``BIONIC_READING_*`` settings.

        Also applies the configured log level to the package logger.

        Raises:
            ValueError: If no API key is configured
        """
        settings = settings or get_settings()
        if settings.api_key is None:
            raise ValueError("API key is not configured (BIONIC_READING_API_KEY)")

        setup_logging(settings.effective_log_level)
        logger.debug("Creating client for %s", settings.base_url)
        return cls.create(
            settings.api_key.get_secret_value(),
            base_url=settings.base_url,
            transport=transport,
        )

    def convert(self, input: str) -> ConvertBuilder:
        """
        Start converting text to a Bionic Reading highlighted string.

        The returned builder uses the default Fixation and Saccade. Nothing
        is sent until ``send()`` is awaited.

        Example:
            >>> builder = client.convert("Lorem ipsum dolor sit amet")
        """
        client = replace(self, url=self.url.copy_with(path=f"/{CONVERT_PATH}"))
        return ConvertBuilder(client=client, request=ConversionRequest(input=input))
