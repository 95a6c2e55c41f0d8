"""
Request builder for the convert endpoint.
"""

import asyncio
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Union

import httpx

from .config import get_logger
from .core.remote import build_headers, build_multipart, decode_body
from .exceptions import ConversionError
from .models import ConversionRequest, ConversionResult, Fixation, Saccade

if TYPE_CHECKING:
    from .client import Client

logger = get_logger("builder")


@dataclass(frozen=True)
class ConvertBuilder:
    """
    Immutable builder for a conversion request.

    Every ``with_*`` call returns a new builder and leaves the original
    untouched, so intermediate builders can be kept and reused.

    Example:
        >>> result = await (
        ...     Client.create("api_key")
        ...     .convert("Lorem ipsum dolor sit amet")
        ...     .with_fixation(Fixation.STRONG)
        ...     .with_saccade(Saccade.FEWEST)
        ...     .send()
        ... )
        >>> print(result.markdown())
    """

    client: "Client"
    request: ConversionRequest

    def with_input(self, input: str) -> "ConvertBuilder":
        return replace(self, request=replace(self.request, input=input))

    def with_fixation(self, fixation: Union[Fixation, int]) -> "ConvertBuilder":
        """Set the fixation level; plain integers are decoded as wire codes."""
        fixation = _coerce_level(Fixation, fixation)
        return replace(self, request=replace(self.request, fixation=fixation))

    def with_saccade(self, saccade: Union[Saccade, int]) -> "ConvertBuilder":
        """Set the saccade level; plain integers are decoded as wire codes."""
        saccade = _coerce_level(Saccade, saccade)
        return replace(self, request=replace(self.request, saccade=saccade))

    async def send(self) -> ConversionResult:
        """
        Send the conversion request.

        Returns:
            ConversionResult with the response HTML (None if the body was
            not valid text)

        Raises:
            ConversionError: If the request failed or the API answered with
                a non-2xx status
        """
        url = self.client.url
        logger.debug(
            "Converting %d chars via %s (fixation=%d, saccade=%d)",
            len(self.request.input),
            url,
            self.request.fixation.code,
            self.request.saccade.code,
        )

        try:
            async with httpx.AsyncClient(transport=self.client.transport) as http:
                response = await http.post(
                    url,
                    files=build_multipart(self.request),
                    headers=build_headers(self.client.api_key, url),
                )
                response.raise_for_status()
        except httpx.HTTPError as e:
            logger.warning("Conversion request failed: %s", e)
            raise ConversionError(e) from e

        html = decode_body(response)
        if html is None:
            logger.warning(
                "Response body from %s is not valid text (%d bytes)",
                url,
                len(response.content),
            )
        return ConversionResult(html=html)

    def send_sync(self) -> ConversionResult:
        """Synchronous version of send."""
        return asyncio.run(self.send())


def _coerce_level(level_type, value):
    """Return ``value`` as a member of ``level_type``, decoding int wire codes."""
    if isinstance(value, level_type):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        return level_type.from_code(value)
    raise TypeError(
        f"Expected {level_type.__name__} or int wire code, "
        f"got {type(value).__name__}"
    )
