"""
Custom exceptions for the Bionic Reading client.
"""

from typing import Iterator, Optional


class ConversionError(Exception):
    """
    Raised when the API call behind a conversion fails.

    The underlying ``httpx`` error is attached as ``__cause__`` and exposed
    through :attr:`cause`. Use :meth:`render` to get the message together
    with the full cause chain, e.g. for logging.
    """

    message = "Failed to convert given text"

    def __init__(self, cause: Optional[BaseException] = None):
        super().__init__(self.message)
        if cause is not None:
            self.__cause__ = cause

    @property
    def cause(self) -> Optional[BaseException]:
        return self.__cause__

    def iter_causes(self) -> Iterator[BaseException]:
        """Yield each underlying error, innermost last."""
        seen = {id(self)}
        current = _next_cause(self)
        while current is not None and id(current) not in seen:
            seen.add(id(current))
            yield current
            current = _next_cause(current)

    def render(self) -> str:
        """Render the message followed by one ``Caused by:`` block per cause."""
        lines = [str(self), ""]
        for cause in self.iter_causes():
            lines.append(f"Caused by:\n\t{cause}")
        return "\n".join(lines) + "\n"


def _next_cause(error: BaseException) -> Optional[BaseException]:
    if error.__cause__ is not None:
        return error.__cause__
    if error.__suppress_context__:
        return None
    return error.__context__
