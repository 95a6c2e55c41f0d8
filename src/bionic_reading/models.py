"""
Conversion parameters, request state and results.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from .markdown import html_to_markdown


class Fixation(Enum):
    """
    Fixation levels.

    Defines the expression of the letter combinations: how much of each
    word gets highlighted. WEAKEST highlights the fewest characters,
    STRONGEST the most. Member values are the codes sent to the API.
    """

    WEAKEST = 1
    WEAK = 2
    AVERAGE = 3
    STRONG = 4
    STRONGEST = 5

    @property
    def code(self) -> int:
        return self.value

    @classmethod
    def from_code(cls, code: int) -> "Fixation":
        """Decode a wire code; any code outside the table maps to AVERAGE."""
        try:
            return cls(code)
        except ValueError:
            return cls.AVERAGE

    @classmethod
    def default(cls) -> "Fixation":
        return cls.WEAKEST


class Saccade(Enum):
    """
    Saccade levels.

    Defines the visual jumps from fixation to fixation. FEWEST gives the
    biggest jumps, MOST the shortest. Member values are the codes sent to
    the API.
    """

    FEWEST = 10
    FEW = 20
    AVERAGE = 30
    MORE = 40
    MOST = 50

    @property
    def code(self) -> int:
        return self.value

    @classmethod
    def from_code(cls, code: int) -> "Saccade":
        """Decode a wire code; any code outside the table maps to AVERAGE."""
        try:
            return cls(code)
        except ValueError:
            return cls.AVERAGE

    @classmethod
    def default(cls) -> "Saccade":
        return cls.FEWEST


@dataclass(frozen=True)
class ConversionRequest:
    """
    Parameters of a single conversion.

    Attributes:
        input: Text to convert
        fixation: Fixation level (defaults to WEAKEST)
        saccade: Saccade level (defaults to FEWEST)
    """

    input: str
    fixation: Fixation = field(default_factory=Fixation.default)
    saccade: Saccade = field(default_factory=Saccade.default)


@dataclass(frozen=True)
class ConversionResult:
    """
    Bionic Reading converted text.

    Holds the raw HTML returned by the API. ``html`` is None when the
    response body could not be decoded as text.

    Example:
        >>> result = ConversionResult(html="<b>Lor</b>em <b>ips</b>um")
        >>> result.html_text()
        '<b>Lor</b>em <b>ips</b>um'
        >>> result.markdown()
        '**Lor**em **ips**um'
    """

    html: Optional[str] = None

    def html_text(self) -> Optional[str]:
        """Get content as HTML, exactly as returned by the API."""
        return self.html

    def markdown(self) -> Optional[str]:
        """Get content as Markdown, converted from the HTML on each call."""
        if self.html is None:
            return None
        return html_to_markdown(self.html)
