"""
HTML to Markdown conversion for API responses.
"""

from functools import lru_cache
from io import BytesIO

from markitdown import MarkItDown, StreamInfo

_HTML_STREAM_INFO = StreamInfo(mimetype="text/html", extension=".html", charset="utf-8")


@lru_cache(maxsize=1)
def _get_converter() -> MarkItDown:
    return MarkItDown(enable_plugins=False)


def html_to_markdown(html: str) -> str:
    """
    Convert an HTML fragment to Markdown.

    Bold tags become ``**...**``, so Bionic Reading highlights survive in
    plain text. The output only depends on the input.

    Args:
        html: HTML string as returned by the API

    Returns:
        Markdown rendering of the HTML
    """
    with BytesIO(html.encode("utf-8")) as stream:
        result = _get_converter().convert_stream(stream, stream_info=_HTML_STREAM_INFO)
        return result.markdown
