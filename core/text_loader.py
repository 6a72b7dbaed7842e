"""Text source loading: streams, files and web pages.

Every loader returns a list of strings ready for FrequencyAnalyzer.load().
I/O, decoding and timeout errors propagate to the caller unchanged.
"""

import codecs
import logging
import re
import ssl
import urllib.request
from html.parser import HTMLParser
from pathlib import Path
from typing import BinaryIO, Optional, TextIO, Union

import certifi

from config import DEFAULT_ENCODING, DEFAULT_URL_LOAD_TIMEOUT

logger = logging.getLogger(__name__)

USER_AGENT = "Mozilla/5.0 (compatible; wordcloud-freq)"

# Elements whose text is never visible
_INVISIBLE_TAGS = {"script", "style", "noscript", "template", "head", "title"}

# Elements that end a run of text
_BLOCK_TAGS = {
    "p", "div", "br", "li", "ul", "ol", "tr", "td", "th", "table",
    "h1", "h2", "h3", "h4", "h5", "h6", "section", "article", "header",
    "footer", "nav", "aside", "blockquote", "pre", "hr",
}

# Elements allowed inside <head>; any other start tag implies </head>
_HEAD_TAGS = {"base", "link", "meta", "noscript", "script", "style", "template", "title"}

# <meta charset="..."> or <meta http-equiv=... content="text/html; charset=...">
_META_CHARSET_RE = re.compile(rb"""<meta[^>]+charset\s*=\s*["']?\s*([A-Za-z0-9_.:-]+)""", re.IGNORECASE)

# Bytes scanned for a meta charset
_META_SNIFF_BYTES = 1024


def read_lines(stream: Union[BinaryIO, TextIO], encoding: str = DEFAULT_ENCODING) -> list[str]:
    """Read all lines from a stream.

    Binary streams are decoded with encoding; text streams are read as-is.
    Line terminators are removed.
    """
    data = stream.read()
    if isinstance(data, bytes):
        data = data.decode(encoding)
    return data.splitlines()


def read_file(path: Union[str, Path], encoding: str = DEFAULT_ENCODING) -> list[str]:
    """Read a text file as a list of lines."""
    path = Path(path)
    logger.debug("Reading %s (%s)", path, encoding)
    with open(path, "rb") as f:
        return read_lines(f, encoding)


class _BodyTextExtractor(HTMLParser):
    """Collects the visible text inside <body>."""

    def __init__(self):
        super().__init__(convert_charrefs=True)
        self._chunks: list[str] = []
        self._in_body = False
        self._saw_body = False
        self._in_head = False
        self._skip_depth = 0

    def handle_starttag(self, tag, attrs):
        if self._in_head and tag not in _HEAD_TAGS:
            # </head> is optional in HTML5
            self._in_head = False
            self._skip_depth = 0

        if tag == "body":
            self._in_body = True
            self._saw_body = True
            self._skip_depth = 0
        elif tag == "head":
            self._in_head = True
            self._skip_depth += 1
        elif tag in _INVISIBLE_TAGS:
            self._skip_depth += 1
        elif tag in _BLOCK_TAGS:
            self._chunks.append(" ")

    def handle_endtag(self, tag):
        if tag == "body":
            self._in_body = False
        elif tag == "head":
            if self._in_head:
                self._in_head = False
                self._skip_depth = 0
        elif tag in _INVISIBLE_TAGS and self._skip_depth:
            self._skip_depth -= 1
        elif tag in _BLOCK_TAGS:
            self._chunks.append(" ")

    def handle_data(self, data):
        if self._skip_depth:
            return
        # Documents without an explicit <body> are treated as all body
        if self._in_body or not self._saw_body:
            self._chunks.append(data)

    def text(self) -> str:
        return " ".join("".join(self._chunks).split())


def extract_body_text(html: str) -> str:
    """Return the visible body text of an HTML document, whitespace collapsed."""
    parser = _BodyTextExtractor()
    parser.feed(html)
    parser.close()
    return parser.text()


def sniff_meta_charset(raw: bytes) -> Optional[str]:
    """Return the charset declared by a <meta> tag near the top of the page, if it is a known codec."""
    match = _META_CHARSET_RE.search(raw[:_META_SNIFF_BYTES])
    if not match:
        return None
    charset = match.group(1).decode("ascii")
    try:
        codecs.lookup(charset)
    except LookupError:
        logger.debug("Ignoring unknown meta charset %r", charset)
        return None
    return charset


def fetch_url_text(
    url: str,
    timeout_ms: int = DEFAULT_URL_LOAD_TIMEOUT,
    encoding: str = DEFAULT_ENCODING,
) -> list[str]:
    """
    Download a web page and extract its visible body text.

    Args:
        url: Page URL
        timeout_ms: Connect/read timeout in milliseconds
        encoding: Fallback charset when neither the Content-Type header
                  nor a <meta> tag declares one

    Charset precedence: Content-Type header, then <meta charset> in the
    first kilobyte of the page, then encoding.

    Returns:
        Single-element list holding the page text

    Raises:
        urllib.error.URLError: On connection or HTTP errors
        TimeoutError: When the server does not answer within timeout_ms
    """
    headers = {"User-Agent": USER_AGENT}
    req = urllib.request.Request(url, headers=headers)
    context = ssl.create_default_context(cafile=certifi.where())

    logger.debug("Fetching %s (timeout %d ms)", url, timeout_ms)
    with urllib.request.urlopen(req, timeout=timeout_ms / 1000.0, context=context) as response:
        header_charset = response.headers.get_content_charset()
        raw = response.read()

    charset = header_charset or sniff_meta_charset(raw) or encoding
    html = raw.decode(charset)

    return [extract_body_text(html)]
