"""
Module for extracting readable text from generic web pages.
"""

import contextlib
import time
from typing import Optional, Tuple

import requests
from bs4 import BeautifulSoup
from urllib3.exceptions import ReadTimeoutError

from app.config import config
from app.models.schemas import ContentType, ExtractionResult
from app.utils.error_handling import (
    BinaryContentDetected,
    ExtractionError,
    NetworkTimeout,
    NoContentExtracted,
    NonTextResponse,
    ResponseTooLarge,
)
from app.utils.helpers import collapse_whitespace, truncate_text
from app.utils.logger import logging

DEFAULT_HEADERS = {
    "User-Agent": (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
        "AppleWebKit/537.36 (KHTML, like Gecko) "
        "Chrome/124.0 Safari/537.36"
    ),
    "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,image/webp,*/*;q=0.8",
    "Accept-Language": "en-US,en;q=0.5",
}

BINARY_CONTENT_TYPES = ("video/", "audio/", "application/octet-stream")
IMAGE_CONTENT_TYPE = "image/"

NON_CONTENT_SELECTOR = (
    'script, style, nav, footer, header, iframe, [role="banner"], '
    '[role="navigation"], .sidebar, .comments, .nav, .menu, .advertisement'
)

CONTENT_SELECTORS = (
    "article",
    "main",
    ".content",
    "#content",
    ".post",
    ".article",
    '[role="main"]',
    ".main-content",
    ".post-content",
    ".entry-content",
)

MIN_PARAGRAPH_CHARS = 20
READ_CHUNK_BYTES = 64 * 1024


class WebsiteExtractor:
    """Fetch a page and pull its main text out of the HTML."""

    def __init__(
        self,
        max_chars: int = config.EXTRACTION_TRUNCATE_CHARS,
        timeout: float = config.PAGE_FETCH_TIMEOUT,
        max_bytes: int = config.MAX_RESPONSE_BYTES,
        session: Optional[requests.Session] = None,
    ):
        self.max_chars = max_chars
        self.timeout = timeout
        self.max_bytes = max_bytes
        self.session = session or requests.Session()

    def extract(self, url: str) -> ExtractionResult:
        """
        Fetch ``url`` and return its cleaned text content.

        Raises:
            BinaryContentDetected: For video, audio or octet-stream responses
            NetworkTimeout: If the request timed out
            ResponseTooLarge: If the body exceeds ``max_bytes``
            NonTextResponse: If the body cannot be decoded as text
            NoContentExtracted: If the body is empty
            ExtractionError: For any other transport or HTTP error
        """
        logging.info(f"Fetching website content from {url}")
        try:
            with self.session.get(
                url,
                headers=DEFAULT_HEADERS,
                timeout=self.timeout,
                stream=True,
                allow_redirects=True,
            ) as response:
                response.raise_for_status()
                content_type = (response.headers.get("Content-Type") or "").lower()

                if any(marker in content_type for marker in BINARY_CONTENT_TYPES):
                    raise BinaryContentDetected(f"Binary content type detected: {content_type}")

                if IMAGE_CONTENT_TYPE in content_type:
                    return ExtractionResult(
                        content=f"Image URL: {url}\nContent-Type: {content_type}",
                        type=ContentType.IMAGE,
                        title="Image Content",
                        url=url,
                    )

                body = self._read_body(response)
                html = self._decode(body, response.encoding)
        except requests.exceptions.Timeout as e:
            raise NetworkTimeout(f"Request timed out after {self.timeout}s: {e}") from e
        except requests.RequestException as e:
            raise ExtractionError(f"Website content extraction failed: {e}") from e

        title, text = self.parse_html(html)
        if len(text) > self.max_chars:
            logging.info(f"Website content truncated to {self.max_chars:,} characters")
            text = truncate_text(text, self.max_chars)

        return ExtractionResult(content=text, type=ContentType.WEBSITE, title=title, url=url)

    def _read_body(self, response: requests.Response) -> bytes:
        """Read the response body while enforcing the size and total time limits."""
        content_length = response.headers.get("Content-Length")
        if content_length:
            with contextlib.suppress(ValueError):
                if int(content_length) > self.max_bytes:
                    raise ResponseTooLarge(
                        f"Response too large ({content_length} bytes, limit {self.max_bytes})"
                    )

        body = bytearray()
        deadline = time.monotonic() + self.timeout
        try:
            for chunk in response.iter_content(chunk_size=READ_CHUNK_BYTES):
                body.extend(chunk)
                if len(body) > self.max_bytes:
                    raise ResponseTooLarge(f"Downloaded content exceeds {self.max_bytes} bytes")
                if time.monotonic() > deadline:
                    raise NetworkTimeout(f"Reading the response took longer than {self.timeout}s")
        except requests.exceptions.ConnectionError as e:
            # requests reports a stalled body read as ConnectionError(ReadTimeoutError)
            if e.args and isinstance(e.args[0], ReadTimeoutError):
                raise NetworkTimeout(f"Read timed out after {self.timeout}s: {e}") from e
            raise

        if not body:
            raise NoContentExtracted("Response body is empty")
        return bytes(body)

    @staticmethod
    def _decode(body: bytes, declared: Optional[str]) -> str:
        """Decode the body strictly, preferring UTF-8 over requests' latin-1 default."""
        candidates = ["utf-8"]
        if declared and declared.lower() not in ("utf-8", "utf8"):
            if declared.lower() in ("iso-8859-1", "latin-1", "ascii"):
                candidates.append(declared)
            else:
                candidates.insert(0, declared)

        for encoding in candidates:
            try:
                text = body.decode(encoding)
            except (UnicodeDecodeError, LookupError):
                continue
            if "\x00" in text:
                break
            return text

        raise NonTextResponse("Response is not text/HTML content")

    @staticmethod
    def parse_html(html: str) -> Tuple[str, str]:
        """
        Extract the title and main text from an HTML document.

        Returns:
            Tuple of (title, whitespace-collapsed text)
        """
        soup = BeautifulSoup(html, "html.parser")

        for element in soup.select(NON_CONTENT_SELECTOR):
            element.decompose()

        title = soup.title.get_text(strip=True) if soup.title else ""

        parts = []
        for selector in CONTENT_SELECTORS:
            for element in soup.select(selector):
                parts.append(element.get_text(" ", strip=True))
        main_content = " ".join(part for part in parts if part)

        if not main_content.strip():
            paragraphs = (p.get_text(" ", strip=True) for p in soup.find_all("p"))
            main_content = " ".join(p for p in paragraphs if len(p) > MIN_PARAGRAPH_CHARS)

        if not main_content.strip():
            root = soup.body or soup
            main_content = root.get_text(" ", strip=True)

        return title, collapse_whitespace(main_content)
