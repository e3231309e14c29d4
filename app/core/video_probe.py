"""
Module for describing video URLs that cannot be transcribed.

Nothing is downloaded: the URL itself plus whatever a HEAD request reveals is
turned into a short text description that the summarizer can reason about.
"""

import os
from typing import Dict, Optional
from urllib.parse import urlparse

import requests

from app.config import config
from app.models.schemas import ContentType, ExtractionResult
from app.utils.logger import logging

BYTES_PER_MB = 1048576


def video_identifier(url: str) -> str:
    """Derive a filename or identifier for a video URL."""
    filename = os.path.basename(urlparse(url).path)
    if filename:
        return filename
    return url.rstrip("/").split("/")[-1].split(".")[0]


class VideoMetadataExtractor:
    """Build a text surrogate for a video from its URL and response headers."""

    def __init__(self, timeout: float = config.HEAD_PROBE_TIMEOUT, session: Optional[requests.Session] = None):
        self.timeout = timeout
        self.session = session or requests.Session()

    def probe(self, url: str) -> Dict[str, str]:
        """
        Issue a HEAD request and return the headers of interest.

        Failures are logged and produce an empty dict.
        """
        try:
            response = self.session.head(url, timeout=self.timeout, allow_redirects=True)
            response.raise_for_status()
        except requests.RequestException as e:
            logging.warning(f"Could not fetch video metadata for {url}: {e}")
            return {}

        headers = {}
        for name in ("Content-Type", "Content-Length"):
            value = response.headers.get(name)
            if value:
                headers[name] = value
        return headers

    def extract(self, url: str) -> ExtractionResult:
        identifier = video_identifier(url)
        hostname = urlparse(url).hostname or ""

        lines = [
            f"Video URL: {url}",
            f"Video ID/Filename: {identifier}",
            f"Source: {hostname}",
        ]

        headers = self.probe(url)
        if "Content-Type" in headers:
            lines.append(f"Content-Type: {headers['Content-Type']}")
        if "Content-Length" in headers:
            try:
                size_mb = round(int(headers["Content-Length"]) / BYTES_PER_MB, 2)
                lines.append(f"File Size: {size_mb} MB")
            except ValueError:
                logging.debug(f"Ignoring malformed Content-Length {headers['Content-Length']!r}")

        return ExtractionResult(
            content="\n".join(lines) + "\n",
            type=ContentType.VIDEO,
            title=f"Video File: {identifier}",
            url=url,
            is_video_file=True,
        )
