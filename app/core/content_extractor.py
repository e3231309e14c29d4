"""
Module for turning a URL into text using the strategy its classification selects.
"""

from typing import Optional
from urllib.parse import urlparse

from app.core.classifier import classify
from app.core.video_probe import VideoMetadataExtractor
from app.core.web_extractor import WebsiteExtractor
from app.core.youtube_transcript import YouTubeTranscriptExtractor
from app.models.schemas import ExtractionResult, ExtractionStrategy, PipelineConfig
from app.utils.error_handling import (
    ExtractionError,
    ExtractionFailed,
    InvalidURLFormat,
    log_extraction_failure,
)
from app.utils.logger import logging


def validate_url(url: str) -> str:
    """
    Validate a URL at the pipeline boundary.

    Returns:
        The URL with surrounding whitespace removed

    Raises:
        InvalidURLFormat: If the URL is blank or not an absolute http(s) URL
    """
    if not isinstance(url, str) or not url.strip():
        raise InvalidURLFormat("URL is required")

    url = url.strip()
    try:
        parsed = urlparse(url)
    except ValueError as e:
        raise InvalidURLFormat(f"Invalid URL format: {url}") from e
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise InvalidURLFormat(f"Invalid URL format: {url}")
    return url


class ContentExtractor:
    """Dispatch a URL to the matching extractor, with one Website to Video fallback."""

    def __init__(
        self,
        pipeline_config: Optional[PipelineConfig] = None,
        youtube: Optional[YouTubeTranscriptExtractor] = None,
        website: Optional[WebsiteExtractor] = None,
        video: Optional[VideoMetadataExtractor] = None,
    ):
        self.pipeline_config = pipeline_config or PipelineConfig()
        max_chars = self.pipeline_config.extraction_truncate_chars
        self.youtube = youtube or YouTubeTranscriptExtractor(max_chars=max_chars)
        self.website = website or WebsiteExtractor(max_chars=max_chars)
        self.video = video or VideoMetadataExtractor()

    def extract(self, url: str) -> ExtractionResult:
        """
        Extract content from ``url``.

        Raises:
            ExtractionFailed: If no strategy could produce content
        """
        try:
            url = validate_url(url)
            strategy = classify(url)
            logging.info(f"Classified {url} as {strategy.value}")
            return self._run(strategy, url)
        except ExtractionError as e:
            log_extraction_failure(e, url)
            raise ExtractionFailed(e.message) from e

    def _run(self, strategy: ExtractionStrategy, url: str) -> ExtractionResult:
        if strategy is ExtractionStrategy.YOUTUBE:
            return self.youtube.extract(url)

        if strategy is ExtractionStrategy.VIDEO:
            return self.video.extract(url)

        try:
            return self.website.extract(url)
        except ExtractionError as e:
            if not e.retry_as_video:
                raise
            logging.info(f"Website extraction failed, trying fallback video handling: {e.message}")
            return self.video.extract(url)
