"""
Centralized error handling for the application.

Extraction errors carry a ``retry_as_video`` tag. The website extractor sets it
when a failure indicates the resource is really a binary or streamed media
file, and the content extractor uses the tag (never the message text) to
decide whether the URL gets one more attempt as a video.
"""

import traceback
from typing import Any, Dict, Optional

from app.config import config
from app.utils.logger import logging


class ExtractionError(Exception):
    """Base class for failures while turning a URL into text."""

    default_retry_as_video = False

    def __init__(self, message: str, retry_as_video: Optional[bool] = None):
        super().__init__(message)
        self.message = message
        self.retry_as_video = (
            self.default_retry_as_video if retry_as_video is None else retry_as_video
        )


class InvalidURLFormat(ExtractionError):
    """The URL is blank, malformed, or lacks a recognizable video id."""


class TranscriptExtractionFailed(ExtractionError):
    """The transcript service could not provide captions for a video."""


class BinaryContentDetected(ExtractionError):
    """The page responded with a video, audio or octet-stream body."""

    default_retry_as_video = True


class NonTextResponse(ExtractionError):
    """The body could not be decoded as text."""


class NetworkTimeout(ExtractionError):
    """The page fetch did not complete within its timeout."""

    default_retry_as_video = True


class ResponseTooLarge(ExtractionError):
    """The body exceeded the maximum response size."""

    default_retry_as_video = True


class NoContentExtracted(ExtractionError):
    """The server answered with an empty body."""


class ExtractionFailed(Exception):
    """The single error surfaced to callers when no strategy produced content."""

    def __init__(self, reason: str):
        super().__init__(f"Content extraction failed: {reason}")
        self.reason = reason


class CompletionServiceError(Exception):
    """The completion service rejected or failed a request."""


def log_extraction_failure(error: Exception, url: str) -> None:
    """
    Log an extraction failure with its traceback.

    Args:
        error: The exception that occurred
        url: URL being processed
    """
    logging.error(f"Error extracting content from {url}: {error}")
    logging.debug(traceback.format_exc())


def log_diagnostic_info(context: Dict[str, Any]):
    """
    Log diagnostic information for debugging.

    Args:
        context: Dictionary of diagnostic information
    """
    if not config.DEBUG:
        return

    try:
        import json
        logging.info(f"Diagnostic info: {json.dumps(context, default=str)}")
    except (TypeError, ValueError) as e:
        logging.error(f"Error logging diagnostic info: {str(e)}")
