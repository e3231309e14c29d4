"""
Module for extracting YouTube video transcripts.
"""

from typing import List, Optional, Sequence
from urllib.parse import urlparse, parse_qs

import requests
from youtube_transcript_api import YouTubeTranscriptApi, NoTranscriptFound

from app.config import config
from app.models.schemas import ContentType, ExtractionResult, TranscriptSegment
from app.utils.error_handling import InvalidURLFormat, TranscriptExtractionFailed
from app.utils.helpers import truncate_text
from app.utils.logger import logging

SHORT_LINK_HOST = "youtu.be"
DEFAULT_LANGUAGES = ("en",)


class TimeoutSession(requests.Session):
    """Session that applies a default timeout to every request."""

    def __init__(self, timeout: float):
        super().__init__()
        self.timeout = timeout

    def request(self, *args, **kwargs):
        kwargs.setdefault("timeout", self.timeout)
        return super().request(*args, **kwargs)


def extract_video_id(url: str) -> str:
    """
    Extract the video ID from a YouTube URL.

    Supports ``youtu.be/<id>`` short links and ``?v=<id>`` watch URLs.

    Raises:
        InvalidURLFormat: If neither pattern yields an ID
    """
    parsed = urlparse(url)
    hostname = (parsed.hostname or "").lower()

    if SHORT_LINK_HOST in hostname:
        video_id = parsed.path.rstrip("/").split("/")[-1]
        if video_id:
            return video_id
    else:
        values = parse_qs(parsed.query).get("v")
        if values and values[0]:
            return values[0]

    raise InvalidURLFormat(f"Invalid YouTube URL format: {url}")


class YouTubeTranscriptExtractor:
    """Class to handle YouTube transcript extraction."""

    def __init__(
        self,
        max_chars: int = config.EXTRACTION_TRUNCATE_CHARS,
        languages: Sequence[str] = DEFAULT_LANGUAGES,
        transcript_api: Optional[YouTubeTranscriptApi] = None,
    ):
        """
        Initialize the extractor.

        Args:
            max_chars: Transcript length above which the text is truncated
            languages: Preferred caption languages, in order
            transcript_api: Transcript service client (created on demand if None)
        """
        self.max_chars = max_chars
        self.languages = list(languages)
        self._api = transcript_api

    @property
    def api(self) -> YouTubeTranscriptApi:
        if self._api is None:
            self._api = YouTubeTranscriptApi(http_client=TimeoutSession(config.TRANSCRIPT_TIMEOUT))
        return self._api

    def fetch_segments(self, video_id: str) -> List[TranscriptSegment]:
        """
        Fetch the ordered transcript segments for a video.

        Preferred languages are tried first; otherwise the first transcript
        the video offers is used.
        """
        try:
            fetched = self.api.fetch(video_id, languages=self.languages)
        except NoTranscriptFound:
            logging.info(f"No {self.languages} transcript for {video_id}, using first available")
            transcript = next(iter(self.api.list(video_id)))
            fetched = transcript.fetch()

        return [
            TranscriptSegment(text=snippet.text, start=snippet.start, duration=snippet.duration)
            for snippet in fetched
        ]

    def extract(self, url: str) -> ExtractionResult:
        """
        Build an extraction result from a YouTube URL's transcript.

        Raises:
            InvalidURLFormat: If the URL has no recognizable video ID
            TranscriptExtractionFailed: If the transcript service fails
        """
        video_id = extract_video_id(url)
        logging.info(f"Fetching transcript for YouTube video {video_id}")

        try:
            segments = self.fetch_segments(video_id)
        except Exception as e:
            raise TranscriptExtractionFailed(
                f"YouTube transcript extraction failed: {e}"
            ) from e

        transcript = " ".join(segment.text for segment in segments)
        if len(transcript) > self.max_chars:
            logging.info(f"Transcript truncated to {self.max_chars:,} characters")
            transcript = truncate_text(transcript, self.max_chars)

        return ExtractionResult(
            content=transcript,
            type=ContentType.YOUTUBE,
            url=url,
            video_id=video_id,
        )
