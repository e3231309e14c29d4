"""
Module for classifying URLs into extraction strategies.
"""

from urllib.parse import urlparse

from app.models.schemas import ExtractionStrategy
from app.utils.helpers import get_file_extension

YOUTUBE_HOST_MARKERS = ("youtube.com", "youtu.be")
VIDEO_EXTENSIONS = {"mp4", "webm", "mov", "avi", "wmv", "m4v", "flv", "mkv"}
MEDIA_HOST_MARKERS = ("cloudinary.com",)
MEDIA_VIDEO_PATH_MARKER = "/video/"


def classify(url: str) -> ExtractionStrategy:
    """
    Select an extraction strategy from the URL's hostname and path.

    Never touches the network and never fails; anything that is not clearly
    a YouTube link or a video file is treated as a website.
    """
    try:
        parsed = urlparse(url)
        hostname = (parsed.hostname or "").lower()
    except ValueError:
        return ExtractionStrategy.WEBSITE
    path = parsed.path or ""

    if any(marker in hostname for marker in YOUTUBE_HOST_MARKERS):
        return ExtractionStrategy.YOUTUBE

    if get_file_extension(path) in VIDEO_EXTENSIONS:
        return ExtractionStrategy.VIDEO

    if any(marker in hostname for marker in MEDIA_HOST_MARKERS) and MEDIA_VIDEO_PATH_MARKER in path:
        return ExtractionStrategy.VIDEO

    return ExtractionStrategy.WEBSITE
