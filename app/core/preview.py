"""
Preview image and display title resolution for extracted content.
"""

from app.models.schemas import ContentType, ExtractionResult

YOUTUBE_THUMBNAIL_URL = "https://img.youtube.com/vi/{video_id}/0.jpg"
VIDEO_PLACEHOLDER = "/img/video-placeholder.png"
WEBSITE_PLACEHOLDER = "/img/website-placeholder.png"


def resolve_preview(result: ExtractionResult) -> str:
    """Pick a representative preview image for an extraction result."""
    if result.type is ContentType.YOUTUBE and result.video_id:
        return YOUTUBE_THUMBNAIL_URL.format(video_id=result.video_id)
    if result.type is ContentType.VIDEO:
        return VIDEO_PLACEHOLDER
    if result.type is ContentType.IMAGE:
        return result.url
    return WEBSITE_PLACEHOLDER


def resolve_content_title(result: ExtractionResult) -> str:
    """
    Build the display title for an extraction result.

    YouTube and image results get a fixed title. Video files and web pages use
    the extracted title, falling back to a generic one when it is missing.
    """
    if result.type is ContentType.YOUTUBE:
        return "YouTube Video Summary"
    if result.type is ContentType.VIDEO:
        return result.title or "Video Content Summary"
    if result.type is ContentType.IMAGE:
        return "Image Content Summary"
    return result.title or "Website Content Summary"
