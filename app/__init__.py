"""
URL Content Summarization Application.

This application classifies a URL, extracts its text (YouTube transcripts,
web pages, images, video file metadata) and summarizes it using LLM models.
"""

from app.config import config

__version__ = config.APP_VERSION
