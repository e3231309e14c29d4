"""
Data models for the URL content summarizer application.
"""
from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field, field_validator
from app.config import config
from app.core import prompts


class ContentType(str, Enum):
    """Kinds of content a URL can resolve to."""
    YOUTUBE = "youtube"
    VIDEO = "video"
    WEBSITE = "website"
    IMAGE = "image"


class ExtractionStrategy(str, Enum):
    """Extraction procedures selected by the content classifier."""
    YOUTUBE = "youtube"
    VIDEO = "video"
    WEBSITE = "website"


class SummaryStage(str, Enum):
    """Stages a summarization request moves through."""
    IDLE = "idle"
    EXTRACTING = "extracting"
    CHUNKING = "chunking"
    SUMMARIZING = "summarizing"
    COMBINING = "combining"
    DONE = "done"
    FAILED = "failed"


class TranscriptSegment(BaseModel):
    """One timed caption line returned by the transcript service."""
    text: str
    start: float = 0.0
    duration: float = 0.0


class ExtractionResult(BaseModel):
    """Normalized text extracted from a URL by exactly one extractor."""
    content: str = ""
    type: ContentType
    title: Optional[str] = None
    url: str
    video_id: Optional[str] = None
    is_video_file: bool = False

    model_config = {"frozen": True}


class CompletionRequest(BaseModel):
    """Request sent to the completion service."""
    model: str = config.DEFAULT_SUMMARY_MODEL
    system_prompt: str = prompts.SYSTEM_PROMPT
    user_prompt: str
    temperature: float = config.TEMPERATURE
    max_tokens: int = 1024


class PipelineConfig(BaseModel):
    """Configuration for the summarization pipeline."""
    max_chunk_chars: int = Field(default=config.MAX_CHUNK_CHARS, gt=0)
    max_concurrent: int = Field(default=config.MAX_CONCURRENT, gt=0)
    batch_delay_ms: int = Field(default=config.BATCH_DELAY_MS, ge=0)
    combine_threshold_chars: int = Field(default=config.COMBINE_THRESHOLD_CHARS, gt=0)
    extraction_truncate_chars: int = Field(default=config.EXTRACTION_TRUNCATE_CHARS, gt=0)
    completion_truncate_chars: int = Field(default=config.COMPLETION_TRUNCATE_CHARS, gt=0)

    model: str = config.DEFAULT_SUMMARY_MODEL
    temperature: float = config.TEMPERATURE
    chunk_max_tokens: int = 1024
    combine_max_tokens: int = 1500
    video_max_tokens: int = 1500

    system_prompt: str = prompts.SYSTEM_PROMPT
    summarize_prompt: str = prompts.SUMMARIZE_PROMPT
    combine_prompt: str = prompts.COMBINE_SUMMARY_PROMPT
    video_prompt: str = prompts.VIDEO_PROMPT

    model_config = {"frozen": True}


class SummaryResponse(BaseModel):
    """Final result of summarizing a URL."""
    preview_image: str
    summary: str
    content_title: str
    content_type: ContentType
    url: str
    process_time_seconds: float

    model_config = {"frozen": True}

    @field_validator('process_time_seconds')
    def validate_process_time(cls, v):
        if v < 0:
            raise ValueError('process time cannot be negative')
        return v
