"""
Module for summarizing extracted content using LLM models.
"""

import asyncio
from typing import List, Optional

from app.core.chunker import chunk_text
from app.core.completion import CompletionClient
from app.core.prompts import NO_CONTENT_MESSAGE
from app.models.schemas import CompletionRequest, ExtractionResult, PipelineConfig, SummaryStage
from app.utils.helpers import truncate_text
from app.utils.logger import logging


class ContentSummarizer:
    """Class to handle chunked summarization of extracted content."""

    def __init__(self, client: Optional[CompletionClient] = None, pipeline_config: Optional[PipelineConfig] = None):
        """
        Initialize the summarizer.

        Args:
            client: Completion client (a default client is created if None)
            pipeline_config: Chunking, batching and prompt settings
        """
        self.client = client or CompletionClient()
        self.config = pipeline_config or PipelineConfig()

    @staticmethod
    def _enter(stage: SummaryStage, detail: str = "") -> None:
        logging.debug(f"Summarization stage -> {stage.value}{' ' + detail if detail else ''}")

    async def generate(self, text: str, prompt: str, max_tokens: int) -> str:
        """
        Run one completion over ``text``.

        Failures never raise; the error description is returned in place of
        the summary so the rest of the request can carry on.
        """
        limit = self.config.completion_truncate_chars
        if len(text) > limit:
            logging.info(f"Truncating text from {len(text):,} to {limit:,} characters for API call")
            text = truncate_text(text, limit)

        request = CompletionRequest(
            model=self.config.model,
            system_prompt=self.config.system_prompt,
            user_prompt=prompt + text,
            temperature=self.config.temperature,
            max_tokens=max_tokens,
        )

        try:
            return await self.client.complete(request)
        except Exception as e:
            logging.error(f"Error generating content: {e}")
            return f"Error generating content: {e}"

    async def summarize_chunks(self, chunks: List[str]) -> List[str]:
        """
        Summarize chunks in batches of ``max_concurrent`` concurrent calls.

        Each batch finishes before the next one starts, with a pause between
        batches. Results keep the order of ``chunks``.
        """
        batch_size = self.config.max_concurrent
        delay = self.config.batch_delay_ms / 1000
        results: List[str] = []

        for batch_number, start in enumerate(range(0, len(chunks), batch_size), start=1):
            batch = chunks[start:start + batch_size]
            self._enter(SummaryStage.SUMMARIZING, f"batch {batch_number} ({len(batch)} chunks)")

            batch_results = await asyncio.gather(*(
                self.generate(chunk, self.config.summarize_prompt, self.config.chunk_max_tokens)
                for chunk in batch
            ))
            results.extend(batch_results)

            if start + batch_size < len(chunks):
                await asyncio.sleep(delay)

        return results

    async def combine(self, summaries: List[str]) -> str:
        """Merge per-chunk summaries into one final summary."""
        self._enter(SummaryStage.COMBINING, f"{len(summaries)} partial summaries")
        combined = "\n\n".join(summaries)
        if len(combined) > self.config.combine_threshold_chars:
            combined = truncate_text(combined, self.config.combine_threshold_chars)

        return await self.generate(combined, self.config.combine_prompt, self.config.combine_max_tokens)

    async def summarize(self, extraction: ExtractionResult) -> str:
        """
        Summarize an extraction result.

        Args:
            extraction: Content produced by one of the extractors

        Returns:
            Summary text (possibly containing embedded error descriptions)
        """
        content = extraction.content
        if not content:
            self._enter(SummaryStage.DONE, "no content")
            return NO_CONTENT_MESSAGE

        if extraction.is_video_file:
            self._enter(SummaryStage.SUMMARIZING, "video description")
            summary = await self.generate(content, self.config.video_prompt, self.config.video_max_tokens)
            self._enter(SummaryStage.DONE)
            return summary

        self._enter(SummaryStage.CHUNKING)
        chunks = chunk_text(content, self.config.max_chunk_chars)
        logging.info(f"Content split into {len(chunks)} chunks")

        results = await self.summarize_chunks(chunks)

        if len(results) == 1:
            summary = results[0]
        else:
            summary = await self.combine(results)

        self._enter(SummaryStage.DONE)
        return summary
