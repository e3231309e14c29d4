"""
Main entry point for the URL Content Summarizer application.
"""

import argparse
import asyncio
import time
from typing import Optional

from dotenv import load_dotenv

from app.core.completion import CompletionClient
from app.core.content_extractor import ContentExtractor
from app.core.preview import resolve_content_title, resolve_preview
from app.core.prompts import ASK_SYSTEM_PROMPT
from app.core.summarizer import ContentSummarizer
from app.config import config
from app.models.schemas import CompletionRequest, PipelineConfig, SummaryResponse, SummaryStage
from app.utils.error_handling import ExtractionFailed, log_diagnostic_info
from app.utils.logger import logging

ASK_TEMPERATURE = 0.5
ASK_MAX_TOKENS = 1000


async def summarize_url(
    url: str,
    extractor: Optional[ContentExtractor] = None,
    summarizer: Optional[ContentSummarizer] = None,
    pipeline_config: Optional[PipelineConfig] = None,
) -> SummaryResponse:
    """
    Process a URL: extract its content and summarize it.

    Args:
        url: URL of a YouTube video, video file, image or web page
        extractor: Content extractor (built from ``pipeline_config`` if None)
        summarizer: Content summarizer (built from ``pipeline_config`` if None)
        pipeline_config: Pipeline settings used for default components

    Returns:
        SummaryResponse object

    Raises:
        ExtractionFailed: If no content could be extracted from the URL
    """
    pipeline_config = pipeline_config or PipelineConfig()
    extractor = extractor or ContentExtractor(pipeline_config)

    logging.info(f"Processing URL: {url}")
    start_time = time.perf_counter()

    logging.debug(f"Summarization stage -> {SummaryStage.EXTRACTING.value}")
    try:
        extraction = await asyncio.to_thread(extractor.extract, url)
    except ExtractionFailed:
        logging.debug(f"Summarization stage -> {SummaryStage.FAILED.value}")
        raise

    logging.info(f"Content extracted in {time.perf_counter() - start_time:.2f}s")
    log_diagnostic_info({
        "url": extraction.url,
        "content_type": extraction.type.value,
        "content_length": len(extraction.content),
        "is_video_file": extraction.is_video_file,
    })

    summarizer = summarizer or ContentSummarizer(pipeline_config=pipeline_config)
    summary_start = time.perf_counter()
    summary = await summarizer.summarize(extraction)
    logging.info(f"Summary generated in {time.perf_counter() - summary_start:.2f}s")

    return SummaryResponse(
        preview_image=resolve_preview(extraction),
        summary=summary,
        content_title=resolve_content_title(extraction),
        content_type=extraction.type,
        url=extraction.url,
        process_time_seconds=time.perf_counter() - start_time,
    )


async def ask_question(prompt: str, client: Optional[CompletionClient] = None) -> str:
    """
    Answer an educational question with a single completion call.

    Raises:
        ValueError: If the prompt is blank
        CompletionServiceError: If the completion service fails
    """
    if not prompt or not prompt.strip():
        raise ValueError("Prompt is required.")

    client = client or CompletionClient()
    request = CompletionRequest(
        model=config.DEFAULT_SUMMARY_MODEL,
        system_prompt=ASK_SYSTEM_PROMPT,
        user_prompt=prompt,
        temperature=ASK_TEMPERATURE,
        max_tokens=ASK_MAX_TOKENS,
    )
    return await client.complete(request)


def main():
    """Main function to run the application from command line."""
    parser = argparse.ArgumentParser(description="URL Content Summarizer")
    parser.add_argument("url", help="URL of a YouTube video, video file, image or web page")
    parser.add_argument("--model", default=config.DEFAULT_SUMMARY_MODEL,
                        help="Groq language model for summarization")
    parser.add_argument("--json", action="store_true", help="Print the full result as JSON")

    args = parser.parse_args()

    # Load environment variables
    load_dotenv()

    pipeline_config = PipelineConfig(model=args.model)
    try:
        result = asyncio.run(summarize_url(args.url, pipeline_config=pipeline_config))
    except ExtractionFailed as e:
        parser.exit(1, f"Error processing URL: {e.reason}\n")

    if args.json:
        print(result.model_dump_json(indent=2))
        return

    print("\n" + "=" * 80)
    print(f"{result.content_title} ({result.content_type.value})")
    print(result.url)
    print("=" * 80)
    print(result.summary)
    print("=" * 80)
    print(f"Processed in {result.process_time_seconds:.2f} seconds")


if __name__ == "__main__":
    main()
