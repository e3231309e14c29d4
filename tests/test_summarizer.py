"""
Tests for the content summarizer module.
"""

import asyncio
from unittest.mock import AsyncMock, patch

import pytest

from app.core.summarizer import ContentSummarizer
from app.models.schemas import ContentType, ExtractionResult, PipelineConfig
from conftest import FakeCompletionClient


def website(content):
    return ExtractionResult(content=content, type=ContentType.WEBSITE, url="https://example.com/post")


@pytest.fixture
def summary_config():
    """Fixture to create a pipeline config without batch delays."""
    return PipelineConfig(batch_delay_ms=0)


def test_empty_content_short_circuits(fake_client, summary_config):
    summarizer = ContentSummarizer(fake_client, summary_config)

    summary = asyncio.run(summarizer.summarize(website("")))

    assert summary == "No content to summarize."
    assert fake_client.requests == []


def test_single_chunk_returns_raw_completion(fake_client, summary_config):
    """A short text is summarized with exactly one call and no combine step."""
    fake_client.reply = "The one and only summary."
    summarizer = ContentSummarizer(fake_client, summary_config)

    summary = asyncio.run(summarizer.summarize(website("A short article about testing.")))

    assert summary == "The one and only summary."
    assert len(fake_client.requests) == 1
    request = fake_client.requests[0]
    assert request.user_prompt == summary_config.summarize_prompt + "A short article about testing."
    assert request.max_tokens == 1024
    assert request.temperature == 0.5
    assert request.system_prompt == summary_config.system_prompt


def test_video_file_uses_single_video_prompt(fake_client, summary_config):
    extraction = ExtractionResult(
        content="Video URL: https://example.com/a.mp4\n" + "x" * 5000,
        type=ContentType.VIDEO,
        url="https://example.com/a.mp4",
        is_video_file=True,
    )
    summarizer = ContentSummarizer(fake_client, summary_config)

    asyncio.run(summarizer.summarize(extraction))

    assert len(fake_client.requests) == 1
    request = fake_client.requests[0]
    assert request.user_prompt.startswith(summary_config.video_prompt)
    assert request.max_tokens == 1500


def test_seven_chunks_run_in_batches_of_three_then_combine(summary_config):
    """Chunks are dispatched as batches of 3, 3 and 1, then combined once in order."""
    in_flight = 0
    concurrency_at_start = []

    class TrackingClient(FakeCompletionClient):
        async def complete(self, request):
            nonlocal in_flight
            self.requests.append(request)
            in_flight += 1
            concurrency_at_start.append(in_flight)
            await asyncio.sleep(0)
            in_flight -= 1
            if request.max_tokens == 1500:
                return "final summary"
            return "summary of " + request.user_prompt[-5:]

    client = TrackingClient()
    pipeline_config = PipelineConfig(max_chunk_chars=10, max_concurrent=3, batch_delay_ms=0)
    content = "".join(f"chunk{i}____" for i in range(7))  # seven 10-char chunks, no breaks
    summarizer = ContentSummarizer(client, pipeline_config)

    summary = asyncio.run(summarizer.summarize(website(content)))

    assert summary == "final summary"
    assert concurrency_at_start == [1, 2, 3, 1, 2, 3, 1, 1]
    assert len(client.requests) == 8

    combine_request = client.requests[-1]
    assert combine_request.max_tokens == 1500
    assert combine_request.user_prompt == pipeline_config.combine_prompt + "\n\n".join(
        f"summary of {i}____" for i in range(7)
    )


def test_delay_between_batches_but_not_after_last():
    client = FakeCompletionClient()
    pipeline_config = PipelineConfig(max_chunk_chars=10, max_concurrent=3, batch_delay_ms=500)
    summarizer = ContentSummarizer(client, pipeline_config)

    with patch("app.core.summarizer.asyncio.sleep", new_callable=AsyncMock) as mock_sleep:
        results = asyncio.run(summarizer.summarize_chunks([f"c{i}" for i in range(7)]))

    assert len(results) == 7
    assert mock_sleep.await_count == 2
    mock_sleep.assert_awaited_with(0.5)


def test_failed_chunk_is_embedded_and_others_survive(summary_config):
    """A failure on chunk 2 of 3 degrades that slot only."""
    client = FakeCompletionClient(
        reply=lambda request: f"summary({request.user_prompt[-1]})",
        fail_on={2},
    )
    summarizer = ContentSummarizer(client, summary_config)

    results = asyncio.run(summarizer.summarize_chunks(["part 1", "part 2", "part 3"]))

    assert results[0] == "summary(1)"
    assert results[1] == "Error generating content: rate limit exceeded on call 2"
    assert results[2] == "summary(3)"


def test_failed_chunk_still_produces_combined_summary():
    client = FakeCompletionClient(
        reply=lambda request: "combined" if request.max_tokens == 1500 else "ok",
        fail_on={2},
    )
    pipeline_config = PipelineConfig(max_chunk_chars=10, batch_delay_ms=0)
    summarizer = ContentSummarizer(client, pipeline_config)

    summary = asyncio.run(summarizer.summarize(website("a" * 30)))

    assert summary == "combined"
    combine_request = client.requests[-1]
    assert "ok\n\nError generating content: rate limit exceeded on call 2\n\nok" in combine_request.user_prompt


def test_failing_combine_returns_error_text():
    client = FakeCompletionClient(reply="ok", fail_on={3})
    pipeline_config = PipelineConfig(max_chunk_chars=10, batch_delay_ms=0)
    summarizer = ContentSummarizer(client, pipeline_config)

    summary = asyncio.run(summarizer.summarize(website("a" * 20)))

    assert summary.startswith("Error generating content:")


def test_chunk_text_is_truncated_before_completion(fake_client):
    pipeline_config = PipelineConfig(completion_truncate_chars=100)
    summarizer = ContentSummarizer(fake_client, pipeline_config)

    asyncio.run(summarizer.generate("z" * 500, "Prompt: ", 1024))

    assert fake_client.requests[0].user_prompt == "Prompt: " + "z" * 100 + "..."


def test_joined_summaries_are_truncated_before_combine():
    client = FakeCompletionClient(reply=lambda request: "s" * 40)
    pipeline_config = PipelineConfig(max_chunk_chars=10, combine_threshold_chars=50, batch_delay_ms=0)
    summarizer = ContentSummarizer(client, pipeline_config)

    asyncio.run(summarizer.summarize(website("b" * 30)))

    combine_request = client.requests[-1]
    joined = combine_request.user_prompt[len(pipeline_config.combine_prompt):]
    assert joined == ("s" * 40 + "\n\n" + "s" * 40)[:50] + "..."


def test_uses_configured_model(fake_client):
    pipeline_config = PipelineConfig(model="custom-model")
    summarizer = ContentSummarizer(fake_client, pipeline_config)

    asyncio.run(summarizer.summarize(website("Some text.")))

    assert fake_client.requests[0].model == "custom-model"
