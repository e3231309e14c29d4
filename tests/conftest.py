"""
Configuration for pytest tests.
"""

import os

import pytest
import requests
from requests.structures import CaseInsensitiveDict

# Must be set before app.config is imported by the test modules.
os.environ.setdefault("GROQ_API_KEY", "test_api_key")
os.environ.setdefault("ENVIRONMENT", "development")


class FakeCompletionClient:
    """Completion client double that records requests."""

    def __init__(self, reply="Chunk summary", fail_on=None):
        self.reply = reply
        self.fail_on = fail_on or set()
        self.requests = []

    async def complete(self, request):
        self.requests.append(request)
        call_number = len(self.requests)
        if call_number in self.fail_on:
            from app.utils.error_handling import CompletionServiceError
            raise CompletionServiceError(f"rate limit exceeded on call {call_number}")
        if callable(self.reply):
            return self.reply(request)
        return self.reply


def make_response(body=b"", status_code=200, headers=None, url="https://example.com/", encoding=None):
    """Build a fully-read requests.Response."""
    response = requests.Response()
    response.status_code = status_code
    response.reason = "OK" if status_code < 400 else "Error"
    response.headers = CaseInsensitiveDict(headers or {})
    response._content = body
    response._content_consumed = True
    response.url = url
    response.encoding = encoding
    return response


@pytest.fixture
def fake_client():
    """Fixture to create a fake completion client."""
    return FakeCompletionClient()


@pytest.fixture
def article_html():
    """Return an HTML page with navigation chrome around an article."""
    return """
    <html>
      <head><title> Test Article Title </title><style>body {color: red}</style></head>
      <body>
        <header>Site Header</header>
        <nav>Home | About | Contact</nav>
        <article>
          <h1>Deep   Learning</h1>
          <p>Neural networks learn representations from data.</p>
          <script>console.log("tracking");</script>
        </article>
        <div class="sidebar">Sidebar links</div>
        <footer>Copyright footer</footer>
      </body>
    </html>
    """


@pytest.fixture(scope="session")
def test_video_url():
    """Return a test YouTube video URL."""
    return "https://youtu.be/V3TUEeB0kW0?si=-InVol0JhtWji-6R"
