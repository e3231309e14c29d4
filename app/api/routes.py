"""
API routes for the URL Content Summarizer application.
"""

from fastapi import APIRouter, HTTPException

from app.api.schems import AskRequest, AskResponse, UrlRequest
from app.main import ask_question, summarize_url
from app.models.schemas import SummaryResponse
from app.utils.error_handling import CompletionServiceError, ExtractionFailed
from app.utils.logger import logging

router = APIRouter(prefix="/api/v1", tags=["summarizer"])


@router.post("/process", response_model=SummaryResponse)
async def process_url(request: UrlRequest):
    """
    Summarize the content behind a URL.

    - YouTube links are summarized from their transcript
    - Video files are described from their URL and headers
    - Any other URL is fetched and its main text summarized
    """
    try:
        return await summarize_url(request.url)
    except ExtractionFailed as e:
        logging.error(f"Process route error: {e.reason}")
        raise HTTPException(status_code=422, detail=f"Error processing URL: {e.reason}")


@router.post("/ask-groq", response_model=AskResponse)
async def ask_groq(request: AskRequest):
    """Answer an educational question."""
    try:
        reply = await ask_question(request.prompt)
    except CompletionServiceError as e:
        logging.error(f"Groq API Error: {e}")
        raise HTTPException(status_code=502, detail=f"Error with Groq API: {e}")

    return AskResponse(reply=reply)
