from pydantic import BaseModel, field_validator


class UrlRequest(BaseModel):
    """Model for requesting URL summarization."""
    url: str

    @field_validator('url')
    def validate_url(cls, v):
        if not v or not v.strip():
            raise ValueError('URL is required in the request body.')
        return v.strip()


class AskRequest(BaseModel):
    """Model for educational question requests."""
    prompt: str

    @field_validator('prompt')
    def validate_prompt(cls, v):
        if not v or not v.strip():
            raise ValueError('Prompt is required in the request body.')
        return v


class AskResponse(BaseModel):
    """Model for educational question responses."""
    message: str = "Groq API Response"
    reply: str
    note: str = "You are speaking to a bot that strictly answers only educational questions."
