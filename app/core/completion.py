"""
Module for calling the text completion service through LangChain.
"""

import os
from typing import Optional

from langchain.chat_models import init_chat_model
from langchain_core.prompts import ChatPromptTemplate

from app.config import config
from app.models.schemas import CompletionRequest
from app.utils.error_handling import CompletionServiceError
from app.utils.logger import logging

COMPLETION_PROMPT = ChatPromptTemplate.from_messages([
    ("system", "{system_prompt}"),
    ("human", "{user_prompt}"),
])


class CompletionClient:
    """Class to handle completion requests against the configured chat model."""

    def __init__(
        self,
        api_key: Optional[str] = None,
        model_provider: str = config.MODEL_PROVIDER,
        timeout: float = config.COMPLETION_TIMEOUT,
    ):
        """
        Initialize the client with API key.

        Args:
            api_key: Groq API key (if None, will try to get from environment)
            model_provider: LangChain model provider name
            timeout: Per-request timeout in seconds
        """
        self.api_key = api_key or os.getenv("GROQ_API_KEY")
        if not self.api_key:
            raise ValueError("Groq API key is required. Set it in .env file or pass directly.")

        os.environ["GROQ_API_KEY"] = self.api_key
        self.model_provider = model_provider
        self.timeout = timeout

    def _create_model(self, request: CompletionRequest):
        return init_chat_model(
            model=request.model,
            model_provider=self.model_provider,
            temperature=request.temperature,
            max_tokens=request.max_tokens,
            timeout=self.timeout,
        )

    async def complete(self, request: CompletionRequest) -> str:
        """
        Run one completion request.

        Args:
            request: Prompts and sampling settings

        Returns:
            Generated text

        Raises:
            CompletionServiceError: If the service call fails
        """
        messages = COMPLETION_PROMPT.format_messages(
            system_prompt=request.system_prompt,
            user_prompt=request.user_prompt,
        )

        try:
            llm = self._create_model(request)
            response = await llm.ainvoke(messages)
        except Exception as e:
            logging.error(f"API Error from {self.model_provider}/{request.model}: {e}")
            raise CompletionServiceError(str(e)) from e

        return response.content
