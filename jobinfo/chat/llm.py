"""Language model clients used to phrase answers from a job context.

Every client exposes one coroutine, ``complete(system_instruction,
user_content)``, and raises ``LanguageModelError`` for any failure: transport
errors, non-success responses and empty or malformed payloads alike.
"""

import logging
from abc import ABC, abstractmethod

from jobinfo.config import Settings
from jobinfo.errors import ConfigurationError, LanguageModelError

logger = logging.getLogger(__name__)


class LanguageModelClient(ABC):
    name: str = "llm"

    @abstractmethod
    async def complete(self, system_instruction: str, user_content: str) -> str:
        raise NotImplementedError


class GeminiClient(LanguageModelClient):
    name = "gemini"

    def __init__(self, api_key: str, model_name: str = "gemini-2.5-flash") -> None:
        import google.generativeai as genai

        self.genai = genai
        self.model_name = model_name
        genai.configure(api_key=api_key)

    async def complete(self, system_instruction: str, user_content: str) -> str:
        try:
            model = self.genai.GenerativeModel(self.model_name, system_instruction=system_instruction)
            out = await model.generate_content_async(user_content)
            # .text raises ValueError when the response carries no text part
            text = out.text
        except Exception as e:
            raise LanguageModelError(f"Gemini request failed: {type(e).__name__}") from e
        if not isinstance(text, str) or not text.strip():
            raise LanguageModelError("Gemini returned an empty response")
        return text


class OpenAIClient(LanguageModelClient):
    name = "openai"

    def __init__(self, api_key: str, model_name: str = "gpt-3.5-turbo") -> None:
        from openai import AsyncOpenAI

        self.client = AsyncOpenAI(api_key=api_key)
        self.model_name = model_name

    async def complete(self, system_instruction: str, user_content: str) -> str:
        try:
            response = await self.client.chat.completions.create(
                model=self.model_name,
                messages=[
                    {"role": "system", "content": system_instruction},
                    {"role": "user", "content": user_content},
                ],
            )
            text = response.choices[0].message.content
        except Exception as e:
            raise LanguageModelError(f"OpenAI request failed: {type(e).__name__}") from e
        if not isinstance(text, str) or not text.strip():
            raise LanguageModelError("OpenAI returned an empty response")
        return text


def build_llm_client(settings: Settings) -> LanguageModelClient:
    """Create the configured client; a missing API key is a startup error."""
    if settings.llm_provider == "openai":
        if not settings.openai_api_key:
            raise ConfigurationError(
                "Missing language model credentials",
                errors=["OPENAI_API_KEY is not set"],
                suggestions=["Set OPENAI_API_KEY or switch LLM_PROVIDER to gemini"],
            )
        client: LanguageModelClient = OpenAIClient(settings.openai_api_key, settings.openai_model)
        model_name = settings.openai_model
    else:
        if not settings.gemini_api_key:
            raise ConfigurationError(
                "Missing language model credentials",
                errors=["GEMINI_API_KEY is not set"],
                suggestions=["Set GEMINI_API_KEY or switch LLM_PROVIDER to openai"],
            )
        client = GeminiClient(settings.gemini_api_key, settings.gemini_model)
        model_name = settings.gemini_model

    logger.info("Language model client ready", extra={"provider": client.name, "model": model_name})
    return client
