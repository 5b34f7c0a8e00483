import logging
import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from openai import AsyncOpenAI, OpenAIError

from .config import BACKEND_TIMEOUT_SECONDS, OPENAI_MODEL
from .errors import ServiceError

logger = logging.getLogger(__name__)

# --------------------------------------------------------------------------------------
# Load .env explicitly from the project root (one level above mensa_menu/)
# --------------------------------------------------------------------------------------
BASE_DIR = Path(__file__).resolve().parent.parent  # project root (where .env lives)
env_path = BASE_DIR / ".env"
load_dotenv(dotenv_path=env_path)

DEFAULT_MODEL = os.getenv("OPENAI_MODEL", OPENAI_MODEL)


class OpenAIBackend:
    """
    Generative text backend: one prompt in, one text out.

    Every failure (missing key, network, API error, empty answer) is raised as
    ServiceError so callers have a single error type to degrade on. The client
    is created on first use, so the app starts without an API key and simply
    serves untranslated names until one is configured.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        model: str = DEFAULT_MODEL,
        timeout: float = BACKEND_TIMEOUT_SECONDS,
        client: Optional[AsyncOpenAI] = None,
    ):
        self.model = model
        self.timeout = timeout
        self._api_key = api_key if api_key is not None else os.getenv("OPENAI_API_KEY")
        self._client = client

        # Log configuration at DEBUG level (no sensitive data in INFO or higher)
        logger.debug("OpenAI API key configured: %s", "Yes" if (self._api_key or client) else "No")
        logger.debug("Using model: %s", self.model)

    def _get_client(self) -> AsyncOpenAI:
        if self._client is None:
            if not self._api_key:
                raise ServiceError(
                    f"OPENAI_API_KEY not found in {env_path}. "
                    "Create a .env file with OPENAI_API_KEY=sk-proj-... at the project root."
                )
            # Explicitly pass the key so we don't depend on any global environment
            self._client = AsyncOpenAI(api_key=self._api_key, timeout=self.timeout, max_retries=1)
        return self._client

    async def generate_text(self, prompt: str) -> str:
        client = self._get_client()
        try:
            completion = await client.chat.completions.create(
                model=self.model,
                messages=[{"role": "user", "content": prompt}],
                temperature=0.2,
            )
        except OpenAIError as e:
            logger.warning("OpenAI request failed: %s", e)
            raise ServiceError(f"OpenAI request failed: {e}") from e

        content = completion.choices[0].message.content if completion.choices else None
        if not content or not content.strip():
            raise ServiceError("OpenAI returned an empty response")
        return content

    async def close(self) -> None:
        if self._client is not None:
            await self._client.close()
            self._client = None
