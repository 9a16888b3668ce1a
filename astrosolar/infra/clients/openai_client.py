# START OF FILE: astrosolar/infra/clients/openai_client.py

import openai
from openai import AsyncOpenAI

from astrosolar.shared.logger import logger
from astrosolar.shared.config import Settings
from astrosolar.domain.models import ChatRequest, ChatResult
from astrosolar.domain.errors import ProviderError, ProviderUnavailable


class OpenAIChatClient:
    def __init__(self, settings: Settings):
        # No SDK-level retries: a failed call goes straight back to the caller.
        self.client = AsyncOpenAI(
            base_url=settings.openai_api_url,
            api_key=settings.openai_api_key,
            timeout=settings.openai_timeout,
            max_retries=0,
        )
        logger.info(f"OpenAI client initialized (timeout {settings.openai_timeout}s).")

    async def get_chat_completion(self, request: ChatRequest) -> ChatResult:
        try:
            logger.info(f"Requesting chat completion with model {request.model}...")
            completion = await self.client.chat.completions.create(
                model=request.model,
                messages=request.messages,
                max_tokens=request.max_tokens,
                temperature=request.temperature,
            )
        except openai.APIStatusError as e:
            logger.error(f"OpenAI API error (status {e.status_code}): {e.body}")
            raise ProviderError("OpenAI API error", status_code=e.status_code) from e
        except openai.APIConnectionError as e:
            # APITimeoutError is a subclass, so timeouts land here too
            logger.error(f"OpenAI API unreachable: {e!r}")
            raise ProviderUnavailable() from e

        message = completion.choices[0].message.content or ""
        usage = completion.usage.model_dump() if completion.usage else None
        logger.info("Chat completion received successfully.")
        return ChatResult(message=message, usage=usage)

# END OF FILE: astrosolar/infra/clients/openai_client.py
