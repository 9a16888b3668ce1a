# path: astrosolar/app/services/chat_service.py
from typing import Any, Dict, Optional

from astrosolar.infra.clients.openai_client import OpenAIChatClient
from astrosolar.domain.models import Message, ChatRequest, ChatResult
from astrosolar.domain.prompts import SYSTEM_PROMPT, BILL_ANALYSIS_PROMPT
from astrosolar.domain.errors import RelayError, InvalidInput, ConfigurationError, InternalError
from astrosolar.shared.config import Settings, MAX_TOKENS, TEMPERATURE
from astrosolar.shared.logger import logger


class ChatService:
    def __init__(self, settings: Settings, client: Optional[OpenAIChatClient] = None):
        self.settings = settings
        if client is None and settings.openai_api_key:
            client = OpenAIChatClient(settings)
        self.client = client
        if self.client is None:
            logger.warning("ChatService initialized without an OpenAI client; OPENAI_API_KEY is not set.")
        else:
            logger.info("ChatService initialized.")

    def build_request(self, body: Dict[str, Any]) -> ChatRequest:
        """Turns the caller's body into the provider request.

        An uploaded image replaces the caller's messages with a single
        bill-analysis turn and switches to the vision model. Otherwise the
        messages are forwarded as-is behind the system prompt.
        """
        messages = [Message(role='system', content=SYSTEM_PROMPT).to_dict()]

        uploaded_file = body.get('uploadedFile')
        if uploaded_file:
            if not isinstance(uploaded_file, str):
                raise InvalidInput("Invalid uploadedFile format")
            image_turn = Message(role='user', content=[
                {"type": "text", "text": BILL_ANALYSIS_PROMPT},
                {"type": "image_url", "image_url": {"url": uploaded_file}},
            ])
            messages.append(image_turn.to_dict())
            model = self.settings.openai_vision_model
        else:
            caller_messages = body.get('messages')
            if not isinstance(caller_messages, list):
                raise InvalidInput("Invalid messages format")
            messages.extend(caller_messages)
            model = self.settings.openai_text_model

        return ChatRequest(model=model, messages=messages, max_tokens=MAX_TOKENS, temperature=TEMPERATURE)

    async def reply(self, body: Dict[str, Any]) -> ChatResult:
        request = self.build_request(body)

        if self.client is None:
            logger.error("OPENAI_API_KEY is not set. Cannot forward chat request.")
            raise ConfigurationError()

        try:
            result = await self.client.get_chat_completion(request)
        except RelayError:
            raise
        except Exception as e:
            logger.error(f"Unexpected error during chat completion: {e}", exc_info=True)
            raise InternalError() from e

        logger.info(f"Chat reply ready (model {request.model}, {len(request.messages)} message(s) sent).")
        return result
# path: astrosolar/app/services/chat_service.py
