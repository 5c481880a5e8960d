import logging
from typing import List, Sequence

from errors import ParseError, ValidationError
from matching.completion import CompletionClient
from matching.prompts import CHATBOT_SYSTEM_PROMPT
from schemas import Message

logger = logging.getLogger(__name__)


def _check_transcript(messages: Sequence[Message]) -> List[dict]:
    if not messages:
        raise ValidationError("messages cannot be empty")
    for m in messages:
        if not m.content or not m.content.strip():
            raise ValidationError("messages cannot contain empty content")
    if messages[-1].role != "user":
        raise ValidationError("the last message must come from the user")
    return [{"role": m.role, "content": m.content} for m in messages]


def chat_reply(client: CompletionClient, messages: Sequence[Message]) -> str:
    """Send the whole transcript and return the assistant's next message."""
    payload = _check_transcript(messages)
    reply = client.complete(CHATBOT_SYSTEM_PROMPT, payload).strip()
    if not reply:
        raise ParseError("Completion service returned an empty reply")
    logger.info("Chat reply generated for a %d-message transcript", len(payload))
    return reply
