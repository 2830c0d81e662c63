"""Builds the message list sent to the language model for one chat turn."""
import logging
from typing import Any, Dict, List, Optional

from ..use_cases.image.load_image import LoadImageUseCase
from ..use_cases.message.list_messages import ListMessagesUseCase
from ...domain.constants import MessageRoles

logger = logging.getLogger(__name__)

# Stands in for the text of an earlier image-only message
IMAGE_PLACEHOLDER = "[image]"


class PromptAssembler:
    """
    Assemble system rules + room history + the new turn.

    Prompt layout:
    1. One system message with the configured instruction
    2. Every earlier message of the room in id order, text only
    3. The new user turn; only this turn may carry its image, inlined as a
       base64 data URL in an OpenAI-style multimodal content list

    The whole history is resent on every call; nothing is windowed or
    summarized.
    """

    def __init__(
        self,
        list_messages: ListMessagesUseCase,
        load_image: LoadImageUseCase,
        system_prompt: str,
    ) -> None:
        self.list_messages = list_messages
        self.load_image = load_image
        self.system_prompt = system_prompt

    async def assemble(self, room_id: str, text: str, image_key: Optional[str] = None) -> List[Dict[str, Any]]:
        """
        Build the prompt for a new turn

        Args:
            room_id: Room whose history is replayed
            text: Text of the new user turn
            image_key: Optional uploaded image for the new turn

        Returns:
            List of {"role", "content"} dicts

        Raises:
            NotFoundError: If image_key does not resolve to a stored image
        """
        history = await self.list_messages.execute_all(room_id)

        messages: List[Dict[str, Any]] = [
            {"role": MessageRoles.SYSTEM, "content": self.system_prompt}
        ]
        for message in history:
            content = message.text
            if not content and message.image_key:
                content = IMAGE_PLACEHOLDER
            messages.append({"role": message.role, "content": content})

        messages.append(await self._current_turn(text, image_key))

        logger.debug(f"Assembled prompt for room {room_id}: {len(history)} history message(s)")
        return messages

    async def _current_turn(self, text: str, image_key: Optional[str]) -> Dict[str, Any]:
        if not image_key:
            return {"role": MessageRoles.USER, "content": text}

        image = await self.load_image.execute(image_key)
        content: List[Dict[str, Any]] = []
        if text:
            content.append({"type": "text", "text": text})
        content.append({
            "type": "image_url",
            "image_url": {"url": image.to_data_url()},
        })
        return {"role": MessageRoles.USER, "content": content}
