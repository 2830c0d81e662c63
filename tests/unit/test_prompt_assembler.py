"""
Unit tests for PromptAssembler
"""
import pytest

from healense.application.services.prompt_assembler import IMAGE_PLACEHOLDER, PromptAssembler
from healense.application.use_cases.image.load_image import LoadImageUseCase
from healense.application.use_cases.image.store_image import StoreImageUseCase
from healense.application.use_cases.message.append_message import AppendMessageUseCase
from healense.application.use_cases.message.list_messages import ListMessagesUseCase
from healense.core.exceptions import NotFoundError
from healense.domain.constants import MessageRoles


@pytest.fixture
def assembler(message_repo, image_repo):
    return PromptAssembler(
        list_messages=ListMessagesUseCase(message_repo, page_size=2),
        load_image=LoadImageUseCase(image_repo),
        system_prompt="Be brief.",
    )


class TestPromptAssembler:
    """Tests for PromptAssembler.assemble"""

    @pytest.mark.asyncio
    async def test_empty_room(self, assembler):
        messages = await assembler.assemble("room-1", "hello")

        assert messages == [
            {"role": "system", "content": "Be brief."},
            {"role": "user", "content": "hello"},
        ]

    @pytest.mark.asyncio
    async def test_history_in_id_order_across_pages(self, assembler, message_repo, room_repo):
        append = AppendMessageUseCase(message_repo, room_repo)
        for index in range(5):
            role = MessageRoles.USER if index % 2 == 0 else MessageRoles.ASSISTANT
            await append.execute("room-1", role, f"turn {index}")

        messages = await assembler.assemble("room-1", "next")

        assert messages[0]["role"] == "system"
        assert [m["content"] for m in messages[1:-1]] == [f"turn {i}" for i in range(5)]
        assert [m["role"] for m in messages[1:-1]] == ["user", "assistant", "user", "assistant", "user"]
        assert messages[-1] == {"role": "user", "content": "next"}

    @pytest.mark.asyncio
    async def test_prior_images_are_dropped(self, assembler, message_repo, room_repo, image_repo):
        stored = await StoreImageUseCase(image_repo, max_bytes=1024).execute(b"\x89PNG", "image/png")
        append = AppendMessageUseCase(message_repo, room_repo)
        await append.execute("room-1", MessageRoles.USER, "look", image_key=stored.key)
        await append.execute("room-1", MessageRoles.USER, "", image_key=stored.key)

        messages = await assembler.assemble("room-1", "and now?")

        assert messages[1] == {"role": "user", "content": "look"}
        assert messages[2] == {"role": "user", "content": IMAGE_PLACEHOLDER}
        assert messages[3] == {"role": "user", "content": "and now?"}

    @pytest.mark.asyncio
    async def test_current_image_is_inlined(self, assembler, image_repo):
        stored = await StoreImageUseCase(image_repo, max_bytes=1024).execute(b"\x89PNG", "image/png")

        messages = await assembler.assemble("room-1", "what is this?", stored.key)

        assert messages[-1] == {
            "role": "user",
            "content": [
                {"type": "text", "text": "what is this?"},
                {"type": "image_url", "image_url": {"url": "data:image/png;base64,iVBORw=="}},
            ],
        }

    @pytest.mark.asyncio
    async def test_image_without_text(self, assembler, image_repo):
        stored = await StoreImageUseCase(image_repo, max_bytes=1024).execute(b"\x89PNG", "image/png")

        messages = await assembler.assemble("room-1", "", stored.key)

        assert [part["type"] for part in messages[-1]["content"]] == ["image_url"]

    @pytest.mark.asyncio
    async def test_unknown_image_raises(self, assembler):
        with pytest.raises(NotFoundError):
            await assembler.assemble("room-1", "hi", "missing-key")
