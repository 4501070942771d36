"""Unit tests for the shared UI helpers."""

from unittest.mock import MagicMock

from nexchat.engine import Revealer
from nexchat.ui.components import typewrite


class TestTypewrite:
    """Tests for revealing text into a page element."""

    async def test_reveals_text_one_character_at_a_time(self) -> None:
        target = MagicMock(is_deleted=False)

        await typewrite(target, "Hello!", Revealer(interval=0))

        contents = [call.args[0] for call in target.set_content.call_args_list]
        assert contents == ["", "H", "He", "Hel", "Hell", "Hello", "Hello!"]

    async def test_skips_deleted_element(self) -> None:
        """A bubble cleared off the page is not written to."""
        target = MagicMock(is_deleted=True)

        await typewrite(target, "Hello!", Revealer(interval=0))

        target.set_content.assert_not_called()
