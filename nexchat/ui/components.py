"""Shared styling and message rendering for the NiceGUI pages."""

from nicegui import app, ui

from nexchat.engine import Revealer
from nexchat.models import Message, MessageKind, Role

CUSTOM_CSS = """
<link href="https://fonts.googleapis.com/css2?family=Inter:wght@400;500;600&display=swap"
      rel="stylesheet">
<style>
    * { font-family: 'Inter', sans-serif; }

    .header { background: linear-gradient(135deg, #2563eb 0%, #7c3aed 100%); }

    .message-user {
        background: linear-gradient(135deg, #2563eb 0%, #7c3aed 100%);
        color: white;
        border-radius: 18px 18px 4px 18px;
    }

    .message-assistant {
        background: #f3f4f6;
        color: #1f2937;
        border-radius: 18px 18px 18px 4px;
    }
    .body--dark .message-assistant { background: #374151; color: #f3f4f6; }

    .avatar-user { background: linear-gradient(135deg, #2563eb 0%, #7c3aed 100%); }
    .avatar-assistant { background: #6b7280; }

    .reveal-cursor::after { content: '▋'; animation: blink 1s steps(2) infinite; }
    @keyframes blink { to { visibility: hidden; } }

    .message-assistant pre { margin: 0.5rem 0; overflow-x: auto; }
    .message-assistant code { font-family: 'Menlo', 'Monaco', monospace; }
</style>
"""


def current_user() -> dict | None:
    """Signed-in user of this browser, stored by the login page."""
    return app.storage.user.get("user")


def render_avatar(is_user: bool) -> None:
    css = "avatar-user" if is_user else "avatar-assistant"
    icon = "person" if is_user else "smart_toy"
    with ui.element("div").classes(f"w-9 h-9 rounded-full flex items-center justify-center {css}"):
        ui.icon(icon).classes("text-white text-lg")


def render_message(msg: Message) -> None:
    """Render one stored message as a chat bubble."""
    is_user = msg.role is Role.USER
    align = "justify-end" if is_user else "justify-start"
    bubble = "message-user" if is_user else "message-assistant"

    with ui.row().classes(f"w-full {align} gap-3 items-end no-wrap"):
        if not is_user:
            render_avatar(False)
        with ui.element("div").classes(f"px-4 py-3 max-w-[70%] {bubble}"):
            if msg.kind is MessageKind.IMAGE and msg.media_reference:
                ui.image(msg.media_reference).classes("w-48 rounded-lg")
                ui.label(msg.content).classes("text-xs opacity-80")
            elif msg.kind is MessageKind.AUDIO and msg.media_reference:
                ui.audio(msg.media_reference)
                ui.label(msg.content).classes("text-xs opacity-80")
            elif is_user:
                ui.label(msg.content).classes("text-sm whitespace-pre-wrap")
            else:
                ui.markdown(msg.content).classes("text-sm leading-relaxed")
        if is_user:
            render_avatar(True)


def render_reveal_bubble() -> ui.markdown:
    """Render an empty assistant bubble and return the element the reveal fills."""
    with ui.row().classes("w-full justify-start gap-3 items-end no-wrap"):
        render_avatar(False)
        with ui.element("div").classes("px-4 py-3 max-w-[70%] message-assistant"):
            return ui.markdown("").classes("text-sm leading-relaxed reveal-cursor")


async def typewrite(target: ui.markdown, text: str, revealer: Revealer) -> None:
    """Reveal text into a markdown element the way assistant replies appear."""

    def publish(snapshot: str) -> None:
        if not target.is_deleted:
            target.set_content(snapshot)

    await revealer.run(text, publish)


def render_thinking() -> ui.row:
    with ui.row().classes("w-full justify-start gap-3 items-end") as row:
        render_avatar(False)
        with ui.element("div").classes("message-assistant px-4 py-3"):
            ui.spinner("dots", size="md")
    return row
