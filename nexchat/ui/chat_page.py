"""NiceGUI chat interface with session sidebar and typewriter reveal.

Each browser tab gets its own engine, so sessions live as long as the page.
"""

import base64
import logging

from fastapi.responses import RedirectResponse
from nicegui import app, events, ui

from nexchat.engine import Busy, ConversationEngine, EngineError, RequestFailed, Revealer
from nexchat.llm.client import get_gemini_client
from nexchat.models import Message, MessageKind, Role
from nexchat.ui.components import (
    CUSTOM_CSS,
    current_user,
    render_message,
    render_reveal_bubble,
    render_thinking,
    typewrite,
)

logger = logging.getLogger(__name__)

WELCOME_MESSAGE = (
    "Hello! I'm NexG AI, your AI assistant powered by Next Generation. "
    "How can I help you today?"
)


@ui.page("/")
def chat_page() -> RedirectResponse | None:
    """Main chat page."""
    user = current_user()
    if user is None:
        return RedirectResponse("/login")

    ui.add_head_html(CUSTOM_CSS)
    ui.dark_mode().bind_value(app.storage.user, "dark_mode")

    try:
        engine = ConversationEngine(model=get_gemini_client())
    except ValueError as e:
        logger.error(f"Chat unavailable: {e}")
        ui.label("Please set GEMINI_API_KEY in your .env file.").classes(
            "absolute-center text-lg text-red-500"
        )
        return None

    messages_container: ui.column
    input_field: ui.textarea
    send_btn: ui.button
    stop_btn: ui.button

    def set_busy(busy: bool) -> None:
        send_btn.set_enabled(not busy)
        stop_btn.set_visibility(busy)

    greeter = Revealer()

    async def greet() -> None:
        """Typewrite the welcome into an empty conversation on first load."""
        if engine.messages:
            return
        messages_container.clear()
        with messages_container:
            bubble = render_reveal_bubble()
        await typewrite(bubble, WELCOME_MESSAGE, greeter)

    def refresh_messages() -> None:
        greeter.stop()
        messages_container.clear()
        with messages_container:
            if not engine.messages:
                with ui.column().classes("w-full h-64 items-center justify-center gap-3"):
                    ui.icon("forum").classes("text-5xl text-gray-300")
                    ui.label(WELCOME_MESSAGE).classes("text-gray-400 text-center max-w-md")
            for msg in engine.messages:
                render_message(msg)

    def refresh_all() -> None:
        session_list.refresh()
        refresh_messages()

    @ui.refreshable
    def session_list() -> None:
        for session in engine.sessions():
            active = session.id == engine.active_session_id
            with ui.row().classes(
                "w-full items-center justify-between px-2 py-1 rounded cursor-pointer"
                + (" bg-gray-200 dark:bg-gray-700" if active else "")
            ).on("click", lambda _, sid=session.id: switch_chat(sid)):
                with ui.column().classes("gap-0"):
                    ui.label(session.title).classes("text-sm")
                    ui.label(session.created_at.strftime("%b %d, %I:%M %p")).classes(
                        "text-[10px] text-gray-400"
                    )
                if active:
                    ui.button(icon="delete").props("flat round dense size=sm").on(
                        "click.stop", lambda _, sid=session.id: delete_chat(sid)
                    )

    def new_chat() -> None:
        engine.create_session()
        refresh_all()

    def switch_chat(session_id: str) -> None:
        try:
            engine.switch_session(session_id)
        except EngineError as e:
            ui.notify(str(e), type="warning")
        refresh_all()

    def delete_chat(session_id: str) -> None:
        try:
            engine.delete_session(session_id)
        except EngineError as e:
            ui.notify(str(e), type="warning")
        refresh_all()

    async def send_message() -> None:
        text = (input_field.value or "").strip()
        if not text or engine.is_busy:
            return

        origin = engine.active_session_id
        greeter.stop()
        input_field.value = ""
        set_busy(True)

        with messages_container:
            if not engine.messages:
                messages_container.clear()
            render_message(Message(role=Role.USER, content=text))
            thinking = render_thinking()
        bubble: ui.markdown | None = None

        def on_partial(snapshot: str) -> None:
            nonlocal bubble
            if engine.active_session_id != origin:
                return
            if bubble is None:
                thinking.delete()
                with messages_container:
                    bubble = render_reveal_bubble()
            bubble.set_content(snapshot)

        try:
            await engine.submit(text, on_partial=on_partial)
        except RequestFailed as e:
            ui.notify(e.detail, type="negative")
        except EngineError as e:
            ui.notify(str(e), type="warning")
        finally:
            set_busy(False)
            refresh_all()

    async def handle_upload(e: events.UploadEventArguments) -> None:
        data = await e.file.read()
        content_type = e.file.content_type or "application/octet-stream"
        kind = MessageKind.AUDIO if content_type.startswith("audio/") else MessageKind.IMAGE
        uri = f"data:{content_type};base64,{base64.b64encode(data).decode()}"
        try:
            engine.attach_media(e.file.name, kind, uri)
        except Busy as err:
            ui.notify(str(err), type="warning")
            return
        upload.reset()
        refresh_messages()

    def logout() -> None:
        app.storage.user.pop("user", None)
        ui.navigate.to("/login")

    # === UI Layout ===
    with ui.header().classes("header items-center justify-between px-5"):
        with ui.row().classes("items-center gap-3"):
            ui.button(icon="menu", on_click=lambda: drawer.toggle()).props("flat round color=white")
            ui.icon("smart_toy").classes("text-white text-3xl")
            ui.label("NexG AI").classes("text-lg font-semibold text-white")
        with ui.row().classes("items-center gap-2"):
            ui.link("Chat with content", "/content").classes("text-white/80 text-sm")
            ui.label(user["name"]).classes("text-white/80 text-sm")
            ui.switch().props("color=white icon=dark_mode").bind_value(
                app.storage.user, "dark_mode"
            )
            ui.button(icon="logout", on_click=logout).props("flat round color=white")

    with ui.left_drawer(value=True).classes("gap-2") as drawer:
        ui.button("New chat", icon="add", on_click=new_chat).classes("w-full")
        session_list()

    with ui.column().classes("w-full max-w-3xl mx-auto p-4 pb-32"):
        messages_container = ui.column().classes("w-full gap-4")
        refresh_messages()
        ui.timer(0.1, greet, once=True)

    with ui.footer().classes("bg-transparent"):
        with ui.row().classes("w-full max-w-3xl mx-auto gap-3 items-end no-wrap"):
            upload = (
                ui.upload(on_upload=handle_upload, auto_upload=True, max_files=1)
                .props("accept=image/*,audio/* flat dense hide-upload-btn")
                .classes("w-40")
            )
            input_field = (
                ui.textarea(placeholder="Type a message...")
                .props("autogrow outlined dense rows=1")
                .classes("flex-grow")
                .on("keydown.enter.prevent", send_message)
            )
            stop_btn = ui.button(icon="stop", on_click=engine.stop).props("round unelevated")
            stop_btn.set_visibility(False)
            send_btn = ui.button(icon="send", on_click=send_message).props("round unelevated")

    return None
