"""NiceGUI chat-with-content page.

The user loads a YouTube transcript, a PDF or pasted text, optionally
translates it, then asks questions answered against it. Questions run
through a ConversationEngine whose model is a GroundedResponder.
"""

import logging

from fastapi.responses import RedirectResponse
from nicegui import app, events, run, ui

from nexchat.content.errors import InvalidContentRequest
from nexchat.content.languages import DEFAULT_TARGET_LANGUAGE, LANGUAGES
from nexchat.content.service import ContentService, GroundedResponder
from nexchat.content.transcript import get_transcript_client
from nexchat.engine import ConversationEngine, EngineError, RequestFailed
from nexchat.llm.client import get_gemini_client
from nexchat.models import Message, Role
from nexchat.parsing.pdf_parser import PDFParseError, parse_pdf
from nexchat.ui.components import (
    CUSTOM_CSS,
    current_user,
    render_message,
    render_reveal_bubble,
    render_thinking,
)

logger = logging.getLogger(__name__)


@ui.page("/content")
def content_page() -> RedirectResponse | None:
    """Chat with a video transcript, PDF, or pasted document."""
    if current_user() is None:
        return RedirectResponse("/login")

    ui.add_head_html(CUSTOM_CSS)
    ui.dark_mode().bind_value(app.storage.user, "dark_mode")

    try:
        client = get_gemini_client()
    except ValueError as e:
        logger.error(f"Content chat unavailable: {e}")
        ui.label("Please set GEMINI_API_KEY in your .env file.").classes(
            "absolute-center text-lg text-red-500"
        )
        return None

    responder = GroundedResponder(client)
    engine = ConversationEngine(model=responder)
    service = ContentService(client)
    transcripts = get_transcript_client()

    def load_content(text: str, source: str) -> None:
        responder.grounding = text
        translation_view.set_content("")
        # Questions about earlier content start a fresh conversation
        engine.create_session()
        content_view.set_content(text)
        content_expansion.set_visibility(bool(text))
        refresh_messages()
        ui.notify(f"Loaded {source} ({len(text)} characters)", type="positive")

    async def fetch_transcript() -> None:
        fetch_btn.props("loading")
        try:
            text = await transcripts.fetch_text(url_input.value or "", language_select.value)
        except InvalidContentRequest as e:
            ui.notify(str(e), type="warning")
            return
        except RequestFailed as e:
            ui.notify(e.detail, type="negative")
            return
        finally:
            fetch_btn.props(remove="loading")
        load_content(text, "transcript")

    def use_document() -> None:
        text = (document_input.value or "").strip()
        if not text:
            ui.notify("Paste some text first", type="warning")
            return
        load_content(text, "document")

    async def handle_pdf(e: events.UploadEventArguments) -> None:
        data = await e.file.read()
        try:
            pdf = await run.io_bound(parse_pdf, data)
        except PDFParseError as err:
            ui.notify(str(err), type="negative")
            return
        finally:
            pdf_upload.reset()
        if not pdf.text:
            ui.notify("No extractable text in this PDF", type="warning")
            return
        load_content(pdf.text, e.file.name)

    async def translate() -> None:
        if not responder.has_content:
            return
        translate_btn.props("loading")
        try:
            translation = await service.translate(responder.grounding, target_select.value)
        except (InvalidContentRequest, RequestFailed) as e:
            ui.notify(str(e), type="negative")
            return
        finally:
            translate_btn.props(remove="loading")
        translation_view.set_content(translation)

    async def analyze() -> None:
        if not responder.has_content:
            return
        analyze_btn.props("loading")
        try:
            analysis = await service.analyze(responder.grounding)
        except (InvalidContentRequest, RequestFailed) as e:
            ui.notify(str(e), type="negative")
            return
        finally:
            analyze_btn.props(remove="loading")
        translation_view.set_content(analysis)

    def refresh_messages() -> None:
        messages_container.clear()
        with messages_container:
            if not engine.messages:
                ui.label("Load some content, then ask a question about it.").classes(
                    "text-gray-400"
                )
            for msg in engine.messages:
                render_message(msg)

    async def ask_question() -> None:
        question = (question_input.value or "").strip()
        if not question or engine.is_busy:
            return
        if not responder.has_content:
            ui.notify("Load a transcript or document first", type="warning")
            return

        question_input.value = ""
        with messages_container:
            if not engine.messages:
                messages_container.clear()
            render_message(Message(role=Role.USER, content=question))
            thinking = render_thinking()
        bubble: ui.markdown | None = None

        def on_partial(snapshot: str) -> None:
            nonlocal bubble
            if bubble is None:
                thinking.delete()
                with messages_container:
                    bubble = render_reveal_bubble()
            bubble.set_content(snapshot)

        try:
            await engine.submit(question, on_partial=on_partial)
        except RequestFailed as e:
            ui.notify(e.detail, type="negative")
        except EngineError as e:
            ui.notify(str(e), type="warning")
        finally:
            refresh_messages()

    def clear_chat() -> None:
        engine.delete_session(engine.active_session_id)
        refresh_messages()

    # === UI Layout ===
    with ui.header().classes("header items-center justify-between px-5"):
        with ui.row().classes("items-center gap-3"):
            ui.icon("smart_display").classes("text-white text-3xl")
            ui.label("Chat with content").classes("text-lg font-semibold text-white")
        ui.link("Back to chat", "/").classes("text-white/80 text-sm")

    language_names = {code: name for name, code in LANGUAGES.items()}

    with ui.column().classes("w-full max-w-4xl mx-auto p-4 gap-4"):
        with ui.card().classes("w-full"):
            with ui.tabs().classes("w-full") as tabs:
                youtube_tab = ui.tab("YouTube", icon="smart_display")
                document_tab = ui.tab("Text", icon="description")
                pdf_tab = ui.tab("PDF", icon="picture_as_pdf")
            with ui.tab_panels(tabs, value=youtube_tab).classes("w-full"):
                with ui.tab_panel(youtube_tab):
                    with ui.row().classes("w-full items-end no-wrap gap-2"):
                        url_input = ui.input("YouTube URL").classes("flex-grow")
                        language_select = ui.select(
                            language_names, value="en", label="Transcript language"
                        ).classes("w-48")
                        fetch_btn = ui.button("Fetch", on_click=fetch_transcript)
                with ui.tab_panel(document_tab):
                    document_input = ui.textarea("Paste document text").classes("w-full")
                    ui.button("Use this text", on_click=use_document)
                with ui.tab_panel(pdf_tab):
                    pdf_upload = ui.upload(
                        on_upload=handle_pdf, auto_upload=True, max_files=1
                    ).props("accept=.pdf").classes("w-full")

        with ui.expansion("Loaded content", icon="article").classes("w-full") as content_expansion:
            content_view = ui.markdown("").classes("text-sm max-h-64 overflow-auto")
            with ui.row().classes("items-end gap-2"):
                target_select = ui.select(
                    list(LANGUAGES), value=DEFAULT_TARGET_LANGUAGE, label="Translate to"
                ).classes("w-48")
                translate_btn = ui.button("Translate", icon="translate", on_click=translate)
                analyze_btn = ui.button("Analyze", icon="insights", on_click=analyze)
            translation_view = ui.markdown("").classes("text-sm max-h-64 overflow-auto")
        content_expansion.set_visibility(False)

        with ui.card().classes("w-full"):
            with ui.row().classes("w-full justify-between items-center"):
                ui.label("Questions").classes("font-semibold")
                ui.button(icon="delete_sweep", on_click=clear_chat).props("flat round dense")
            messages_container = ui.column().classes("w-full gap-4")
            refresh_messages()
            with ui.row().classes("w-full items-end no-wrap gap-2"):
                question_input = (
                    ui.input(placeholder="Ask about the content...")
                    .classes("flex-grow")
                    .on("keydown.enter", ask_question)
                )
                ui.button(icon="stop", on_click=engine.stop).props("round flat")
                ui.button(icon="send", on_click=ask_question).props("round unelevated")

    return None
