"""Unit tests for transcript fetch, content prompts and grounded answers."""

import json

import httpx
import pytest
import pytest_check as check

from nexchat.content.errors import InvalidContentRequest
from nexchat.content.languages import LANGUAGES, is_language_code
from nexchat.content.prompts import NO_ANALYSIS, NO_ANSWER, NO_TRANSLATION
from nexchat.content.service import ContentService, GroundedResponder
from nexchat.content.transcript import TranscriptClient, join_segments
from nexchat.engine import FALLBACK_REPLY, ConversationEngine, RequestFailed
from tests.fakes import FakeModel

VIDEO_URL = "https://www.youtube.com/watch?v=dQw4w9WgXcQ"


def _transcripts(handler) -> TranscriptClient:
    http_client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return TranscriptClient(service_url="https://transcripts.test/get/", http_client=http_client)


class TestTranscriptClient:
    """Tests for the remote transcript service client."""

    async def test_joins_segments_with_spaces(self) -> None:
        bodies: list[dict] = []

        def handler(request: httpx.Request) -> httpx.Response:
            bodies.append(json.loads(request.content))
            return httpx.Response(
                200, json={"transcript": [{"text": "Never gonna"}, {"text": "give you up"}]}
            )

        text = await _transcripts(handler).fetch_text(VIDEO_URL, "en")

        check.equal(text, "Never gonna give you up")
        check.equal(bodies[0], {"url": VIDEO_URL, "language": "en"})

    @pytest.mark.parametrize(
        ("url", "language", "message"),
        [
            ("", "en", "No URL"),
            ("not a url", "en", "Invalid URL"),
            (VIDEO_URL, "eng", "2-letter"),
            (VIDEO_URL, "e1", "2-letter"),
        ],
    )
    async def test_rejects_bad_requests(self, url: str, language: str, message: str) -> None:
        """Bad input is rejected before any request is sent."""
        client = _transcripts(lambda _: pytest.fail("request should not be sent"))

        with pytest.raises(InvalidContentRequest, match=message):
            await client.fetch_text(url, language)

    async def test_service_error_raises_request_failed(self) -> None:
        client = _transcripts(lambda _: httpx.Response(404, json={"error": "No transcript"}))

        with pytest.raises(RequestFailed, match="No transcript"):
            await client.fetch_text(VIDEO_URL)

    async def test_transport_error_raises_request_failed(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectTimeout("timed out", request=request)

        with pytest.raises(RequestFailed, match="Connection failed"):
            await _transcripts(handler).fetch_text(VIDEO_URL)

    def test_join_skips_empty_segments(self) -> None:
        assert join_segments([{"text": "a"}, {"text": ""}, {}, {"text": "b"}]) == "a b"


class TestLanguages:
    def test_all_codes_are_two_letters(self) -> None:
        check.equal(len(LANGUAGES), 17)
        check.is_true(all(is_language_code(code) for code in LANGUAGES.values()))


class TestContentService:
    """Tests for ask, translate and analyze prompts."""

    async def test_ask_embeds_question_and_transcript(self) -> None:
        model = FakeModel(replies=["42"])

        answer = await ContentService(model).ask("What is the answer?", "The answer is 42.")

        check.equal(answer, "42")
        check.is_in("Transcript:\nThe answer is 42.", model.prompts[0])
        check.is_in("Question: What is the answer?", model.prompts[0])

    async def test_translate_names_target_language(self) -> None:
        model = FakeModel(replies=["Hola"])

        translation = await ContentService(model).translate("Hello", "Spanish")

        check.equal(translation, "Hola")
        check.is_in("Translate the following text to Spanish", model.prompts[0])

    @pytest.mark.parametrize(
        ("call", "fallback"),
        [
            (lambda s: s.ask("q", "t"), NO_ANSWER),
            (lambda s: s.translate("t", "French"), NO_TRANSLATION),
            (lambda s: s.analyze("t"), NO_ANALYSIS),
        ],
    )
    async def test_empty_replies_use_fallbacks(self, call, fallback: str) -> None:
        service = ContentService(FakeModel(replies=[""]))

        assert await call(service) == fallback

    async def test_empty_inputs_rejected(self) -> None:
        service = ContentService(FakeModel())

        with pytest.raises(InvalidContentRequest):
            await service.ask("  ", "transcript")
        with pytest.raises(InvalidContentRequest):
            await service.translate("", "Hindi")
        with pytest.raises(InvalidContentRequest):
            await service.analyze(" ")


class TestGroundedResponder:
    """Tests for grounded chat through the conversation engine."""

    async def test_answers_latest_question_from_content(self) -> None:
        model = FakeModel(replies=["first", "second"])
        responder = GroundedResponder(model, grounding="Video about cats.")
        engine = ConversationEngine(model=responder, reveal_interval=0)

        await engine.submit("What animal?")
        await engine.submit("What colour?")

        check.equal([m.content for m in engine.messages][-1], "second")
        check.is_in("Question: What colour?", model.prompts[1])
        check.is_in("Video about cats.", model.prompts[1])

    async def test_without_content_falls_back(self) -> None:
        """Asking before content is loaded stores the apology."""
        engine = ConversationEngine(model=GroundedResponder(FakeModel()), reveal_interval=0)

        with pytest.raises(RequestFailed, match="No content loaded"):
            await engine.submit("Anything?")

        assert engine.messages[-1].content == FALLBACK_REPLY
