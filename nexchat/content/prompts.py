"""Prompt templates for the single-shot content calls."""

ASK_PROMPT = (
    "You are an expert assistant. Answer the following question based on the "
    "transcript below.\n\nTranscript:\n{transcript}\n\nQuestion: {question}\nAnswer:"
)

TRANSLATE_PROMPT = (
    "Translate the following text to {language}. Maintain the original meaning, "
    "context, and formatting while providing a natural translation:"
    "\n\nText:\n{text}\n\nTranslation:"
)

ANALYZE_PROMPT = (
    "You are an expert document analyzer. Analyze the following text and provide "
    "a detailed summary, key points, and insights.\n\nText:\n{text}\n\nAnalysis:"
)

NO_ANSWER = "No answer generated."
NO_TRANSLATION = "Translation failed"
NO_ANALYSIS = "No analysis generated."


def build_ask_prompt(question: str, transcript: str) -> str:
    return ASK_PROMPT.format(transcript=transcript, question=question)


def build_translate_prompt(text: str, language: str) -> str:
    return TRANSLATE_PROMPT.format(text=text, language=language)


def build_analyze_prompt(text: str) -> str:
    return ANALYZE_PROMPT.format(text=text)
