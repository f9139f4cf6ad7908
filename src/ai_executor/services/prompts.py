"""Fixed instruction strings sent alongside user-configured prompts."""

from __future__ import annotations

from ..domain.models import AnalysisType, Personality

ANALYSIS_INSTRUCTIONS = {
    AnalysisType.SENTIMENT: (
        "Analyze the sentiment of the following text. Respond with: Positive, Negative, or Neutral, "
        "followed by a confidence score (0-1) and brief explanation."
    ),
    AnalysisType.KEYWORDS: (
        "Extract the most important keywords and phrases from the following text. "
        "Return them as a JSON array."
    ),
    AnalysisType.SUMMARY: "Provide a concise summary of the following text in 2-3 sentences.",
}

PERSONALITY_INSTRUCTIONS = {
    Personality.PROFESSIONAL: "Respond in a professional and formal manner.",
    Personality.FRIENDLY: "Respond in a warm, friendly, and conversational manner.",
    Personality.CONCISE: "Respond with brief, to-the-point answers.",
}

DATA_EXTRACTION_INSTRUCTION = (
    "Extract information from the text according to this schema: {schema}. "
    "Return ONLY a valid JSON object matching the schema, with no additional text or explanation."
)

UNPARSED_EXTRACTION_NOTE = "Could not parse as JSON, returning raw text"


def analysis_instruction(analysis_type: object) -> str:
    """Return the system instruction for ``analysis_type``; empty for unknown types."""
    try:
        return ANALYSIS_INSTRUCTIONS[AnalysisType(analysis_type)]
    except ValueError:
        return ""


def personality_instruction(personality: object) -> str:
    try:
        return PERSONALITY_INSTRUCTIONS[Personality(personality)]
    except ValueError:
        return ""
