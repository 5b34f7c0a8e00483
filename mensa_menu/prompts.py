"""
Prompts for the generative backend and parsing of its responses.

The backend is asked for plain JSON but regularly wraps it in markdown code
fences or adds a sentence before/after it, so responses are unwrapped before
parsing.
"""

import json
import re
from typing import Dict, List

from .errors import ServiceError
from .normalizer import language_code

LANGUAGE_NAMES = {
    "en": "English",
    "ko": "Korean",
    "de": "German",
}

# Example pair shown in the translation prompt, per target language
TRANSLATION_EXAMPLES = {
    "en": {
        "Schnitzel mit Pommes": "Schnitzel with French Fries",
        "Gemüsepfanne": "Vegetable Pan",
    },
    "ko": {
        "Schnitzel mit Pommes": "감자튀김을 곁들인 슈니첼",
        "Gemüsepfanne": "채소 볶음",
    },
}

EXPLANATION_LANGUAGE_INSTRUCTIONS = {
    "en": "Respond in English.",
    "de": "Antworten Sie auf Deutsch.",
    "ko": "한국어로 답변하세요.",
}

CODE_FENCE_PATTERN = re.compile(r"^```[a-zA-Z0-9_-]*\s*|\s*```$")


def build_translation_prompt(names: List[str], language) -> str:
    """Prompt asking for a JSON object mapping each German name to its translation."""
    lang = language_code(language)
    language_name = LANGUAGE_NAMES.get(lang, "English")
    example = json.dumps(TRANSLATION_EXAMPLES.get(lang, TRANSLATION_EXAMPLES["en"]), ensure_ascii=False, indent=2)

    return f"""Translate the following German food/dish names to {language_name}. Return ONLY a valid JSON object mapping each German name to its {language_name} translation.

German names to translate:
{json.dumps(names, ensure_ascii=False, indent=2)}

Example output format:
{example}

Important:
- Translate each name accurately
- Use every German name exactly as given as the key
- Keep proper food terminology
- Preserve proper nouns when appropriate
- Return valid JSON only, no markdown formatting"""


def build_explanation_prompt(dish_name: str, language) -> str:
    """Prompt asking for a short prose explanation of a German dish."""
    lang = language_code(language)
    instruction = EXPLANATION_LANGUAGE_INSTRUCTIONS.get(lang, EXPLANATION_LANGUAGE_INSTRUCTIONS["en"])

    return f"""{instruction}

You are a helpful food expert. Provide a brief, informative explanation (2-3 sentences) about the following German dish: "{dish_name}"

Include:
- What the dish typically consists of
- Any cultural or regional significance
- A brief description of taste or texture

Keep the response concise and informative. Do not use bullet points or lists."""


def strip_code_fences(text: str) -> str:
    """Remove a surrounding ```json ... ``` block, if any."""
    cleaned = text.strip()
    if cleaned.startswith("```"):
        cleaned = CODE_FENCE_PATTERN.sub("", cleaned).strip()
    return cleaned


def parse_translation_response(text: str) -> Dict[str, object]:
    """
    Parse the backend's name -> translation JSON object.

    Values are returned as-is; per-entry validation is the caller's job.

    Raises:
        ServiceError: If no JSON object can be found in the response
    """
    cleaned = strip_code_fences(text or "")
    if not cleaned:
        raise ServiceError("Empty translation response")

    try:
        data = json.loads(cleaned)
    except json.JSONDecodeError:
        # Prose around the object: take the outermost braces
        start, end = cleaned.find("{"), cleaned.rfind("}")
        if start == -1 or end <= start:
            raise ServiceError("Translation response contains no JSON object")
        try:
            data = json.loads(cleaned[start:end + 1])
        except json.JSONDecodeError as e:
            raise ServiceError(f"Translation response is not valid JSON: {e}") from e

    if not isinstance(data, dict):
        raise ServiceError(f"Translation response is a {type(data).__name__}, expected an object")
    return data
