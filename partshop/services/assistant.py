"""
AI description assistant.

Asks a generative text service for a short sales description (in Burmese) and a
few technical specs for a part. Any failure degrades to "no suggestion": the
caller gets None and the problem is only logged.
"""
import json
import logging
from typing import Optional

from openai import AsyncOpenAI
from pydantic import ValidationError

from partshop.core import config
from partshop.core.errors import AssistantUnavailable
from partshop.schemas.assistant import AIAnalysisResponse

log = logging.getLogger(__name__)

SYSTEM_PROMPT = "You write catalog copy for a vehicle parts shop and must respond with strict JSON."


def build_prompt(item_name: str, section_label: str) -> str:
    return (
        "Generate a short, sales-focused description in Burmese language (Myanmar) and a list of "
        "3 potential technical specifications (can be English or Burmese mixed) for a vehicle part "
        f'named "{item_name}" in the category "{section_label}".\n'
        "Return JSON with keys 'suggestedDescription' (a compelling 1-sentence marketing "
        "description in Burmese) and 'technicalSpecs' (an array of 3 likely technical specs)."
    )


def get_client() -> Optional[AsyncOpenAI]:
    api_key = config.OPENAI_API_KEY
    if not api_key:
        log.error("OPENAI_API_KEY is missing, description assistant disabled.")
        return None
    return AsyncOpenAI(api_key=api_key)


def parse_suggestion(content: Optional[str]) -> AIAnalysisResponse:
    """Validates the raw model output, raising AssistantUnavailable when it is unusable."""
    if not content:
        raise AssistantUnavailable("Empty response from description service.")
    try:
        return AIAnalysisResponse.model_validate(json.loads(content))
    except (json.JSONDecodeError, ValidationError) as e:
        raise AssistantUnavailable(f"Malformed suggestion: {e}") from e


async def generate_item_details(
    item_name: str,
    section_label: str,
    client: Optional[AsyncOpenAI] = None,
) -> Optional[AIAnalysisResponse]:
    """Drafts a description for a part; returns None whenever no suggestion is available."""
    client = client or get_client()
    if client is None:
        return None

    try:
        resp = await client.chat.completions.create(
            model=config.OPENAI_MODEL,
            response_format={"type": "json_object"},
            messages=[
                {"role": "system", "content": SYSTEM_PROMPT},
                {"role": "user", "content": build_prompt(item_name, section_label)},
            ],
        )
        content = resp.choices[0].message.content if resp.choices else None
        return parse_suggestion(content)
    except AssistantUnavailable as e:
        log.error(f"Description assistant error: {e}")
        return None
    except Exception as e:
        # Network, auth and quota errors from the SDK all mean "no suggestion"
        log.error(f"Description assistant unavailable: {e}")
        return None


def apply_suggestion(result: AIAnalysisResponse) -> str:
    """Formats a suggestion the way it is written into the description field."""
    text = result.suggested_description
    if result.technical_specs:
        text += f"\nSpecs: {', '.join(result.technical_specs)}"
    return text
