"""OpenAI implementation of CardExtractionService"""

import json
import logging
import re
from typing import Any, Dict, Optional

from openai import AsyncOpenAI

from config import ApplicationConfig
from src.app.services.card_extraction_service import CardExtractionService
from src.domain.card_data import CARD_FIELDS, ExtractedCardData

logger = logging.getLogger(__name__)

EXTRACTION_PROMPT = """Analyze this business card image and extract the following information. Return ONLY a valid JSON object with these exact fields (use empty string if not found):
{
  "name": "person's name",
  "business_name": "company or business name",
  "mobile": "phone/mobile number",
  "email": "email address",
  "address": "physical address",
  "business_type": "type of business (e.g., Retail, Manufacturing, Services, Wholesale, etc.)"
}

Be thorough in extracting all visible information. For business type, infer from the business name or any other clues if not explicitly stated."""

JSON_OBJECT = re.compile(r"\{[\s\S]*\}")

# camelCase keys some model replies still use
FIELD_ALIASES = {"business_name": "businessName", "business_type": "businessType"}


def parse_card_reply(content: str) -> ExtractedCardData:
    """Pull the first JSON object out of a model reply; empty fields if none"""
    match = JSON_OBJECT.search(content or "")
    if not match:
        return ExtractedCardData()

    parsed: Dict[str, Any] = json.loads(match.group(0))
    fields = {}
    for field in CARD_FIELDS:
        value = parsed.get(field) or parsed.get(FIELD_ALIASES.get(field, field)) or ""
        fields[field] = str(value).strip()
    return ExtractedCardData(**fields)


class OpenAICardExtractionService(CardExtractionService):
    """Vision chat completion that returns the card's fields as JSON"""

    def __init__(
        self,
        client: Optional[AsyncOpenAI] = None,
        model: Optional[str] = None,
        max_tokens: Optional[int] = None,
    ):
        self.client = client
        self.model = model or ApplicationConfig.OPENAI_MODEL
        self.max_tokens = max_tokens or ApplicationConfig.EXTRACTION_MAX_TOKENS

    def _get_client(self) -> AsyncOpenAI:
        if self.client is None:
            self.client = AsyncOpenAI(
                api_key=ApplicationConfig.OPENAI_API_KEY,
                timeout=ApplicationConfig.EXTRACTION_TIMEOUT_SECONDS,
            )
        return self.client

    async def extract_fields(self, image_base64: str) -> ExtractedCardData:
        try:
            response = await self._get_client().chat.completions.create(
                model=self.model,
                messages=[
                    {
                        "role": "user",
                        "content": [
                            {"type": "text", "text": EXTRACTION_PROMPT},
                            {
                                "type": "image_url",
                                "image_url": {"url": f"data:image/jpeg;base64,{image_base64}"},
                            },
                        ],
                    }
                ],
                max_tokens=self.max_tokens,
            )
            content = response.choices[0].message.content if response.choices else None
            return parse_card_reply(content or "{}")
        except Exception as e:
            logger.error(f"Card field extraction failed: {e}")
            return ExtractedCardData()
