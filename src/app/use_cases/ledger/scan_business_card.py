"""ScanBusinessCard Use Case"""

import base64
import binascii
from libs.result import Result, Return, Error
from src.app.services.card_extraction_service import CardExtractionService
from src.domain.card_data import ExtractedCardData


class ScanBusinessCard:
    """
    Use case: Guess contact fields from a card photo

    Extraction never fails; only an image that is not valid base64 is
    rejected (INVALID_IMAGE). The caller shows the fields for correction.
    """

    def __init__(self, extraction_service: CardExtractionService):
        self.extraction_service = extraction_service

    async def execute(self, image_base64: str) -> Result[ExtractedCardData]:
        try:
            base64.b64decode(image_base64, validate=True)
        except (binascii.Error, ValueError):
            return Return.err(
                Error(
                    code="INVALID_IMAGE",
                    message="Image must be base64 encoded",
                )
            )

        return Return.ok(await self.extraction_service.extract_fields(image_base64))
