"""Card Extraction Service Interface"""

from abc import ABC, abstractmethod
from src.domain.card_data import ExtractedCardData


class CardExtractionService(ABC):
    """
    Extracts contact fields from a business card image

    Implementations must never raise: any failure returns an
    ExtractedCardData with empty fields.
    """

    @abstractmethod
    async def extract_fields(self, image_base64: str) -> ExtractedCardData:
        """
        Args:
            image_base64: JPEG image, base64 encoded

        Returns:
            ExtractedCardData (empty strings for anything not found)
        """
        pass
