"""Unit tests for OpenAICardExtractionService"""

import pytest
from unittest.mock import AsyncMock, MagicMock

from src.adapter.services.card_extraction_service import (
    OpenAICardExtractionService,
    parse_card_reply,
)


def completion(content):
    response = MagicMock()
    response.choices = [MagicMock()]
    response.choices[0].message.content = content
    return response


@pytest.fixture
def mock_client():
    client = MagicMock()
    client.chat.completions.create = AsyncMock()
    return client


class TestParseCardReply:
    def test_json_wrapped_in_prose_and_fences(self):
        content = (
            "Here is the data:\n```json\n"
            '{"name": " Asha Rao ", "business_name": "Rao Traders", "mobile": "+91 98450 12345",'
            ' "email": "asha@raotraders.in", "address": "", "business_type": "Wholesale"}\n```'
        )

        data = parse_card_reply(content)

        assert data.name == "Asha Rao"
        assert data.business_name == "Rao Traders"
        assert data.address == ""
        assert data.business_type == "Wholesale"

    def test_camel_case_keys_are_accepted(self):
        data = parse_card_reply('{"name": "Ravi", "businessName": "Ravi Stores", "businessType": "Retail"}')

        assert data.business_name == "Ravi Stores"
        assert data.business_type == "Retail"
        assert data.email == ""

    def test_no_json_gives_empty_fields(self):
        data = parse_card_reply("I could not read this card.")

        assert data.model_dump() == {
            "name": "", "business_name": "", "mobile": "", "email": "", "address": "", "business_type": ""
        }


@pytest.mark.asyncio
class TestOpenAICardExtractionService:
    async def test_sends_image_as_data_url(self, mock_client):
        mock_client.chat.completions.create.return_value = completion('{"name": "Asha"}')
        service = OpenAICardExtractionService(client=mock_client, model="gpt-4o", max_tokens=500)

        data = await service.extract_fields("aGVsbG8=")

        assert data.name == "Asha"
        kwargs = mock_client.chat.completions.create.call_args.kwargs
        assert kwargs["model"] == "gpt-4o"
        assert kwargs["max_tokens"] == 500
        image_part = kwargs["messages"][0]["content"][1]
        assert image_part["image_url"]["url"] == "data:image/jpeg;base64,aGVsbG8="

    async def test_api_error_degrades_to_empty_fields(self, mock_client):
        mock_client.chat.completions.create.side_effect = Exception("rate limited")
        service = OpenAICardExtractionService(client=mock_client)

        data = await service.extract_fields("aGVsbG8=")

        assert data.name == ""
        assert data.email == ""

    async def test_malformed_json_degrades_to_empty_fields(self, mock_client):
        mock_client.chat.completions.create.return_value = completion('{"name": "Asha",}')
        service = OpenAICardExtractionService(client=mock_client)

        data = await service.extract_fields("aGVsbG8=")

        assert data.name == ""

    async def test_empty_reply(self, mock_client):
        mock_client.chat.completions.create.return_value = completion(None)
        service = OpenAICardExtractionService(client=mock_client)

        data = await service.extract_fields("aGVsbG8=")

        assert data.mobile == ""
