"""Data Transfer Objects for Report Use Cases"""

from pydantic import BaseModel, Field


class ExportFileDTO(BaseModel):
    """A generated file ready to be downloaded or shared"""

    filename: str = Field(..., description="Suggested file name")
    media_type: str = Field(..., description="MIME type of content")
    content: bytes = Field(..., description="File content")
