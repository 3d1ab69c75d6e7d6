"""API request models."""

from pydantic import BaseModel, Field
from typing import Optional


class ValidateTextRequest(BaseModel):
    """Request to validate document text without storing it."""

    text: str = Field(
        ...,
        description="Plain text content of the document",
        examples=[
            "Title: Equipment Cleaning\nDocument ID: SOP-101\nVersion: 1.0\n"
            "Effective Date: 2024-01-15\n\nPurpose:\nDefine cleaning steps.\n"
        ],
    )
    document_id: Optional[str] = None


class UploadDocumentRequest(BaseModel):
    """Request to upload a document. Content is already extracted to plain text."""

    file_name: str = Field(..., min_length=1, max_length=255)
    content: str = Field(..., description="Extracted plain text of the document")
    content_type: str = Field(default="text/plain", description="MIME type of the original file")
