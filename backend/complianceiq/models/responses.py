"""API response models."""

from pydantic import BaseModel
from typing import Optional, Literal
from datetime import datetime

from complianceiq.validators import ValidationResult


class DocumentRecordResponse(BaseModel):
    """Stored document record without its full text."""

    id: str
    file_name: str
    upload_date: datetime
    type: Literal["pdf", "docx", "txt"]
    status: Literal["processing", "completed", "failed"]
    compliance_score: int = 0

    @classmethod
    def from_record(cls, record: dict) -> "DocumentRecordResponse":
        return cls(
            id=record["id"],
            file_name=record["file_name"],
            upload_date=record["upload_date"],
            type=record.get("type", "txt"),
            status=record.get("status", "processing"),
            compliance_score=record.get("compliance_score", 0),
        )


class DocumentDetailResponse(DocumentRecordResponse):
    """Document record with content and the latest validation result."""

    content: str = ""
    validation_result: Optional[ValidationResult] = None

    @classmethod
    def from_record(cls, record: dict) -> "DocumentDetailResponse":
        result = record.get("validation_result")
        return cls(
            **DocumentRecordResponse.from_record(record).model_dump(),
            content=record.get("content") or "",
            validation_result=ValidationResult.model_validate(result) if result else None,
        )


class UploadDocumentResponse(BaseModel):
    """Response after a document was stored and validated."""

    document: DocumentRecordResponse
    validation_result: ValidationResult


class RuleResponse(BaseModel):
    """A compliance rule catalog entry."""

    name: str
    category: Literal["Structure", "Metadata", "Content"]
    severity: Literal["Critical", "Major", "Minor"]
    enabled: bool


class SampleDocumentResponse(BaseModel):
    """A sample SOP text for demos."""

    id: str
    name: str
    description: str
    content: str


class HealthDependency(BaseModel):
    """Health status of a single dependency."""

    status: Literal["healthy", "unhealthy", "degraded"]
    latency_ms: Optional[float] = None
    message: Optional[str] = None


class HealthResponse(BaseModel):
    """System health check response."""

    status: Literal["healthy", "unhealthy", "degraded"]
    version: str = "1.0.0"
    uptime_seconds: float
    dependencies: dict[str, HealthDependency]
