"""Document service — upload pipeline layered on top of the validation engine.

The engine stays pure; this service owns the record lifecycle:

    processing ──evaluate ok──▶ completed (score stored)
        │
        └──evaluate error──▶ failed (error re-raised to the caller)
"""

import uuid
from datetime import datetime, timezone
from pathlib import PurePath
from typing import Optional

import structlog

from complianceiq.config import get_settings
from complianceiq.services.document_store import DocumentStore
from complianceiq.validators import (
    EvaluationError,
    RuleCatalogError,
    ValidationEngine,
    ValidationResult,
    load_rule_catalog,
    validation_engine,
)

logger = structlog.get_logger()


class DocumentNotFound(Exception):
    """No record exists for the requested document id."""

    def __init__(self, document_id: str):
        super().__init__(f"Document {document_id} not found")
        self.document_id = document_id


class DocumentValidationFailed(Exception):
    """Evaluation could not run; the owning record has been marked failed."""

    def __init__(self, document_id: str, cause: Exception):
        super().__init__(f"Document validation failed: {cause}")
        self.document_id = document_id
        self.cause = cause


def _generate_document_id() -> str:
    """Generate a short, readable document ID."""
    return f"doc_{uuid.uuid4().hex[:8]}"


def detect_document_type(file_name: str, content_type: str = "") -> str:
    """Classify an upload as pdf, docx or txt from its MIME type or extension."""
    content_type = (content_type or "").lower()
    suffix = PurePath(file_name).suffix.lower()

    if "pdf" in content_type or suffix == ".pdf":
        return "pdf"
    if "word" in content_type or suffix in (".doc", ".docx"):
        return "docx"
    return "txt"


class DocumentService:
    """Creates document records, validates their content, and keeps status in sync."""

    def __init__(
        self,
        store: DocumentStore,
        engine: Optional[ValidationEngine] = None,
        rules_path: Optional[str] = None,
    ):
        self.store = store
        self.engine = engine or validation_engine
        self.rules_path = rules_path if rules_path is not None else get_settings().RULES_PATH

    def _rule_catalog(self):
        return load_rule_catalog(self.rules_path or None)

    async def upload(
        self,
        file_name: str,
        content: str,
        content_type: str = "text/plain",
    ) -> tuple[dict, ValidationResult]:
        """Store a new document and validate it.

        Returns:
            (updated document record, validation result)

        Raises:
            DocumentValidationFailed: evaluation failed; the record is left as 'failed'
        """
        document_id = _generate_document_id()
        record = {
            "id": document_id,
            "file_name": file_name,
            "upload_date": datetime.now(timezone.utc).isoformat(),
            "type": detect_document_type(file_name, content_type),
            "content": content,
            "status": "processing",
            "compliance_score": 0,
            "validation_result": None,
        }
        await self.store.create(document_id, record)

        logger.info(
            "document_uploaded",
            document_id=document_id,
            file_name=file_name,
            type=record["type"],
            content_length=len(content) if content is not None else 0,
        )

        return await self._validate_record(document_id, content)

    async def revalidate(self, document_id: str) -> tuple[dict, ValidationResult]:
        """Re-run validation on a stored document, producing a fresh result."""
        record = await self.get(document_id)
        await self.store.update_status(document_id, "processing")
        return await self._validate_record(document_id, record.get("content"))

    async def _validate_record(self, document_id: str, content) -> tuple[dict, ValidationResult]:
        try:
            result = self.engine.evaluate(
                content,
                rule_catalog=self._rule_catalog(),
                document_id=document_id,
            )
        except (EvaluationError, RuleCatalogError) as e:
            logger.error(
                "document_validation_failed",
                document_id=document_id,
                error=str(e),
                error_type=type(e).__name__,
            )
            await self.store.update(document_id, {"status": "failed", "compliance_score": 0})
            raise DocumentValidationFailed(document_id, e) from e

        record = await self.store.update(document_id, {
            "status": "completed",
            "compliance_score": result.score,
            "validation_result": result.model_dump(mode="json", by_alias=True),
        })

        logger.info(
            "document_validated",
            document_id=document_id,
            score=result.score,
            total_issues=len(result.issues),
        )

        return record, result

    async def get(self, document_id: str) -> dict:
        """Fetch a record or raise DocumentNotFound."""
        record = await self.store.get(document_id)
        if record is None:
            raise DocumentNotFound(document_id)
        return record

    async def list_recent(self, limit: int = 20) -> list[dict]:
        """Most recent records that still exist, newest first."""
        records = []
        for document_id in await self.store.list_recent(limit):
            record = await self.store.get(document_id)
            if record is not None:
                records.append(record)
        return records

    async def delete(self, document_id: str) -> dict:
        """Delete a record and return what was deleted."""
        record = await self.get(document_id)
        await self.store.delete(document_id)
        return record
