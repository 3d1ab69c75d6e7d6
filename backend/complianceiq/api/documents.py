"""Documents API — upload, list, get, re-validate, delete."""

from fastapi import APIRouter, HTTPException, Request, Query

import structlog

from complianceiq.config import get_settings
from complianceiq.models.requests import UploadDocumentRequest
from complianceiq.models.responses import (
    DocumentDetailResponse,
    DocumentRecordResponse,
    UploadDocumentResponse,
)
from complianceiq.services.document_service import DocumentNotFound, DocumentService
from complianceiq.services.rate_limiter import rate_limiter

logger = structlog.get_logger()

router = APIRouter()


def _service(request: Request) -> DocumentService:
    return request.app.state.document_service


async def _get_or_404(service: DocumentService, document_id: str) -> dict:
    try:
        return await service.get(document_id)
    except DocumentNotFound:
        raise HTTPException(status_code=404, detail=f"Document {document_id} not found")


@router.post("/documents", status_code=201, response_model=UploadDocumentResponse)
async def upload_document(request_body: UploadDocumentRequest, request: Request):
    """Store a document and validate its content.

    The record is created as 'processing' and ends up 'completed' with a score,
    or 'failed' when validation could not run.
    """
    limit = get_settings().MAX_DOCUMENT_CHARS
    if len(request_body.content) > limit:
        raise ValueError(f"Document text exceeds {limit} characters")

    client_ip = request.client.host if request.client else "unknown"
    if not rate_limiter.allow_request(client_ip):
        raise HTTPException(
            status_code=429,
            detail={
                "error": "Rate limit exceeded",
                "message": (
                    f"Maximum {rate_limiter.max_tokens} uploads per "
                    f"{rate_limiter.refill_seconds // 60} minutes. Try again later."
                ),
                "remaining": rate_limiter.remaining_tokens(client_ip),
                "retry_after_seconds": int(rate_limiter.reset_time(client_ip)),
            },
        )

    record, result = await _service(request).upload(
        file_name=request_body.file_name,
        content=request_body.content,
        content_type=request_body.content_type,
    )

    return UploadDocumentResponse(
        document=DocumentRecordResponse.from_record(record),
        validation_result=result,
    )


@router.get("/documents", response_model=list[DocumentRecordResponse])
async def list_documents(
    request: Request,
    limit: int = Query(default=20, ge=1, le=100),
):
    """List recently uploaded documents, newest first."""
    records = await _service(request).list_recent(limit)
    return [DocumentRecordResponse.from_record(r) for r in records]


@router.get("/documents/{document_id}", response_model=DocumentDetailResponse)
async def get_document(document_id: str, request: Request):
    """Get a document with its content and latest validation result."""
    record = await _get_or_404(_service(request), document_id)
    return DocumentDetailResponse.from_record(record)


@router.post("/documents/{document_id}/validate", response_model=UploadDocumentResponse)
async def revalidate_document(document_id: str, request: Request):
    """Re-run validation on a stored document."""
    service = _service(request)
    await _get_or_404(service, document_id)

    record, result = await service.revalidate(document_id)
    return UploadDocumentResponse(
        document=DocumentRecordResponse.from_record(record),
        validation_result=result,
    )


@router.delete("/documents/{document_id}")
async def delete_document(document_id: str, request: Request):
    """Delete a document record."""
    service = _service(request)
    await _get_or_404(service, document_id)
    await service.delete(document_id)

    logger.info("document_deleted", document_id=document_id)
    return {"document_id": document_id, "status": "deleted"}
