"""Validation API — stateless text validation, rule catalog, sample documents."""

from fastapi import APIRouter

from complianceiq.config import get_settings
from complianceiq.models.requests import ValidateTextRequest
from complianceiq.models.responses import RuleResponse, SampleDocumentResponse
from complianceiq.samples import SAMPLE_DOCUMENTS
from complianceiq.validators import ValidationResult, load_rule_catalog, validation_engine

router = APIRouter()


def _check_length(text: str) -> None:
    limit = get_settings().MAX_DOCUMENT_CHARS
    if len(text) > limit:
        raise ValueError(f"Document text exceeds {limit} characters")


@router.post("/validate", response_model=ValidationResult)
async def validate_text(request_body: ValidateTextRequest):
    """Validate document text without storing it."""
    _check_length(request_body.text)
    return validation_engine.evaluate(
        request_body.text,
        rule_catalog=load_rule_catalog(get_settings().RULES_PATH or None),
        document_id=request_body.document_id,
    )


@router.get("/rules", response_model=list[RuleResponse])
async def list_rules(include_disabled: bool = False):
    """List compliance rules. Disabled rules are hidden unless requested."""
    rules = load_rule_catalog(get_settings().RULES_PATH or None)
    return [
        RuleResponse(**rule.model_dump())
        for rule in rules
        if include_disabled or rule.enabled
    ]


@router.get("/samples", response_model=list[SampleDocumentResponse])
async def list_samples():
    """List sample SOP documents for demo purposes."""
    return [SampleDocumentResponse(**sample) for sample in SAMPLE_DOCUMENTS]
