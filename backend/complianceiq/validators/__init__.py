"""Document Validator — deterministic compliance checks for SOP documents.

Usage:
    from complianceiq.validators import validation_engine, load_rule_catalog

    result = validation_engine.evaluate(text, rule_catalog=load_rule_catalog())
    if result.issues:
        # Render result.issues, persist result.score
"""

from complianceiq.validators.engine import ValidationEngine, validation_engine
from complianceiq.validators.exceptions import (
    EvaluationError,
    InvalidInputError,
    ProcessingFailureError,
)
from complianceiq.validators.models import (
    Category,
    ComplianceRule,
    Issue,
    Severity,
    ValidationResult,
    compute_score,
)
from complianceiq.validators.rules import RuleCatalogError, load_rule_catalog

__all__ = [
    "ValidationEngine",
    "validation_engine",
    "EvaluationError",
    "InvalidInputError",
    "ProcessingFailureError",
    "Category",
    "ComplianceRule",
    "Issue",
    "Severity",
    "ValidationResult",
    "compute_score",
    "RuleCatalogError",
    "load_rule_catalog",
]
