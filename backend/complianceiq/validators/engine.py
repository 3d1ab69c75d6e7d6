"""Validation Engine — orchestrates all validators, computes score, produces result.

This is the main entry point for document validation. It runs all registered
validators against the document text and produces an immutable ValidationResult.

Usage:
    engine = ValidationEngine()
    result = engine.evaluate(text, rule_catalog=load_rule_catalog())
    print(result.score, [issue.id for issue in result.issues])
"""

import time
from typing import Iterable, Mapping, Optional, Union

import structlog
from pydantic import ValidationError as PydanticValidationError

from complianceiq.validators.base import BaseValidator, RuleLookup
from complianceiq.validators.exceptions import InvalidInputError, ProcessingFailureError
from complianceiq.validators.models import ComplianceRule, Issue, ValidationResult

# Import all validators
from complianceiq.validators.structure_validator import StructureValidator
from complianceiq.validators.metadata_validator import MetadataValidator
from complianceiq.validators.placeholder_validator import PlaceholderValidator
from complianceiq.validators.signature_validator import SignatureValidator
from complianceiq.validators.procedure_validator import ProcedureValidator
from complianceiq.validators.reference_validator import ReferenceValidator

logger = structlog.get_logger()

RuleCatalog = Union[Iterable[ComplianceRule], Mapping[str, ComplianceRule]]


class ValidationEngine:
    """Orchestrates all validators and produces a unified validation result.

    Design principles:
        - Deterministic: same input → same issues, same order, same score
        - Pure: no I/O, no shared mutable state; safe to call concurrently
        - All-or-nothing: a full result or an error, never a partial result
        - Observable: logs every validation run with timing
    """

    def __init__(self, validators: Optional[list[BaseValidator]] = None):
        """Initialize with default validators or custom list.

        Args:
            validators: Optional list of validators. If None, uses all defaults.
        """
        self.validators = validators or self._default_validators()

    @staticmethod
    def _default_validators() -> list[BaseValidator]:
        """Create the default validator chain in execution order."""
        return [
            StructureValidator(),    # Required sections, in list order
            MetadataValidator(),     # Doc ID, version, effective date, revision history
            PlaceholderValidator(),  # Banned placeholder phrases
            SignatureValidator(),    # Prepared/Reviewed/Approved by
            ProcedureValidator(),    # Step count + action language
            ReferenceValidator(),    # Reference years + staleness
        ]

    def evaluate(
        self,
        text: Union[str, bytes, bytearray, None],
        rule_catalog: Optional[RuleCatalog] = None,
        document_id: Optional[str] = None,
    ) -> ValidationResult:
        """Run all validators against the document text and produce a result.

        Args:
            text: Plain document text. UTF-8 bytes are accepted.
            rule_catalog: Optional compliance rules, as a list or a name-keyed mapping.
                Only enabled rules are consulted.
            document_id: Identifier recorded on the result

        Returns:
            ValidationResult with score and ordered issues

        Raises:
            InvalidInputError: text is missing or not textual, or the rule catalog is malformed
            ProcessingFailureError: a validator failed unexpectedly
        """
        start_time = time.perf_counter()

        text = self._coerce_text(text)
        rules = self._rule_lookup(rule_catalog)

        all_issues: list[Issue] = []
        validator_timings: dict[str, float] = {}

        for validator in self.validators:
            v_start = time.perf_counter()
            try:
                all_issues.extend(validator.validate(text, rules))
            except Exception as e:
                logger.error(
                    "validator_failed",
                    validator=validator.name,
                    document_id=document_id,
                    error=str(e),
                    error_type=type(e).__name__,
                )
                raise ProcessingFailureError(
                    f"Failed to validate document content: {validator.name} raised {type(e).__name__}: {e}",
                    validator=validator.name,
                ) from e
            finally:
                v_duration = (time.perf_counter() - v_start) * 1000
                validator_timings[validator.name] = round(v_duration, 2)

        total_duration = time.perf_counter() - start_time

        try:
            result = ValidationResult.build(
                all_issues,
                document_id=document_id,
                process_time=total_duration,
            )
        except ValueError as e:
            # A custom validator broke an invariant (e.g. duplicate issue ids)
            raise ProcessingFailureError(f"Failed to build validation result: {e}") from e

        logger.info(
            "validation_complete",
            document_id=document_id,
            score=result.score,
            summary=result.summary,
            total_issues=len(all_issues),
            duration_ms=round(total_duration * 1000, 2),
            validator_timings=validator_timings,
        )

        return result

    @staticmethod
    def _coerce_text(text) -> str:
        """Accept str or UTF-8 bytes; reject anything else."""
        if text is None:
            raise InvalidInputError("Document text is required")
        if isinstance(text, (bytes, bytearray)):
            try:
                return bytes(text).decode("utf-8")
            except UnicodeDecodeError as e:
                raise InvalidInputError(f"Document text is not valid UTF-8: {e}") from e
        if not isinstance(text, str):
            raise InvalidInputError(
                f"Document text must be a string, got {type(text).__name__}"
            )
        return text

    @staticmethod
    def _rule_lookup(rule_catalog: Optional[RuleCatalog]) -> RuleLookup:
        """Normalize a catalog into a read-only name → rule lookup of enabled rules.

        Entries may be ComplianceRule instances or plain dicts with the same fields.
        """
        if rule_catalog is None:
            return {}
        rules = rule_catalog.values() if isinstance(rule_catalog, Mapping) else rule_catalog
        try:
            parsed = [
                rule if isinstance(rule, ComplianceRule) else ComplianceRule.model_validate(rule)
                for rule in rules
            ]
        except (PydanticValidationError, TypeError) as e:
            raise InvalidInputError(f"Invalid rule catalog: {e}") from e
        return {rule.name: rule for rule in parsed if rule.enabled}

    def add_validator(self, validator: BaseValidator) -> None:
        """Add a custom validator to the chain."""
        self.validators.append(validator)

    def remove_validator(self, validator_name: str) -> None:
        """Remove a validator by name."""
        self.validators = [v for v in self.validators if v.name != validator_name]


# Module-level singleton
validation_engine = ValidationEngine()
