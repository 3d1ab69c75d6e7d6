"""Procedure Validator — enough numbered steps, written as actions."""

from complianceiq.validators.base import BaseValidator, RuleLookup
from complianceiq.validators.models import Category, Issue, Severity
from complianceiq.validators.reference_data import (
    ACTION_VERB_PATTERN,
    MIN_PROCEDURE_STEPS,
    PROCEDURE_STEP_PATTERN,
)


class ProcedureValidator(BaseValidator):
    """Counts numbered procedure steps and checks the procedure uses action verbs."""

    @property
    def name(self) -> str:
        return "ProcedureValidator"

    def validate(self, text: str, rules: RuleLookup) -> list[Issue]:
        issues = []

        # 1. Step count across the whole document
        steps = len(PROCEDURE_STEP_PATTERN.findall(text))
        if steps < MIN_PROCEDURE_STEPS:
            issues.append(self._issue(
                id="insufficient-steps",
                category=Category.CONTENT,
                severity=Severity.CRITICAL,
                description=(
                    f"Procedure section must contain at least {MIN_PROCEDURE_STEPS} "
                    f"numbered steps (found {steps})"
                ),
                location="Procedure section",
                rule="Procedure Section",
            ))

        # 2. Action language. A missing section is reported by StructureValidator.
        block = self._section_block(text, "procedure")
        if block is not None and not ACTION_VERB_PATTERN.search(block):
            issues.append(self._issue(
                id="weak-procedure-language",
                category=Category.CONTENT,
                severity=Severity.MINOR,
                description="Procedure steps should use action verbs (e.g. review, verify, document)",
                location="Procedure section",
                rule="Procedure Action Language",
            ))

        return issues
