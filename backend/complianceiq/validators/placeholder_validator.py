"""Placeholder Validator — flags incomplete-content markers anywhere in the text.

Each banned phrase fires at most once, however often it occurs.
"""

from complianceiq.validators.base import BaseValidator, RuleLookup
from complianceiq.validators.models import Category, Issue, Severity
from complianceiq.validators.reference_data import PLACEHOLDER_PHRASES


class PlaceholderValidator(BaseValidator):
    """Detects placeholder text that must not appear in a finalized document."""

    @property
    def name(self) -> str:
        return "PlaceholderValidator"

    def validate(self, text: str, rules: RuleLookup) -> list[Issue]:
        text_lower = text.lower()

        return [
            self._issue(
                id=f"placeholder-{self._slug(phrase)}",
                category=Category.CONTENT,
                severity=Severity.MAJOR,
                description=f'Contains placeholder text: "{phrase}"',
                location="Document content",
                rule="No Placeholder Text",
            )
            for phrase in PLACEHOLDER_PHRASES
            if phrase in text_lower
        ]
