"""Base validator — abstract class implementing the Strategy Pattern.

Each validator is a standalone, independently testable unit.
New validators are added without modifying the engine.
"""

from abc import ABC, abstractmethod
import re
from typing import Mapping, Optional

from complianceiq.validators.models import Category, ComplianceRule, Issue, Severity
from complianceiq.validators.reference_data import section_block_pattern

RuleLookup = Mapping[str, ComplianceRule]


class BaseValidator(ABC):
    """Abstract base for all document validators.

    Contract:
        - validate() is deterministic: same input → same output
        - validate() returns a list of Issue (empty = no findings)
        - No network calls, no file access, no randomness
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable name for logging."""
        ...

    @abstractmethod
    def validate(self, text: str, rules: RuleLookup) -> list[Issue]:
        """Run validation checks against the document text.

        Args:
            text: Plain document text
            rules: Enabled compliance rules keyed by rule name

        Returns:
            List of Issue findings (empty if no issues)
        """
        ...

    # ── Helper Methods ──

    def _issue(
        self,
        id: str,
        category: Category,
        severity: Severity,
        description: str,
        location: str,
        rule: str,
    ) -> Issue:
        """Convenience method to create an Issue."""
        return Issue(
            id=id,
            category=category,
            severity=severity,
            description=description,
            location=location,
            rule=rule,
        )

    def _section_block(self, text: str, label: str) -> Optional[str]:
        """Text following `<label>:` up to the next blank line or section header.

        Returns None when the label is absent.
        """
        match = section_block_pattern(label).search(text)
        if match is None:
            return None
        return match.group(1)

    def _contains_any(self, text: str, keywords: list[str]) -> bool:
        """Check if text contains any of the keywords (case-insensitive)."""
        text_lower = text.lower()
        return any(kw.lower() in text_lower for kw in keywords)

    def _slug(self, value: str) -> str:
        """Lowercase a phrase and join its words with hyphens."""
        return re.sub(r"\s+", "-", value.strip().lower())
