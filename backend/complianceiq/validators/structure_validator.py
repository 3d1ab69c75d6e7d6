"""Structure Validator — checks that every required SOP section label is present.

Category and severity default to Structure/Critical. An enabled catalog entry
whose name matches the section's rule overrides both.
"""

import re

from complianceiq.validators.base import BaseValidator, RuleLookup
from complianceiq.validators.models import Category, Issue, Severity
from complianceiq.validators.reference_data import REQUIRED_SECTIONS


class StructureValidator(BaseValidator):
    """Detects missing required sections."""

    @property
    def name(self) -> str:
        return "StructureValidator"

    def validate(self, text: str, rules: RuleLookup) -> list[Issue]:
        issues = []

        for section in REQUIRED_SECTIONS:
            if re.search(section["pattern"], text, re.IGNORECASE):
                continue

            catalog_rule = rules.get(section["rule"])
            issues.append(self._issue(
                id=f"missing-{section['slug']}",
                category=catalog_rule.category if catalog_rule else Category.STRUCTURE,
                severity=catalog_rule.severity if catalog_rule else Severity.CRITICAL,
                description=f"Missing required section: {section['label']}",
                location="Document structure",
                rule=section["rule"],
            ))

        return issues
