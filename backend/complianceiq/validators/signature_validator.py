"""Signature Validator — every approval role must be signed by a real name.

A signature is incomplete when the role line is absent, its value contains
TBD or a bracketed marker, or it has fewer than three non-whitespace characters.
"""

import re
from typing import Optional

from complianceiq.validators.base import BaseValidator, RuleLookup
from complianceiq.validators.models import Category, Issue, Severity
from complianceiq.validators.reference_data import (
    MIN_SIGNATURE_LENGTH,
    SIGNATURE_LINE_PATTERN,
    SIGNATURE_ROLES,
)


class SignatureValidator(BaseValidator):
    """Checks Prepared by / Reviewed by / Approved by accountability."""

    @property
    def name(self) -> str:
        return "SignatureValidator"

    def validate(self, text: str, rules: RuleLookup) -> list[Issue]:
        issues = []

        # First occurrence of each role wins
        signatures: dict[str, str] = {}
        for role, value in SIGNATURE_LINE_PATTERN.findall(text):
            signatures.setdefault(role.lower(), value.strip())

        for role in SIGNATURE_ROLES:
            problem = self._signature_problem(signatures.get(role.lower()))
            if problem is None:
                continue

            issues.append(self._issue(
                id=f"missing-{self._slug(role)}",
                category=Category.CONTENT,
                severity=Severity.CRITICAL,
                description=f"'{role}' signature {problem}",
                location="Approvals section",
                rule="Approval Signatures",
            ))

        return issues

    def _signature_problem(self, value: Optional[str]) -> Optional[str]:
        """Describe what is wrong with a signature value, or None if it is complete."""
        if value is None:
            return "is missing"
        if "tbd" in value.lower():
            return f"is not assigned (found '{value}')"
        if "[" in value:
            return f"contains a placeholder (found '{value}')"
        if len(re.sub(r"\s", "", value)) < MIN_SIGNATURE_LENGTH:
            return "is too short to identify a signatory"
        return None
