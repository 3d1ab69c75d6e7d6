"""Reference Validator — references must be dated, and not stale.

Only evaluated when a References section exists; its absence is reported by
StructureValidator.
"""

from complianceiq.validators.base import BaseValidator, RuleLookup
from complianceiq.validators.models import Category, Issue, Severity
from complianceiq.validators.reference_data import OUTDATED_REFERENCE_YEAR, YEAR_PATTERN


class ReferenceValidator(BaseValidator):
    """Checks publication years in the References block."""

    @property
    def name(self) -> str:
        return "ReferenceValidator"

    def validate(self, text: str, rules: RuleLookup) -> list[Issue]:
        issues = []

        block = self._section_block(text, "references")
        if block is None:
            return issues

        years = YEAR_PATTERN.findall(block)

        # 1. At least one year
        if not years:
            issues.append(self._issue(
                id="missing-reference-years",
                category=Category.CONTENT,
                severity=Severity.MAJOR,
                description="References must include publication years",
                location="References section",
                rule="References Section",
            ))

        # 2. Staleness, one issue listing every outdated year
        outdated = list(dict.fromkeys(y for y in years if int(y) < OUTDATED_REFERENCE_YEAR))
        if outdated:
            issues.append(self._issue(
                id="outdated-references",
                category=Category.CONTENT,
                severity=Severity.MINOR,
                description=(
                    f"References cite outdated editions published before "
                    f"{OUTDATED_REFERENCE_YEAR}: {', '.join(outdated)}"
                ),
                location="References section",
                rule="Reference Currency",
            ))

        return issues
