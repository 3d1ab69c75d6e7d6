"""Reference data — required SOP sections, banned phrases, signature roles, action verbs.

This is the encoded GxP documentation knowledge that makes validation deterministic.
Patterns are compiled case-insensitive unless the check says otherwise.
"""

import re
from functools import lru_cache

# ──────────────────────────────────────────────────────────────────────
# REQUIRED SECTIONS (checked in this order)
# ──────────────────────────────────────────────────────────────────────

# slug: used in the issue id (missing-<slug>)
# label: human-readable section name
# rule: rule catalog name, also the display name on the issue
REQUIRED_SECTIONS: list[dict] = [
    {"slug": "title", "label": "Title", "pattern": r"title:", "rule": "Required Title Section"},
    {"slug": "document-id", "label": "Document ID", "pattern": r"document id:", "rule": "Document ID Section"},
    # Label checks for version and effective date share their words with the
    # format checks, so their slugs carry a suffix to keep issue ids unique.
    {"slug": "version-section", "label": "Version/Revision", "pattern": r"(version|revision):", "rule": "Version Section"},
    {"slug": "effective-date-section", "label": "Effective Date", "pattern": r"effective date:", "rule": "Effective Date Section"},
    {"slug": "purpose", "label": "Purpose", "pattern": r"purpose:", "rule": "Purpose Section"},
    {"slug": "scope", "label": "Scope", "pattern": r"scope:", "rule": "Scope Section"},
    {"slug": "responsibilities", "label": "Responsibilities", "pattern": r"responsibilities:", "rule": "Responsibilities Section"},
    {"slug": "definitions", "label": "Definitions", "pattern": r"definitions:", "rule": "Definitions Section"},
    {"slug": "procedure", "label": "Procedure", "pattern": r"procedure:", "rule": "Procedure Section"},
    {"slug": "references", "label": "References", "pattern": r"references:", "rule": "References Section"},
    {"slug": "revision-history", "label": "Revision History", "pattern": r"revision history:", "rule": "Revision History"},
    {"slug": "approvals", "label": "Approvals", "pattern": r"(prepared by|reviewed by|approved by)", "rule": "Approval Signatures"},
]


# ──────────────────────────────────────────────────────────────────────
# METADATA FORMATS
# ──────────────────────────────────────────────────────────────────────

DOCUMENT_ID_PATTERN = re.compile(r"SOP-\d{3}(?!\d)", re.IGNORECASE)
VERSION_PATTERN = re.compile(r"(?:version|revision):\s*\d+\.\d+", re.IGNORECASE)
EFFECTIVE_DATE_PATTERN = re.compile(r"effective date:\s*\d{4}-\d{2}-\d{2}", re.IGNORECASE)

# Markers that make a revision history entry incomplete
REVISION_HISTORY_MARKERS = ["[empty]", "tbd"]


# ──────────────────────────────────────────────────────────────────────
# CONTENT
# ──────────────────────────────────────────────────────────────────────

PLACEHOLDER_PHRASES = [
    "tbd",
    "lorem ipsum",
    "placeholder",
    "[empty]",
    "to be determined",
    "insert text here",
]

# Roles whose signature line must be present and filled in
SIGNATURE_ROLES = ["Prepared by", "Reviewed by", "Approved by"]
SIGNATURE_LINE_PATTERN = re.compile(
    r"(prepared by|reviewed by|approved by):[ \t]*([^\n]*)", re.IGNORECASE
)
MIN_SIGNATURE_LENGTH = 3

# Numbered, capitalized procedure steps: "1. Review ..." (case-sensitive)
PROCEDURE_STEP_PATTERN = re.compile(r"\d+\.\s+[A-Z]")
MIN_PROCEDURE_STEPS = 3

ACTION_VERBS = [
    "submit",
    "review",
    "approve",
    "verify",
    "document",
    "record",
    "check",
    "validate",
    "ensure",
    "complete",
    "perform",
]
ACTION_VERB_PATTERN = re.compile(
    r"\b(?:" + "|".join(ACTION_VERBS) + r")", re.IGNORECASE
)

# Standalone four-digit numbers; "13485" in "ISO 13485" is not a year
YEAR_PATTERN = re.compile(r"(?<!\d)(\d{4})(?!\d)")
OUTDATED_REFERENCE_YEAR = 2010


@lru_cache
def section_block_pattern(label: str) -> re.Pattern:
    """Pattern capturing the text after `<label>:` up to a blank line or the next `Header:` line."""
    # Only the label is case-insensitive; headers must start with a capital
    return re.compile(
        r"(?i:" + re.escape(label) + r"):([\s\S]*?)(?=\n[ \t\r]*\n|\n[A-Z][A-Za-z /()]*:|$)"
    )
