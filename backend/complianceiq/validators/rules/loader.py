"""Compliance rule catalog loader — reads ComplianceRule entries from JSON.

The catalog is read-only reference data. It is loaded once per path, cached,
and handed to the engine by callers; the engine never reads it on its own.
"""

import json
from pathlib import Path
from typing import Optional, Union

import structlog
from pydantic import ValidationError as PydanticValidationError

from complianceiq.validators.models import ComplianceRule

logger = structlog.get_logger()

RULES_DIR = Path(__file__).parent
DEFAULT_RULES_FILE = RULES_DIR / "compliance_rules.json"

# Cache loaded catalogs to avoid re-reading from disk
_catalog_cache: dict[Path, tuple[ComplianceRule, ...]] = {}


class RuleCatalogError(Exception):
    """The rule catalog file is missing or unreadable."""


def load_rule_catalog(path: Optional[Union[str, Path]] = None) -> list[ComplianceRule]:
    """Load every rule in a catalog file, enabled or not.

    Entries that fail validation are skipped and logged.

    Args:
        path: JSON catalog file. Defaults to the bundled catalog.

    Returns:
        Rules in file order

    Raises:
        RuleCatalogError: the file is missing or is not a valid catalog document
    """
    catalog_path = Path(path) if path else DEFAULT_RULES_FILE
    cache_key = catalog_path.resolve()

    if cache_key in _catalog_cache:
        return list(_catalog_cache[cache_key])

    try:
        data = json.loads(catalog_path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        raise RuleCatalogError(f"Cannot load rule catalog {catalog_path}: {e}") from e

    entries = data.get("rules", []) if isinstance(data, dict) else data
    if not isinstance(entries, list):
        raise RuleCatalogError(f"Rule catalog {catalog_path} has no 'rules' list")

    rules = []
    for i, entry in enumerate(entries):
        try:
            rules.append(ComplianceRule(**entry))
        except (PydanticValidationError, TypeError) as e:
            logger.warning("rule_catalog_entry_skipped", path=str(catalog_path), index=i, error=str(e))

    _catalog_cache[cache_key] = tuple(rules)
    logger.info("rule_catalog_loaded", path=str(catalog_path), rules=len(rules))

    return rules


def enabled_rules(path: Optional[Union[str, Path]] = None) -> list[ComplianceRule]:
    """Only the rules that are switched on."""
    return [rule for rule in load_rule_catalog(path) if rule.enabled]


def get_rule(name: str, path: Optional[Union[str, Path]] = None) -> Optional[ComplianceRule]:
    """Look up a rule by its display name.

    Args:
        name: Rule name (e.g., "Purpose Section")
        path: Catalog file, defaults to the bundled catalog

    Returns:
        The rule, or None if the catalog has no such entry
    """
    return next((rule for rule in load_rule_catalog(path) if rule.name == name), None)


def clear_cache() -> None:
    """Forget every cached catalog."""
    _catalog_cache.clear()
