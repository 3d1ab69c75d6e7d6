"""Compliance rule catalog — JSON-backed category/severity defaults per rule."""

from complianceiq.validators.rules.loader import (
    RuleCatalogError,
    clear_cache,
    enabled_rules,
    get_rule,
    load_rule_catalog,
)

__all__ = ["RuleCatalogError", "clear_cache", "enabled_rules", "get_rule", "load_rule_catalog"]
