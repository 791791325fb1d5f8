"""
Rule collections and the filters that post-process mined rules.
"""
from .rulesets import RuleSets, adapt_rules, empty_collection, append
from .filters import (
    CLOSED_RULES,
    FILTERED_RULES,
    NO_SINGLETON_RULES,
    NO_COMPLEX_RULES,
    find_closures,
    filter_rules,
    filter_no_singleton_rules,
    filter_no_complex_rules,
    is_closed,
    is_drug_to_reaction,
)
from .pipeline import FilterPipeline, STEP_OUTPUTS

__all__ = [
    "RuleSets",
    "adapt_rules",
    "empty_collection",
    "append",
    "CLOSED_RULES",
    "FILTERED_RULES",
    "NO_SINGLETON_RULES",
    "NO_COMPLEX_RULES",
    "find_closures",
    "filter_rules",
    "filter_no_singleton_rules",
    "filter_no_complex_rules",
    "is_closed",
    "is_drug_to_reaction",
    "FilterPipeline",
    "STEP_OUTPUTS",
]
