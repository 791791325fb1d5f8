"""
Rule filters for drug interaction / adverse reaction analysis.

Every filter reads one RuleSets and returns a new one holding the kept rules
in their original order. Inputs are never modified.
"""
from typing import Iterable

from maras.core.logging_config import get_logger
from maras.representation import ClosureLattice, Interaction, Rule

from .rulesets import RuleSets, empty_collection

log = get_logger(__name__)

CLOSED_RULES = "Closed Rules"
FILTERED_RULES = "Filtered Rules"
NO_SINGLETON_RULES = "Filtered Rules - No singletons"
# Same label as the singleton filter; downstream reports match on it.
NO_COMPLEX_RULES = "Filtered Rules - No singletons"


def _log_result(source: RuleSets, result: RuleSets) -> None:
    log.debug(
        "rules_filtered",
        source=source.name,
        result=result.name,
        kept=len(result),
        dropped=len(source) - len(result),
    )


def is_closed(interaction: Interaction, level: Iterable[Interaction]) -> bool:
    """True if some closure of the level contains every item of ``interaction``."""
    for closure in level:
        if closure.contains(interaction):
            return True
    return False


def is_drug_to_reaction(rule: Rule) -> bool:
    """True if the antecedent holds only drugs and the consequent only reactions."""
    return (
        all(item.is_drug for item in rule.antecedent)
        and not any(item.is_drug for item in rule.consequent)
    )


def find_closures(rules: RuleSets, closures) -> RuleSets:
    """
    Keep the rules whose interaction is a closed itemset.

    The lattice level matching the interaction size must exist; a rule whose
    size has no level is dropped even if a larger level would contain it.

    Args:
        rules: Rules to filter
        closures: ClosureLattice, or a sequence of levels of Interaction

    Returns:
        RuleSets named "Closed Rules"
    """
    if not isinstance(closures, ClosureLattice):
        closures = ClosureLattice(closures)

    closed = empty_collection(CLOSED_RULES)
    for rule in rules:
        size = rule.interaction.size
        if not closures.has_level(size):
            continue
        if is_closed(rule.interaction, closures.level(size)):
            closed.add_rule(rule)

    _log_result(rules, closed)
    return closed


def filter_rules(rules: RuleSets) -> RuleSets:
    """
    Keep drug => reaction rules.

    Empty antecedents or consequents pass their side of the check.
    """
    filtered = empty_collection(FILTERED_RULES)
    for rule in rules:
        if is_drug_to_reaction(rule):
            filtered.add_rule(rule)

    _log_result(rules, filtered)
    return filtered


def filter_no_singleton_rules(rules: RuleSets, min_antecedent_items: int = 2) -> RuleSets:
    """Drop rules whose antecedent has fewer than ``min_antecedent_items`` drugs."""
    filtered = empty_collection(NO_SINGLETON_RULES)
    for rule in rules:
        if len(rule.antecedent) >= min_antecedent_items:
            filtered.add_rule(rule)

    _log_result(rules, filtered)
    return filtered


def filter_no_complex_rules(
    rules: RuleSets,
    max_antecedent_items: int = 2,
    max_consequent_items: int = 1
) -> RuleSets:
    """Drop rules with too many drugs or reactions (by default more than 2 drugs or 1 reaction)."""
    filtered = empty_collection(NO_COMPLEX_RULES)
    for rule in rules:
        if len(rule.antecedent) > max_antecedent_items or len(rule.consequent) > max_consequent_items:
            continue
        filtered.add_rule(rule)

    _log_result(rules, filtered)
    return filtered
