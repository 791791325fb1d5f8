"""
Named, append-only collections of mined rules.
"""
from typing import Any, Iterable, Iterator, List, Tuple

from maras.core.exceptions import DecodeError
from maras.core.logging_config import get_logger
from maras.representation import Rule, RuleDecoder

log = get_logger(__name__)


class RuleSets:
    """
    Ordered collection of rules with a diagnostic name.

    Collections only grow. Filters build new collections that reference the
    same Rule objects, so one rule may live in many collections.
    """

    def __init__(self, name: str):
        self.name = name
        self._rules: List[Rule] = []

    def add_rule(self, rule: Rule) -> None:
        self._rules.append(rule)

    @property
    def rules(self) -> Tuple[Rule, ...]:
        return tuple(self._rules)

    def __len__(self) -> int:
        return len(self._rules)

    def __iter__(self) -> Iterator[Rule]:
        return iter(self._rules)

    def __getitem__(self, index: int) -> Rule:
        return self._rules[index]

    def __repr__(self) -> str:
        return f"RuleSets(name={self.name!r}, rules={len(self._rules)})"

    # Fluent access to the filters so callers can chain them.

    def find_closures(self, closures) -> "RuleSets":
        from .filters import find_closures
        return find_closures(self, closures)

    def filter_rules(self) -> "RuleSets":
        from .filters import filter_rules
        return filter_rules(self)

    def filter_no_singleton_rules(self, **kwargs) -> "RuleSets":
        from .filters import filter_no_singleton_rules
        return filter_no_singleton_rules(self, **kwargs)

    def filter_no_complex_rules(self, **kwargs) -> "RuleSets":
        from .filters import filter_no_complex_rules
        return filter_no_complex_rules(self, **kwargs)


def empty_collection(name: str) -> RuleSets:
    return RuleSets(name)


def append(collection: RuleSets, rule: Rule) -> None:
    collection.add_rule(rule)


def adapt_rules(name: str, raw_rules: Iterable[Any]) -> RuleSets:
    """
    Convert rules produced by the mining algorithm into a RuleSets.

    Item codes are decoded into Items, in order; statistics are carried over
    unchanged. Nothing is returned if any code fails to decode.

    Args:
        name: Name of the resulting collection
        raw_rules: Raw rules exposing antecedent, consequent, coverage,
            absolute_support, confidence and lift

    Returns:
        RuleSets holding one Rule per raw rule, in source order

    Raises:
        DecodeError: If any item code is outside the item domain
    """
    decoder = RuleDecoder()
    collection = RuleSets(name)
    for index, raw in enumerate(raw_rules):
        try:
            rule = decoder.decode(raw)
        except DecodeError as e:
            log.error("rule_decode_failed", collection=name, rule_index=index, code=e.code)
            raise DecodeError(e.code, e.reason, rule_index=index) from e
        collection.add_rule(rule)

    log.debug("rules_adapted", collection=name, count=len(collection))
    return collection
