"""
Representation layer for drug/reaction items, interactions and rules.
"""
from .item import Item, MAX_ITEM_ID
from .interaction import Interaction, ClosureLattice
from .rule import Rule, RawRule, RuleDecoder

__all__ = [
    "Item",
    "MAX_ITEM_ID",
    "Interaction",
    "ClosureLattice",
    "Rule",
    "RawRule",
    "RuleDecoder",
]
