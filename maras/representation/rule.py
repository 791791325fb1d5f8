"""
Rule representation and decoding of raw mined rules.
"""
from dataclasses import dataclass, field
from typing import Any, Dict, Sequence, Tuple, Union

from .interaction import Interaction
from .item import Item


@dataclass(frozen=True, eq=False)
class Rule:
    """
    Immutable association rule between drug/reaction items.

    Rules compare by identity: two rules mined separately are distinct even
    when their content matches.

    Attributes:
        antecedent: Tuple of Item on the cause side, in mined order
        consequent: Tuple of Item on the effect side, in mined order
        coverage: Relative support of the antecedent
        absolute_support: Number of reports containing the whole rule
        confidence: Conditional probability of consequent given antecedent
        lift: Confidence divided by consequent support
        interaction: Union of antecedent and consequent items
    """
    antecedent: Tuple[Item, ...]
    consequent: Tuple[Item, ...]
    coverage: float
    absolute_support: Union[int, float]
    confidence: float
    lift: float
    interaction: Interaction = field(init=False, repr=False)

    def __post_init__(self):
        object.__setattr__(self, 'antecedent', tuple(self.antecedent))
        object.__setattr__(self, 'consequent', tuple(self.consequent))
        object.__setattr__(
            self, 'interaction', Interaction.from_items(self.antecedent + self.consequent)
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for diagnostics."""
        return {
            'antecedent': [item.to_int() for item in self.antecedent],
            'consequent': [item.to_int() for item in self.consequent],
            'coverage': self.coverage,
            'absolute_support': self.absolute_support,
            'confidence': self.confidence,
            'lift': self.lift,
        }

    def __str__(self) -> str:
        ant = ", ".join(str(item) for item in self.antecedent)
        con = ", ".join(str(item) for item in self.consequent)
        return f"{{{ant}}} => {{{con}}}"


@dataclass(frozen=True)
class RawRule:
    """
    Rule as emitted by the mining algorithm, items still as integer codes.
    """
    antecedent: Sequence[int]
    consequent: Sequence[int]
    coverage: float
    absolute_support: Union[int, float]
    confidence: float
    lift: float

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RawRule":
        return cls(
            antecedent=data['antecedent'],
            consequent=data['consequent'],
            coverage=data['coverage'],
            absolute_support=data['absolute_support'],
            confidence=data['confidence'],
            lift=data['lift'],
        )


class RuleDecoder:
    """
    Decodes raw mined rules into Rule objects.
    """

    def decode(self, raw: Any) -> Rule:
        """
        Decode a raw rule, item by item, keeping item order and statistics.

        Args:
            raw: Object exposing antecedent/consequent code sequences and
                coverage, absolute_support, confidence, lift

        Returns:
            Rule object

        Raises:
            DecodeError: If any item code is outside the item domain
        """
        antecedent = [Item.from_int(code) for code in raw.antecedent]
        consequent = [Item.from_int(code) for code in raw.consequent]
        return Rule(
            antecedent=antecedent,
            consequent=consequent,
            coverage=raw.coverage,
            absolute_support=raw.absolute_support,
            confidence=raw.confidence,
            lift=raw.lift,
        )
