"""
Configured chains of rule filters.
"""
from typing import Callable, Dict, List, Optional, Sequence

from maras.core.config import FilterPolicyConfig, PipelineConfig
from maras.core.exceptions import ConfigurationError
from maras.core.logging_config import get_logger

from .filters import (
    CLOSED_RULES,
    FILTERED_RULES,
    NO_COMPLEX_RULES,
    NO_SINGLETON_RULES,
    filter_no_complex_rules,
    filter_no_singleton_rules,
    filter_rules,
    find_closures,
)
from .rulesets import RuleSets

log = get_logger(__name__)

# Step name -> name of the collection the step produces.
STEP_OUTPUTS: Dict[str, str] = {
    "closures": CLOSED_RULES,
    "drug_reaction": FILTERED_RULES,
    "no_singletons": NO_SINGLETON_RULES,
    "no_complex": NO_COMPLEX_RULES,
}


class FilterPipeline:
    """
    Applies rule filters one after another, in the order given.

    Each step receives the RuleSets produced by the previous one.
    """

    def __init__(
        self,
        steps: Sequence[str],
        closures=None,
        policy: Optional[FilterPolicyConfig] = None
    ):
        """
        Initialize pipeline.

        Args:
            steps: Step names ("closures", "drug_reaction", "no_singletons", "no_complex")
            closures: ClosureLattice, required when "closures" is a step
            policy: Cardinality limits for the size-based steps

        Raises:
            ConfigurationError: On unknown steps or a missing closure lattice
        """
        unknown = [step for step in steps if step not in STEP_OUTPUTS]
        if unknown:
            raise ConfigurationError(
                f"Unknown filter steps {unknown}; expected any of {sorted(STEP_OUTPUTS)}"
            )
        if "closures" in steps and closures is None:
            raise ConfigurationError("The 'closures' step needs a closure lattice")

        self.steps: List[str] = list(steps)
        self.closures = closures
        self.policy = policy or FilterPolicyConfig()
        self._actions: Dict[str, Callable[[RuleSets], RuleSets]] = {
            "closures": lambda rules: find_closures(rules, self.closures),
            "drug_reaction": filter_rules,
            "no_singletons": lambda rules: filter_no_singleton_rules(
                rules, min_antecedent_items=self.policy.min_antecedent_items
            ),
            "no_complex": lambda rules: filter_no_complex_rules(
                rules,
                max_antecedent_items=self.policy.max_antecedent_items,
                max_consequent_items=self.policy.max_consequent_items,
            ),
        }

    @classmethod
    def from_config(cls, config: PipelineConfig, closures=None) -> "FilterPipeline":
        return cls(config.steps, closures=closures, policy=config.policy)

    def run(self, rules: RuleSets) -> RuleSets:
        """
        Run every step on the output of the previous one.

        Args:
            rules: Source collection, left untouched

        Returns:
            Output of the last step, or ``rules`` itself if there are no steps
        """
        result = rules
        for step in self.steps:
            before = len(result)
            result = self._actions[step](result)
            log.info("filter_step", step=step, collection=result.name, rules_in=before, rules_out=len(result))
        return result

    def __repr__(self):
        return f"FilterPipeline(steps={self.steps}, policy={self.policy!r})"
