"""
Configuration management with Pydantic validation.
"""
from typing import List, Literal
from pydantic import BaseModel, Field, model_validator
from pathlib import Path
import json

from .exceptions import ConfigurationError

FilterStep = Literal["closures", "drug_reaction", "no_singletons", "no_complex"]

DEFAULT_STEPS: List[str] = ["closures", "drug_reaction", "no_singletons", "no_complex"]


class FilterPolicyConfig(BaseModel):
    """Cardinality limits used by the size-based rule filters."""
    min_antecedent_items: int = Field(ge=0, default=2)
    max_antecedent_items: int = Field(ge=1, default=2)
    max_consequent_items: int = Field(ge=1, default=1)

    @model_validator(mode='after')
    def validate_bounds(self):
        if self.min_antecedent_items > self.max_antecedent_items:
            raise ValueError(
                f"min_antecedent_items ({self.min_antecedent_items}) must be <= "
                f"max_antecedent_items ({self.max_antecedent_items})"
            )
        return self


class PipelineConfig(BaseModel):
    """Root configuration model: which filters run, in which order."""
    name: str = "MARAS rule filtering"
    steps: List[FilterStep] = Field(default_factory=lambda: list(DEFAULT_STEPS))
    policy: FilterPolicyConfig = Field(default_factory=FilterPolicyConfig)

    @property
    def requires_closures(self) -> bool:
        return "closures" in self.steps

    @classmethod
    def from_json(cls, path: Path) -> "PipelineConfig":
        """Load configuration from a JSON file."""
        path = Path(path)
        if not path.exists():
            raise ConfigurationError(f"Configuration file not found: {path}")
        try:
            with open(path, 'r', encoding='utf-8') as f:
                config_dict = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"Configuration file {path} is not valid JSON: {e}") from e
        if not isinstance(config_dict, dict):
            raise ConfigurationError(f"Configuration file {path} must contain a JSON object")

        return cls(**config_dict)

    def to_json(self, path: Path):
        """Save configuration to JSON file."""
        with open(path, 'w', encoding='utf-8') as f:
            json.dump(self.model_dump(mode='json'), f, indent=2, ensure_ascii=False)
