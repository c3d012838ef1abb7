"""Domain entities for the outreach pipeline."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

import numpy as np


TEXT_FIELDS = ("current_role", "country", "industry")


@dataclass(frozen=True)
class Profile:
    """A single LinkedIn-style profile row."""
    person_id: str
    current_role: str
    country: str
    industry: str
    label: bool | None = None

    @property
    def is_labeled(self) -> bool:
        return self.label is not None


@dataclass(frozen=True)
class ColumnLayout:
    """Zero-based column positions of profile fields in a pipe-delimited row."""
    person_id: int
    current_role: int
    country: int
    industry: int
    label: int | None = None
    separator: str = "|"

    @property
    def required_fields(self) -> int:
        indexes = [self.person_id, self.current_role, self.country, self.industry]
        if self.label is not None:
            indexes.append(self.label)
        return max(indexes) + 1


# Labeled files carry one extra leading column compared to the inference
# file, so role/country/industry sit one index further right.
TRAIN_LAYOUT = ColumnLayout(label=0, person_id=1, current_role=4, country=5, industry=6)
INFERENCE_LAYOUT = ColumnLayout(person_id=0, current_role=3, country=4, industry=5)


@dataclass(frozen=True)
class Prediction:
    """Model output for one profile."""
    is_positive: bool
    probability: float
    score: float


@dataclass(frozen=True)
class ScoredProfile:
    """A profile paired with the prediction made for it."""
    profile: Profile
    prediction: Prediction

    @property
    def person_id(self) -> str:
        return self.profile.person_id


@dataclass
class EvaluationResult:
    """Evaluation results for a binary classifier."""
    metrics: dict[str, float]
    predictions: np.ndarray
    actuals: np.ndarray
    model_name: str
    evaluation_timestamp: datetime = field(default_factory=datetime.now)
    metadata: dict[str, Any] = field(default_factory=dict)

    @property
    def accuracy(self) -> float:
        return self.metrics["accuracy"]

    @property
    def auc(self) -> float:
        return self.metrics["auc"]

    @property
    def f1(self) -> float:
        return self.metrics["f1"]

    def summary(self) -> str:
        lines = [
            f"Evaluation Results for: {self.model_name}",
            f"Timestamp: {self.evaluation_timestamp}",
            "-" * 50,
        ]
        for metric_name, value in self.metrics.items():
            lines.append(f"{metric_name}: {value:.6f}")
        return "\n".join(lines)


@dataclass(frozen=True)
class ModelConfig:
    """Hyperparameters of the boosted tree classifier."""
    n_trees: int = 50
    max_leaves: int = 50
    min_samples_per_leaf: int = 20
    learning_rate: float = 0.2
    random_state: int = 0


@dataclass(frozen=True)
class FeatureConfig:
    """Settings for text featurization of profile fields."""
    fields: tuple[str, ...] = TEXT_FIELDS
    ngram_range: tuple[int, int] = (1, 2)
    min_df: int = 1
    max_features: int | None = 1000
