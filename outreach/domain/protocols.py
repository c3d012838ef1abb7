"""Protocol interfaces for outreach pipeline components."""

from typing import Protocol, runtime_checkable

import numpy as np
import polars as pl


@runtime_checkable
class IClassifier(Protocol):
    """Interface for binary classifiers scoring featurized profiles.

    Any ensemble implementation exposing fit and probability
    prediction can back an OutreachModel.
    """

    @property
    def model_name(self) -> str:
        """Return the model's identifier."""
        ...

    @property
    def is_fitted(self) -> bool:
        """Check if the model has been trained."""
        ...

    def fit(
        self,
        X: np.ndarray,
        y: np.ndarray,
        feature_names: list[str] | None = None,
    ) -> "IClassifier":
        """Train the model on provided data."""
        ...

    def predict_proba(self, X: np.ndarray) -> np.ndarray:
        """Return the positive-class probability for each row."""
        ...

    def predict_margin(self, X: np.ndarray) -> np.ndarray:
        """Return the raw, untransformed score for each row."""
        ...


@runtime_checkable
class IFeatureEngineer(Protocol):
    """Interface for turning profile frames into feature matrices."""

    def fit(self, profiles_df: pl.DataFrame) -> "IFeatureEngineer":
        """Fit any stateful transformers (e.g., TF-IDF vocabularies)."""
        ...

    def transform(self, profiles_df: pl.DataFrame) -> np.ndarray:
        """Transform profiles into a feature matrix."""
        ...

    def fit_transform(self, profiles_df: pl.DataFrame) -> np.ndarray:
        """Fit transformers and transform data in one step."""
        ...

    def get_feature_columns(self) -> list[str]:
        """Return the list of feature column names produced."""
        ...


@runtime_checkable
class IMetric(Protocol):
    """Interface for evaluation metrics."""

    @property
    def name(self) -> str:
        """Return the metric's identifier."""
        ...

    def compute(self, y_true: np.ndarray, y_prob: np.ndarray) -> float:
        """Compute the metric from labels and positive-class probabilities."""
        ...
