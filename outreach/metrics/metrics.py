"""Metric implementations for binary outreach classification.

Every metric receives the true 0/1 labels and the predicted
positive-class probabilities. Label-based metrics apply their own
decision threshold.
"""

from dataclasses import dataclass
from typing import Callable

import numpy as np
from sklearn.metrics import (
    accuracy_score,
    f1_score,
    log_loss,
    precision_score,
    recall_score,
    roc_auc_score,
)


@dataclass(frozen=True)
class AccuracyMetric:
    """Fraction of correctly classified samples."""

    threshold: float = 0.5

    @property
    def name(self) -> str:
        return "accuracy"

    def compute(self, y_true: np.ndarray, y_prob: np.ndarray) -> float:
        return float(accuracy_score(y_true, to_labels(y_prob, self.threshold)))


@dataclass(frozen=True)
class AUCMetric:
    """Area under the ROC curve.

    Threshold independent; undefined when only one class is present.
    """

    @property
    def name(self) -> str:
        return "auc"

    def compute(self, y_true: np.ndarray, y_prob: np.ndarray) -> float:
        return float(roc_auc_score(y_true, y_prob))


@dataclass(frozen=True)
class F1Metric:
    """Harmonic mean of precision and recall for the positive class."""

    threshold: float = 0.5

    @property
    def name(self) -> str:
        return "f1"

    def compute(self, y_true: np.ndarray, y_prob: np.ndarray) -> float:
        return float(f1_score(y_true, to_labels(y_prob, self.threshold), zero_division=0))


@dataclass(frozen=True)
class PrecisionMetric:
    """Positive predictive value."""

    threshold: float = 0.5

    @property
    def name(self) -> str:
        return "precision"

    def compute(self, y_true: np.ndarray, y_prob: np.ndarray) -> float:
        return float(precision_score(y_true, to_labels(y_prob, self.threshold), zero_division=0))


@dataclass(frozen=True)
class RecallMetric:
    """True positive rate."""

    threshold: float = 0.5

    @property
    def name(self) -> str:
        return "recall"

    def compute(self, y_true: np.ndarray, y_prob: np.ndarray) -> float:
        return float(recall_score(y_true, to_labels(y_prob, self.threshold), zero_division=0))


@dataclass(frozen=True)
class LogLossMetric:
    """Binary cross-entropy of the predicted probabilities."""

    @property
    def name(self) -> str:
        return "log_loss"

    def compute(self, y_true: np.ndarray, y_prob: np.ndarray) -> float:
        return float(log_loss(y_true, y_prob, labels=[0, 1]))


@dataclass
class CustomMetric:
    """Custom metric wrapper for user-defined metric functions."""

    metric_name: str
    compute_fn: Callable[[np.ndarray, np.ndarray], float]

    @property
    def name(self) -> str:
        return self.metric_name

    def compute(self, y_true: np.ndarray, y_prob: np.ndarray) -> float:
        return float(self.compute_fn(y_true, y_prob))


def to_labels(y_prob: np.ndarray, threshold: float = 0.5) -> np.ndarray:
    """Convert probabilities to 0/1 labels (positive when above threshold)."""
    return (np.asarray(y_prob) > threshold).astype(np.int64)


def create_standard_metrics(threshold: float = 0.5) -> list:
    """Create the standard list of binary classification metrics."""
    return [
        AccuracyMetric(threshold),
        AUCMetric(),
        F1Metric(threshold),
        PrecisionMetric(threshold),
        RecallMetric(threshold),
        LogLossMetric(),
    ]


def compute_all_metrics(
    y_true: np.ndarray,
    y_prob: np.ndarray,
    metrics: list | None = None,
) -> dict[str, float]:
    """Compute all specified metrics.

    Args:
        y_true: Actual 0/1 labels
        y_prob: Predicted positive-class probabilities
        metrics: List of metric instances. If None, uses standard metrics.

    Returns:
        Dictionary mapping metric names to computed values
    """
    if metrics is None:
        metrics = create_standard_metrics()

    return {metric.name: metric.compute(y_true, y_prob) for metric in metrics}


def compute_baseline_metrics(y_test: np.ndarray, y_train: np.ndarray) -> dict[str, float]:
    """Compute metrics of a constant predictor using the training positive rate."""
    positive_rate = float(np.mean(y_train))
    baseline_prob = np.full(len(y_test), positive_rate)

    return {
        "baseline_accuracy": float(accuracy_score(y_test, to_labels(baseline_prob))),
        "baseline_log_loss": float(log_loss(y_test, baseline_prob, labels=[0, 1])),
        "train_positive_rate": positive_rate,
    }
