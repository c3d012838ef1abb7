"""Metrics module for model evaluation."""

from .metrics import (
    AccuracyMetric,
    AUCMetric,
    F1Metric,
    PrecisionMetric,
    RecallMetric,
    LogLossMetric,
    CustomMetric,
    compute_all_metrics,
    compute_baseline_metrics,
    create_standard_metrics,
    to_labels,
)

__all__ = [
    "AccuracyMetric",
    "AUCMetric",
    "F1Metric",
    "PrecisionMetric",
    "RecallMetric",
    "LogLossMetric",
    "CustomMetric",
    "compute_all_metrics",
    "compute_baseline_metrics",
    "create_standard_metrics",
    "to_labels",
]
