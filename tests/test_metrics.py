"""Tests for classification metrics and evaluation."""

import numpy as np
import pytest

from outreach.domain.entities import Profile
from outreach.domain.errors import DataFormatError
from outreach.metrics.metrics import (
    AccuracyMetric,
    AUCMetric,
    CustomMetric,
    F1Metric,
    compute_all_metrics,
    compute_baseline_metrics,
    to_labels,
)
from outreach.pipelines.evaluation import EvaluationPipeline, evaluate


Y_TRUE = np.array([1, 1, 0, 0])


class TestMetrics:
    def test_to_labels_is_strict(self):
        assert to_labels(np.array([0.2, 0.5, 0.51])).tolist() == [0, 0, 1]

    def test_accuracy(self):
        assert AccuracyMetric().compute(Y_TRUE, np.array([0.9, 0.2, 0.1, 0.3])) == 0.75

    def test_auc_is_threshold_independent(self):
        assert AUCMetric().compute(Y_TRUE, np.array([0.4, 0.3, 0.2, 0.1])) == 1.0

    def test_f1(self):
        # one true positive, one false negative, one false positive
        y_prob = np.array([0.9, 0.1, 0.8, 0.1])
        assert F1Metric().compute(Y_TRUE, y_prob) == pytest.approx(0.5)

    def test_compute_all_standard(self):
        results = compute_all_metrics(Y_TRUE, np.array([0.9, 0.8, 0.1, 0.2]))
        assert {"accuracy", "auc", "f1", "precision", "recall", "log_loss"} <= set(results)
        assert results["accuracy"] == 1.0

    def test_custom_metric(self):
        metric = CustomMetric("positives", lambda y, p: float(np.sum(p > 0.5)))
        assert compute_all_metrics(Y_TRUE, np.array([0.9, 0.8, 0.1, 0.6]), [metric]) == {"positives": 3.0}

    def test_baseline(self):
        baseline = compute_baseline_metrics(Y_TRUE, np.array([1, 0, 0, 0]))
        assert baseline["train_positive_rate"] == 0.25
        assert baseline["baseline_accuracy"] == 0.5


class TestEvaluate:
    def test_rejects_single_class(self, trained_model, train_profiles):
        with pytest.raises(DataFormatError):
            evaluate(trained_model, [p for p in train_profiles if p.label])

    def test_rejects_unlabeled(self, trained_model, inference_profiles):
        with pytest.raises(DataFormatError):
            evaluate(trained_model, inference_profiles)

    def test_rejects_empty(self, trained_model):
        with pytest.raises(DataFormatError):
            evaluate(trained_model, [])

    def test_baseline_included_with_train_profiles(self, trained_model, train_profiles):
        result = evaluate(trained_model, train_profiles, train_profiles=train_profiles)
        assert result.metrics["train_positive_rate"] == 0.5
        assert result.metadata["n_samples"] == 4

    def test_report(self, trained_model, train_profiles):
        pipeline = EvaluationPipeline(trained_model)
        report = pipeline.generate_report(pipeline.run(train_profiles))
        assert "Accuracy: 100.00%" in report
        assert "Auc: 100.00%" in report
        assert "F1Score: 100.00%" in report

    def test_mixed_unlabeled(self, trained_model, train_profiles):
        with pytest.raises(DataFormatError):
            evaluate(trained_model, train_profiles + [Profile("x", "r", "c", "i")])
