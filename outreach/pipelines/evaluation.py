"""Evaluation pipeline for outreach models.

Scores a model on a held-out labeled set and reports accuracy,
AUC, F1 and related binary classification metrics.
"""

from dataclasses import dataclass
from datetime import datetime

import numpy as np
from loguru import logger

from outreach.domain.entities import EvaluationResult, Profile
from outreach.domain.errors import DataFormatError
from outreach.domain.protocols import IMetric
from outreach.metrics.metrics import (
    compute_all_metrics,
    compute_baseline_metrics,
    create_standard_metrics,
)
from outreach.models.outreach_model import OutreachModel, labels_of


def evaluate(
    model: OutreachModel,
    profiles: list[Profile],
    metrics: list[IMetric] | None = None,
    train_profiles: list[Profile] | None = None,
) -> EvaluationResult:
    """Evaluate ``model`` on labeled ``profiles``.

    Args:
        model: Fitted outreach model
        profiles: Labeled test profiles
        metrics: Metrics to compute (standard metrics if None)
        train_profiles: Optional training profiles for a baseline comparison

    Returns:
        EvaluationResult with all computed metrics

    Raises:
        DataFormatError: If the test set is empty, unlabeled or single-class
    """
    y_true = labels_of(profiles)
    if np.unique(y_true).size < 2:
        raise DataFormatError("The test set must contain both positive and negative profiles")

    if metrics is None:
        metrics = create_standard_metrics(model.threshold)

    y_prob = model.predict_proba(profiles)
    metrics_results = compute_all_metrics(y_true, y_prob, metrics)

    if train_profiles is not None:
        metrics_results.update(compute_baseline_metrics(y_true, labels_of(train_profiles)))

    return EvaluationResult(
        metrics=metrics_results,
        predictions=y_prob,
        actuals=y_true,
        model_name=model.model_name,
        metadata={
            "n_samples": len(profiles),
            "n_positive": int(y_true.sum()),
            "n_features": model.feature_engineer.n_features,
        },
    )


@dataclass
class EvaluationPipeline:
    """Pipeline for evaluating a trained model and reporting the results."""

    model: OutreachModel

    def run(
        self,
        profiles: list[Profile],
        metrics: list[IMetric] | None = None,
        train_profiles: list[Profile] | None = None,
    ) -> EvaluationResult:
        """Evaluate on ``profiles`` and log the headline metrics.

        Passing ``train_profiles`` adds a constant-predictor baseline.
        """
        logger.info("=============== Evaluating Model accuracy with Test data ===============")
        result = evaluate(self.model, profiles, metrics, train_profiles)
        logger.info(
            "Accuracy: {:.2%} | Auc: {:.2%} | F1Score: {:.2%}",
            result.accuracy, result.auc, result.f1,
        )
        logger.info("=============== End of model evaluation ===============")
        return result

    def get_feature_importance_analysis(self, n: int = 10) -> list[tuple[str, float]]:
        """Return the model's top features by gain."""
        return self.model.classifier.get_top_features(n)

    def generate_report(self, result: EvaluationResult) -> str:
        """Render a model quality report for operators."""
        lines = [
            "=" * 70,
            "Model quality metrics evaluation",
            f"Model: {result.model_name}",
            f"Timestamp: {datetime.now().isoformat()}",
            f"Samples: {result.metadata.get('n_samples', len(result.actuals)):,}",
            "-" * 50,
            f"Accuracy: {result.accuracy:.2%}",
            f"Auc: {result.auc:.2%}",
            f"F1Score: {result.f1:.2%}",
        ]

        for name in ("precision", "recall"):
            if name in result.metrics:
                lines.append(f"{name.capitalize()}: {result.metrics[name]:.2%}")
        if "log_loss" in result.metrics:
            lines.append(f"LogLoss: {result.metrics['log_loss']:.4f}")
        if "baseline_accuracy" in result.metrics:
            lines.extend([
                "",
                f"Baseline accuracy: {result.metrics['baseline_accuracy']:.2%}"
                f" (train positive rate {result.metrics['train_positive_rate']:.2%})",
                f"Baseline LogLoss: {result.metrics['baseline_log_loss']:.4f}",
            ])

        top_features = self.get_feature_importance_analysis()
        if top_features:
            lines.extend([
                "",
                "## Top 10 Features",
                "-" * 50,
            ])
            for rank, (name, imp) in enumerate(top_features, 1):
                lines.append(f"{rank:2d}. {name}: {imp:.4f}")

        lines.append("=" * 70)
        return "\n".join(lines)
