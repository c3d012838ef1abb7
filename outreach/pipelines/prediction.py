"""Batch prediction pipeline for outreach targeting.

Applies a loaded model to unlabeled profiles, keeps the positive
predictions, ranks them by probability and writes the identifiers
of the best matches to a file.
"""

from dataclasses import dataclass
from pathlib import Path

import polars as pl
from loguru import logger

from outreach.data.loader import load_profiles
from outreach.domain.entities import (
    ColumnLayout,
    INFERENCE_LAYOUT,
    Profile,
    ScoredProfile,
)
from outreach.models.outreach_model import OutreachModel


DEFAULT_TOP_N = 100


def predict_batch(model: OutreachModel, profiles: list[Profile]) -> list[ScoredProfile]:
    """Predict every profile, pairing each with its prediction in input order."""
    predictions = model.predict(profiles)
    return [
        ScoredProfile(profile=profile, prediction=prediction)
        for profile, prediction in zip(profiles, predictions)
    ]


def scored_to_frame(scored: list[ScoredProfile]) -> pl.DataFrame:
    """Tabulate scored profiles, one row each, in input order."""
    return pl.DataFrame(
        {
            "person_id": [s.profile.person_id for s in scored],
            "is_positive": [s.prediction.is_positive for s in scored],
            "probability": [s.prediction.probability for s in scored],
            "score": [s.prediction.score for s in scored],
        },
        schema={
            "person_id": pl.Utf8,
            "is_positive": pl.Boolean,
            "probability": pl.Float64,
            "score": pl.Float64,
        },
    )


def select_top_matches(
    scored: list[ScoredProfile],
    top_n: int = DEFAULT_TOP_N,
) -> list[ScoredProfile]:
    """Keep positive predictions, best probability first, at most ``top_n``.

    Profiles with equal probability keep their input order.
    """
    if not scored:
        return []

    ranked = (
        scored_to_frame(scored)
        .with_row_index("position")
        .filter(pl.col("is_positive"))
        .sort("probability", descending=True, maintain_order=True)
        .head(top_n)
    )
    return [scored[i] for i in ranked.get_column("position").to_list()]


def write_person_ids(path: Path | str, scored: list[ScoredProfile]) -> Path:
    """Write one person id per line, in the given order."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    with open(path, "w", encoding="utf-8") as f:
        for item in scored:
            f.write(f"{item.person_id}\n")

    return path


@dataclass
class BatchPredictionPipeline:
    """Pipeline ranking unlabeled profiles with a trained model."""

    model: OutreachModel
    top_n: int = DEFAULT_TOP_N

    def run(self, profiles: list[Profile], output_path: Path | str) -> list[ScoredProfile]:
        """Predict, select the top matches and write their ids to ``output_path``.

        Returns:
            The retained matches in the order they were written
        """
        logger.info("=============== Prediction of loaded model with multiple samples ===============")

        scored = predict_batch(self.model, profiles)
        matches = select_top_matches(scored, self.top_n)
        write_person_ids(output_path, matches)

        for item in matches:
            logger.info(
                "Profile: {} | Prediction: {} | Probability: {:.6f}",
                item.person_id,
                "Send" if item.prediction.is_positive else "Skip",
                item.prediction.probability,
            )

        n_positive = sum(1 for s in scored if s.prediction.is_positive)
        logger.info(
            "Wrote {} of {} positive matches ({} profiles scored) to {}",
            len(matches), n_positive, len(scored), output_path,
        )
        logger.info("=============== End of predictions ===============")
        return matches


def load_inference_data(path: Path | str, layout: ColumnLayout = INFERENCE_LAYOUT) -> list[Profile]:
    """Load unlabeled profiles to be ranked."""
    return load_profiles(path, layout)
