"""Training pipeline for outreach models.

Orchestrates the training workflow:
1. Loading labeled profiles
2. Feature engineering
3. Model training
"""

from dataclasses import dataclass, field
from pathlib import Path

from loguru import logger

from outreach.data.loader import load_profiles
from outreach.domain.entities import (
    ColumnLayout,
    FeatureConfig,
    ModelConfig,
    Profile,
    TRAIN_LAYOUT,
)
from outreach.features.profile_features import ProfileFeatureEngineer
from outreach.models.boosted_trees import BoostedTreeClassifier
from outreach.models.outreach_model import OutreachModel


@dataclass
class TrainingPipeline:
    """Pipeline for training outreach models.

    Builds a fresh featurizer and classifier from the configuration
    and fits both on labeled profiles. Nothing is written to disk.
    """

    model_config: ModelConfig = field(default_factory=ModelConfig)
    feature_config: FeatureConfig = field(default_factory=FeatureConfig)
    threshold: float = 0.5

    def run(self, profiles: list[Profile]) -> OutreachModel:
        """Fit a new model on ``profiles``.

        Raises:
            DataFormatError: If profiles are empty or unlabeled
        """
        n_positive = sum(1 for p in profiles if p.label)
        logger.info("=============== Create and Train the Model ===============")
        logger.info(
            "Training on {} profiles ({} positive, {} negative)",
            len(profiles), n_positive, len(profiles) - n_positive,
        )
        logger.info(
            "Model config: n_trees={}, max_leaves={}, min_samples_per_leaf={}",
            self.model_config.n_trees,
            self.model_config.max_leaves,
            self.model_config.min_samples_per_leaf,
        )

        model = OutreachModel(
            feature_engineer=ProfileFeatureEngineer.from_config(self.feature_config),
            classifier=BoostedTreeClassifier(config=self.model_config),
            threshold=self.threshold,
        )
        model.fit(profiles)

        logger.info("Fitted {} on {} features", model.model_name, model.feature_engineer.n_features)
        logger.info("=============== End of training ===============")
        return model


def load_training_data(path: Path | str, layout: ColumnLayout = TRAIN_LAYOUT) -> list[Profile]:
    """Load labeled profiles for training or evaluation."""
    return load_profiles(path, layout)
