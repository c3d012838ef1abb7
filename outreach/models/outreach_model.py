"""Trained outreach model: profile featurizer plus boosted tree classifier."""

from dataclasses import dataclass, field

import numpy as np
import polars as pl

from outreach.data.loader import profiles_to_frame
from outreach.domain.entities import Prediction, Profile
from outreach.domain.errors import DataFormatError
from outreach.features.profile_features import ProfileFeatureEngineer
from outreach.models.boosted_trees import BoostedTreeClassifier


@dataclass
class OutreachModel:
    """End-to-end model deciding whether a profile should be mailed.

    Owns both the fitted featurizer and the classifier, so raw profiles
    go in and predictions come out.
    """

    feature_engineer: ProfileFeatureEngineer = field(default_factory=ProfileFeatureEngineer)
    classifier: BoostedTreeClassifier = field(default_factory=BoostedTreeClassifier)
    threshold: float = 0.5

    @property
    def model_name(self) -> str:
        return self.classifier.model_name

    @property
    def is_fitted(self) -> bool:
        return self.feature_engineer.is_fitted and self.classifier.is_fitted

    def fit(self, profiles: list[Profile]) -> "OutreachModel":
        """Fit featurizer and classifier on labeled profiles.

        Raises:
            DataFormatError: If there are no profiles or some are unlabeled
        """
        y = labels_of(profiles)

        profiles_df = profiles_to_frame(profiles)
        X = self.feature_engineer.fit_transform(profiles_df)
        self.classifier.fit(X, y, feature_names=self.feature_engineer.get_feature_columns())
        return self

    def featurize(self, profiles: list[Profile] | pl.DataFrame) -> np.ndarray:
        """Turn profiles into the classifier's feature matrix."""
        if not isinstance(profiles, pl.DataFrame):
            profiles = profiles_to_frame(profiles)
        return self.feature_engineer.transform(profiles)

    def predict_proba(self, profiles: list[Profile]) -> np.ndarray:
        """Return the positive-class probability of each profile."""
        if not profiles:
            return np.zeros(0, dtype=np.float32)
        return self.classifier.predict_proba(self.featurize(profiles))

    def predict(self, profiles: list[Profile]) -> list[Prediction]:
        """Predict every profile, preserving input order."""
        if not profiles:
            return []

        X = self.featurize(profiles)
        probabilities = self.classifier.predict_proba(X)
        scores = self.classifier.predict_margin(X)

        return [
            Prediction(
                is_positive=bool(probability > self.threshold),
                probability=float(probability),
                score=float(score),
            )
            for probability, score in zip(probabilities, scores)
        ]

    def predict_one(self, profile: Profile) -> Prediction:
        """Predict a single profile."""
        return self.predict([profile])[0]


def labels_of(profiles: list[Profile]) -> np.ndarray:
    """Return the labels of ``profiles`` as a 0/1 array.

    Raises:
        DataFormatError: If there are no profiles or some are unlabeled
    """
    if not profiles:
        raise DataFormatError("No labeled profiles were provided")

    unlabeled = [p.person_id for p in profiles if p.label is None]
    if unlabeled:
        raise DataFormatError(
            f"{len(unlabeled)} profiles have no label (first: {unlabeled[0]!r})"
        )

    return np.array([1 if p.label else 0 for p in profiles], dtype=np.int64)
