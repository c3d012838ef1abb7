"""Feature engineering for outreach classification.

Each text field of a profile (current role, country, industry) is
turned into TF-IDF weighted word n-grams by its own vectorizer. The
per-field matrices are concatenated in field order into one dense
feature matrix whose width is fixed once the vectorizers are fitted.
"""

from dataclasses import dataclass, field
import pickle
from typing import Any

import numpy as np
import polars as pl
from loguru import logger
from sklearn.feature_extraction.text import TfidfVectorizer

from outreach.domain.entities import FeatureConfig, TEXT_FIELDS


# Default sklearn pattern drops single-character tokens such as "C" or "R".
TOKEN_PATTERN = r"(?u)\b\w+\b"


@dataclass
class ProfileFeatureEngineer:
    """Fits and applies one TF-IDF vectorizer per profile text field."""

    fields: tuple[str, ...] = TEXT_FIELDS
    ngram_range: tuple[int, int] = (1, 2)
    min_df: int = 1
    max_features: int | None = 1000

    _vectorizers: dict[str, TfidfVectorizer | None] = field(default_factory=dict, init=False)
    _feature_columns: list[str] = field(default_factory=list, init=False)
    _is_fitted: bool = field(default=False, init=False)

    @classmethod
    def from_config(cls, config: FeatureConfig) -> "ProfileFeatureEngineer":
        return cls(
            fields=tuple(config.fields),
            ngram_range=tuple(config.ngram_range),
            min_df=config.min_df,
            max_features=config.max_features,
        )

    @property
    def is_fitted(self) -> bool:
        return self._is_fitted

    @property
    def n_features(self) -> int:
        return len(self._feature_columns)

    def fit(self, profiles_df: pl.DataFrame) -> "ProfileFeatureEngineer":
        """Fit a vectorizer for every configured field.

        A field with no usable tokens in the training data contributes
        no columns.
        """
        self._vectorizers = {}
        self._feature_columns = []

        for name in self.fields:
            vectorizer = TfidfVectorizer(
                lowercase=True,
                token_pattern=TOKEN_PATTERN,
                ngram_range=self.ngram_range,
                min_df=self.min_df,
                max_features=self.max_features,
                dtype=np.float64,
            )
            try:
                vectorizer.fit(self._field_texts(profiles_df, name))
            except ValueError as e:
                # raised by sklearn when the vocabulary ends up empty
                logger.warning("Field '{}' yields no features: {}", name, e)
                self._vectorizers[name] = None
                continue

            self._vectorizers[name] = vectorizer
            self._feature_columns.extend(
                f"{name}__{term}" for term in vectorizer.get_feature_names_out()
            )

        self._is_fitted = True
        logger.debug("Fitted featurizer with {} columns", len(self._feature_columns))
        return self

    def transform(self, profiles_df: pl.DataFrame) -> np.ndarray:
        """Transform profiles into a dense (n_profiles, n_features) matrix."""
        if not self._is_fitted:
            raise RuntimeError("Feature engineer must be fitted before transform")

        blocks = []
        for name in self.fields:
            vectorizer = self._vectorizers.get(name)
            if vectorizer is None:
                continue
            matrix = vectorizer.transform(self._field_texts(profiles_df, name))
            blocks.append(matrix.toarray())

        if not blocks:
            return np.zeros((profiles_df.height, 0), dtype=np.float64)
        return np.hstack(blocks)

    def fit_transform(self, profiles_df: pl.DataFrame) -> np.ndarray:
        """Fit and transform in one step."""
        self.fit(profiles_df)
        return self.transform(profiles_df)

    def get_feature_columns(self) -> list[str]:
        """Return the list of feature column names."""
        return self._feature_columns.copy()

    def to_bytes(self) -> bytes:
        """Serialize the fitted state."""
        if not self._is_fitted:
            raise RuntimeError("Cannot save unfitted feature engineer")

        state: dict[str, Any] = {
            "fields": self.fields,
            "ngram_range": self.ngram_range,
            "min_df": self.min_df,
            "max_features": self.max_features,
            "vectorizers": self._vectorizers,
            "feature_columns": self._feature_columns,
        }
        return pickle.dumps(state)

    @classmethod
    def from_bytes(cls, data: bytes) -> "ProfileFeatureEngineer":
        """Restore a feature engineer serialized with ``to_bytes``."""
        state = pickle.loads(data)

        engineer = cls(
            fields=tuple(state["fields"]),
            ngram_range=tuple(state["ngram_range"]),
            min_df=state["min_df"],
            max_features=state["max_features"],
        )
        engineer._vectorizers = state["vectorizers"]
        engineer._feature_columns = state["feature_columns"]
        engineer._is_fitted = True
        return engineer

    @staticmethod
    def _field_texts(profiles_df: pl.DataFrame, name: str) -> list[str]:
        """Return a field's values with nulls replaced by the empty string."""
        return profiles_df.get_column(name).fill_null("").to_list()
