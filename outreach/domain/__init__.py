"""Domain layer: entities, protocols and errors."""

from .entities import (
    Profile,
    ColumnLayout,
    Prediction,
    ScoredProfile,
    EvaluationResult,
    ModelConfig,
    FeatureConfig,
    TRAIN_LAYOUT,
    INFERENCE_LAYOUT,
)

from .errors import (
    OutreachError,
    ParseError,
    DataFormatError,
    ModelFormatError,
)

from .protocols import (
    IClassifier,
    IFeatureEngineer,
    IMetric,
)

__all__ = [
    "Profile",
    "ColumnLayout",
    "Prediction",
    "ScoredProfile",
    "EvaluationResult",
    "ModelConfig",
    "FeatureConfig",
    "TRAIN_LAYOUT",
    "INFERENCE_LAYOUT",
    "OutreachError",
    "ParseError",
    "DataFormatError",
    "ModelFormatError",
    "IClassifier",
    "IFeatureEngineer",
    "IMetric",
]
