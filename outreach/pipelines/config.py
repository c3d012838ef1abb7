"""Configuration loader for outreach pipelines.

Provides typed configuration loading from YAML files with
sensible defaults and validation using Pydantic.
"""

from pathlib import Path

import yaml
from pydantic import BaseModel, Field, model_validator

from outreach.domain.entities import (
    ColumnLayout,
    FeatureConfig,
    INFERENCE_LAYOUT,
    ModelConfig,
    TEXT_FIELDS,
    TRAIN_LAYOUT,
)


class PathsConfig(BaseModel):
    """Configuration for file system paths.

    File names are resolved against ``data_dir`` unless absolute.
    """

    model_config = {"frozen": True, "protected_namespaces": ()}

    data_dir: Path = Field(default=Path("data"))
    train_file: Path = Field(default=Path("people-train.in"))
    test_file: Path = Field(default=Path("people-test.in"))
    inference_file: Path = Field(default=Path("people.in"))
    output_file: Path = Field(default=Path("people.out"))
    model_file: Path = Field(default=Path("Model.zip"))

    def _in_data_dir(self, p: Path) -> Path:
        return p if p.is_absolute() else self.data_dir / p

    @property
    def train_path(self) -> Path:
        return self._in_data_dir(self.train_file)

    @property
    def test_path(self) -> Path:
        return self._in_data_dir(self.test_file)

    @property
    def inference_path(self) -> Path:
        return self._in_data_dir(self.inference_file)

    @property
    def output_path(self) -> Path:
        return self._in_data_dir(self.output_file)

    @property
    def model_path(self) -> Path:
        return self._in_data_dir(self.model_file)


class ModelHyperparamsConfig(BaseModel):
    """Configuration for model hyperparameters."""

    model_config = {"frozen": True}

    n_trees: int = Field(default=50, ge=1)
    max_leaves: int = Field(default=50, ge=2)
    min_samples_per_leaf: int = Field(default=20, ge=0)
    learning_rate: float = Field(default=0.2, gt=0, le=1)
    random_state: int = Field(default=0)


class FeaturesConfig(BaseModel):
    """Configuration for text featurization."""

    model_config = {"frozen": True}

    fields: list[str] = Field(default_factory=lambda: list(TEXT_FIELDS), min_length=1)
    ngram_min: int = Field(default=1, ge=1)
    ngram_max: int = Field(default=2, ge=1)
    min_df: int = Field(default=1, ge=1)
    max_features: int | None = Field(default=1000, ge=1)

    @model_validator(mode="after")
    def _check_fields(self) -> "FeaturesConfig":
        unknown = [f for f in self.fields if f not in TEXT_FIELDS]
        if unknown:
            raise ValueError(f"Unknown feature fields {unknown}; expected a subset of {list(TEXT_FIELDS)}")
        if self.ngram_max < self.ngram_min:
            raise ValueError("ngram_max must be >= ngram_min")
        return self


class ColumnLayoutConfig(BaseModel):
    """Column positions of profile fields in a pipe-delimited file."""

    model_config = {"frozen": True}

    person_id: int = Field(ge=0)
    current_role: int = Field(ge=0)
    country: int = Field(ge=0)
    industry: int = Field(ge=0)
    label: int | None = Field(default=None, ge=0)
    separator: str = Field(default="|", min_length=1)

    @classmethod
    def from_domain(cls, layout: ColumnLayout) -> "ColumnLayoutConfig":
        return cls(
            person_id=layout.person_id,
            current_role=layout.current_role,
            country=layout.country,
            industry=layout.industry,
            label=layout.label,
            separator=layout.separator,
        )

    def to_domain(self) -> ColumnLayout:
        return ColumnLayout(
            person_id=self.person_id,
            current_role=self.current_role,
            country=self.country,
            industry=self.industry,
            label=self.label,
            separator=self.separator,
        )


class LayoutsConfig(BaseModel):
    """Layouts of the labeled (train/test) and inference files.

    The inference file has one leading column fewer than the labeled
    files, so role, country and industry sit one index to the left.
    """

    model_config = {"frozen": True}

    train: ColumnLayoutConfig = Field(default_factory=lambda: ColumnLayoutConfig.from_domain(TRAIN_LAYOUT))
    inference: ColumnLayoutConfig = Field(default_factory=lambda: ColumnLayoutConfig.from_domain(INFERENCE_LAYOUT))

    @model_validator(mode="after")
    def _check_labels(self) -> "LayoutsConfig":
        if self.train.label is None:
            raise ValueError("The train layout needs a label column")
        return self


class PredictionConfig(BaseModel):
    """Configuration for batch prediction."""

    model_config = {"frozen": True}

    top_n: int = Field(default=100, ge=1)
    threshold: float = Field(default=0.5, ge=0, le=1)


class PipelineConfig(BaseModel):
    """Complete pipeline configuration."""

    model_config = {"frozen": True}

    paths: PathsConfig = Field(default_factory=PathsConfig)
    model: ModelHyperparamsConfig = Field(default_factory=ModelHyperparamsConfig)
    features: FeaturesConfig = Field(default_factory=FeaturesConfig)
    layouts: LayoutsConfig = Field(default_factory=LayoutsConfig)
    prediction: PredictionConfig = Field(default_factory=PredictionConfig)

    def with_base_path(self, base_path: Path) -> "PipelineConfig":
        """Return a new config with the data directory resolved against base_path."""
        data_dir = self.paths.data_dir
        if data_dir.is_absolute():
            return self

        resolved_paths = self.paths.model_copy(update={"data_dir": base_path / data_dir})
        return self.model_copy(update={"paths": resolved_paths})

    def to_domain_model_config(self) -> ModelConfig:
        """Convert to domain ModelConfig entity."""
        return ModelConfig(
            n_trees=self.model.n_trees,
            max_leaves=self.model.max_leaves,
            min_samples_per_leaf=self.model.min_samples_per_leaf,
            learning_rate=self.model.learning_rate,
            random_state=self.model.random_state,
        )

    def to_domain_feature_config(self) -> FeatureConfig:
        """Convert to domain FeatureConfig entity."""
        return FeatureConfig(
            fields=tuple(self.features.fields),
            ngram_range=(self.features.ngram_min, self.features.ngram_max),
            min_df=self.features.min_df,
            max_features=self.features.max_features,
        )

    @property
    def train_layout(self) -> ColumnLayout:
        return self.layouts.train.to_domain()

    @property
    def inference_layout(self) -> ColumnLayout:
        return self.layouts.inference.to_domain()


def load_config(config_path: Path | str, base_path: Path | None = None) -> PipelineConfig:
    """Load pipeline configuration from a YAML file.

    Args:
        config_path: Path to the YAML configuration file
        base_path: Optional base path for resolving relative paths.
                   Defaults to the parent directory of the config file.

    Returns:
        PipelineConfig with all settings loaded

    Raises:
        FileNotFoundError: If config file doesn't exist
        yaml.YAMLError: If YAML parsing fails
        pydantic.ValidationError: If configuration validation fails
    """
    config_path = Path(config_path)

    if not config_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    if base_path is None:
        base_path = config_path.parent

    with open(config_path, "r") as f:
        data = yaml.safe_load(f) or {}

    config = PipelineConfig.model_validate(data)
    return config.with_base_path(base_path)


def get_default_config(base_path: Path | None = None) -> PipelineConfig:
    """Get default configuration without loading from file.

    Args:
        base_path: Optional base path for resolving relative paths.

    Returns:
        PipelineConfig with all default values
    """
    config = PipelineConfig()
    if base_path:
        return config.with_base_path(base_path)
    return config
