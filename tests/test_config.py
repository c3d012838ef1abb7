"""Tests for pipeline configuration loading."""

from pathlib import Path

import pydantic
import pytest

from outreach.domain.entities import INFERENCE_LAYOUT, TRAIN_LAYOUT
from outreach.pipelines.config import PipelineConfig, get_default_config, load_config


class TestDefaults:
    def test_default_paths(self):
        config = get_default_config()
        assert config.paths.train_path == Path("data") / "people-train.in"
        assert config.paths.test_path == Path("data") / "people-test.in"
        assert config.paths.inference_path == Path("data") / "people.in"
        assert config.paths.output_path == Path("data") / "people.out"
        assert config.paths.model_path == Path("data") / "Model.zip"

    def test_default_layouts_match_domain(self):
        config = get_default_config()
        assert config.train_layout == TRAIN_LAYOUT
        assert config.inference_layout == INFERENCE_LAYOUT

    def test_default_hyperparameters(self):
        model = get_default_config().to_domain_model_config()
        assert (model.n_trees, model.max_leaves, model.min_samples_per_leaf) == (50, 50, 20)

    def test_base_path(self, tmp_path):
        config = get_default_config(tmp_path)
        assert config.paths.train_path == tmp_path / "data" / "people-train.in"

    def test_default_prediction(self):
        assert get_default_config().prediction.top_n == 100


class TestLoadConfig:
    def test_yaml_overrides(self, tmp_path):
        config_path = tmp_path / "pipeline_config.yml"
        config_path.write_text(
            "paths:\n"
            "  data_dir: inputs\n"
            "  model_file: /tmp/models/Model.zip\n"
            "model:\n"
            "  n_trees: 10\n"
            "features:\n"
            "  fields: [current_role, industry]\n"
            "  ngram_max: 1\n"
            "layouts:\n"
            "  inference:\n"
            "    person_id: 0\n"
            "    current_role: 4\n"
            "    country: 5\n"
            "    industry: 6\n"
            "prediction:\n"
            "  top_n: 5\n"
        )

        config = load_config(config_path)

        assert config.paths.data_dir == tmp_path / "inputs"
        assert config.paths.model_path == Path("/tmp/models/Model.zip")
        assert config.model.n_trees == 10
        assert config.to_domain_feature_config().fields == ("current_role", "industry")
        assert config.to_domain_feature_config().ngram_range == (1, 1)
        assert config.inference_layout.current_role == 4
        assert config.train_layout == TRAIN_LAYOUT
        assert config.prediction.top_n == 5

    def test_repository_config_file(self):
        config = load_config(Path(__file__).parent.parent / "pipeline_config.yml")
        assert config.train_layout == TRAIN_LAYOUT
        assert config.inference_layout == INFERENCE_LAYOUT

    def test_empty_file(self, tmp_path):
        config_path = tmp_path / "empty.yml"
        config_path.write_text("")
        assert load_config(config_path).model == PipelineConfig().model

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "absent.yml")

    @pytest.mark.parametrize(
        "data",
        [
            {"model": {"n_trees": 0}},
            {"features": {"fields": ["surname"]}},
            {"features": {"ngram_min": 2, "ngram_max": 1}},
            {"layouts": {"train": {"person_id": 1, "current_role": 4, "country": 5, "industry": 6}}},
            {"prediction": {"top_n": 0}},
        ],
    )
    def test_validation(self, data):
        with pytest.raises(pydantic.ValidationError):
            PipelineConfig.model_validate(data)

    def test_frozen(self):
        config = get_default_config()
        with pytest.raises(pydantic.ValidationError):
            config.prediction.top_n = 3
