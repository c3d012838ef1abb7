"""Shared fixtures for outreach tests."""

from pathlib import Path

import pytest

from outreach.domain.entities import ModelConfig, Profile
from outreach.models.outreach_model import OutreachModel
from outreach.pipelines.training import TrainingPipeline


# Labeled layout: label|person_id|first_name|last_name|role|country|industry
TRAIN_LINES = [
    "1|p1|Ada|Lovelace|Software Engineer|USA|Software",
    "1|p2|Alan|Turing|Backend Developer|Canada|Software",
    "0|p3|Bob|Smith|Sales Manager|Brazil|Retail",
    "0|p4|Carol|Jones|Store Clerk|Mexico|Retail",
]

# Inference layout: person_id|first_name|last_name|role|country|industry
INFERENCE_LINES = [
    "q1|Grace|Hopper|Software Engineer|USA|Software",
    "q2|Dan|Brown|Sales Manager|Brazil|Retail",
    "q3|Eve|White|Store Clerk|Mexico|Retail",
]

# The default min_samples_per_leaf of 20 leaves a four-row set unsplit,
# so the default model is a constant predictor there. One sample per leaf
# lets the toy set be separated.
TOY_MODEL_CONFIG = ModelConfig(n_trees=20, max_leaves=8, min_samples_per_leaf=1)


def write_lines(path: Path, lines: list[str]) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path


@pytest.fixture
def train_profiles() -> list[Profile]:
    return [
        Profile("p1", "Software Engineer", "USA", "Software", True),
        Profile("p2", "Backend Developer", "Canada", "Software", True),
        Profile("p3", "Sales Manager", "Brazil", "Retail", False),
        Profile("p4", "Store Clerk", "Mexico", "Retail", False),
    ]


@pytest.fixture
def inference_profiles() -> list[Profile]:
    return [
        Profile("q1", "Software Engineer", "USA", "Software"),
        Profile("q2", "Sales Manager", "Brazil", "Retail"),
        Profile("q3", "Store Clerk", "Mexico", "Retail"),
    ]


@pytest.fixture
def trained_model(train_profiles) -> OutreachModel:
    return TrainingPipeline(model_config=TOY_MODEL_CONFIG).run(train_profiles)


@pytest.fixture
def data_dir(tmp_path) -> Path:
    """Directory holding the three input files of a full run."""
    data = tmp_path / "data"
    write_lines(data / "people-train.in", TRAIN_LINES)
    write_lines(data / "people-test.in", TRAIN_LINES)
    write_lines(data / "people.in", INFERENCE_LINES)
    return data
