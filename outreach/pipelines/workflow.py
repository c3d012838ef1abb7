"""End-to-end workflows tying the pipelines together.

The full run is strictly linear:
load train data, fit, evaluate, persist, load model, load inference
data, predict, filter/sort/truncate, write.
"""

from dataclasses import dataclass
from pathlib import Path

from loguru import logger

from outreach.domain.entities import EvaluationResult, Profile, ScoredProfile
from outreach.models.model_store import load_model, save_model
from outreach.models.outreach_model import OutreachModel
from outreach.pipelines.config import PipelineConfig, get_default_config, load_config
from outreach.pipelines.evaluation import EvaluationPipeline
from outreach.pipelines.prediction import BatchPredictionPipeline, load_inference_data
from outreach.pipelines.training import TrainingPipeline, load_training_data


@dataclass
class WorkflowResult:
    """Everything produced by a full run."""
    model: OutreachModel
    evaluation: EvaluationResult
    matches: list[ScoredProfile]
    model_path: Path
    output_path: Path


def run_training(config: PipelineConfig) -> tuple[OutreachModel, EvaluationResult]:
    """Train on the train file, evaluate on the test file and save the model."""
    train_profiles = load_training_data(config.paths.train_path, config.train_layout)

    model = TrainingPipeline(
        model_config=config.to_domain_model_config(),
        feature_config=config.to_domain_feature_config(),
        threshold=config.prediction.threshold,
    ).run(train_profiles)

    evaluation = run_evaluation(config, model, train_profiles)

    save_model(model, config.paths.model_path)
    return model, evaluation


def run_evaluation(
    config: PipelineConfig,
    model: OutreachModel | None = None,
    train_profiles: list[Profile] | None = None,
) -> EvaluationResult:
    """Evaluate ``model`` (or the saved model) on the test file.

    With ``train_profiles`` the report also shows a constant-predictor baseline.
    """
    if model is None:
        model = load_model(config.paths.model_path)

    test_profiles = load_training_data(config.paths.test_path, config.train_layout)
    pipeline = EvaluationPipeline(model)
    result = pipeline.run(test_profiles, train_profiles=train_profiles)
    print(pipeline.generate_report(result))
    return result


def run_prediction(config: PipelineConfig) -> list[ScoredProfile]:
    """Load the saved model and write the top matches of the inference file."""
    model = load_model(config.paths.model_path)
    profiles = load_inference_data(config.paths.inference_path, config.inference_layout)

    return BatchPredictionPipeline(
        model=model,
        top_n=config.prediction.top_n,
    ).run(profiles, config.paths.output_path)


def run_pipeline(config: PipelineConfig | None = None) -> WorkflowResult:
    """Run every stage in order; any failure after row parsing is fatal."""
    if config is None:
        config = get_default_config()

    logger.info("Data directory: {}", config.paths.data_dir)
    model, evaluation = run_training(config)
    matches = run_prediction(config)

    return WorkflowResult(
        model=model,
        evaluation=evaluation,
        matches=matches,
        model_path=config.paths.model_path,
        output_path=config.paths.output_path,
    )


def run_pipeline_from_config(config_path: Path | str = "pipeline_config.yml") -> WorkflowResult:
    """Run the full pipeline using configuration from a YAML file."""
    return run_pipeline(load_config(config_path))
