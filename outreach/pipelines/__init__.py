"""Pipeline implementations for outreach ranking."""

from .config import (
    PipelineConfig,
    PathsConfig,
    ModelHyperparamsConfig,
    FeaturesConfig,
    ColumnLayoutConfig,
    LayoutsConfig,
    PredictionConfig,
    load_config,
    get_default_config,
)
from .training import (
    TrainingPipeline,
    load_training_data,
)
from .evaluation import (
    EvaluationPipeline,
    evaluate,
)
from .prediction import (
    BatchPredictionPipeline,
    predict_batch,
    select_top_matches,
    write_person_ids,
    load_inference_data,
)
from .workflow import (
    WorkflowResult,
    run_training,
    run_evaluation,
    run_prediction,
    run_pipeline,
    run_pipeline_from_config,
)

__all__ = [
    # Config
    "PipelineConfig",
    "PathsConfig",
    "ModelHyperparamsConfig",
    "FeaturesConfig",
    "ColumnLayoutConfig",
    "LayoutsConfig",
    "PredictionConfig",
    "load_config",
    "get_default_config",
    # Training
    "TrainingPipeline",
    "load_training_data",
    # Evaluation
    "EvaluationPipeline",
    "evaluate",
    # Prediction
    "BatchPredictionPipeline",
    "predict_batch",
    "select_top_matches",
    "write_person_ids",
    "load_inference_data",
    # Workflows
    "WorkflowResult",
    "run_training",
    "run_evaluation",
    "run_prediction",
    "run_pipeline",
    "run_pipeline_from_config",
]
