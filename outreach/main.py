"""Main entry point for the outreach ranking pipeline.

Provides CLI interface for running training, evaluation and prediction.

Usage:
    # Full run: train, evaluate, save, reload, predict, write people.out
    python -m outreach.main run --config pipeline_config.yml

    # Training with explicit data directory and overrides
    python -m outreach.main train --data-dir ./data --n-trees 100

    # Evaluate the saved model on the test file
    python -m outreach.main evaluate --config pipeline_config.yml

    # Rank the inference file with the saved model
    python -m outreach.main predict --config pipeline_config.yml --top-n 50
"""

import argparse
from pathlib import Path

from outreach.logging_setup import setup_logging
from outreach.pipelines.config import PipelineConfig, get_default_config, load_config
from outreach.pipelines.workflow import (
    run_evaluation,
    run_pipeline,
    run_prediction,
    run_training,
)


def _load_pipeline_config(args: argparse.Namespace) -> PipelineConfig:
    """Load pipeline config from file or defaults, then apply CLI overrides."""
    config = load_config(args.config) if args.config else get_default_config()

    path_overrides = {}
    if args.data_dir:
        path_overrides["data_dir"] = Path(args.data_dir)
    if args.model_file:
        path_overrides["model_file"] = Path(args.model_file)
    if getattr(args, "output_file", None):
        path_overrides["output_file"] = Path(args.output_file)

    model_overrides = {}
    for name in ("n_trees", "max_leaves", "min_samples_per_leaf", "learning_rate"):
        value = getattr(args, name, None)
        if value is not None:
            model_overrides[name] = value

    prediction_overrides = {}
    if getattr(args, "top_n", None) is not None:
        prediction_overrides["top_n"] = args.top_n

    # Round-trip through validation so CLI values get the same checks as YAML.
    data = config.model_dump()
    data["paths"].update(path_overrides)
    data["model"].update(model_overrides)
    data["prediction"].update(prediction_overrides)
    return PipelineConfig.model_validate(data)


def run(args: argparse.Namespace) -> None:
    """Run the whole pipeline."""
    config = _load_pipeline_config(args)
    result = run_pipeline(config)

    print("\n" + "=" * 60)
    print("RUN COMPLETE")
    print("=" * 60)
    print(result.evaluation.summary())
    print(f"\nModel saved to: {result.model_path}")
    print(f"Matches written: {len(result.matches)} -> {result.output_path}")


def train(args: argparse.Namespace) -> None:
    """Run the training pipeline."""
    config = _load_pipeline_config(args)
    _, evaluation = run_training(config)

    print("\n" + "=" * 60)
    print("TRAINING COMPLETE")
    print("=" * 60)
    print(evaluation.summary())
    print(f"\nModel saved to: {config.paths.model_path}")


def evaluate(args: argparse.Namespace) -> None:
    """Run evaluation of the saved model on the test file."""
    config = _load_pipeline_config(args)
    print(f"Loading model from {config.paths.model_path}")
    run_evaluation(config)


def predict(args: argparse.Namespace) -> None:
    """Rank the inference file with the saved model."""
    config = _load_pipeline_config(args)
    matches = run_prediction(config)

    print("\n" + "=" * 60)
    print("PREDICTION RESULT")
    print("=" * 60)
    print(f"Matches written: {len(matches)} -> {config.paths.output_path}")


def _add_common_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--config", type=str, help="Path to YAML config file")
    parser.add_argument("--data-dir", type=str, help="Path to data directory (overrides config)")
    parser.add_argument("--model-file", type=str, help="Model artifact path (overrides config)")
    parser.add_argument("--log-level", type=str, default="INFO", help="Logging level")
    parser.add_argument("--log-file", type=str, help="Also write DEBUG logs to this file")


def _add_training_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--n-trees", type=int, help="Number of boosted trees (overrides config)")
    parser.add_argument("--max-leaves", type=int, help="Leaves per tree (overrides config)")
    parser.add_argument("--min-samples-per-leaf", type=int, help="Minimum samples per leaf (overrides config)")
    parser.add_argument("--learning-rate", type=float, help="Learning rate (overrides config)")


def _add_prediction_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--output-file", type=str, help="Output file for matches (overrides config)")
    parser.add_argument("--top-n", type=int, help="Maximum number of matches written (overrides config)")


def main(argv: list[str] | None = None) -> None:
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Outreach Ranking Pipeline")
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    run_parser = subparsers.add_parser("run", help="Train, evaluate, save, then rank new profiles")
    _add_common_arguments(run_parser)
    _add_training_arguments(run_parser)
    _add_prediction_arguments(run_parser)

    train_parser = subparsers.add_parser("train", help="Train, evaluate and save a new model")
    _add_common_arguments(train_parser)
    _add_training_arguments(train_parser)

    eval_parser = subparsers.add_parser("evaluate", help="Evaluate the saved model")
    _add_common_arguments(eval_parser)

    predict_parser = subparsers.add_parser("predict", help="Rank profiles with the saved model")
    _add_common_arguments(predict_parser)
    _add_prediction_arguments(predict_parser)

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return

    setup_logging(args.log_level.upper(), Path(args.log_file) if args.log_file else None)

    if args.command == "run":
        run(args)
    elif args.command == "train":
        train(args)
    elif args.command == "evaluate":
        evaluate(args)
    elif args.command == "predict":
        predict(args)


if __name__ == "__main__":
    main()
