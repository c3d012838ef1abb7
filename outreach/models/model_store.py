"""Persistence of trained outreach models as a single zip artifact.

Archive members:
    - manifest.json: format marker, hyperparameters and feature names
    - booster.ubj: XGBoost booster in binary JSON
    - featurizer.pkl: fitted profile feature engineer
"""

from dataclasses import asdict
import json
from pathlib import Path
import pickle
import zipfile

import xgboost as xgb
from loguru import logger

from outreach.domain.entities import ModelConfig
from outreach.domain.errors import ModelFormatError
from outreach.features.profile_features import ProfileFeatureEngineer
from outreach.models.boosted_trees import BoostedTreeClassifier
from outreach.models.outreach_model import OutreachModel


FORMAT_NAME = "outreach-model"
FORMAT_VERSION = 1

MANIFEST_MEMBER = "manifest.json"
BOOSTER_MEMBER = "booster.ubj"
FEATURIZER_MEMBER = "featurizer.pkl"


def save_model(model: OutreachModel, path: Path | str) -> Path:
    """Write ``model`` to ``path``, replacing any existing file.

    Raises:
        RuntimeError: If the model has not been fitted
        OSError: If the artifact cannot be written
    """
    if not model.is_fitted:
        raise RuntimeError("Cannot save unfitted model")

    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    manifest = {
        "format": FORMAT_NAME,
        "format_version": FORMAT_VERSION,
        "model_name": model.model_name,
        "threshold": model.threshold,
        "config": asdict(model.classifier.config),
        "feature_names": model.feature_engineer.get_feature_columns(),
    }

    with zipfile.ZipFile(path, "w", compression=zipfile.ZIP_DEFLATED) as archive:
        archive.writestr(MANIFEST_MEMBER, json.dumps(manifest, indent=2))
        archive.writestr(BOOSTER_MEMBER, model.classifier.to_bytes())
        archive.writestr(FEATURIZER_MEMBER, model.feature_engineer.to_bytes())

    logger.info("The model is saved to {}", path)
    return path


def load_model(path: Path | str) -> OutreachModel:
    """Load a model written by ``save_model``.

    Raises:
        FileNotFoundError: If ``path`` does not exist
        ModelFormatError: If the file is not a compatible model artifact
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Model file not found: {path}")

    try:
        with zipfile.ZipFile(path, "r") as archive:
            manifest = json.loads(archive.read(MANIFEST_MEMBER))
            _check_manifest(manifest, path)
            booster_bytes = archive.read(BOOSTER_MEMBER)
            featurizer_bytes = archive.read(FEATURIZER_MEMBER)
    except zipfile.BadZipFile as e:
        raise ModelFormatError(f"{path} is not a model archive: {e}") from e
    except KeyError as e:
        raise ModelFormatError(f"{path} is missing archive member {e}") from e
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise ModelFormatError(f"{path} has an unreadable manifest: {e}") from e

    try:
        feature_engineer = ProfileFeatureEngineer.from_bytes(featurizer_bytes)
        classifier = BoostedTreeClassifier.from_bytes(
            booster_bytes,
            config=ModelConfig(**manifest["config"]),
            feature_names=manifest.get("feature_names"),
        )
    except (pickle.UnpicklingError, xgb.core.XGBoostError, KeyError, TypeError) as e:
        raise ModelFormatError(f"{path} holds a corrupt model: {e}") from e

    logger.info("Loaded model {} from {}", manifest.get("model_name"), path)
    return OutreachModel(
        feature_engineer=feature_engineer,
        classifier=classifier,
        threshold=manifest.get("threshold", 0.5),
    )


def _check_manifest(manifest: dict, path: Path) -> None:
    if not isinstance(manifest, dict):
        raise ModelFormatError(f"{path} has a manifest that is not a JSON object")

    if manifest.get("format") != FORMAT_NAME:
        raise ModelFormatError(f"{path} is not an outreach model artifact")

    version = manifest.get("format_version")
    if version != FORMAT_VERSION:
        raise ModelFormatError(
            f"{path} has format version {version}, expected {FORMAT_VERSION}"
        )
