"""Classifier, trained model and model persistence."""

from .boosted_trees import BoostedTreeClassifier
from .outreach_model import OutreachModel, labels_of
from .model_store import save_model, load_model, FORMAT_VERSION

__all__ = [
    "BoostedTreeClassifier",
    "OutreachModel",
    "labels_of",
    "save_model",
    "load_model",
    "FORMAT_VERSION",
]
