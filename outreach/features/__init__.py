"""Featurization of profile text fields."""

from .profile_features import ProfileFeatureEngineer

__all__ = ["ProfileFeatureEngineer"]
