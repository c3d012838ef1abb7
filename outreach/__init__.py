"""Outreach ranker: train, evaluate and apply a profile outreach classifier."""

__version__ = "0.1.0"
