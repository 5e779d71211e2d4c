"""
Pipelines package for the CKD XGBoost Classifier

This package contains ZenML pipelines for the CKD XGBoost Classifier project.
"""

# Import pipelines for easier access
from pipelines.training_pipeline import train_pipeline

__all__ = [
    'train_pipeline'
]
