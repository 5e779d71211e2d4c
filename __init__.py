"""
CKD XGBoost Classifier Package

This package trains a gradient-boosted tree classifier on the chronic kidney disease dataset.
It includes data ingestion, cleaning, encoding, splitting, training, evaluation and plotting components.
"""

__version__ = "0.1.0"
