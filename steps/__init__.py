"""
Steps package for the CKD XGBoost Classifier

This package contains ZenML steps for data processing, model training, evaluation and plotting.
"""

# Import steps for easier access
from steps.ingest_data import ingest_data
from steps.clean_data import clean_data
from steps.shuffle_data import shuffle_data
from steps.encode_features import encode_features
from steps.split_data import split_data
from steps.model_train import train_model
from steps.model_eval import eval_model
from steps.plot_model import plot_model
from steps.model_export import model_export

__all__ = [
    'ingest_data',
    'clean_data',
    'shuffle_data',
    'encode_features',
    'split_data',
    'train_model',
    'eval_model',
    'plot_model',
    'model_export'
]
