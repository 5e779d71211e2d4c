"""
Training Pipeline for the CKD XGBoost Classifier

This module defines the ZenML pipeline for training and evaluating the CKD classifier.
"""

from zenml.pipelines import pipeline
from typing import Optional


@pipeline(enable_cache=True)
def train_pipeline(
    config_path: Optional[str] = None,
    data_path: Optional[str] = None,
    output_path: Optional[str] = None
):
    """
    Pipeline for training the CKD classifier.

    This pipeline connects the following steps:
    1. ingest_data: Loads the CKD CSV file
    2. clean_data: Coerces pcv/wc/rc to numbers and drops the identifier column
    3. shuffle_data: Permutes rows with a fixed seed
    4. encode_features: Separates the label and full-rank one-hot encodes the features
    5. split_data: Splits rows 70/30 into training and test sets
    6. train_model: Trains an XGBoost booster (binary:logistic)
    7. eval_model: Reports the held-out misclassification rate
    8. plot_model: Renders the multi-tree diagram and feature importance chart
    9. model_export: Saves the booster, feature names and metrics

    Args:
        config_path: Experiment config YAML (default: src/default_experiment_config.yml)
        data_path: Overrides the CSV path from the config
        output_path: Overrides the output directory from the config
    """
    # Import utility function for loading the experiment configuration
    from src.util import load_experiment_config

    config = load_experiment_config(config_path, data_path=data_path, output_path=output_path)
    print(f"Using data file: {config['data_path']}")
    print(f"Writing results to: {config['output_path']}")

    # Import steps here to avoid circular imports
    from steps.ingest_data import ingest_data
    from steps.clean_data import clean_data
    from steps.shuffle_data import shuffle_data
    from steps.encode_features import encode_features
    from steps.split_data import split_data
    from steps.model_train import train_model
    from steps.model_eval import eval_model
    from steps.plot_model import plot_model
    from steps.model_export import model_export

    raw_df = ingest_data(data_path=config["data_path"])

    clean_df = clean_data(
        raw_df=raw_df,
        numeric_text_columns=config["numeric_text_columns"],
        id_column=config["id_column"],
        strip_whitespace=config["strip_whitespace"]
    )

    shuffled_df = shuffle_data(clean_df=clean_df, random_seed=config["random_seed"])

    features, labels = encode_features(
        shuffled_df=shuffled_df,
        label_column=config["label_column"],
        positive_label=config["positive_label"],
        negative_label=config["negative_label"]
    )

    X_train, y_train, X_test, y_test = split_data(
        features=features,
        labels=labels,
        train_fraction=config["train_fraction"]
    )

    booster = train_model(
        X_train=X_train,
        y_train=y_train,
        num_boost_round=config["num_boost_round"],
        xgb_params=config["xgb_params"],
        random_seed=config["random_seed"]
    )

    metrics = eval_model(booster=booster, X_test=X_test, y_test=y_test)

    plot_model(
        booster=booster,
        output_path=config["output_path"],
        importance_top_n=config["plots"]["importance_top_n"],
        dpi=config["plots"]["dpi"]
    )

    model_export(booster=booster, metrics=metrics, output_dir=config["output_path"])
