"""Utility module of the CKD XGBoost classifier
contain functions commonly used in different steps of the pipeline"""

import os
import copy
import json
import yaml
import logging
from pathlib import Path
from typing import Dict, Any, Optional, Union
from dotenv import load_dotenv

# Set up logging
logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path(__file__).parent / "default_experiment_config.yml"

# Fallback used when the YAML file cannot be loaded
EXPERIMENT_DEFAULTS: Dict[str, Any] = {
    "data_path": "data/kidney_disease.csv",
    "id_column": "id",
    "label_column": "classification",
    "positive_label": "ckd",
    "negative_label": "notckd",
    "numeric_text_columns": ["pcv", "wc", "rc"],
    "strip_whitespace": True,
    "random_seed": 42,
    "train_fraction": 0.7,
    "num_boost_round": 10,
    "xgb_params": {
        "objective": "binary:logistic",
        "eta": 0.3,
        "max_depth": 6,
        "eval_metric": "error",
    },
    "output_path": "results",
    "plots": {
        "importance_top_n": 20,
        "dpi": 300,
    },
}

# Environment variable -> (config key, type)
ENV_OVERRIDES = {
    "CKD_DATA_PATH": ("data_path", str),
    "RANDOM_SEED": ("random_seed", int),
    "TRAIN_FRACTION": ("train_fraction", float),
    "NUM_BOOST_ROUND": ("num_boost_round", int),
    "OUTPUT_PATH": ("output_path", str),
}


def load_yaml_file(file_path: Union[str, Path], default: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """
    Load a YAML file and return its contents.

    Args:
        file_path: Path to the YAML file (can be string or Path object)
        default: Default value to return if the file cannot be loaded (default: empty dict)

    Returns:
        Dictionary containing the YAML file contents, or the default value if loading fails
    """
    if default is None:
        default = {}

    path = Path(file_path)

    if not path.exists():
        logger.warning(f"YAML file not found: {path}")
        return default

    with open(path, 'r') as file:
        data = yaml.safe_load(file)

    # Check if data is None (empty file)
    if data is None:
        logger.warning(f"YAML file is empty: {path}")
        return default

    return data


def _merge_dicts(base: Dict[str, Any], update: Dict[str, Any]) -> Dict[str, Any]:
    """Recursively merge update into a copy of base."""
    merged = copy.deepcopy(base)
    for key, value in update.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge_dicts(merged[key], value)
        else:
            merged[key] = value
    return merged


def load_experiment_config(config_path: Optional[Union[str, Path]] = None, **overrides: Any) -> Dict[str, Any]:
    """
    Build the experiment configuration.

    Values are resolved in this order, later ones winning:
    built-in defaults, the YAML file, environment variables (a .env file is honoured),
    and finally keyword overrides that are not None.

    Args:
        config_path: Path to a YAML config file (default: src/default_experiment_config.yml)
        **overrides: Top-level config keys to override, e.g. data_path="data/ckd.csv"

    Returns:
        Dictionary with the resolved configuration
    """
    load_dotenv()

    if config_path is None:
        config_path = DEFAULT_CONFIG_PATH

    config = _merge_dicts(EXPERIMENT_DEFAULTS, load_yaml_file(config_path))

    for env_name, (key, cast) in ENV_OVERRIDES.items():
        raw_value = os.getenv(env_name)
        if raw_value is None:
            continue
        try:
            config[key] = cast(raw_value)
            logger.info(f"Using {key} from environment ({env_name}): {config[key]}")
        except (ValueError, TypeError):
            logger.warning(f"Ignoring invalid value for {env_name}: {raw_value!r}")

    for key, value in overrides.items():
        if value is not None:
            config[key] = value

    return config


def ensure_output_dir(output_path: Union[str, Path]) -> Path:
    """
    Resolve the output directory against the working directory and create it.

    Args:
        output_path: Absolute or relative output directory

    Returns:
        Absolute Path of the created directory
    """
    output_path = Path(output_path)
    if not output_path.is_absolute():
        output_path = Path(os.getcwd()) / output_path
    output_path.mkdir(parents=True, exist_ok=True)
    return output_path


def save_json_file(file_path: Union[str, Path], data: Any) -> Path:
    """Save data to a JSON file, creating parent directories as needed."""
    path = Path(file_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, 'w') as file:
        json.dump(data, file, indent=2, default=str)
    return path
