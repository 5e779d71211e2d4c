"""
Script to run the CKD XGBoost training pipeline.
"""

import argparse
import logging

from pipelines.training_pipeline import train_pipeline


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Train an XGBoost classifier for chronic kidney disease")
    parser.add_argument("--config", default=None,
                        help="Experiment config YAML (default: src/default_experiment_config.yml)")
    parser.add_argument("--data-path", default=None, help="CSV file to train on")
    parser.add_argument("--output-path", default=None, help="Directory for plots and exported model")
    parser.add_argument("--no-cache", action="store_true", help="Disable ZenML step caching")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)

    # Set up logging
    logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')

    print("Starting CKD XGBoost training pipeline...")
    print("\n" + "=" * 60 + "\n")

    pipeline_instance = train_pipeline.with_options(enable_cache=not args.no_cache)
    pipeline_run = pipeline_instance(
        config_path=args.config,
        data_path=args.data_path,
        output_path=args.output_path
    )

    print("\nPipeline completed successfully!")
    if pipeline_run is not None:
        print(f"Run name: {pipeline_run.name}")


if __name__ == "__main__":
    main()
