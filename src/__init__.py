"""
Core modules for the CKD XGBoost Classifier

Plain functions and classes used by the ZenML steps; none of them depend on ZenML.
"""
