"""Utility modules: configuration, constants, validation and data loading."""
