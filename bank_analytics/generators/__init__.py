"""Synthetic data generators for the case-study tables."""
