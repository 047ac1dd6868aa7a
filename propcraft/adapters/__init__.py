"""Adapters connecting propcraft to its runtime environment."""
