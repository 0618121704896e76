"""Boundary adapters to external systems."""
