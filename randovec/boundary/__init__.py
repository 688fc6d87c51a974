"""Boundary layer: adapters for external systems."""
