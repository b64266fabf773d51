"""Utility helpers shared across sigsmooth."""
