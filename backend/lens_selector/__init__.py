"""Lens Selector — read-only lookup service for lens documents."""

__version__ = "1.0.0"
