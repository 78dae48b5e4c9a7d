"""Manage project folders, their metadata, archives, presets and tag IDs."""

__version__ = "0.1.0"