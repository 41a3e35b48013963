"""Hierarchical navigation menus with active-path resolution for Django."""

__version__ = "1.0.0"
