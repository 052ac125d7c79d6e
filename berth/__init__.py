"""Berth - scaffold and deploy containerized services."""

__version__ = "0.1.0"
