"""Core Berth infrastructure: configuration, logging and workspace access."""
