"""Shared models, configuration and terminal output."""
