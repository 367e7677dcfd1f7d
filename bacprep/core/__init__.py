"""Configuration, errors and AI agents."""
