"""Configuration, logging and formatting helpers for notion-cli."""
