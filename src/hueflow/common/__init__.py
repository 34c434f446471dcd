"""Ambient helpers shared across hueflow: env parsing, config, settings, logging."""
