"""Core configuration and logging for the translation resolver."""
