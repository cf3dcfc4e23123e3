"""Application configuration, CLI, and environment settings."""
