"""Core package: application configuration."""
