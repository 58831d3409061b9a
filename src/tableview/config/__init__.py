"""Configuration – env-based settings and their validation errors."""
