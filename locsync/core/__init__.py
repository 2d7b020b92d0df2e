"""Core translation and provider logic."""
