"""API-level models."""
