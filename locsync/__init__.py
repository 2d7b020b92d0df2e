"""locsync - batch translation of app-store string catalogs with LLM providers."""

__version__ = "0.1.0"
