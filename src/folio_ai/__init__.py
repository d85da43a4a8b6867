"""Folio AI — provider fallback text generation for the developer portfolio."""

__version__ = "0.1.0"
