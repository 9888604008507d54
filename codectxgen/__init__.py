"""Code context helpers and a pattern-based source security scanner."""

__version__ = "1.0.0"