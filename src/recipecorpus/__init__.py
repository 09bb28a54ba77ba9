"""Recipe corpus import and ingredient canonicalization."""

__version__ = "0.1.0"
