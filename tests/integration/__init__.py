"""Integration tests for recipecorpus.

These tests generate recipe CSV files on disk and run the whole import,
from the CSV reader to the exported JSON corpus.

Run with: pytest tests/integration/ -v
Skip with: pytest -m "not integration"
"""
