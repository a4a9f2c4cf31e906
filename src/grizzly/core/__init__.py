"""Reconciliation pipeline."""
