"""Cortex/Mimir ruler providers."""
