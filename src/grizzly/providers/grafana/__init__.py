"""Grafana API providers."""
