"""Concrete adapters for restoration ports."""
