"""Use cases for the restoration feature."""
