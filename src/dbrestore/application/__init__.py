"""Application services wiring features to configuration."""
