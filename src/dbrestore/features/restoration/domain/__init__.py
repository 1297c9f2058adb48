"""Domain types for database restoration."""
