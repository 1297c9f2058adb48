"""Application service façades."""
