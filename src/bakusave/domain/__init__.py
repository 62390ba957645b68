"""Domain models for decoded save data."""
