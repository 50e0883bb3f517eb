"""Data transfer objects (read models) for the presentation layer."""
