"""FastAPI presentation layer for the dashboard read models."""
