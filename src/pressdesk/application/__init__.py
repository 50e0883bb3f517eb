"""Application layer: read models, ports, services and queries."""
