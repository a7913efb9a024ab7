"""Core pipeline: domain types, ports, services and use cases."""
