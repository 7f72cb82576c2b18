"""Core domain: models, interfaces, services and estimation."""
