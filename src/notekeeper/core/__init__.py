"""Core domain: models, stores, services and schemas."""
