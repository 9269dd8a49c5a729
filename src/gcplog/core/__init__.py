"""Core domain: models, ports and pure functions used by the handler."""
