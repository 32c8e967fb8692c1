"""Adapters – third-party integrations (HTTP)."""
