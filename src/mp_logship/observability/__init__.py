"""Observability – diagnostic logging."""
