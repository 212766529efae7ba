"""Adapters layer - Concrete implementations of ports."""
