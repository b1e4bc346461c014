"""Adapters - Infrastructure implementations of the domain ports."""
