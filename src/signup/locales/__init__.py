"""Bundled translation tables (one ``<locale>.json`` per locale)."""
