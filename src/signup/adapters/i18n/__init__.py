"""Translation adapters - Message table implementations."""

from .catalog import JsonTranslationCatalog

__all__ = ["JsonTranslationCatalog"]
