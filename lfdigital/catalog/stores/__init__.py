"""Catalog store implementations."""

from lfdigital.catalog.stores.inmemory import InMemoryCatalogStore

__all__ = ["InMemoryCatalogStore"]
