"""
Skuman Adapters.

Implementations of protocols for catalog and sequence storage.
Model-backed adapters use lazy imports, so importing this package does not
require the app registry to be ready.
"""

from skuman.adapters.catalog import InMemoryCatalogBackend, ModelCatalogBackend
from skuman.adapters.sequence import DatabaseSequenceBackend, LocalSequenceBackend

__all__ = [
    # Catalog adapters
    "ModelCatalogBackend",
    "InMemoryCatalogBackend",
    # Sequence adapters
    "DatabaseSequenceBackend",
    "LocalSequenceBackend",
]
