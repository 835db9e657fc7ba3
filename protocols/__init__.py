"""
Skuman Protocols.

Defines interfaces for external integrations.
"""

from skuman.protocols.catalog import CatalogBackend, CatalogEntry
from skuman.protocols.sequence import SequenceBackend

__all__ = [
    # Catalog Protocol
    "CatalogBackend",
    "CatalogEntry",
    # Sequence Protocol
    "SequenceBackend",
]
