"""
Skuman Signals.

Persistence of products happens outside skuman; collaborators listen here.

Signals:
    sku_generated: A new SKU was issued and its sequence consumed
"""

from django.dispatch import Signal

# New SKU issued
# Sent by SkuGenerator.generate() after encoding
# Args: code (12-digit string), decoded (DecodedSku)
sku_generated = Signal()

__all__ = ["sku_generated"]
