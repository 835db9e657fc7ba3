"""
Django Skuman - Structured SKU codes for a children's clothing catalog.

Every product gets a 12-digit code built from its six classifications plus
a per-combination sequence, and any code decodes back into them.

Usage:
    from skuman import sku, SkuError

    try:
        code = sku.generate("1", "10", "1", "02", "05", "1")
    except SkuError as e:
        print(e.code, e.details)
    else:
        print(f"Created: {code}")  # 110102051001

    decoded = sku.decode("110102051001")
    print(decoded.size, decoded.color, decoded.sequence)  # 02 05 1
"""

from skuman.exceptions import SkuError


def __getattr__(name):
    """Lazy import to avoid AppRegistryNotReady errors."""
    if name == "sku":
        from skuman.service import sku

        return sku
    if name == "SkuGenerator":
        from skuman.service import SkuGenerator

        return SkuGenerator
    if name == "DecodedSku":
        from skuman.codec import DecodedSku

        return DecodedSku
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = ["sku", "SkuGenerator", "DecodedSku", "SkuError"]
__version__ = "0.1.0"
