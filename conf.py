"""
Skuman Settings.

Supports two formats (dict takes priority):

    # Option 1: Dict
    SKUMAN = {
        "MAX_SEQUENCE": 999,
        "SEQUENCE_BACKEND": "skuman.adapters.sequence.DatabaseSequenceBackend",
    }

    # Option 2: Flat
    SKUMAN_MAX_SEQUENCE = 999
    SKUMAN_SEQUENCE_BACKEND = "skuman.adapters.sequence.DatabaseSequenceBackend"

All settings have defaults, so zero configuration is required.
"""

import logging
import threading

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured
from django.utils.module_loading import import_string

logger = logging.getLogger(__name__)


# ── Defaults ──

DEFAULTS = {
    "SEGMENT_WIDTHS": {
        "product_type": 1,
        "category": 2,
        "subcategory": 1,
        "size": 2,
        "color": 2,
        "season": 1,
    },
    "SEQUENCE_WIDTH": 3,
    "MAX_SEQUENCE": 999,
    "CATALOG_BACKEND": "skuman.adapters.catalog.ModelCatalogBackend",
    "SEQUENCE_BACKEND": "skuman.adapters.sequence.DatabaseSequenceBackend",
}


# ── Accessors ──

_sentinel = object()


def get_setting(name, default=_sentinel):
    """
    Get a skuman setting.

    Looks up in order:
    1. SKUMAN dict (e.g. SKUMAN = {"MAX_SEQUENCE": 999})
    2. Flat setting (e.g. SKUMAN_MAX_SEQUENCE = 999)
    3. DEFAULTS
    """
    skuman_dict = getattr(settings, "SKUMAN", {})
    if name in skuman_dict:
        return skuman_dict[name]

    flat_value = getattr(settings, f"SKUMAN_{name}", _sentinel)
    if flat_value is not _sentinel:
        return flat_value

    if default is not _sentinel:
        return default

    return DEFAULTS.get(name)


def get_layout():
    """
    Build the SkuLayout described by the current settings.

    Widths may be overridden per dimension; dimensions missing from the
    override keep their default width.
    """
    from skuman.codec import SkuLayout

    widths = {**DEFAULTS["SEGMENT_WIDTHS"], **get_setting("SEGMENT_WIDTHS")}
    return SkuLayout(
        widths=tuple(widths[name] for name in DEFAULTS["SEGMENT_WIDTHS"]),
        sequence_width=get_setting("SEQUENCE_WIDTH"),
        max_sequence=get_setting("MAX_SEQUENCE"),
    )


# ── Backends ──

_backend_lock = threading.Lock()
_backend_instances = {}


def _load_backend(setting_name):
    """
    Return the cached backend instance configured under `setting_name`.

    Raises:
        ImproperlyConfigured: If the setting is empty or the import fails
    """
    instance = _backend_instances.get(setting_name)
    if instance is not None:
        return instance

    with _backend_lock:
        instance = _backend_instances.get(setting_name)
        if instance is None:  # double-checked
            path = get_setting(setting_name)
            if not path:
                raise ImproperlyConfigured(
                    f"SKUMAN['{setting_name}'] must be configured. "
                    f"Example: '{DEFAULTS[setting_name]}'"
                )
            try:
                instance = import_string(path)()
            except ImportError as e:
                raise ImproperlyConfigured(
                    f"Failed to import {setting_name.lower()} '{path}': {e}"
                ) from e
            _backend_instances[setting_name] = instance
            logger.debug("Loaded %s: %s", setting_name.lower(), path)

    return instance


def get_catalog_backend():
    """Return the configured CatalogBackend instance."""
    return _load_backend("CATALOG_BACKEND")


def get_sequence_backend():
    """Return the configured SequenceBackend instance."""
    return _load_backend("SEQUENCE_BACKEND")


def reset_backends() -> None:
    """Reset cached backends (for tests)."""
    with _backend_lock:
        _backend_instances.clear()
