"""Input-layer public API for key decoding and key dispatch tables."""

from .reader import ESC_SEQUENCE_TIMEOUT_MS, _PENDING_BYTES, read_key
from .key_registry import KeyBinding, KeyRegistry

__all__ = [
    "read_key",
    "_PENDING_BYTES",
    "ESC_SEQUENCE_TIMEOUT_MS",
    "KeyBinding",
    "KeyRegistry",
]
