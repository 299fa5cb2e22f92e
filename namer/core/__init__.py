"""
Core naming primitives.

This module provides the pure functions used to derive bounded names:
- Hashing: FNV-1a digest of a name
- Names: compose and shorten names within a maximum length
- Errors: precondition violations
"""

from .hashing import DIGEST_LENGTH, digest, fnv1a_32
from .names import (
    DIGEST_OVERHEAD,
    DNS1123_LABEL_MAX_LENGTH,
    DNS1123_SUBDOMAIN_MAX_LENGTH,
    SEPARATOR,
    SUFFIXLESS_OVERHEAD,
    compose_name,
    limit_length,
    pod_name,
)
from .errors import NameLengthError

__all__ = [
    "DIGEST_LENGTH",
    "DIGEST_OVERHEAD",
    "DNS1123_LABEL_MAX_LENGTH",
    "DNS1123_SUBDOMAIN_MAX_LENGTH",
    "SEPARATOR",
    "SUFFIXLESS_OVERHEAD",
    "NameLengthError",
    "compose_name",
    "digest",
    "fnv1a_32",
    "limit_length",
    "pod_name",
]
