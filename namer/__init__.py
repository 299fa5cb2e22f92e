"""
Deterministic Name Shortener

Length-bounded, collision-resistant names for generated cluster objects.
"""

from .core import (
    DNS1123_LABEL_MAX_LENGTH,
    DNS1123_SUBDOMAIN_MAX_LENGTH,
    NameLengthError,
    compose_name,
    digest,
    limit_length,
    pod_name,
)

__version__ = "0.1.0"

__all__ = [
    "DNS1123_LABEL_MAX_LENGTH",
    "DNS1123_SUBDOMAIN_MAX_LENGTH",
    "NameLengthError",
    "compose_name",
    "digest",
    "limit_length",
    "pod_name",
]
