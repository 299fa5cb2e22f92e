"""
Length-bounded name composition.

Generated objects (build pods, derived resources) are named after the object
that owns them. The destination naming system caps name length, so long
names are truncated and a digest of the lost text is embedded to keep
similarly-prefixed names apart.

Every function here is pure: the same inputs always produce the same name,
so callers can regenerate a name instead of storing it.
"""

import logging

from .errors import NameLengthError
from .hashing import DIGEST_LENGTH, digest

logger = logging.getLogger(__name__)

SEPARATOR = "-"

# Budget reserved for "-<digest>-" and "-<digest>"
DIGEST_OVERHEAD = 2 * len(SEPARATOR) + DIGEST_LENGTH
SUFFIXLESS_OVERHEAD = len(SEPARATOR) + DIGEST_LENGTH

DNS1123_SUBDOMAIN_MAX_LENGTH = 253
DNS1123_LABEL_MAX_LENGTH = 63


def compose_name(base: str, suffix: str, max_length: int) -> str:
    """
    Join base and suffix with a dash, shortening to fit max_length.

    If "<base>-<suffix>" fits it is returned as is. Otherwise:
    - if the suffix leaves room, the base is truncated and the result is
      "<base prefix>-<digest(base)>-<suffix>"
    - if the suffix alone is too long, it is dropped and the result is
      "<base prefix>-<digest(base-suffix)>"

    Args:
        base: Name stem, e.g. "deployment-5"
        suffix: Role qualifier, e.g. "deploy"
        max_length: Upper bound on the returned length

    Returns:
        Name of at most max_length characters

    Raises:
        NameLengthError: max_length < 1, or the name needs shortening and
            max_length cannot hold "-<digest>"

    Example:
        compose_name("deployment-5", "deploy", 20) -> "deployment-5-deploy"
    """
    if max_length < 1:
        raise NameLengthError(f"max_length must be positive, got {max_length}")

    name = f"{base}{SEPARATOR}{suffix}"
    if len(name) <= max_length:
        return name

    if max_length < SUFFIXLESS_OVERHEAD:
        raise NameLengthError(
            f"max_length {max_length} cannot hold a {DIGEST_LENGTH}-character digest"
        )

    base_length = max_length - DIGEST_OVERHEAD - len(suffix)

    if base_length < 0:
        # Suffix does not fit; hash the full name so it still counts
        prefix = base[: min(len(base), max_length - SUFFIXLESS_OVERHEAD)]
        shortened = f"{prefix}{SEPARATOR}{digest(name)}"
    else:
        prefix = base[:base_length]
        shortened = f"{prefix}{SEPARATOR}{digest(base)}{SEPARATOR}{suffix}"

    logger.debug(f"Shortened name {name!r} to {shortened!r} (max_length={max_length})")
    return shortened


def pod_name(base: str, suffix: str) -> str:
    """Compose a name within the DNS-1123 subdomain limit used for pods."""
    return compose_name(base, suffix, DNS1123_SUBDOMAIN_MAX_LENGTH)


def limit_length(name: str, max_length: int) -> str:
    """
    Return name, or a prefix of it ending in its digest, within max_length.

    Never raises. A max_length of zero or less yields "", and a bound
    shorter than the digest yields a digest fragment.
    """
    if max_length <= 0:
        return ""
    if len(name) <= max_length:
        return name

    suffix = digest(name)
    prefix = name[: min(max(0, max_length - len(suffix)), len(name))]
    shortened = f"{prefix}{suffix}"[:max_length]

    logger.debug(f"Limited name {name!r} to {shortened!r} (max_length={max_length})")
    return shortened
