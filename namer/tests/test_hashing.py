"""
Tests for the FNV-1a digest.

Critical: digests are embedded in names that callers regenerate later, so
they must never change across runs or platforms.
"""

import os
import subprocess
import sys
from pathlib import Path

from namer.core.hashing import DIGEST_LENGTH, digest, fnv1a_32


REPO_ROOT = Path(__file__).resolve().parents[2]


def test_fnv1a_reference_vectors():
    """Known FNV-1a 32-bit values must match."""
    assert fnv1a_32(b"") == 0x811C9DC5
    assert fnv1a_32(b"a") == 0xE40C292C
    assert fnv1a_32(b"foobar") == 0xBF9CF968


def test_digest_is_eight_lowercase_hex_chars():
    """Digest is zero-padded, lowercase, fixed width."""
    for value in ["", "a", "foo", "deployment-5", "日本語"]:
        d = digest(value)
        assert len(d) == DIGEST_LENGTH
        assert d == d.lower()
        int(d, 16)


def test_digest_matches_reference():
    assert digest("") == "811c9dc5"
    assert digest("a") == "e40c292c"
    assert digest("foobar") == "bf9cf968"


def test_digest_str_and_bytes_agree():
    """Strings are hashed as UTF-8 bytes."""
    assert digest("foo") == digest(b"foo")
    assert digest("日本語") == digest("日本語".encode("utf-8"))


def test_digest_is_order_sensitive():
    assert digest("ab") != digest("ba")


def test_digest_determinism():
    """Same input must produce identical digest."""
    assert digest("foo") == digest("foo")


def test_digest_stable_across_processes():
    """Digest must not depend on per-process hash randomization."""
    code = "from namer.core.hashing import digest; print(digest('foo'))"
    out = subprocess.run(
        [sys.executable, "-c", code],
        capture_output=True,
        text=True,
        check=True,
        cwd=REPO_ROOT,
        env={**os.environ, "PYTHONHASHSEED": "12345"},
    )
    assert out.stdout.strip() == digest("foo")
