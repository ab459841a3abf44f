"""Slot derivation: SHA1("SteamUser Hash {label} {account_name}") per label."""

import hashlib
import logging
import secrets
from typing import Callable, Optional, Sequence, Tuple

from ..errors import RandomSourceUnavailable

logger = logging.getLogger(__name__)

LABELS: Tuple[str, str, str] = ("BB3", "FF2", "3B3")
HASH_LENGTH = hashlib.sha1().digest_size

RandBytes = Callable[[int], bytes]


def account_name_hash(label: str, account_name: str) -> bytes:
    """Hash an account name for one slot.

    Matches the Steam client: SHA1 over "SteamUser Hash <label> <account_name>".
    """
    return custom_hash(f"SteamUser Hash {label} {account_name}")


def custom_hash(value: str) -> bytes:
    """Hash an arbitrary string into a slot value."""
    return hashlib.sha1(value.encode("utf-8")).digest()


def random_hash(randbytes: Optional[RandBytes] = None) -> bytes:
    """Draw a slot's worth of random bytes.

    ``randbytes`` takes a byte count and returns that many bytes; it
    defaults to ``secrets.token_bytes``. Pass ``random.Random(seed).randbytes``
    for reproducible output in tests.
    """
    source = randbytes or secrets.token_bytes
    try:
        value = source(HASH_LENGTH)
    except (OSError, NotImplementedError) as e:
        raise RandomSourceUnavailable(f"random source failed: {e}") from e

    if len(value) != HASH_LENGTH:
        raise RandomSourceUnavailable(
            f"random source returned {len(value)} bytes, expected {HASH_LENGTH}"
        )
    return bytes(value)


def derive_from_seed(seed: str) -> Tuple[bytes, bytes, bytes]:
    """Derive all three slots from an account name, in label order."""
    bb3, ff2, value_3b3 = (account_name_hash(label, seed) for label in LABELS)
    return bb3, ff2, value_3b3


def derive_random(randbytes: Optional[RandBytes] = None) -> Tuple[bytes, bytes, bytes]:
    """Draw all three slots independently."""
    logger.debug("Deriving random machine ID slots")
    return random_hash(randbytes), random_hash(randbytes), random_hash(randbytes)


def derive_custom(values: Sequence[str]) -> Tuple[bytes, bytes, bytes]:
    """Hash three caller-supplied strings, one per label."""
    if len(values) != len(LABELS):
        raise ValueError(f"expected {len(LABELS)} values, got {len(values)}")
    bb3, ff2, value_3b3 = (custom_hash(value) for value in values)
    return bb3, ff2, value_3b3
