"""Steam machine IDs, as supplied to Steam when logging in."""

import logging
from dataclasses import dataclass
from typing import Optional, Tuple

from .utils.binary import encode_machine_id
from .utils.hashing import (
    LABELS,
    RandBytes,
    derive_custom,
    derive_from_seed,
    derive_random,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MachineID:
    """A Steam machine ID.

    Each value is a raw 20-byte SHA1 digest (or random bytes of the same
    length); hex encoding happens only in ``to_message()`` and ``str()``.
    """

    value_bb3: bytes
    value_ff2: bytes
    value_3b3: bytes

    def __post_init__(self) -> None:
        for label, value in zip(LABELS, self._values()):
            if not isinstance(value, bytes):
                raise TypeError(f"{label} value must be bytes, got {type(value).__name__}")
            if not value:
                raise ValueError(f"{label} value must not be empty")

    @classmethod
    def random(cls, randbytes: Optional[RandBytes] = None) -> "MachineID":
        """Create a random machine ID.

        Raises RandomSourceUnavailable if ``randbytes`` (default
        ``secrets.token_bytes``) fails.
        """
        return cls(*derive_random(randbytes))

    @classmethod
    def from_account_name(cls, account_name: str) -> "MachineID":
        """Create the machine ID the Steam client derives for ``account_name``."""
        logger.debug("Deriving machine ID from account name")
        return cls(*derive_from_seed(account_name))

    @classmethod
    def custom_format(cls, value_bb3: str, value_ff2: str, value_3b3: str) -> "MachineID":
        """Create a machine ID by hashing three arbitrary strings.

        Generally these follow the account name format, e.g.
        ``"SteamUser Hash BB3 accountname"``.
        """
        return cls(*derive_custom((value_bb3, value_ff2, value_3b3)))

    def _values(self) -> Tuple[bytes, bytes, bytes]:
        return self.value_bb3, self.value_ff2, self.value_3b3

    def slots(self) -> Tuple[Tuple[str, bytes], ...]:
        """Return ``(label, value)`` pairs in wire order."""
        return tuple(zip(LABELS, self._values()))

    def to_message(self) -> bytes:
        """Encode as the binary MessageObject sent in a login request."""
        return encode_machine_id(self.slots())

    def __str__(self) -> str:
        return ":".join(f"{label}.{value.hex().upper()}" for label, value in self.slots())
