"""Utility functions for steam_machine_id."""

from .binary import KeyValueWriter, c_string, encode_machine_id
from .hashing import LABELS, account_name_hash, custom_hash, random_hash

__all__ = [
    "KeyValueWriter",
    "c_string",
    "encode_machine_id",
    "LABELS",
    "account_name_hash",
    "custom_hash",
    "random_hash",
]
