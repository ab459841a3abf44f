"""Binary KeyValue writer for the Steam MessageObject format.

Grammar::

    0x00 name\\0 (0x01 key\\0 value\\0)* 0x08 0x08

Only the tags needed for a machine ID are written: object start, string
field, and object end. The trailing 0x08 after the outer object closes
the message itself.
"""

from typing import Iterable, Tuple

TYPE_NONE = 0x00
TYPE_STRING = 0x01
TYPE_END = 0x08

MESSAGE_OBJECT_NAME = "MessageObject"

# 1 + len("MessageObject\0") + 3 * (1 + len("BB3\0") + 40 + 1) + 2
ENCODED_LENGTH = 155


def c_string(text: str) -> bytes:
    """Return ``text`` as NUL-terminated ASCII."""
    return text.encode("ascii") + b"\x00"


class KeyValueWriter:
    """Accumulates binary KeyValue tokens into a byte buffer."""

    def __init__(self) -> None:
        self._buffer = bytearray()
        self._depth = 0

    def object_start(self, name: str) -> "KeyValueWriter":
        self._buffer.append(TYPE_NONE)
        self._buffer += c_string(name)
        self._depth += 1
        return self

    def string_field(self, key: str, value: str) -> "KeyValueWriter":
        self._buffer.append(TYPE_STRING)
        self._buffer += c_string(key)
        self._buffer += c_string(value)
        return self

    def object_end(self) -> "KeyValueWriter":
        if self._depth == 0:
            raise ValueError("object_end() without a matching object_start()")
        self._buffer.append(TYPE_END)
        self._depth -= 1
        return self

    def end_of_message(self) -> "KeyValueWriter":
        if self._depth:
            raise ValueError(f"{self._depth} object(s) still open at end of message")
        self._buffer.append(TYPE_END)
        return self

    @property
    def depth(self) -> int:
        return self._depth

    def getvalue(self) -> bytes:
        return bytes(self._buffer)


def encode_machine_id(slots: Iterable[Tuple[str, bytes]]) -> bytes:
    """Encode labeled slots as a MessageObject.

    Each slot value is written as its lowercase hex digest, so the record
    stays printable whatever the raw bytes are.
    """
    writer = KeyValueWriter().object_start(MESSAGE_OBJECT_NAME)
    for label, value in slots:
        writer.string_field(label, value.hex())
    return writer.object_end().end_of_message().getvalue()
