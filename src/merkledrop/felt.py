from __future__ import annotations
from typing import Any, Optional

from .errors import AddressParseError, DataParseError

# Starknet prime, the modulus of every Cairo felt252
FIELD_PRIME = 2**251 + 17 * 2**192 + 1

# Decimal and integer claim data must fit a u128
MAX_NUMERIC_DATA = 2**128

_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


def _is_hex(s: str) -> bool:
    return len(s) > 2 and s[:2] in ("0x", "0X") and all(c in _HEX_DIGITS for c in s[2:])


def _is_dec(s: str) -> bool:
    # str.isdigit() accepts unicode digits such as superscripts
    return bool(s) and s.isascii() and s.isdigit()


def parse_address(s: str, index: Optional[int] = None) -> int:
    """Parse a ``0x`` hex or bare decimal address into a field element."""
    if isinstance(s, str):
        value = None
        if _is_hex(s):
            value = int(s[2:], 16)
        elif _is_dec(s):
            value = int(s, 10)
        if value is not None and value < FIELD_PRIME:
            return value
    raise AddressParseError(s, index)


def parse_data_item(value: Any, item_index: Optional[int] = None) -> int:
    """Coerce one claim-data item into a field element.

    Accepts a non-negative ``int`` (JSON numbers), a decimal numeral string, or a
    ``0x`` hex string. Non-hex numeric inputs must stay under 2**128; hex inputs
    only need to be valid field elements.
    """
    # bool is an int subclass; True/False are never meaningful claim data
    if isinstance(value, bool):
        raise DataParseError(value, "booleans are not claim data", item_index=item_index)
    if isinstance(value, int):
        if value < 0:
            raise DataParseError(value, "negative value", item_index=item_index)
        if value >= MAX_NUMERIC_DATA:
            raise DataParseError(value, "value does not fit in 128 bits", item_index=item_index)
        return value
    if isinstance(value, str):
        if _is_hex(value):
            n = int(value[2:], 16)
            if n >= FIELD_PRIME:
                raise DataParseError(value, "value exceeds field prime", item_index=item_index)
            return n
        if _is_dec(value):
            n = int(value, 10)
            if n >= MAX_NUMERIC_DATA:
                raise DataParseError(value, "value does not fit in 128 bits", item_index=item_index)
            return n
        raise DataParseError(value, "not a decimal or hex numeral", item_index=item_index)
    raise DataParseError(value, f"unsupported type {type(value).__name__}", item_index=item_index)


def to_hex(fe: int) -> str:
    """Zero-padded, lower-case, 0x-prefixed 64-digit hex string."""
    return f"0x{fe:064x}"


def to_bytes(fe: int) -> bytes:
    return fe.to_bytes(32, "big")


def from_bytes(b: bytes) -> int:
    if len(b) != 32:
        raise ValueError("field element must be 32 bytes")
    return int.from_bytes(b, "big")


def from_hex(s: str) -> int:
    """Parse a hex string (``0x`` optional) such as a proof element or root."""
    text = s[2:] if s[:2] in ("0x", "0X") else s
    if not text or any(c not in _HEX_DIGITS for c in text):
        raise ValueError(f"invalid hex field element {s!r}")
    n = int(text, 16)
    if n >= FIELD_PRIME:
        raise ValueError(f"hex value exceeds field prime: {s!r}")
    return n
