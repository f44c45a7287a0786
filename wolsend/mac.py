from __future__ import annotations

from dataclasses import dataclass

HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


class MacFormatError(ValueError):
    pass


@dataclass(frozen=True)
class MacAddress:
    text: str
    octets: bytes

    def __str__(self) -> str:
        return self.text


def parse_mac(raw: str) -> MacAddress:
    """Parse ``aa:bb:cc:dd:ee:ff`` into a MacAddress.

    Exactly six colon-separated groups of two hex digits, either case.
    No trimming or delimiter normalization is done.
    """
    parts = raw.split(":")
    if len(parts) != 6:
        raise MacFormatError(f"Invalid MAC address format: {raw!r}")
    for part in parts:
        if len(part) != 2 or not all(c in HEX_DIGITS for c in part):
            raise MacFormatError(f"Invalid MAC address format: {raw!r}")
    return MacAddress(text=raw, octets=bytes(int(p, 16) for p in parts))


def is_valid_mac(raw: str) -> bool:
    try:
        parse_mac(raw)
    except MacFormatError:
        return False
    return True
