"""
Text helpers shared by the command dispatcher and the binary patch adapter.

Hex strings are uppercase, two digits per byte, without separators.
"""

from typing import Tuple

QUOTE_CHARS = ("'", '"')


def remove_quotes(value: str) -> str:
    """Strip a single pair of matching surrounding quote characters."""
    if len(value) >= 2 and value[0] in QUOTE_CHARS and value[-1] == value[0]:
        return value[1:-1]
    return value


def ascii_to_hex(text: str) -> str:
    """Encode the UTF-8 bytes of ``text`` as two hex digits each."""
    return text.encode("utf-8").hex().upper()


def decimal_to_hex(decimal: str) -> str:
    """
    Convert a decimal number to hex in natural byte order.

    Args:
        decimal: Non-negative integer written in base 10

    Returns:
        Uppercase hex string padded to an even number of digits

    Raises:
        ValueError: If ``decimal`` is not a non-negative integer
    """
    number = int(decimal.strip(), 10)
    if number < 0:
        raise ValueError(f"Negative value cannot be hex encoded: {decimal}")
    digits = format(number, "X")
    if len(digits) % 2:
        digits = "0" + digits
    return digits


def decimal_to_hex_reversed(decimal: str) -> str:
    """Like decimal_to_hex, with the byte order reversed (little-endian)."""
    digits = decimal_to_hex(decimal)
    pairs = [digits[i : i + 2] for i in range(0, len(digits), 2)]
    return "".join(reversed(pairs))


def pad_hex_pair(search_hex: str, replacement_hex: str) -> Tuple[str, str]:
    """Right-pad the shorter hex string with zero bytes so both lengths match."""
    width = max(len(search_hex), len(replacement_hex))
    return search_hex.ljust(width, "0"), replacement_hex.ljust(width, "0")


def hex_to_bytes(hex_data: str) -> bytes:
    """Decode a hex string, ignoring whitespace; raises ValueError if malformed."""
    compact = "".join(hex_data.split())
    if len(compact) % 2:
        raise ValueError(f"Hex data must have an even number of digits: {hex_data}")
    return bytes.fromhex(compact)
