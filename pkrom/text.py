"""Decoding of the game's character set to readable text."""

from __future__ import annotations

TEXT_END = 0x50
UNKNOWN = "(nil)"

_CHARSET: dict[int, str] = {
    0x00: "",
    0x49: "\n\n",
    0x4E: "\n",
    0x4F: "  ",
    0x50: "",
    0x51: "*",
    0x52: "A1",
    0x53: "A2",
    0x54: "POKé",
    0x55: "+",
    0x57: "#",
    0x58: "$",
    0x5F: ".\n",
    0x75: "…",
    0x7F: " ",
    0x9A: "(",
    0x9B: ")",
    0x9C: ":",
    0x9D: ";",
    0x9E: "[",
    0x9F: "]",
    0xBA: "é",
    0xBB: "'d",
    0xBC: "'l",
    0xBD: "'s",
    0xBE: "'t",
    0xBF: "'v",
    0xE0: "'",
    0xE1: "PK",
    0xE2: "MN",
    0xE3: "-",
    0xE4: "'r",
    0xE5: "'m",
    0xE6: "?",
    0xE7: "!",
    0xE8: ".",
    0xED: "→",
    0xEE: "↓",
    0xEF: "♂",
    0xF0: "¥",
    0xF1: "×",
    0xF3: "/",
    0xF4: ",",
    0xF5: "♀",
}
_CHARSET.update({0x80 + i: chr(ord("A") + i) for i in range(26)})
_CHARSET.update({0xA0 + i: chr(ord("a") + i) for i in range(26)})
_CHARSET.update({0xF6 + i: str(i) for i in range(10)})


def char_as_ascii(character: int) -> str:
    """Return the text for one encoded character, or ``"(nil)"`` if unknown."""
    return _CHARSET.get(character, UNKNOWN)


def _decoded(data: bytes):
    for character in data:
        if character == TEXT_END:
            return
        yield char_as_ascii(character)


def ascii_length(data: bytes) -> int:
    """Number of UTF-8 bytes the decoded text takes, up to the end marker."""
    return sum(len(piece.encode("utf-8")) for piece in _decoded(data))


def to_ascii(data: bytes) -> str:
    """Decode ``data`` up to (not including) the end marker."""
    return "".join(_decoded(data))