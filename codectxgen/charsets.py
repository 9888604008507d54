"""Character-set detection and conversion of raw file bytes to text."""

import codecs

_BOM_UTF8 = b"\xef\xbb\xbf"
_BOM_UTF16_LE = b"\xff\xfe"
_BOM_UTF16_BE = b"\xfe\xff"

# Windows-1252 leaves five bytes undefined; they decode to the C1 control
# character with the same code point instead of failing.
_CP1252_TABLE = {}
for _byte in range(0x80, 0xA0):
    try:
        _CP1252_TABLE[_byte] = bytes([_byte]).decode("cp1252")
    except UnicodeDecodeError:
        pass
del _byte


def _is_valid_utf8(data: bytes) -> bool:
    """Loose structural check of UTF-8 lead and continuation bytes."""
    size = len(data)
    i = 0
    while i < size:
        lead = data[i]
        if lead < 0x80:
            i += 1
            continue
        if i + 1 >= size:
            return False
        if lead < 0xE0:
            width = 2
        elif lead < 0xF0:
            width = 3
        elif lead < 0xF8:
            width = 4
        else:
            return False
        if i + width - 1 >= size:
            return False
        if any(b & 0xC0 != 0x80 for b in data[i + 1 : i + width]):
            return False
        i += width
    return True


def _is_valid_utf16(data: bytes) -> bool:
    """Heuristic: even length and more than a quarter of the bytes are zero."""
    if len(data) % 2 != 0:
        return False
    return data.count(0) / len(data) > 0.25


def _is_valid_gbk(data: bytes) -> bool:
    size = len(data)
    i = 0
    while i < size:
        lead = data[i]
        if lead < 0x80:
            i += 1
            continue
        if i + 1 < size:
            trail = data[i + 1]
            if 0x81 <= lead <= 0xFE and 0x40 <= trail <= 0xFE and trail != 0x7F:
                i += 2
                continue
        return False
    return True


def _is_valid_ansi(data: bytes) -> bool:
    printable = sum(
        1 for b in data if 32 <= b <= 126 or 160 <= b <= 255 or b in (9, 10, 13)
    )
    return printable / len(data) > 0.8


def detect_encoding(data: bytes) -> tuple[str, bytes]:
    """Guess the encoding of ``data``.

    Returns the encoding name and the data with any byte-order mark removed.
    Names are 'utf-8', 'utf-16le', 'utf-16be', 'gbk' and 'ansi'.
    """
    data = bytes(data)
    if not data:
        return "utf-8", data
    if data.startswith(_BOM_UTF8):
        return "utf-8", data[3:]
    if data.startswith(_BOM_UTF16_LE):
        return "utf-16le", data[2:]
    if data.startswith(_BOM_UTF16_BE):
        return "utf-16be", data[2:]
    if _is_valid_utf8(data):
        return "utf-8", data
    if _is_valid_utf16(data):
        return "utf-16le", data
    if _is_valid_gbk(data):
        return "gbk", data
    if _is_valid_ansi(data):
        return "ansi", data
    return "utf-8", data


def _utf16_to_text(data: bytes, little_endian: bool) -> str:
    if len(data) % 2 != 0:
        return data.decode("utf-8", errors="replace")
    order = "little" if little_endian else "big"
    chars = []
    for pos in range(0, len(data), 2):
        unit = int.from_bytes(data[pos : pos + 2], order)
        if unit == 0:
            break
        chars.append(chr(unit))
    return "".join(chars)


def _ansi_to_text(data: bytes) -> str:
    return data.decode("latin-1").translate(_CP1252_TABLE)


def convert_to_utf8(data: bytes, encoding: str) -> str:
    """Decode ``data`` from ``encoding`` into text.

    UTF-16 decoding stops at the first NUL code unit. Unknown encodings are
    treated as UTF-8.
    """
    data = bytes(data)
    name = encoding.lower()
    if name == "utf-16le":
        return _utf16_to_text(data, little_endian=True)
    if name == "utf-16be":
        return _utf16_to_text(data, little_endian=False)
    if name == "gbk":
        return data.decode("gbk", errors="replace")
    if name in ("ansi", "windows-1252", "cp1252"):
        return _ansi_to_text(data)
    return data.decode("utf-8", errors="replace")


_DECODERS = {
    "gbk": "gbk",
    "gb2312": "gbk",
    "ansi": "cp1252",
    "windows-1252": "cp1252",
    "cp1252": "cp1252",
    "utf-16le": "utf-16-le",
    "utf-16be": "utf-16-be",
    "utf-8": "utf-8",
}


def get_encoding_decoder(enc: str) -> codecs.CodecInfo:
    """Codec for a supported encoding name; raises ValueError otherwise."""
    try:
        return codecs.lookup(_DECODERS[enc.lower()])
    except KeyError:
        raise ValueError(f"不支持的编码: {enc}") from None