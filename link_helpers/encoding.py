"""Obfuscation encoders for mailto links and the JavaScript confirm guard."""

from __future__ import annotations

import re

_WORD_CHAR_RE = re.compile(r"\w", re.ASCII)


def confirm_to_javascript(message: str) -> str:
    """Build the ``onclick`` value guarding a link with ``confirm()``."""
    escaped = str(message).replace("'", "\\'")
    return f"return confirm('{escaped}');"


def hex_encode_address(address: str) -> str:
    """Percent-encode every ASCII word character of ``address``.

    Anything else (``@``, ``.``, ``+``, non-ASCII letters) is left as is.

    Example:
        >>> hex_encode_address("me@x.com")
        '%6d%65@%78.%63%6f%6d'
    """
    return "".join(
        f"%{ord(char):x}" if _WORD_CHAR_RE.match(char) else char
        for char in address
    )


def javascript_escape(text: str) -> str:
    """Encode every character of ``text`` for JavaScript's ``unescape()``.

    Latin-1 characters become ``%xx``; anything wider uses ``%uXXXX``, with
    surrogate pairs above the BMP.
    """
    encoded = []
    for char in text:
        code = ord(char)
        if code <= 0xFF:
            encoded.append(f"%{code:02x}")
        elif code <= 0xFFFF:
            encoded.append(f"%u{code:04x}")
        else:
            code -= 0x10000
            encoded.append(f"%u{0xD800 + (code >> 10):04x}%u{0xDC00 + (code & 0x3FF):04x}")
    return "".join(encoded)
