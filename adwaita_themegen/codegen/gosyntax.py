"""
Go literal helpers used by the templates.
"""

from typing import Union

from adwaita_themegen.models import RGBA

_SIMPLE_ESCAPES = {
    "\a": r"\a",
    "\b": r"\b",
    "\f": r"\f",
    "\n": r"\n",
    "\r": r"\r",
    "\t": r"\t",
    "\v": r"\v",
    "\\": r"\\",
    '"': r"\"",
}


def _is_go_printable(char: str) -> bool:
    # Go's unicode.IsPrint: letters, marks, numbers, punctuation, symbols and
    # the ASCII space, which is what str.isprintable() accepts
    return char.isprintable()


def go_quote(value: Union[bytes, str]) -> str:
    """
    Quote a value as a Go interpreted string literal.

    The output matches Go's ``strconv.Quote`` (the ``%q`` verb): bytes that
    are not valid UTF-8 become ``\\xNN``, non-printable runes become ``\\xNN``,
    ``\\uNNNN`` or ``\\UNNNNNNNN``, and printable runes are kept as is.
    """
    if isinstance(value, bytes):
        # invalid bytes decode to lone surrogates U+DC80..U+DCFF
        text = value.decode("utf-8", errors="surrogateescape")
    else:
        text = value

    out = ['"']
    for char in text:
        code = ord(char)
        if char in _SIMPLE_ESCAPES:
            out.append(_SIMPLE_ESCAPES[char])
        elif 0xDC80 <= code <= 0xDCFF and isinstance(value, bytes):
            out.append(f"\\x{code - 0xDC00:02x}")
        elif code < 0x80:
            if code < 0x20 or code == 0x7F:
                out.append(f"\\x{code:02x}")
            else:
                out.append(char)
        elif 0xD800 <= code <= 0xDFFF:
            # a lone surrogate is not a valid rune, Go writes U+FFFD
            out.append("\\ufffd")
        elif _is_go_printable(char):
            out.append(char)
        elif code < 0x10000:
            out.append(f"\\u{code:04x}")
        else:
            out.append(f"\\U{code:08x}")
    out.append('"')
    return "".join(out)


def go_nrgba(color: RGBA) -> str:
    """Composite literal of a color.NRGBA."""
    return (
        f"color.NRGBA{{R: 0x{color.r:02x}, G: 0x{color.g:02x}, "
        f"B: 0x{color.b:02x}, A: 0x{color.a:02x}}}"
    )
