"""Decoders for the pseudo-literal list/set cells of the recipe CSV.

The Food.com export stores list columns as Python ``repr`` output, e.g.
``['preheat oven', 'mix "well", then bake']`` or ``{'pasta', 'dinner'}``.
``ast.literal_eval`` chokes on the truncated and oddly escaped cells that
occur in the wild, so cells are scanned by hand and malformed input decodes
to an empty list instead of raising.
"""

import re

EMPTY_SENTINELS = frozenset({"", "NA", "character(0)"})

_QUOTE_CHARS = ("'", '"')
_UNICODE_ESCAPE = re.compile(r"\\u([0-9a-fA-F]{4})")


def parse_python_list(text: str | None) -> list[str]:
    """
    Parse a Python-style list literal into its string items.

    Handles both quote styles, doubled-quote escapes and commas or brackets
    inside quoted items. Returns an empty list for sentinels, for cells that
    do not start with ``[`` and for cells with an unterminated quote.

    Examples:
        "['a', 'b']" -> ["a", "b"]
        '["it\'s", "x, y"]' -> ["it's", "x, y"]
        "NA" -> []
    """
    if text is None:
        return []

    text = text.strip()
    if text in EMPTY_SENTINELS or not text.startswith("["):
        return []

    inner = text[1:-1].strip() if text.endswith("]") else text[1:].strip()
    if not inner:
        return []

    items: list[str] = []
    current: list[str] = []
    in_quotes = False
    quote_char = ""
    i = 0
    length = len(inner)

    while i < length:
        char = inner[i]

        if not in_quotes:
            if char in _QUOTE_CHARS:
                in_quotes = True
                quote_char = char
            i += 1
            continue

        if char == quote_char:
            # Doubled quote inside an item is an escaped quote
            if i + 1 < length and inner[i + 1] == quote_char:
                current.append(char)
                i += 2
                continue

            in_quotes = False
            items.append("".join(current).strip())
            current = []
            i += 1
            # Skip to the separator after the closing quote
            while i < length and inner[i] != ",":
                i += 1
            i += 1
            continue

        current.append(char)
        i += 1

    if in_quotes:
        return []

    return [item for item in items if item]


def parse_python_set(text: str | None) -> list[str]:
    """
    Parse a Python-style set literal (``{'a', 'b'}``) into unique items.

    The braces are swapped for brackets and the list decoder does the rest;
    first-seen order is kept so output is stable across runs.
    """
    if text is None:
        return []

    text = text.strip()
    if text in EMPTY_SENTINELS or not text.startswith("{"):
        return []

    inner = text[1:-1] if text.endswith("}") else text[1:]
    items = parse_python_list(f"[{inner}]")
    return list(dict.fromkeys(items))


def decode_unicode_escapes(text: str) -> str:
    """Decode literal ``\\uXXXX`` sequences, e.g. ``caf\\u00e9`` -> ``café``."""
    if not text or "\\u" not in text:
        return text
    return _UNICODE_ESCAPE.sub(lambda m: chr(int(m.group(1), 16)), text)
