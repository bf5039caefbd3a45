"""Quickstart Example - A Tiny Lexer on Top of Cursor.

Demonstrates the cursor operations a hand-written lexer relies on:

1. Walk the text with has_next()/next()
2. Use peek() to decide where a token ends
3. Use back() to give back one character of over-read
4. Report an error with line:column and the offending line

Python 3.13+.
"""

from __future__ import annotations

from textreader import Cursor, Location


class LexError(Exception):
    """Unexpected character, with its location."""

    def __init__(self, message: str, location: Location, context: str) -> None:
        super().__init__(f"{location}: {message}\n{context}")
        self.location = location


def tokenize(source: str) -> list[tuple[str, str, Location]]:
    """Split source into (kind, text, start) tokens: words, numbers and '='."""
    cursor = Cursor(source)
    tokens: list[tuple[str, str, Location]] = []

    while True:
        start = cursor.location
        ch = cursor.next()
        if ch is None:
            break

        if ch.isspace():
            continue
        if ch == "=":
            tokens.append(("EQUALS", ch, start))
            continue
        if ch.isalpha() or ch.isdigit():
            kind = "WORD" if ch.isalpha() else "NUMBER"
            chars = [ch]
            # Read one character too far, then hand it back
            while (nxt := cursor.next()) is not None and nxt.isalnum():
                chars.append(nxt)
            if nxt is not None:
                cursor.back()
            tokens.append((kind, "".join(chars), start))
            continue

        cursor.back()
        raise LexError(f"Unexpected character {ch!r}", cursor.location, cursor.error_context())

    return tokens


def main() -> None:
    source = "width = 80\nheight = 24\n"
    print("=" * 60)
    print("Tokens")
    print("=" * 60)
    for kind, text, start in tokenize(source):
        print(f"{start!s:>6}  {kind:<7} {text}")

    print()
    print("=" * 60)
    print("Diagnostics")
    print("=" * 60)
    try:
        tokenize("width = 80\nheight = $24\n")
    except LexError as e:
        print(e)


if __name__ == "__main__":
    main()
