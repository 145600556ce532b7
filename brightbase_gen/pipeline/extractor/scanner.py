"""
Brace-depth-aware scanner for TypeScript type-definition text.

Finds `key: { ... }` entries by reading a key, expecting `:` and `{`, and
consuming up to the matching `}` while skipping string literals and
comments. The top-level fields of each consumed span are recorded so that
callers can classify entries by their marker fields.
"""

from __future__ import annotations

import re
from collections.abc import Callable

from .nodes import SchemaEntry

_WORD_PATTERN = re.compile(r"[\w$]+")

_QUOTES = "'\"`"
_OPENERS = "{[(<"
_CLOSERS = "}])>"
_FIELD_SEPARATORS = ";,"
_CONTINUATIONS = "|&"


class SchemaScanner:
    """Scans schema text for object-literal entries."""

    def __init__(self, text: str):
        self.text = text

    def find_entries(self, is_match: Callable[[SchemaEntry], bool]) -> list[SchemaEntry]:
        """
        Find matching entries in source order.

        A matching entry is treated as a leaf and the scan resumes after its
        closing brace. Entries that do not match are descended into.

        Args:
            is_match: Predicate deciding whether an entry is wanted

        Returns:
            Matching entries, left to right
        """
        text = self.text
        end = len(text)
        entries: list[SchemaEntry] = []
        pos = 0

        while pos < end:
            if self._at_comment(pos):
                pos = self._skip_comment(pos, end)
                continue

            key, key_end = self._read_key(pos, end)
            if key is None:
                # Skip numbers as whole tokens so "2fa" never yields "fa"
                word = _WORD_PATTERN.match(text, pos)
                pos = word.end() if word else pos + 1
                continue

            entry = self._entry_at(key, key_end, end)
            if entry is None:
                pos = key_end
            elif is_match(entry):
                entries.append(entry)
                pos = entry.body_end + 1
            else:
                pos = entry.body_start

        return entries

    def _entry_at(self, key: str, key_end: int, end: int) -> SchemaEntry | None:
        """Build an entry if `key` is followed by `:` and a balanced object literal."""
        text = self.text
        pos = self._skip_trivia(key_end, end)
        if pos < end and text[pos] == "?":
            pos += 1
        if pos >= end or text[pos] != ":":
            return None

        pos = self._skip_trivia(pos + 1, end)
        if pos >= end or text[pos] != "{":
            return None

        close = self._find_closing_brace(pos, end)
        if close is None:
            return None

        return SchemaEntry(
            name=key,
            body_start=pos + 1,
            body_end=close,
            fields=self._read_fields(pos + 1, close),
        )

    def _read_fields(self, start: int, end: int) -> dict[str, str]:
        """Read the `key: value` members at the top level of a span."""
        text = self.text
        fields: dict[str, str] = {}
        pos = start

        while True:
            pos = self._skip_separators(pos, end)
            if pos >= end:
                break

            key, key_end = self._read_key(pos, end)
            if key is not None:
                colon = self._skip_trivia(key_end, end)
                if colon < end and text[colon] == "?":
                    colon += 1
                if colon < end and text[colon] == ":":
                    value_end = self._find_value_end(colon + 1, end)
                    fields.setdefault(key, text[colon + 1 : value_end].strip())
                    pos = value_end
                    continue

            # Index signatures, methods and anything else unparseable
            pos = max(self._find_value_end(pos, end), pos + 1)

        return fields

    def _find_value_end(self, pos: int, end: int) -> int:
        """
        Find where a member value ends.

        A value ends at depth zero on `;`, `,`, a stray closer, or a newline
        that neither follows nor precedes a `|` / `&` continuation.
        """
        text = self.text
        depth = 0
        last = ""  # Last non-space character of the value so far

        while pos < end:
            if self._at_comment(pos):
                pos = self._skip_comment(pos, end)
                continue

            ch = text[pos]
            if ch in _QUOTES:
                pos = self._skip_string(pos, end)
                last = ch
                continue

            if ch in _OPENERS:
                depth += 1
            elif ch in _CLOSERS:
                if ch == ">" and pos > 0 and text[pos - 1] == "=":
                    # Arrow in a function type
                    pass
                elif depth == 0:
                    return pos
                else:
                    depth -= 1
            elif depth == 0 and ch in _FIELD_SEPARATORS:
                return pos
            elif (
                depth == 0
                and ch == "\n"
                and last
                and last not in _CONTINUATIONS
                and not self._continues(pos + 1, end)
            ):
                return pos

            if not ch.isspace():
                last = ch
            pos += 1

        return end

    def _continues(self, pos: int, end: int) -> bool:
        """Check whether the next line continues a union or intersection."""
        pos = self._skip_trivia(pos, end)
        return pos < end and self.text[pos] in _CONTINUATIONS

    def _find_closing_brace(self, open_pos: int, end: int) -> int | None:
        """Return the offset of the brace matching the one at open_pos."""
        text = self.text
        depth = 0
        pos = open_pos

        while pos < end:
            if self._at_comment(pos):
                pos = self._skip_comment(pos, end)
                continue

            ch = text[pos]
            if ch in _QUOTES:
                pos = self._skip_string(pos, end)
                continue
            if ch == "{":
                depth += 1
            elif ch == "}":
                depth -= 1
                if depth == 0:
                    return pos
            pos += 1

        return None

    def _read_key(self, pos: int, end: int) -> tuple[str | None, int]:
        """Read an identifier or quoted key, returning (key, end offset)."""
        text = self.text
        if text[pos] in _QUOTES:
            string_end = self._skip_string(pos, end)
            if string_end > end or text[string_end - 1] != text[pos] or string_end - pos < 2:
                return None, pos
            return text[pos + 1 : string_end - 1], string_end

        word = _WORD_PATTERN.match(text, pos, end)
        if word is None or word.group()[0].isdigit():
            return None, pos
        return word.group(), word.end()

    def _skip_string(self, pos: int, end: int) -> int:
        """Skip a string literal starting at pos, honouring backslash escapes."""
        text = self.text
        quote = text[pos]
        pos += 1
        while pos < end:
            ch = text[pos]
            if ch == "\\":
                pos += 2
                continue
            pos += 1
            if ch == quote:
                return pos
        return end

    def _skip_trivia(self, pos: int, end: int) -> int:
        """Skip whitespace and comments."""
        text = self.text
        while pos < end:
            if text[pos].isspace():
                pos += 1
            elif self._at_comment(pos):
                pos = self._skip_comment(pos, end)
            else:
                break
        return pos

    def _skip_separators(self, pos: int, end: int) -> int:
        """Skip whitespace, comments and member separators."""
        while True:
            pos = self._skip_trivia(pos, end)
            if pos < end and self.text[pos] in _FIELD_SEPARATORS:
                pos += 1
            else:
                return pos

    def _at_comment(self, pos: int) -> bool:
        return self.text.startswith(("//", "/*"), pos)

    def _skip_comment(self, pos: int, end: int) -> int:
        """Skip a comment; line comments stop before their newline."""
        if self.text.startswith("//", pos):
            newline = self.text.find("\n", pos, end)
            return end if newline == -1 else newline
        close = self.text.find("*/", pos + 2, end)
        return end if close == -1 else close + 2
