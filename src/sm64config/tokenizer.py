"""Whitespace tokenizer for configuration records."""

from __future__ import annotations

from typing import List

# Matches the C locale's isspace() set; unicode spaces are part of a token.
WHITESPACE = frozenset(" \t\n\v\f\r")


def skip_whitespace(text: str, pos: int = 0) -> int:
    """Return the index of the first non-whitespace character at or after ``pos``."""
    end = len(text)
    while pos < end and text[pos] in WHITESPACE:
        pos += 1
    return pos


def tokenize(line: str, max_tokens: int) -> List[str]:
    """Split ``line`` into at most ``max_tokens`` whitespace-delimited words.

    Anything after the last collected word is ignored, so
    ``tokenize("key_a   123  extra", 2)`` gives ``["key_a", "123"]``.
    """
    tokens: List[str] = []
    end = len(line)
    pos = skip_whitespace(line)
    while pos < end and len(tokens) < max_tokens:
        start = pos
        while pos < end and line[pos] not in WHITESPACE:
            pos += 1
        tokens.append(line[start:pos])
        pos = skip_whitespace(line, pos)
    return tokens


__all__ = ["WHITESPACE", "skip_whitespace", "tokenize"]
