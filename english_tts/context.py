#!/usr/bin/env python3
"""
Context pattern matching for the letter-to-sound rules.

A rule only fires when the letters around its match text satisfy its
left and right context patterns. Patterns are written in a tiny
language evaluated against the padded, uppercased word buffer:

    A-Z ' space   literal character (a space only matches a word edge)
    #             one or more vowels
    :             zero or more consonants
    ^             exactly one consonant
    .             one voiced consonant (B D V G J L M N R W Z)
    +             one front vowel (E I Y)
    %             a suffix: ER, E, ES, ED, ING, ELY (right context only)

Evaluation is a single greedy pass. A quantifier never gives back what
it consumed, so a later symbol that fails makes the whole context fail.
The rule table was tuned against exactly this behaviour.
"""

from typing import FrozenSet

VOWEL_LETTERS: FrozenSet[str] = frozenset("AEIOU")
CONSONANT_LETTERS: FrozenSet[str] = frozenset("ABCDEFGHIJKLMNOPQRSTUVWXYZ") - VOWEL_LETTERS
VOICED_CONSONANTS: FrozenSet[str] = frozenset("BDVGJLMNRWZ")
FRONT_VOWELS: FrozenSet[str] = frozenset("EIY")

LITERALS: FrozenSet[str] = frozenset("ABCDEFGHIJKLMNOPQRSTUVWXYZ' ")
LEFT_SYMBOLS: FrozenSet[str] = frozenset("#:^.+")
RIGHT_SYMBOLS: FrozenSet[str] = LEFT_SYMBOLS | {"%"}


class MalformedPatternError(ValueError):
    """A context pattern uses a symbol outside the pattern language."""


def validate_pattern(pattern: str, side: str) -> None:
    """
    Reject patterns the matcher cannot evaluate.

    Args:
        pattern: context pattern string
        side: "left" or "right" (the suffix class is right-only)

    Raises:
        MalformedPatternError: on the first unsupported symbol
    """
    allowed = RIGHT_SYMBOLS if side == "right" else LEFT_SYMBOLS
    for symbol in pattern:
        if symbol not in LITERALS and symbol not in allowed:
            raise MalformedPatternError(
                f"Bad char in {side} rule: {symbol!r} (pattern {pattern!r})"
            )


def _char_at(buffer: str, index: int) -> str:
    # Positions outside the buffer match nothing.
    if 0 <= index < len(buffer):
        return buffer[index]
    return ""


def left_match(pattern: str, buffer: str, index: int) -> bool:
    """
    Match a left context pattern, scanning right-to-left.

    Args:
        pattern: left context pattern ("" matches any context)
        buffer: padded, uppercased word
        index: position of the character just before the match text

    Returns:
        True if every pattern symbol is satisfied.
    """
    if not pattern:
        return True

    for symbol in reversed(pattern):
        ch = _char_at(buffer, index)

        if symbol in LITERALS:
            if symbol != ch:
                return False
            index -= 1
        elif symbol == "#":
            if ch not in VOWEL_LETTERS:
                return False
            index -= 1
            while _char_at(buffer, index) in VOWEL_LETTERS:
                index -= 1
        elif symbol == ":":
            while _char_at(buffer, index) in CONSONANT_LETTERS:
                index -= 1
        elif symbol == "^":
            if ch not in CONSONANT_LETTERS:
                return False
            index -= 1
        elif symbol == ".":
            if ch not in VOICED_CONSONANTS:
                return False
            index -= 1
        elif symbol == "+":
            if ch not in FRONT_VOWELS:
                return False
            index -= 1
        else:
            raise MalformedPatternError(f"Bad char in left rule: {symbol!r}")

    return True


def right_match(pattern: str, buffer: str, index: int) -> bool:
    """
    Match a right context pattern, scanning left-to-right.

    Args:
        pattern: right context pattern ("" matches any context)
        buffer: padded, uppercased word
        index: position of the character just after the match text

    Returns:
        True if every pattern symbol is satisfied.
    """
    if not pattern:
        return True

    for symbol in pattern:
        ch = _char_at(buffer, index)

        if symbol in LITERALS:
            if symbol != ch:
                return False
            index += 1
        elif symbol == "#":
            if ch not in VOWEL_LETTERS:
                return False
            index += 1
            while _char_at(buffer, index) in VOWEL_LETTERS:
                index += 1
        elif symbol == ":":
            while _char_at(buffer, index) in CONSONANT_LETTERS:
                index += 1
        elif symbol == "^":
            if ch not in CONSONANT_LETTERS:
                return False
            index += 1
        elif symbol == ".":
            if ch not in VOICED_CONSONANTS:
                return False
            index += 1
        elif symbol == "+":
            if ch not in FRONT_VOWELS:
                return False
            index += 1
        elif symbol == "%":
            if ch == "E":
                index += 1
                # EL(Y), ER, ES, ED settle the whole context.
                if _char_at(buffer, index) in ("L", "R", "S", "D"):
                    return True
                # A bare E is a suffix too; keep matching after it.
            elif ch == "I":
                if buffer[index + 1:index + 3] == "NG":
                    return True
                return False
            else:
                return False
        else:
            raise MalformedPatternError(f"Bad char in right rule: {symbol!r}")

    return True
