"""User records and the parser for lines of the users CSV export."""

from __future__ import annotations

import re
from dataclasses import dataclass

_INTEGER_PREFIX = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)")


@dataclass
class User:
    """One user of the social network data set."""

    id: int
    screen_name: str
    tags: str = ""
    avatar: str = ""
    followers_count: int = 0
    friends_count: int = 0
    lang: str = ""
    last_seen: int = 0
    tweet_id: int = 0
    friends: str = ""


class _FieldReader:
    """Reads delimiter-terminated fields from a line, one after another."""

    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0

    def take(self, delimiter: str) -> str:
        if self._pos >= len(self._text):
            return ""
        end = self._text.find(delimiter, self._pos)
        if end == -1:
            field = self._text[self._pos :]
            self._pos = len(self._text)
        else:
            field = self._text[self._pos : end]
            self._pos = end + 1
        return field


def _to_int(text: str, bits: int, what: str) -> int:
    match = _INTEGER_PREFIX.match(text)
    if match is None:
        raise ValueError(f"{what}: not a number: {text!r}")
    value = int(match.group(1))
    limit = 1 << (bits - 1)
    if not -limit <= value < limit:
        raise ValueError(f"{what}: out of range: {value}")
    return value


def _unquote(field: str, what: str) -> str:
    """Drop the two doubled-quote characters on each side of a field."""
    if len(field) < 2:
        raise ValueError(f"{what}: field too short: {field!r}")
    if len(field) < 4:
        return field[2:]
    return field[2 : len(field) - 2]


def parse_line(line: str) -> User:
    """Parse one data line (without its line terminator) into a User."""
    if not line:
        raise ValueError("empty line")
    text = line[1 : len(line) - 1] if len(line) >= 2 else ""
    reader = _FieldReader(text)

    user_id = _to_int(reader.take(","), 64, "id")
    screen_name = _unquote(reader.take(","), "screen_name")
    tags = reader.take("]")
    reader.take(",")
    avatar = reader.take(",")
    followers_count = _to_int(reader.take(","), 32, "followers_count")
    friends_count = _to_int(reader.take(","), 32, "friends_count")
    lang = reader.take(",")
    last_seen = _to_int(reader.take(","), 64, "last_seen")
    tweet_id = _to_int(_unquote(reader.take(","), "tweet_id"), 64, "tweet_id")
    friends = reader.take("]")

    return User(
        id=user_id,
        screen_name=screen_name,
        tags=tags,
        avatar=avatar,
        followers_count=followers_count,
        friends_count=friends_count,
        lang=lang,
        last_seen=last_seen,
        tweet_id=tweet_id,
        friends=friends,
    )