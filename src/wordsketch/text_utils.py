#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Default tokenizer for social-media style corpus lines.

Keeps URLs, @user mentions, #hashtags and word tokens
(inner apostrophes included) whole, and splits every other non-space
character into a token of its own. The builder lower-cases lines before
calling it; any callable ``str -> List[str]`` can replace it.
"""
import re
import unicodedata
from typing import Iterator, List

URL_RE = r"(?:https?://\S+|www\.\S+)"
USER_RE = r"@[A-Za-z0-9_]{1,15}"
HASHTAG_RE = r"#\w+"
WORD_RE = r"\w+(?:['’]\w+)*"
TOKEN_RE = re.compile(rf"{URL_RE}|{USER_RE}|{HASHTAG_RE}|{WORD_RE}|[^\w\s]")
WHITESPACE_RE = re.compile(r"\s")


def strip_control_chars(s: str) -> str:
    return "".join(ch for ch in s if ch.isprintable())


def tokenize(line: str) -> List[str]:
    s = unicodedata.normalize("NFKC", line)
    # tabs, form feeds etc. separate tokens; other control chars are dropped
    s = WHITESPACE_RE.sub(" ", s)
    s = strip_control_chars(s)
    return TOKEN_RE.findall(s)


def simple_tokenize(line: str) -> List[str]:
    return line.split()


def read_lines(path) -> Iterator[str]:
    """Lazily yield the lines of a UTF-8 text file without their newline."""
    with open(path, "r", encoding="utf-8") as f:
        for line in f:
            yield line.rstrip("\r\n")
