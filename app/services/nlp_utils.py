"""Lightweight text utilities for resume analytics.

This module has no heavyweight dependencies so the engine stays cheap enough
to run on every edit. It provides:
- Bullet normalization for description fields (string or list form)
- Tokenization that keeps tech terms such as "c++", "next.js" and "ci/cd"
- Longest-match phrase classification against the fixed lexicons
- Simple lemmatization heuristics for keyword overlap
- Job-description term frequencies with stop-word filtering
"""

from __future__ import annotations

import re
from collections import Counter
from dataclasses import dataclass
from typing import Any, Iterable, Sequence

from app.services.lexicons import LEXICON_CATEGORIES, STOP_WORDS


BULLET_MARKER_PATTERN = re.compile(r"^[•\-*]\s*")

TOKEN_PATTERN = re.compile(r"\.net\b|[a-z0-9](?:[a-z0-9+#.\-]*[a-z0-9+#])?")


def get_description_bullets(description: Any) -> list[str]:
    """
    Normalize a description-like field into a list of bullets.

    Lists are returned without blank entries. Strings are split on newlines,
    with any leading bullet marker stripped. Anything else yields no bullets.
    """
    if isinstance(description, (list, tuple)):
        return [item for item in description if isinstance(item, str) and item.strip()]

    if isinstance(description, str) and description.strip():
        bullets = []
        for line in description.split("\n"):
            line = BULLET_MARKER_PATTERN.sub("", line.strip()).strip()
            if line:
                bullets.append(line)
        return bullets

    return []


def tokenize(text: str) -> list[str]:
    return TOKEN_PATTERN.findall((text or "").lower())


def lemmatize(token: str) -> str:
    # Very small heuristic lemmatizer good enough for keyword matching.
    if len(token) <= 3:
        return token

    if token.endswith("ies") and len(token) > 4:
        return token[:-3] + "y"
    if token.endswith("sses"):
        return token[:-2]
    if token.endswith(("xes", "ches", "shes")) and len(token) > 4:
        return token[:-2]
    if token.endswith("s") and len(token) > 3 and not token.endswith("ss"):
        return token[:-1]
    if token.endswith("ing") and len(token) > 5:
        return token[:-3]
    if token.endswith("ed") and len(token) > 4:
        return token[:-2]
    return token


@dataclass(frozen=True)
class Term:
    """One classified span of the token stream."""

    text: str
    category: str | None = None


class NLPProcessor:
    """Lexicon matcher shared by keyword counting and job matching."""

    def __init__(self, lexicons: Sequence[tuple[str, Iterable[str]]] = LEXICON_CATEGORIES) -> None:
        self.index: dict[tuple[str, ...], str] = {}
        for category, terms in lexicons:
            for term in terms:
                key = tuple(tokenize(term))
                # Earlier lexicons win when a term is listed twice
                if key and key not in self.index:
                    self.index[key] = category
        self.max_phrase_length = max((len(k) for k in self.index), default=1)

    def extract_terms(self, text: str) -> list[Term]:
        """
        Split text into terms, preferring the longest lexicon phrase at each
        position. A matched phrase is consumed so its words are not counted
        again on their own.
        """
        tokens = [self._lexicon_token(token) for token in tokenize(text)]
        terms: list[Term] = []
        i = 0
        while i < len(tokens):
            for size in range(min(self.max_phrase_length, len(tokens) - i), 0, -1):
                key = tuple(tokens[i:i + size])
                category = self.index.get(key)
                if category:
                    terms.append(Term(" ".join(key), category))
                    i += size
                    break
            else:
                terms.append(Term(tokens[i]))
                i += 1
        return terms

    def _lexicon_token(self, token: str) -> str:
        # "node.js" style names fall back to the bare lexicon entry ("node")
        if token.endswith(".js") and (token,) not in self.index and (token[:-3],) in self.index:
            return token[:-3]
        return token

    def classify(self, chunks: Iterable[str]) -> Counter:
        """Count lexicon hits per category across independent text chunks."""
        counts: Counter = Counter()
        for chunk in chunks:
            for term in self.extract_terms(chunk):
                if term.category:
                    counts[term.category] += 1
        return counts

    def category_of(self, term: str) -> str | None:
        return self.index.get(tuple(tokenize(term)))

    def vocabulary(self, chunks: Iterable[str]) -> set[str]:
        """All terms, raw tokens and their lemmas found in the given text."""
        vocab: set[str] = set()
        for chunk in chunks:
            for term in self.extract_terms(chunk):
                vocab.add(term.text)
            for token in tokenize(chunk):
                vocab.add(token)
                vocab.add(lemmatize(token))
        return vocab

    def signal_terms(self, text: str) -> tuple[Counter, list[str]]:
        """
        Frequencies of meaningful terms in a job description, plus the order
        in which each term first appears. Stop words and very short tokens are
        dropped unless they are lexicon terms (e.g. "ai", "s3").
        """
        frequency: Counter = Counter()
        order: list[str] = []
        for term in self.extract_terms(text):
            if not term.category:
                if term.text in STOP_WORDS or len(term.text) < 3 or not re.search(r"[a-z]", term.text):
                    continue
            if term.text not in frequency:
                order.append(term.text)
            frequency[term.text] += 1
        return frequency, order
