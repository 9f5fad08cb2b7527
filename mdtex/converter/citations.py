"""
Author-year citation grammar.

Two surface forms are recognised:

  direct    @smith2020 [p. 5]            -> \\citeauthor{smith2020} (\\citeyear[p.~5]{smith2020})
  indirect  [see @smith2020, p. 5; @doe]  -> (see \\citeauthor{...} \\citeyear[...]{...}; ...)

The tokenizers never raise. Anything that does not match is left for the
Markdown parser to treat as ordinary text.
"""
from __future__ import annotations

import re
from typing import NamedTuple, Optional

from .models import CiteToken
from .text_utils import collapse_whitespace

AUTHOR_KEY = r"[a-z](?:-?[a-z])*[0-9]*[a-z]*"

_AUTHOR_RE = re.compile(r"@(" + AUTHOR_KEY + r")")
_DIRECT_RE = re.compile(r"@(" + AUTHOR_KEY + r")(?: \[([^\]]*)\])?")
_INDIRECT_RE = re.compile(r"\[([^\[\]]*@[^\[\]]+)\]")

# `[` only counts when its bracket holds an `@` before any other bracket.
CITE_START_PATTERN = r"@|\[(?=[^\[\]]*@)"
_START_RE = re.compile(CITE_START_PATTERN)


class _AuthorSpan(NamedTuple):
    key: str
    start: int
    end: int


def find_citation_start(src: str) -> Optional[int]:
    m = _START_RE.search(src or "")
    return m.start() if m else None


def tokenize_direct(src: str) -> Optional[CiteToken]:
    m = _DIRECT_RE.match(src or "")
    if not m:
        return None
    locator = m.group(2)
    return CiteToken(
        raw=m.group(0),
        authors=[m.group(1)],
        pages=[collapse_whitespace(locator) if locator else ""],
        is_indirect=False,
    )


def _scan_authors(content: str) -> list[_AuthorSpan]:
    return [_AuthorSpan(m.group(1), m.start(), m.end()) for m in _AUTHOR_RE.finditer(content)]


def _locator_from_segment(segment: str) -> str:
    """
    The text after an author up to the next author. A locator is present only
    when it opens with a comma; it runs to the first `;` and may not contain
    another `@`.
    """
    if not segment.startswith(","):
        return ""
    body = segment[1:]
    semi = body.find(";")
    if semi != -1:
        body = body[:semi]
    if "@" in body:
        return ""
    return collapse_whitespace(body)


def tokenize_indirect(src: str) -> Optional[CiteToken]:
    m = _INDIRECT_RE.match(src or "")
    if not m:
        return None
    content = m.group(1)
    spans = _scan_authors(content)
    if not spans:
        return None

    authors: list[str] = []
    pages: list[str] = []
    for i, span in enumerate(spans):
        seg_end = spans[i + 1].start if i + 1 < len(spans) else len(content)
        authors.append(span.key)
        pages.append(_locator_from_segment(content[span.end:seg_end]))

    return CiteToken(
        raw=m.group(0),
        authors=authors,
        pages=pages,
        prefatory_text=content[: spans[0].start].strip(),
        is_indirect=True,
    )


def tokenize_citation(src: str) -> Optional[CiteToken]:
    return tokenize_direct(src) or tokenize_indirect(src)


def render_citation(token: CiteToken) -> str:
    if not token.is_indirect:
        author, page = token.authors[0], token.pages[0]
        return f"\\citeauthor{{{author}}} (\\citeyear[{page}]{{{author}}})"

    body = "; ".join(
        f"\\citeauthor{{{author}}} \\citeyear[{page}]{{{author}}}"
        for author, page in zip(token.authors, token.pages)
    )
    if token.prefatory_text:
        return f"({token.prefatory_text} {body})"
    return f"({body})"
