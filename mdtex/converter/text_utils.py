from __future__ import annotations

import re

# Named entities the Markdown source is expected to carry. Anything else is
# left as written so it stays visible in the LaTeX output.
_NAMED_ENTITIES: dict[str, str] = {
    "amp": "&",
    "lt": "<",
    "gt": ">",
    "quot": "\"",
    "apos": "'",
    "colon": ":",
    "nbsp": " ",
}

# Code spans only ever see these five (the escapes a Markdown lexer emits).
_CODE_ENTITIES: tuple[tuple[str, str], ...] = (
    ("&amp;", "&"),
    ("&lt;", "<"),
    ("&gt;", ">"),
    ("&quot;", "\""),
    ("&#39;", "'"),
)

_ENTITY_RE = re.compile(r"&(#[xX][0-9a-fA-F]+|#\d+|\w+);")


def _build_mojibake_en_dash() -> str:
    """
    UTF-8 en dash decoded as cp1252, e.g. text pasted from a mis-encoded export.
    """
    return "–".encode("utf-8").decode("cp1252")


# Order matters: the backslash goes first so later replacements are not
# escaped twice, and the mojibake dash goes before `~`/`^`.
_TEX_REPL: tuple[tuple[str, str], ...] = (
    ("\\", "\\textbackslash "),
    ("&", "\\& "),
    ("%", "\\% "),
    ("$", "\\$ "),
    ("#", "\\# "),
    ("_", "\\_ "),
    ("{", "\\{ "),
    ("}", "\\} "),
    (_build_mojibake_en_dash(), "--"),
    ("~", "\\textasciitilde "),
    ("^", "\\textasciicircum "),
)


def html_unescape(text: str) -> str:
    if not text or "&" not in text:
        return text or ""

    def _repl(m: re.Match) -> str:
        name = m.group(1)
        if name.startswith("#"):
            try:
                if name[1:2] in ("x", "X"):
                    code = int(name[2:], 16)
                else:
                    code = int(name[1:])
                # Lone surrogates cannot be encoded to UTF-8 on write.
                if 0xD800 <= code <= 0xDFFF:
                    return m.group(0)
                return chr(code)
            except (ValueError, OverflowError):
                return m.group(0)
        return _NAMED_ENTITIES.get(name.lower(), m.group(0))

    return _ENTITY_RE.sub(_repl, text)


def unescape_code(text: str) -> str:
    if not text:
        return ""
    for k, v in _CODE_ENTITIES:
        text = text.replace(k, v)
    return text


def tex_escape(text: str) -> str:
    """
    Escape the characters that are special to TeX: \\ & % $ # _ { } ~ ^
    """
    if not text:
        return ""
    for k, v in _TEX_REPL:
        if k in text:
            text = text.replace(k, v)
    return text


def collapse_whitespace(text: str, joiner: str = "~") -> str:
    """Trim, then join internal whitespace runs with a non-breaking tie."""
    return re.sub(r"\s+", joiner, (text or "").strip())
