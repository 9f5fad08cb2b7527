from __future__ import annotations

import re
from typing import Any, Callable, Iterable, Optional

from pydantic import BaseModel

from .citations import CITE_START_PATTERN, render_citation, tokenize_citation
from .models import CiteToken, MathToken, ParaRefToken


class InlineExtension:
    """
    A custom inline grammar the Markdown parser tries while scanning text.

    `pattern` is the trigger the parser scans for; `start` reports where it
    first fires. `tokenize` is anchored at the start of `src` and returns
    None when the text there is not this construct.
    """

    name: str = ""
    level: str = "inline"
    pattern: str = ""

    def start(self, src: str) -> Optional[int]:
        m = re.search(self.pattern, src or "")
        return m.start() if m else None

    def tokenize(self, src: str) -> Optional[BaseModel]:
        raise NotImplementedError

    def render(self, token: Any) -> str:
        raise NotImplementedError


class MathExtension(InlineExtension):
    name = "latex"
    pattern = r"\$"

    _rule = re.compile(r"\$([^$\n]+)\$")

    def tokenize(self, src: str) -> Optional[MathToken]:
        m = self._rule.match(src or "")
        if not m:
            return None
        return MathToken(raw=m.group(0), expression=m.group(1))

    def render(self, token: MathToken) -> str:
        return "$" + token.expression + "$"


class CitationExtension(InlineExtension):
    name = "cite"
    pattern = CITE_START_PATTERN

    def tokenize(self, src: str) -> Optional[CiteToken]:
        return tokenize_citation(src)

    def render(self, token: CiteToken) -> str:
        return render_citation(token)


class ParaRefExtension(InlineExtension):
    """(see para. 3) -> (see para.~3)"""

    name = "para"
    pattern = r"\((?=.*?paras?\. )"

    _rule = re.compile(r"\((.*?paras?\.) (.*?)\)")

    def tokenize(self, src: str) -> Optional[ParaRefToken]:
        m = self._rule.match(src or "")
        if not m:
            return None
        return ParaRefToken(raw=m.group(0), before_space=m.group(1), after_space=m.group(2))

    def render(self, token: ParaRefToken) -> str:
        return f"({token.before_space}~{token.after_space})"


def default_extensions() -> list[InlineExtension]:
    return [MathExtension(), CitationExtension(), ParaRefExtension()]


def inline_extensions_plugin(extensions: Iterable[InlineExtension]) -> Callable[[Any], None]:
    """
    Build a mistune plugin registering each extension, in order, ahead of
    the built-in link rule.
    """
    extensions = list(extensions)

    def _fall_through(inline, name: str, pos: int, state) -> Optional[int]:
        # A declined extension leaves the position to the rules after it,
        # so `[label @ x](url)` is still a link.
        rules = inline.rules
        if name not in rules:
            return None
        for other in rules[rules.index(name) + 1:]:
            if other not in inline.specification:
                continue
            m = inline.compile_sc([other]).match(state.src, pos)
            if not m:
                continue
            end = inline.parse_method(m, state)
            if end:
                return end
        return None

    def _make_parse(ext: InlineExtension):
        def _parse(inline, m, state):
            pos = m.start()
            token = ext.tokenize(state.src[pos:])
            if token is None:
                return _fall_through(inline, ext.name, pos, state)
            state.append_token({"type": ext.name, "raw": token.raw, "attrs": {"token": token}})
            return pos + len(token.raw)

        return _parse

    def _make_render(ext: InlineExtension):
        def _render(renderer, raw: str, token: BaseModel) -> str:
            return ext.render(token)

        return _render

    def plugin(md) -> None:
        for ext in extensions:
            md.inline.register(ext.name, ext.pattern, _make_parse(ext), before="link")
            if md.renderer is not None:
                md.renderer.register(ext.name, _make_render(ext))

    return plugin
