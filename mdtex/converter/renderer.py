from __future__ import annotations

from typing import Any, Optional

from mistune.core import BaseRenderer, BlockState

from .config import ConvertConfig
from .text_utils import html_unescape, tex_escape, unescape_code

_SECTION_COMMANDS: dict[int, str] = {
    1: "chapter",
    2: "section",
    3: "subsection",
    4: "subsubsection",
    5: "paragraph",
    6: "subparagraph",
}


class UnsupportedConstructError(RuntimeError):
    """A Markdown construct with no LaTeX rendering; aborts the document."""

    def __init__(self, construct: str, detail: str = ""):
        self.construct = construct
        msg = f"{construct} are not supported."
        if detail:
            msg = f"{msg} [{detail!r}]"
        super().__init__(msg)


def _plain_text(tokens: list[dict[str, Any]]) -> str:
    out: list[str] = []
    for tok in tokens or []:
        if "raw" in tok:
            out.append(tok["raw"])
        elif "children" in tok:
            out.append(_plain_text(tok["children"]))
    return "".join(out)


class LatexRenderer(BaseRenderer):
    """Render mistune tokens to LaTeX, one method per element kind."""

    NAME = "latex"

    def __init__(self, cfg: Optional[ConvertConfig] = None):
        super().__init__()
        self.cfg = cfg or ConvertConfig()
        self.eol = self.cfg.line_ending

    def render_token(self, token: dict[str, Any], state: BlockState) -> str:
        func = self._get_method(token["type"])
        attrs = token.get("attrs")

        if token["type"] == "image" and "children" in token:
            # The label names a file to include, so it must reach us unescaped.
            text = _plain_text(token.get("children", []))
        elif "raw" in token:
            text = token["raw"]
        elif "children" in token:
            text = self.render_tokens(token["children"], state)
        else:
            if attrs:
                return func(**attrs)
            return func()

        if attrs:
            return func(text, **attrs)
        return func(text)

    # -- blocks --------------------------------------------------------------

    def blank_line(self) -> str:
        return ""

    def block_text(self, text: str) -> str:
        return text

    def paragraph(self, text: str) -> str:
        return text + self.eol + self.eol

    def heading(self, text: str, level: int, **attrs: Any) -> str:
        command = "\\" + _SECTION_COMMANDS[level]
        if self.cfg.unnumbered_headings:
            command += "*"
        return self.eol + command + "{" + text + "}" + self.eol + self.eol

    def thematic_break(self) -> str:
        return self.eol + "\\clearpage" + self.eol + self.eol

    def block_code(self, code: str, info: Optional[str] = None, **attrs: Any) -> str:
        lang = info.split()[0] if info and info.strip() else ""
        if lang == self.cfg.passthrough_marker:
            return code.rstrip("\r\n") + self.eol + self.eol
        raise UnsupportedConstructError("Code blocks", lang)

    def list(self, text: str, ordered: bool, **attrs: Any) -> str:
        env = "enumerate" if ordered else "itemize"
        return (
            self.eol
            + "\\begin{" + env + "}" + self.eol
            + text
            + "\\end{" + env + "}" + self.eol
        )

    def list_item(self, text: str) -> str:
        return "\\item " + text.strip() + self.eol

    def block_quote(self, text: str) -> str:
        raise UnsupportedConstructError("Blockquotes")

    def block_html(self, html: str) -> str:
        raise UnsupportedConstructError("HTML blocks", html.strip())

    def block_error(self, text: str) -> str:
        raise UnsupportedConstructError("Malformed blocks", text.strip())

    # -- table / task list / strikethrough plugins ---------------------------

    def table(self, text: str) -> str:
        raise UnsupportedConstructError("Tables")

    def table_head(self, text: str) -> str:
        raise UnsupportedConstructError("Table heads")

    def table_body(self, text: str) -> str:
        raise UnsupportedConstructError("Table bodies")

    def table_row(self, text: str) -> str:
        raise UnsupportedConstructError("Table rows")

    def table_cell(self, text: str, align: Optional[str] = None, head: bool = False) -> str:
        raise UnsupportedConstructError("Table cells")

    def task_list_item(self, text: str, checked: bool = False) -> str:
        raise UnsupportedConstructError("Checkboxes")

    def strikethrough(self, text: str) -> str:
        raise UnsupportedConstructError("Strikethrough", text)

    # -- inlines -------------------------------------------------------------

    def text(self, text: str) -> str:
        return tex_escape(html_unescape(text))

    def strong(self, text: str) -> str:
        return "\\textbf{" + text + "}"

    def emphasis(self, text: str) -> str:
        return "\\emph{" + text + "}"

    def codespan(self, text: str) -> str:
        code = unescape_code(text)
        marker = self.cfg.passthrough_marker
        if code.startswith(marker):
            return code.replace(marker, "", 1).strip()
        return "\\texttt{" + code + "}"

    def linebreak(self) -> str:
        return "\\\\" + self.eol

    def softbreak(self) -> str:
        return self.eol

    def link(self, text: str, url: str, title: Optional[str] = None) -> str:
        # needs \usepackage{hyperref}
        return "\\href{" + url + "}{" + text + "}"

    def image(self, text: str, url: str, title: Optional[str] = None) -> str:
        return "\\input{" + text + "}" + self.eol

    def inline_html(self, html: str) -> str:
        raise UnsupportedConstructError("Inline HTML", html)
