from __future__ import annotations

from pathlib import Path
from typing import Iterable, Optional

import mistune

from .config import ConvertConfig
from .extensions import InlineExtension, default_extensions, inline_extensions_plugin
from .renderer import LatexRenderer

# Parsed only so that they fail loudly in the renderer instead of slipping
# through as plain text.
_UNSUPPORTED_SYNTAX_PLUGINS = ("table", "strikethrough", "task_lists")


class MarkdownToTexConverter:
    def __init__(
        self,
        cfg: Optional[ConvertConfig] = None,
        extensions: Optional[Iterable[InlineExtension]] = None,
    ):
        self.cfg = cfg or ConvertConfig()
        self.extensions = list(extensions) if extensions is not None else default_extensions()
        self.renderer = LatexRenderer(self.cfg)
        self.md = mistune.create_markdown(
            renderer=self.renderer,
            plugins=[*_UNSUPPORTED_SYNTAX_PLUGINS, inline_extensions_plugin(self.extensions)],
        )

    def convert(self, markdown: str) -> str:
        if not markdown:
            return ""
        src = markdown.replace("\r\n", "\n").replace("\r", "\n")
        return self.md(src)

    def convert_file(self, src_path: str | Path, out_path: Optional[str | Path] = None) -> Path:
        src_path = Path(src_path).resolve()
        if not src_path.exists():
            raise FileNotFoundError(f"Markdown source not found: {src_path}")
        out_path = Path(out_path).resolve() if out_path else src_path.with_suffix(".tex")

        tex = self.convert(src_path.read_text(encoding=self.cfg.encoding))

        out_path.parent.mkdir(parents=True, exist_ok=True)
        # newline="" keeps the configured line ending as written
        with open(out_path, "w", encoding=self.cfg.encoding, newline="") as f:
            f.write(tex)
        return out_path


def markdown_to_tex(markdown: str, cfg: Optional[ConvertConfig] = None) -> str:
    return MarkdownToTexConverter(cfg).convert(markdown)
