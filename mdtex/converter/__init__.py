from .runner import main
from .pipeline import MarkdownToTexConverter, markdown_to_tex
from .config import ConvertConfig
from .renderer import LatexRenderer, UnsupportedConstructError

__all__ = [
    "MarkdownToTexConverter",
    "markdown_to_tex",
    "ConvertConfig",
    "LatexRenderer",
    "UnsupportedConstructError",
    "main",
]
