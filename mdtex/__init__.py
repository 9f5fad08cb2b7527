from .converter import MarkdownToTexConverter, markdown_to_tex, ConvertConfig, UnsupportedConstructError

__all__ = ["MarkdownToTexConverter", "markdown_to_tex", "ConvertConfig", "UnsupportedConstructError"]
