import pytest


def test_imports():
    """
    Smoke test to ensure critical modules can be imported without error.
    This catches syntax errors, missing dependencies, or circular imports.
    """
    try:
        import mdtex
        from mdtex.converter import MarkdownToTexConverter, LatexRenderer, main
        from mdtex.converter.extensions import default_extensions
        import md_to_tex
    except ImportError as e:
        pytest.fail(f"Failed to import core modules: {e}")
    except Exception as e:
        pytest.fail(f"Unexpected error during import: {e}")


def test_converter_init():
    """
    The parser must accept our renderer and every plugin we configure.
    """
    from mdtex import MarkdownToTexConverter

    try:
        conv = MarkdownToTexConverter()
        assert conv.convert("Hello.\n") == "Hello.\n\n"
    except Exception as e:
        pytest.fail(f"Failed to initialize converter: {e}")
