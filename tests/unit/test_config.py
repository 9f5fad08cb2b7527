import pytest
from mdtex.config import load_settings
from mdtex.converter.config import ConvertConfig

_VARS = ("MDTEX_PASSTHROUGH_MARKER", "MDTEX_UNNUMBERED", "MDTEX_LINE_ENDING", "MDTEX_ENCODING")


@pytest.fixture
def clean_env(monkeypatch):
    for name in _VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


def test_defaults(clean_env):
    s = load_settings()
    assert s.passthrough_marker == "mdtotex"
    assert s.unnumbered_headings is False
    assert s.line_ending == "\n"
    assert s.encoding == "utf-8"
    assert ConvertConfig.from_settings(s) == ConvertConfig()


def test_env_overrides(clean_env):
    clean_env.setenv("MDTEX_PASSTHROUGH_MARKER", "\"rawtex\"")
    clean_env.setenv("MDTEX_UNNUMBERED", "yes")
    clean_env.setenv("MDTEX_LINE_ENDING", "CRLF")
    cfg = ConvertConfig.from_settings(load_settings())
    assert cfg.passthrough_marker == "rawtex"
    assert cfg.unnumbered_headings is True
    assert cfg.line_ending == "\r\n"


def test_bad_line_ending(clean_env):
    clean_env.setenv("MDTEX_LINE_ENDING", "cr")
    with pytest.raises(ValueError):
        load_settings()
