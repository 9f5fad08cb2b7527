import pytest
from mdtex.converter.pipeline import MarkdownToTexConverter, markdown_to_tex
from mdtex.converter.renderer import UnsupportedConstructError


def test_direct_citation_in_paragraph():
    out = markdown_to_tex("As @smith2020 [p. 5] argues, and @doe agrees.\n")
    assert out == (
        "As \\citeauthor{smith2020} (\\citeyear[p.~5]{smith2020}) argues, "
        "and \\citeauthor{doe} (\\citeyear[]{doe}) agrees.\n\n"
    )


def test_indirect_citation_in_paragraph():
    out = markdown_to_tex("This holds [see @a, p. 5; @b].\n")
    assert "This holds (see \\citeauthor{a} \\citeyear[p.~5]{a}; \\citeauthor{b} \\citeyear[]{b})." in out


def test_indirect_citation_without_prefatory_text():
    out = markdown_to_tex("Known [@a, p. 1].\n")
    assert "Known (\\citeauthor{a} \\citeyear[p.~1]{a})." in out


def test_bracket_without_author_stays_text():
    out = markdown_to_tex("Write to [me @ home] today.\n")
    assert "[me @ home]" in out
    assert "\\citeauthor" not in out


def test_uppercase_at_sign_is_not_a_citation():
    assert "@Smith" in markdown_to_tex("Ask @Smith.\n")


def test_ordinary_link_still_parses():
    out = markdown_to_tex("See [docs](https://example.com) now.\n")
    assert "\\href{https://example.com}{docs}" in out


def test_link_label_with_at_sign_is_still_a_link():
    out = markdown_to_tex("Follow [Contact @ HQ](https://example.com) now.\n")
    assert "Follow \\href{https://example.com}{Contact @ HQ} now." in out
    assert "[Contact" not in out


def test_link_label_starting_with_handle_is_still_a_link():
    out = markdown_to_tex("Ping [@Twitter](https://twitter.com/x).\n")
    assert "\\href{https://twitter.com/x}{@Twitter}" in out
    assert "\\citeauthor" not in out


def test_reference_link_label_with_at_sign():
    md = "Reach [ref @ here][x] soon.\n\n[x]: https://example.com\n"
    out = markdown_to_tex(md)
    assert "\\href{https://example.com}{ref @ here}" in out


def test_math_passes_through_unchanged():
    out = markdown_to_tex("Energy $E = mc^2$ and $x_1 + x_2$ hold.\n")
    assert "$E = mc^2$" in out
    assert "$x_1 + x_2$" in out
    assert "\\textasciicircum" not in out


def test_unclosed_dollar_is_escaped():
    assert "costs 5\\$  only" in markdown_to_tex("costs 5$ only\n")


def test_paragraph_reference_is_joined():
    out = markdown_to_tex("As argued (see para. 3), the case fails.\n")
    assert "As argued (see para.~3), the case fails." in out


def test_full_document():
    md = """# Introduction

The claim @smith2020 [ch. 2] is disputed [cf. @doe, 14; @roe].

## Method

- measure $\\alpha$
- compare (see paras. 4-5)

```mdtotex
\\bibliography{refs}
```
"""
    out = markdown_to_tex(md)
    assert out.startswith("\n\\chapter{Introduction}\n\n")
    assert "\\citeauthor{smith2020} (\\citeyear[ch.~2]{smith2020})" in out
    assert "(cf. \\citeauthor{doe} \\citeyear[14]{doe}; \\citeauthor{roe} \\citeyear[]{roe})" in out
    assert "\n\\section{Method}\n\n" in out
    assert "\\item measure $\\alpha$\n" in out
    assert "\\item compare (see paras.~4-5)\n" in out
    assert out.endswith("\\bibliography{refs}\n\n")


def test_unsupported_construct_aborts_whole_document():
    md = "# Fine\n\nStill fine.\n\n| a |\n|---|\n| 1 |\n"
    with pytest.raises(UnsupportedConstructError):
        markdown_to_tex(md)


def test_empty_input():
    assert markdown_to_tex("") == ""


def test_converter_is_reusable():
    conv = MarkdownToTexConverter()
    assert conv.convert("# A\n") == conv.convert("# A\n")
    assert conv.convert("@a\n") == "\\citeauthor{a} (\\citeyear[]{a})\n\n"


def test_convert_file(tmp_path):
    src = tmp_path / "chapter.md"
    src.write_text("## Part\n\nText @a.\n", encoding="utf-8")
    out = MarkdownToTexConverter().convert_file(src)
    assert out == src.with_suffix(".tex").resolve()
    tex = out.read_text(encoding="utf-8")
    assert "\\section{Part}" in tex
    assert "\\citeauthor{a}" in tex


def test_convert_file_with_surrogate_reference(tmp_path):
    src = tmp_path / "odd.md"
    src.write_text("Broken &#xD800; char.\n", encoding="utf-8")
    out = MarkdownToTexConverter().convert_file(src)
    tex = out.read_text(encoding="utf-8")
    assert "Broken" in tex
    assert "\\# xD800;" in tex


def test_convert_file_missing_source(tmp_path):
    with pytest.raises(FileNotFoundError):
        MarkdownToTexConverter().convert_file(tmp_path / "nope.md")
