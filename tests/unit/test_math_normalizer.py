"""Unit tests for math markup normalization."""

from bs4 import BeautifulSoup

from domain.parsers.math_normalizer import normalize_math


def normalized(html: str) -> str:
    soup = BeautifulSoup(f'<div id="fragment">{html}</div>', "lxml")
    return normalize_math(soup.find("div", id="fragment")).decode_contents()


def test_tex_math_becomes_inline_delimiters():
    html = '<p>Let <span class="tex-math"> a_i </span> be given.</p>'

    assert normalized(html) == "<p>Let <span>\\(a_i\\)</span> be given.</p>"


def test_every_math_element_is_rewritten():
    html = '<span class="tex-math">n</span> and <span class="tex-math">m</span>'

    result = normalized(html)

    assert result == "<span>\\(n\\)</span> and <span>\\(m\\)</span>"
    assert "tex-math" not in result


def test_fragment_without_math_is_unchanged():
    html = "<p>No formulas here.</p>"

    assert normalized(html) == html


def test_latex_special_characters_are_escaped_as_text():
    html = '<span class="tex-math">1 &lt; n &lt; 10</span>'

    assert normalized(html) == "<span>\\(1 &lt; n &lt; 10\\)</span>"


def test_normalize_math_edits_tag_in_place():
    soup = BeautifulSoup('<div id="x"><i class="tex-math">k^2</i></div>', "lxml")
    fragment = soup.find("div", id="x")

    result = normalize_math(fragment)

    assert result is fragment
    assert fragment.get_text() == "\\(k^2\\)"
    assert fragment.find("i") is None
