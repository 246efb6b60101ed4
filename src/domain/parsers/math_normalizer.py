"""Rewrites Codeforces math markup into inline-math delimiters."""

from bs4 import BeautifulSoup, Tag

MATH_SELECTOR = ".tex-math"


def normalize_math(fragment: Tag) -> Tag:
    """
    Replace every `.tex-math` element in fragment with `<span>\\(latex\\)</span>`.

    Modifies fragment in place and returns it.
    """
    factory = BeautifulSoup("", "lxml")
    for element in fragment.select(MATH_SELECTOR):
        latex = element.get_text().strip()
        wrapper = factory.new_tag("span")
        wrapper.string = f"\\({latex}\\)"
        element.replace_with(wrapper)
    return fragment
