import re

from bs4 import BeautifulSoup
from bs4.element import (
    CData,
    NavigableString,
    RubyParenthesisString,
    RubyTextString,
    Script,
    Stylesheet,
    TemplateString,
)

MAX_SNIPPET_LENGTH = 300
ELLIPSIS = "…"

_WHITESPACE = re.compile(r"\s+")
# bs4 files <script>/<style>/<template>/<rt>/<rp> bodies under their own string types
# and get_text() skips them by default; only the tags should go.
_TEXT_TYPES = (
    NavigableString,
    CData,
    Script,
    Stylesheet,
    TemplateString,
    RubyTextString,
    RubyParenthesisString,
)


def clean_snippet(text: str) -> str:
    """Strip HTML tags from a search snippet and truncate it for display.

    The parser drops tags and decodes entities (quotes included) in a single
    pass, so an escaped ``&lt;b&gt;`` ends up as the literal text ``<b>`` and
    never as markup. Text inside any element is kept, including
    ``<script>`` and ``<style>`` bodies. Whitespace is collapsed after decoding
    because entities such as ``&nbsp;`` decode to whitespace.
    """
    if not text:
        return ""

    clean = BeautifulSoup(text, "lxml").get_text(types=_TEXT_TYPES)
    clean = _WHITESPACE.sub(" ", clean).strip()

    if len(clean) > MAX_SNIPPET_LENGTH:
        return clean[:MAX_SNIPPET_LENGTH] + ELLIPSIS
    return clean
