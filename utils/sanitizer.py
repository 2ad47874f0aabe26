"""
HTML sanitization for AI-generated report fragments.

Claude's reportHtml is untrusted: it is cleaned against a narrow allow-list
before the results page marks it safe.
"""

import re

import bleach
from bleach.sanitizer import Cleaner

ALLOWED_TAGS = [
    "h2", "h3", "h4",
    "p", "br", "hr", "blockquote",
    "strong", "em", "b", "i", "code",
    "ul", "ol", "li",
    "a",
]

ALLOWED_ATTRIBUTES = {
    "a": ["href", "title"],
}

ALLOWED_PROTOCOLS = ["http", "https", "mailto"]

_SCRIPT_STYLE_RE = re.compile(
    r"<(script|style)\b[^>]*>.*?</\1\s*>", re.IGNORECASE | re.DOTALL
)


def _force_safe_link_attrs(attrs, new=False):
    """bleach linkify callback: open links in a new tab without an opener"""
    attrs[(None, "target")] = "_blank"
    attrs[(None, "rel")] = "noopener noreferrer nofollow"
    return attrs


_cleaner = Cleaner(
    tags=ALLOWED_TAGS,
    attributes=ALLOWED_ATTRIBUTES,
    protocols=ALLOWED_PROTOCOLS,
    strip=True,
    strip_comments=True,
)


def sanitize_html(raw_html: str) -> str:
    """
    Sanitize an AI-generated HTML fragment.

    Disallowed tags are stripped (their text is kept), attributes outside the
    allow-list are dropped, and hrefs with non-http(s)/mailto schemes are
    removed. Script and style bodies are removed entirely.
    """
    if not raw_html:
        return ""

    # bleach keeps the text of stripped tags; script/style bodies must not survive as text
    raw_html = _SCRIPT_STYLE_RE.sub("", raw_html)

    cleaned = _cleaner.clean(raw_html)
    cleaned = bleach.linkify(
        cleaned,
        callbacks=[_force_safe_link_attrs],
        skip_tags=["code"],
        parse_email=False,
    )
    return cleaned.strip()
