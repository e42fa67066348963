"""
Text sanitization applied to user input before it is stored.

Every function here returns None for None and is idempotent: applying it to
its own output returns the output unchanged.
"""

import html
import re

import bleach

GMAIL_SUFFIX = "@gmail.com"

ALLOWED_TAGS = frozenset({
    "a", "b", "blockquote", "br", "caption", "code", "col", "colgroup", "div",
    "em", "h1", "h2", "h3", "h4", "h5", "h6", "hr", "i", "img", "li", "ol", "p",
    "pre", "s", "small", "span", "strike", "strong", "sub", "sup", "table",
    "tbody", "td", "tfoot", "th", "thead", "tr", "u", "ul",
})
ALLOWED_ATTRIBUTES = [
    "align", "alt", "border", "class", "colspan", "height", "href", "rowspan",
    "src", "target", "title", "width",
]
ALLOWED_URL_SCHEMES = frozenset({"http", "https", "mailto"})

# Removed together with their content before cleaning
_BLOCK_RE = re.compile(r"<(script|style)\b[^>]*>.*?</\1\s*>", re.IGNORECASE | re.DOTALL)


def sanitize_google_id(raw: str | None) -> str | None:
    """Trim the id and keep only the part before the first @ of a gmail address."""
    if raw is None:
        return None
    sanitized = raw.strip()
    if sanitized.lower().endswith(GMAIL_SUFFIX):
        sanitized = sanitized.split("@")[0]
    return sanitized.strip()


def sanitize_email(raw: str | None) -> str | None:
    if raw is None:
        return None
    return raw.strip()


def sanitize_name(raw: str | None) -> str | None:
    """Trim and collapse runs of whitespace to a single space."""
    if raw is None:
        return None
    return " ".join(raw.split())


def sanitize_title(raw: str | None) -> str | None:
    return sanitize_name(raw)


def sanitize_text_field(raw: str | None) -> str | None:
    if raw is None:
        return None
    return raw.strip()


def sanitize_for_html(raw: str | None) -> str | None:
    """
    Escape HTML special characters.

    The input is unescaped first so that already escaped text is not
    escaped a second time.
    """
    if raw is None:
        return None
    return html.escape(html.unescape(raw), quote=True)


def desanitize_from_html(sanitized: str | None) -> str | None:
    if sanitized is None:
        return None
    return html.unescape(sanitized)


def _remove_blocks(text: str) -> str:
    previous = None
    while text != previous:
        previous, text = text, _BLOCK_RE.sub("", text)
    return text


def sanitize_for_rich_text(raw: str | None) -> str | None:
    """
    Reduce HTML to an allowlist of formatting tags and attributes.

    Script and style blocks are removed with their content, other disallowed
    tags are dropped while their text is kept, and stray angle brackets are
    escaped. Removing a tag can join the pieces of another one together, so
    the cleaning repeats until the text no longer changes.
    """
    if raw is None:
        return None
    previous, current = None, raw
    while current != previous:
        previous = current
        current = bleach.clean(
            _remove_blocks(current),
            tags=ALLOWED_TAGS,
            attributes=ALLOWED_ATTRIBUTES,
            protocols=ALLOWED_URL_SCHEMES,
            strip=True,
            strip_comments=True,
        )
    return current
