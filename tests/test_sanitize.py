import pytest

from coursekit import sanitize


@pytest.mark.parametrize(
    "function",
    [
        sanitize.sanitize_google_id,
        sanitize.sanitize_email,
        sanitize.sanitize_name,
        sanitize.sanitize_title,
        sanitize.sanitize_text_field,
        sanitize.sanitize_for_html,
        sanitize.desanitize_from_html,
        sanitize.sanitize_for_rich_text,
    ],
)
def test_none_passes_through(function):
    assert function(None) is None


def test_sanitize_google_id():
    assert sanitize.sanitize_google_id(" jwong ") == "jwong"
    assert sanitize.sanitize_google_id("jwong@GMAIL.COM") == "jwong"
    assert sanitize.sanitize_google_id("jwong@uni.edu") == "jwong@uni.edu"
    assert sanitize.sanitize_google_id("jwong@gmail.com@gmail.com") == "jwong"


def test_sanitize_name():
    assert sanitize.sanitize_name("  Jean \t  Wong\n") == "Jean Wong"
    assert sanitize.sanitize_email("  jean@uni.edu ") == "jean@uni.edu"
    assert sanitize.sanitize_text_field("  a  b ") == "a  b"


def test_sanitize_for_html():
    raw = "Tom <b>&</b> \"Jerry\""

    sanitized = sanitize.sanitize_for_html(raw)

    assert sanitized == "Tom &lt;b&gt;&amp;&lt;/b&gt; &quot;Jerry&quot;"
    assert sanitize.sanitize_for_html(sanitized) == sanitized
    assert sanitize.desanitize_from_html(sanitized) == raw


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("<p>Plain <b>bold</b></p>", "<p>Plain <b>bold</b></p>"),
        ('<p onclick="x()">Hi<script>alert(1)</script></p>', "<p>Hi</p>"),
        ('<a href="javascript:alert(1)" title="t">x</a>', '<a title="t">x</a>'),
        ('<img src="https://x/y.png" onerror="alert(1)">', '<img src="https://x/y.png">'),
        ("<iframe src='https://x'></iframe>text", "text"),
        ("a < b", "a &lt; b"),
        ("if a < b > c", "if a &lt; b &gt; c"),
        ("<scr<script></script>ipt>alert(1)</script>", ""),
        ("<!-- hidden -->shown", "shown"),
    ],
)
def test_sanitize_for_rich_text(raw, expected):
    sanitized = sanitize.sanitize_for_rich_text(raw)

    assert sanitized == expected
    assert sanitize.sanitize_for_rich_text(sanitized) == sanitized


@pytest.mark.parametrize(
    "function",
    [
        sanitize.sanitize_google_id,
        sanitize.sanitize_email,
        sanitize.sanitize_name,
        sanitize.sanitize_title,
        sanitize.sanitize_text_field,
        sanitize.sanitize_for_html,
        sanitize.sanitize_for_rich_text,
    ],
)
@pytest.mark.parametrize(
    "raw",
    [
        "a@gmail.com@gmail.com",
        " X@GMAIL.COM ",
        "x @gmail.com",
        "   \t\n ",
        "",
        "  Jean \t Wong  ",
        "Tom & <b>Jerry</b> &amp; co",
        "if a < b > c",
    ],
)
def test_sanitizers_are_idempotent(function, raw):
    once = function(raw)

    assert function(once) == once
