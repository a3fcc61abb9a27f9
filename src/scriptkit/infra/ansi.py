"""Infrastructure: ANSI escape-sequence removal.

Only escape sequences are removed (CSI colour and cursor codes, OSC
sequences such as hyperlinks).  Carriage returns, form feeds and other
plain control characters are part of the text and are kept.
"""

from __future__ import annotations

import re

_ANSI_RE = re.compile(
    r"[\x1b\x9b][\[\]()#;?]*"
    r"(?:"
    r"(?:(?:(?:;[-a-zA-Z\d/#&.:=?%@~_]+)*"
    r"|[a-zA-Z\d]+(?:;[-a-zA-Z\d/#&.:=?%@~_]*)*)?\x07)"
    r"|(?:(?:\d{1,4}(?:;\d{0,4})*)?[\dA-PR-TZcf-nq-uy=><~])"
    r")"
)


def strip_ansi(text: str) -> str:
    """Return *text* with every ANSI escape sequence removed."""
    if not text:
        return ""
    return _ANSI_RE.sub("", text)
