"""Infrastructure: base64 transcoding of text."""

from __future__ import annotations

import base64
import binascii

from scriptkit.exceptions import Base64DecodeError

_ENCODING = "utf-8"


def base64_transcode(text: str, decode: bool = False) -> str:
    """Encode *text* to base64, or decode it when *decode* is ``True``.

    Only a real ``True`` selects decode mode; truthy non-booleans
    (``1``, ``"yes"``) still encode.  Decoded bytes that are not valid
    UTF-8 are replaced with U+FFFD.

    Raises
    ------
    Base64DecodeError
        When decoding input that is not valid base64.
    """
    if decode is True:
        try:
            raw = base64.b64decode(text, validate=True)
        except (binascii.Error, ValueError) as exc:
            raise Base64DecodeError(
                f"Input is not valid base64: {exc}",
                hint="Base64 text uses A-Z, a-z, 0-9, '+', '/' and '=' padding.",
            ) from exc
        return raw.decode(_ENCODING, errors="replace")

    return base64.b64encode(text.encode(_ENCODING)).decode("ascii")
