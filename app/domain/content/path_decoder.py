"""
Decoding of form-encoded content folder paths.

Pure function, no IO. Blank paths are returned untouched so that
callers can tell "no path" (root listing) from an explicit one.
"""

import re
from typing import Optional
from urllib.parse import unquote_plus

from app.domain.content.errors import ContentDecodingError

PATH_ENCODING = "utf-8"

# A '%' must be followed by two hex digits.
_MALFORMED_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")


def decode_content_path(path: Optional[str]) -> Optional[str]:
    """Form-decode a content path as UTF-8.

    ``+`` decodes to a space and ``%XX`` escapes to their UTF-8 bytes.

    Args:
        path: Raw ``path`` query value, possibly None or empty.

    Returns:
        The input unchanged when blank, otherwise its decoded form.

    Raises:
        ContentDecodingError: If an escape is malformed or the decoded
            bytes are not valid UTF-8.
    """
    if path is None or not path.strip():
        return path
    malformed = _MALFORMED_ESCAPE.search(path)
    if malformed:
        raise ContentDecodingError(
            path, f"malformed escape at position {malformed.start()}"
        )
    try:
        return unquote_plus(path, encoding=PATH_ENCODING, errors="strict")
    except UnicodeDecodeError as exc:
        raise ContentDecodingError(path, str(exc)) from exc
