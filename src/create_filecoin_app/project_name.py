"""Project name sanitization for use as a directory name."""

import re

MAX_NAME_BYTES = 255

_ILLEGAL = re.compile(r'[/\?<>\\:\*\|"]')
_CONTROL = re.compile(r'[\x00-\x1f\x80-\x9f]')
_RESERVED = re.compile(r'^\.+$')
_WINDOWS_RESERVED = re.compile(r'^(con|prn|aux|nul|com[0-9]|lpt[0-9])(\..*)?$', re.IGNORECASE)
_WINDOWS_TRAILING = re.compile(r'[\. ]+$')


def _truncate_utf8(name: str, limit: int) -> str:
    encoded = name.encode("utf-8")
    if len(encoded) <= limit:
        return name
    return encoded[:limit].decode("utf-8", errors="ignore")


def sanitize_project_name(name: str) -> str:
    """Strip characters that are unsafe in a directory name.

    Path separators, reserved punctuation and control characters are
    removed, "." / ".." and Windows device names are dropped entirely,
    and trailing dots and spaces are trimmed. The result may be empty.
    """
    result = _ILLEGAL.sub("", name)
    result = _CONTROL.sub("", result)
    result = _RESERVED.sub("", result)
    result = _WINDOWS_RESERVED.sub("", result)
    result = _WINDOWS_TRAILING.sub("", result)
    return _truncate_utf8(result, MAX_NAME_BYTES)
