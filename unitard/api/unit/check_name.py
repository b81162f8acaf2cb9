"""Unit name validation."""

import re

# Used verbatim as a filename and a systemd unit name
_NAME_RE = re.compile(r"[A-Za-z0-9_]+")


def check_name(name: object) -> bool:
    """Return True if name is non-empty and contains only ASCII letters, digits and underscore."""
    if not isinstance(name, str):
        return False
    return _NAME_RE.fullmatch(name) is not None
