from __future__ import annotations

USER_AGENT = "webpack4py-Client/0.1.0"
DEFAULT_TIMEOUT = 10


def is_remote_source(source: object) -> bool:
    """Tell whether a manifest source points at an HTTP(S) endpoint."""
    return isinstance(source, str) and source.lower().startswith(("http://", "https://"))
