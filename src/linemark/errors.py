"""Exception classes for linemark.

Parsing is total: no input text raises. The exceptions here signal
programming errors (misuse of the fragment model), invalid configuration,
or documents the renderer cannot handle.
"""

from __future__ import annotations

from typing import Any


class LinemarkError(Exception):
    """Base exception for all linemark errors."""

    pass


class FragmentError(LinemarkError):
    """A fragment mutation violated its contract.

    Raised when ``style``, ``replace`` or ``remove`` addresses a fragment
    that cannot be split (a link or an image). Well-formed scanner output
    never does this, so seeing it means a bug in the caller.
    """

    def __init__(self, message: str, fragment: Any = None) -> None:
        """Initialize fragment error.

        Args:
            message: Description of the violation
            fragment: The fragment that was addressed (optional)
        """
        self.message = message
        self.fragment = fragment

        detail = f" ({type(fragment).__name__})" if fragment is not None else ""
        super().__init__(f"{message}{detail}")


class ConfigError(LinemarkError):
    """Invalid parse configuration value."""

    def __init__(self, field_name: str, message: str) -> None:
        self.field_name = field_name
        super().__init__(f"Config '{field_name}': {message}")


class RenderError(LinemarkError):
    """Error during HTML rendering.

    Raised when the renderer meets a node it does not know how to emit.
    """

    pass
