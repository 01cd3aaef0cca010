"""Exception classes for chatmark.

Parsing itself never raises: every string produces a Document. These
exceptions cover misuse of the surrounding API (bad configuration, handing a
renderer something that is not a node).
"""

from __future__ import annotations


class ChatmarkError(Exception):
    """Base exception for all chatmark errors."""

    pass


class ConfigError(ChatmarkError, ValueError):
    """Invalid feature configuration.

    Raised when a FeatureConfig field is outside its allowed values or an
    unknown preset name is requested.
    """

    def __init__(self, field: str, message: str) -> None:
        """Initialize config error.

        Args:
            field: Name of the offending config field (or "preset")
            message: Description of the problem
        """
        self.field = field
        super().__init__(f"Invalid {field}: {message}")


class RenderError(ChatmarkError):
    """Error during rendering.

    Raised when a renderer is handed an object that is not a chatmark node.
    """

    pass
