"""Exception classes for memomark.

Provides standardized exceptions for error handling throughout memomark.
The list rendering core raises none of these: it is total over well-formed
input and degrades malformed payloads to defaults.
"""

from __future__ import annotations


class MemomarkError(Exception):
    """Base exception for all memomark errors.

    Subclass this for specific error categories.
    """

    pass


class RenderError(MemomarkError):
    """Error during rendering.

    Raised when a renderer is handed a value that is not a document node.
    """

    pass


class NodeFormatError(MemomarkError):
    """Serialized node cannot be turned into a document node.

    Raised when a node dict lacks its ``type`` tag or its payload has the
    wrong shape.
    """

    def __init__(self, message: str, type_name: str | None = None) -> None:
        """Initialize node format error.

        Args:
            message: Description of the problem
            type_name: Node type tag of the offending dict, if known
        """
        self.message = message
        self.type_name = type_name

        prefix = f"{type_name}: " if type_name else ""
        super().__init__(f"{prefix}{message}")
