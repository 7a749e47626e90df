"""Exception definitions for the JSON field builder"""


class FieldBuilderException(Exception):
    """Base exception for all field builder errors."""

    pass


class InvalidPathError(FieldBuilderException, IndexError):
    """Raised when a path does not address an existing node of the tree.

    Use this exception when:
    - An index is negative or out of range at some depth
    - The path descends through a field that has no children
    - An operation that targets a field receives the empty (root) path
    """

    def __init__(self, path, depth: int, reason: str):
        self.path = tuple(path)
        self.depth = depth
        self.reason = reason
        super().__init__(f"Invalid path {list(self.path)} at depth {depth}: {reason}")


class ExportError(FieldBuilderException):
    """Raised when the generated document cannot be written to disk."""

    pass


class ConfigException(FieldBuilderException):
    """Raised when settings validation or loading fails."""

    pass
