"""Exceptions raised while loading graph description files."""


class SchemaLoadError(Exception):
    """Raised when a graph file cannot be read or is not a YAML mapping."""

    def __init__(self, message: str, path: str | None = None):
        self.path = path
        super().__init__(message)


class SchemaValidationError(Exception):
    """Raised when a graph description does not match the schema.

    ``errors`` holds one ``{"loc", "msg", "type"}`` dict per problem;
    ``path`` names the file the description came from, if any.
    """

    def __init__(
        self,
        message: str,
        errors: list[dict] | None = None,
        path: str | None = None,
    ):
        self.errors = errors or []
        self.path = path
        super().__init__(message)
