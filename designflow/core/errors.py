# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Domain error kinds.
Subclass the builtins the controllers already translate (KeyError -> 404,
ValueError -> 4xx) so the HTTP layer stays a thin mapping.
"""


class NotFound(KeyError):
    """A referenced request or designer id does not exist."""

    def __init__(self, kind: str, entity_id: str) -> None:
        self.kind = kind
        self.entity_id = entity_id
        super().__init__(f"No {kind} found with id '{entity_id}'")

    def __str__(self) -> str:
        return self.args[0]


class InvalidTransition(ValueError):
    """Rejected lifecycle input. Never leaves partial state behind."""

    def __init__(self, message: str, request_id: str = "") -> None:
        self.request_id = request_id
        super().__init__(message)


class OracleUnavailable(RuntimeError):
    """The advisory service failed or answered with something unusable."""
