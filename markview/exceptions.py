from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from markview.markdown.diagnostics import Diagnostic


class MarkviewError(Exception):
    """Base exception for all markview errors."""

    def __init__(self, message: str):
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to a JSON-compatible dictionary."""
        return {"detail": str(self)}


class UnrepresentableNodeError(MarkviewError):
    """Raised in strict mode when a parse node has no counterpart in the typed tree."""

    def __init__(self, diagnostic: "Diagnostic", *, message: str | None = None):
        location = f" at line {diagnostic.line}" if diagnostic.line is not None else ""
        super().__init__(message or f"{diagnostic.kind}: {diagnostic.node_type!r}{location} is not representable")
        self.diagnostic = diagnostic

    def to_dict(self) -> dict[str, Any]:
        return {"detail": str(self), **self.diagnostic.model_dump(mode="json")}
