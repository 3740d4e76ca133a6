"""Error details domain model."""

from pydantic import BaseModel, ConfigDict

_STATUS_REASONS = {
    429: "Rate limit exceeded",
    502: "Bad gateway (server error)",
    503: "Service unavailable",
    504: "Gateway timeout",
}


class ErrorDetails(BaseModel):
    """User-facing summary of why a refresh failed."""

    model_config = ConfigDict(frozen=True)

    status_code: int | None = None
    reason: str

    @classmethod
    def from_exception(cls, error: Exception) -> "ErrorDetails":
        """Summarize an exception, using its status_code attribute when it has one."""
        status_code = getattr(error, "status_code", None)
        if not isinstance(status_code, int):
            return cls(reason=str(error) or error.__class__.__name__)
        return cls(
            status_code=status_code,
            reason=_STATUS_REASONS.get(status_code, f"HTTP {status_code}"),
        )
