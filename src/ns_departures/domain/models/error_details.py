"""Error details shown next to a failed live status."""

from pydantic import BaseModel, ConfigDict

STATUS_REASONS = {
    429: "Rate limit exceeded",
    502: "Bad gateway (server error)",
    503: "Service unavailable",
    504: "Gateway timeout",
}


class ErrorDetails(BaseModel):
    """HTTP status code (when the NS API answered) and a readable reason."""

    model_config = ConfigDict(frozen=True)

    status_code: int | None = None
    reason: str

    @classmethod
    def for_status(cls, status_code: int) -> "ErrorDetails":
        """Details for a non-2xx answer; unlisted codes read as "HTTP <code>"."""
        return cls(
            status_code=status_code, reason=STATUS_REASONS.get(status_code, f"HTTP {status_code}")
        )

    @classmethod
    def unreachable(cls, timed_out: bool) -> "ErrorDetails":
        """Details for a request that never got an answer."""
        return cls(reason="Request timed out" if timed_out else "Connection failed")

    @classmethod
    def unknown(cls) -> "ErrorDetails":
        return cls(reason="Unknown error")
