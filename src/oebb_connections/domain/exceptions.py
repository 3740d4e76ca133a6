"""Domain exceptions."""


class TransientFetchError(Exception):
    """Upstream answered with an error status, a malformed payload, or not at all.

    Eligible for retry.
    """

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class RetryExhaustedError(Exception):
    """Every attempt of a retried operation failed transiently."""

    def __init__(self, attempts: int, last_error: Exception) -> None:
        super().__init__(f"Giving up after {attempts} attempt(s): {last_error}")
        self.attempts = attempts
        self.last_error = last_error
