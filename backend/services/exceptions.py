"""Exception hierarchy for scoring, configuration and backend access."""


class ScoringError(Exception):
    """Base class for errors raised by this service."""


class ConfigError(ScoringError):
    """A weight configuration was rejected."""


class InvalidTotal(ConfigError):
    """Leaf weights do not sum to 100 (within tolerance)."""

    def __init__(self, total: float) -> None:
        self.total = total
        super().__init__(f"Weights must sum to 100 points, got {total:.1f}")


class InvalidCriterion(ConfigError):
    """A leaf weight is negative, non-numeric, missing or unknown."""

    def __init__(self, path: str, value: object = None, reason: str = "invalid value") -> None:
        self.path = path
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid criterion '{path}': {reason} ({value!r})")


class BackendError(ScoringError):
    """Failure talking to the recruitment backend."""


class BackendUnavailableError(BackendError):
    """Backend unreachable, timed out or returned 5xx. Safe to retry."""


class BackendPayloadError(BackendError):
    """Backend answered with data that fails validation."""


class BackendRequestError(BackendError):
    """Backend rejected the request (4xx)."""

    def __init__(self, status_code: int, detail: str = "") -> None:
        self.status_code = status_code
        self.detail = detail
        super().__init__(f"Backend returned {status_code}: {detail}")


class QuestionnaireError(ScoringError):
    """A questionnaire template failed validation."""

    def __init__(self, message: str, question_index: int | None = None) -> None:
        self.question_index = question_index
        self.message = message
        prefix = f"Question {question_index + 1}: " if question_index is not None else ""
        super().__init__(prefix + message)
