"""Exceptions raised by the dispatch services."""


class DispatchError(Exception):
    """Base exception for the dispatch engine."""

    def __init__(self, message: str | None = None):
        self.message = message
        super().__init__(self.message)


class UnknownCrewError(DispatchError):
    """Raised when a crew id is not part of the ledger."""

    def __init__(self, crew_id: str, message: str | None = None):
        self.crew_id = crew_id
        super().__init__(message or f"Unknown crew: {crew_id}")


class UnknownJobError(DispatchError):
    """Raised when a job id is not part of the ledger."""

    def __init__(self, job_id: str, message: str | None = None):
        self.job_id = job_id
        super().__init__(message or f"Unknown job: {job_id}")


class LedgerNotFoundError(DispatchError):
    """Raised when no ledger is registered under the requested id."""

    def __init__(self, ledger_id: str, message: str | None = None):
        self.ledger_id = ledger_id
        super().__init__(message or f"Ledger not found: {ledger_id}")
