"""Custom exceptions for LedgerPrep."""


class LedgerPrepError(Exception):
    """Base exception for onboarding engine errors."""


class UnknownIndustryError(LedgerPrepError):
    """Raised when an industry key has no Chart of Accounts template."""

    def __init__(self, industry: str, available: list[str] | None = None):
        self.industry = industry
        self.available = available or []
        message = f"Unknown industry type: {industry}"
        if self.available:
            message += f" (available: {', '.join(self.available)})"
        super().__init__(message)


class TemplateValidationError(LedgerPrepError):
    """Raised when a Chart of Accounts template contains a malformed account."""

    def __init__(self, industry: str, message: str):
        self.industry = industry
        super().__init__(f"Invalid template '{industry}': {message}")


class MissingTemplateError(LedgerPrepError):
    """Raised when an account template or account list is absent."""

    def __init__(self, context: str):
        self.context = context
        super().__init__(f"No account template supplied for {context}")


class NoTransactionsError(LedgerPrepError):
    """Raised when a transaction export is requested for an empty set."""

    def __init__(self, context: str = "transaction export"):
        self.context = context
        super().__init__(
            f"No transactions found for {context}. Extract transactions first."
        )


class SuggestionParseError(LedgerPrepError):
    """Raised when an AI suggestion payload contains no parseable JSON."""

    def __init__(self, message: str):
        super().__init__(f"Suggestion parse error: {message}")


class InputFileError(LedgerPrepError):
    """Raised when an input JSON file cannot be loaded or validated."""

    def __init__(self, file_path: str, message: str):
        self.file_path = file_path
        super().__init__(f"Input error for {file_path}: {message}")
