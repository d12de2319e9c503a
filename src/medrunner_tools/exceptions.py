"""Custom exceptions for Medrunner Tools."""


class MedrunnerToolsError(Exception):
    """Base exception for all Medrunner Tools errors."""

    pass


class ConfigurationError(MedrunnerToolsError):
    """Raised when configuration is invalid or missing."""

    pass


class TipSplitError(MedrunnerToolsError):
    """Base class for tip split validation errors."""

    pass


class InvalidPoolAmountError(TipSplitError):
    """Raised when the tip pool is zero or negative after truncation."""

    def __init__(self, pool: int, message: str | None = None):
        self.pool = pool
        super().__init__(message or "Please enter a valid tip amount.")


class NoParticipantsError(TipSplitError):
    """Raised when a tip split is requested with no recipients."""

    def __init__(self, message: str | None = None):
        super().__init__(message or "Please add recipients first.")


class RosterError(MedrunnerToolsError):
    """Raised when ship assignments cannot be loaded or contain no crew."""

    pass
