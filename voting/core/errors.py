"""Error taxonomy shared by the vote and results services."""


class VotingError(Exception):
    """Base class for voting application errors."""


class ValidationError(VotingError):
    """Raised when a submitted option is missing or not one of the configured two."""

    def __init__(self, option: str | None):
        self.option = option
        super().__init__(f"Invalid option: {option!r}")


class StorageError(VotingError):
    """Raised when the vote store cannot be reached or a query fails."""


class StartupError(VotingError):
    """Raised when the votes table cannot be created at startup."""
