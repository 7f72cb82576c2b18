"""Custom exceptions for the application."""


class WhereToWatchError(Exception):
    """Base exception for all application errors."""

    pass


class ConfigurationError(WhereToWatchError):
    """Configuration-related errors."""

    pass


class TMDbServiceError(WhereToWatchError):
    """TMDb service errors."""

    pass


class MovieNotFoundError(TMDbServiceError):
    """Requested movie does not exist on TMDb."""

    pass


class HistoryStoreError(WhereToWatchError):
    """History store errors."""

    pass


class AvailabilityError(WhereToWatchError):
    """Availability report errors."""

    pass
