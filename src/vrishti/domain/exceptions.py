"""Domain errors raised by the account and listing services.

Routes map each error to an HTTP status and a human-readable message.
"""


class VrishtiError(Exception):
    """Base class for all domain errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class DuplicateAccountError(VrishtiError):
    """Raised when registering an email that already has an account."""

    def __init__(self, email: str) -> None:
        self.email = email
        super().__init__(f"An account with email '{email}' already exists")


class AccountNotFoundError(VrishtiError):
    """Raised when logging in with an unknown email."""

    def __init__(self, email: str) -> None:
        self.email = email
        super().__init__(f"No account with email '{email}'")


class InvalidCredentialsError(VrishtiError):
    """Raised when the supplied password does not match the stored digest."""

    def __init__(self) -> None:
        super().__init__("Invalid credentials")


class ListingNotFoundError(VrishtiError):
    """Raised when deleting a listing that does not exist."""

    def __init__(self, listing_id: str) -> None:
        self.listing_id = listing_id
        super().__init__(f"Listing '{listing_id}' not found")


class PersistenceError(VrishtiError):
    """Raised when the store fails. The underlying error is chained."""


class NotificationError(VrishtiError):
    """A single recipient's notification could not be delivered.

    Only ever logged by the notification dispatcher.
    """

    def __init__(self, recipient: str, reason: str) -> None:
        self.recipient = recipient
        self.reason = reason
        super().__init__(f"Notification to '{recipient}' failed: {reason}")
