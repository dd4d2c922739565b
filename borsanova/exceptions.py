"""Domain specific exceptions for exchange operations."""


class BorsaError(RuntimeError):
    """Base class for domain errors raised by the exchange engine."""


class InvalidArgumentError(BorsaError, ValueError):
    """Raised when a quantity, price, amount, name or policy constant is not acceptable."""


class NotListedError(BorsaError, LookupError):
    """Raised when a company has no quotation on the requested exchange."""


class InsufficientInventoryError(BorsaError):
    """Raised when a purchase exceeds the shares still available on the exchange."""


class InsufficientHoldingsError(BorsaError):
    """Raised when a sale exceeds the shares allocated to the operator."""


class InsufficientFundsError(BorsaError):
    """Raised when the operator does not have enough budget for a withdrawal."""
