class PricingError(Exception):
    """Base class for failures raised by the pricing core."""

    code = "PricingError"

    def __init__(self, message: str, details: dict | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)


class ValidationError(PricingError):
    """Missing or malformed input."""

    code = "ValidationError"


class NotFoundError(PricingError):
    """Hall, price list or add-on has no rate data behind it."""

    code = "NotFoundError"


class PolicyError(PricingError):
    """Business rule the customer can fix by changing the request."""

    code = "PolicyError"
