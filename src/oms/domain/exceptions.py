"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.

The four direct subclasses map onto boundary status codes:
ValidationError -> 400, AuthenticationFailed -> 401,
AuthorizationError -> 403, EntityNotFoundError -> 404.
"""

from __future__ import annotations


class DomainException(Exception):
    """Base class for all domain errors."""

    status_code = 400


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""

    status_code = 404


class AuthorizationError(DomainException):
    """The principal is not allowed to perform the operation."""

    status_code = 403


class AuthenticationFailed(DomainException):
    """Credentials could not be verified."""

    status_code = 401

    def __init__(self, message: str = "Invalid email or password") -> None:
        super().__init__(message)


# --- Reservation ---------------------------------------------------------------


class ProductNotFound(EntityNotFoundError):

    def __init__(self, product_id: int) -> None:
        super().__init__(f"Product with ID '{product_id}' not found")
        self.product_id = product_id


class InsufficientStock(ValidationError):

    def __init__(
        self,
        product_id: int,
        product_name: str,
        requested: int,
        available: int,
    ) -> None:
        super().__init__(
            f"Not enough stock for product: {product_name} "
            f"(need {requested}, have {available} available)"
        )
        self.product_id = product_id
        self.product_name = product_name
        self.requested = requested
        self.available = available


# --- Order lifecycle -----------------------------------------------------------


class UnknownPrincipal(EntityNotFoundError):

    def __init__(self, email: str) -> None:
        super().__init__(f"User not found: '{email}'")
        self.email = email


class OrderNotFound(EntityNotFoundError):

    def __init__(self, order_id: int) -> None:
        super().__init__(f"Order #{order_id} not found")
        self.order_id = order_id


class NotOwner(AuthorizationError):

    def __init__(self, order_id: int, email: str) -> None:
        super().__init__(f"Order #{order_id} does not belong to '{email}'")
        self.order_id = order_id
        self.email = email


class InvalidStateTransition(ValidationError):

    def __init__(self, order_id: int | None, current: str, target: str) -> None:
        super().__init__(
            f"Cannot move order #{order_id} from {current} to {target}"
        )
        self.order_id = order_id
        self.current = current
        self.target = target


class AccessDenied(AuthorizationError):
    """The principal's role does not permit the operation."""
