"""Client for the SATIM online card payment gateway: orders, status, confirmation and refunds."""

__version__ = "0.1.0"

__all__ = ["client", "transport", "types"]