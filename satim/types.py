"""Response models, constants and errors for the SATIM payment gateway."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Optional

TEST_ENDPOINT = "https://test.satim.dz/payment/rest"
LIVE_ENDPOINT = "https://cib.satim.dz/payment/rest"

CURRENCY_DZD = "012"

LANGUAGE_AR = "AR"
LANGUAGE_FR = "FR"
LANGUAGE_EN = "EN"

_UNMARSHAL_ERROR = "failed to unmarshal response body"

_ORDER_STATUSES = {
    0: "Pending",
    1: "PartiallyPaid",
    2: "Paid",
    4: "Refunded",
    5: "Pending",
    6: "Declined",
    7: "Cancelled",
}


class SatimError(Exception):
    """Raised when a gateway request fails or returns an unusable answer."""


class OrderAlreadyConfirmedError(SatimError):
    """Raised when the gateway reports that an order was confirmed before."""

    def __init__(self, response):
        super().__init__("order already confirmed")
        self.response = response


def order_status_from_code(code):
    """Map a numeric gateway order status to its name."""
    return _ORDER_STATUSES.get(code, "Failed")


def _matches(value, kind):
    if kind is None:
        return True
    if kind is int:
        return isinstance(value, int) and not isinstance(value, bool)
    return isinstance(value, kind)


class _Response:
    """Decoding shared by all gateway responses.

    Keys are matched exactly first and then without regard to case; when
    several keys map to the same field the last one wins.
    """

    _fields: dict = {}

    @classmethod
    def _decode(cls, data):
        if data is None:
            return cls()
        if not isinstance(data, Mapping):
            raise SatimError(_UNMARSHAL_ERROR)
        folded = {name.lower(): spec for name, spec in cls._fields.items()}
        values = {}
        for key, value in data.items():
            if not isinstance(key, str):
                continue
            spec = cls._fields.get(key) or folded.get(key.lower())
            if spec is None:
                continue
            attr, kind = spec
            if value is not None and not _matches(value, kind):
                raise SatimError(_UNMARSHAL_ERROR)
            values[attr] = value
        return cls(**values)


@dataclass
class RegisterOrderResponse(_Response):
    """Answer to an order registration."""

    order_id: Optional[str] = None
    form_url: Optional[str] = None
    error_code: Optional[str] = None
    error_message: Optional[str] = None

    _fields = {
        "orderId": ("order_id", str),
        "formUrl": ("form_url", str),
        "errorCode": ("error_code", str),
        "errorMessage": ("error_message", str),
    }

    @classmethod
    def from_dict(cls, data):
        """Build a response from a decoded JSON document."""
        return cls._decode(data)

    def is_successful(self):
        return self.error_code is None or self.error_code == "0"


@dataclass
class OrderConfirmResponse(_Response):
    """Answer to an order confirmation."""

    error_code: Optional[str] = None
    error_message: Optional[str] = None
    deposit_amount: Optional[int] = None
    approval_code: Optional[str] = None
    currency: Optional[str] = None
    params: Any = None
    action_code: Optional[int] = None
    action_code_description: Optional[str] = None
    order_status: Optional[int] = None
    order_number: Optional[str] = None
    pan: Optional[str] = None
    amount: Optional[int] = None
    expiration: Optional[str] = None
    ip: Optional[str] = None
    svfe_response: Optional[str] = None

    _fields = {
        "ErrorCode": ("error_code", str),
        "ErrorMessage": ("error_message", str),
        "depositAmount": ("deposit_amount", int),
        "approvalCode": ("approval_code", str),
        "currency": ("currency", str),
        "params": ("params", None),
        "actionCode": ("action_code", int),
        "actionCodeDescription": ("action_code_description", str),
        "OrderStatus": ("order_status", int),
        "OrderNumber": ("order_number", str),
        "Pan": ("pan", str),
        "Amount": ("amount", int),
        "expiration": ("expiration", str),
        "Ip": ("ip", str),
        "SvfeResponse": ("svfe_response", str),
    }

    @classmethod
    def from_dict(cls, data):
        """Build a response from a decoded JSON document."""
        return cls._decode(data)

    def is_successful(self):
        return self.error_code is None or self.error_code == "0"

    def is_already_confirmed(self):
        return self.error_code == "2"


@dataclass
class OrderStatusResponse(_Response):
    """Answer to an order status query."""

    error_code: Optional[str] = None
    error_message: Optional[str] = None
    order_number: Optional[str] = None
    order_status: Optional[int] = None
    deposit_amount: Optional[int] = None
    currency: Optional[str] = None
    amount: Optional[int] = None
    params: Any = None
    approval_code: Optional[str] = None
    pan: Optional[str] = None
    expiration: Optional[str] = None
    ip: Optional[str] = None
    svfe_response: Optional[str] = None

    _fields = {
        "ErrorCode": ("error_code", str),
        "ErrorMessage": ("error_message", str),
        "OrderNumber": ("order_number", str),
        "OrderStatus": ("order_status", int),
        "depositAmount": ("deposit_amount", int),
        "currency": ("currency", str),
        "Amount": ("amount", int),
        "params": ("params", None),
        "approvalCode": ("approval_code", str),
        "Pan": ("pan", str),
        "expiration": ("expiration", str),
        "Ip": ("ip", str),
        "SvfeResponse": ("svfe_response", str),
    }

    @classmethod
    def from_dict(cls, data):
        """Build a response from a decoded JSON document."""
        return cls._decode(data)

    def is_successful(self):
        return self.error_code == "0"

    def status(self):
        """Name of the order status; raises SatimError when it is absent."""
        if self.order_status is None:
            raise SatimError("failed to get order status")
        return order_status_from_code(self.order_status)


@dataclass
class OrderRefundResponse(_Response):
    """Answer to a refund request."""

    error_code: Optional[str] = None
    error_message: Optional[str] = None

    _fields = {
        "errorCode": ("error_code", str),
        "errorMessage": ("error_message", str),
    }

    @classmethod
    def from_dict(cls, data):
        """Build a response from a decoded JSON document."""
        return cls._decode(data)