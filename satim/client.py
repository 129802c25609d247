"""High-level SATIM client and order builder."""

from __future__ import annotations

import json

from .transport import SatimHttpClient
from .types import CURRENCY_DZD, LANGUAGE_FR, LIVE_ENDPOINT, TEST_ENDPOINT

_MIN_AMOUNT = 5000
_MAX_FIELD_LENGTH = 20

_JSON_ESCAPES = str.maketrans(
    {
        "<": "\\u003c",
        ">": "\\u003e",
        "&": "\\u0026",
        "\u2028": "\\u2028",
        "\u2029": "\\u2029",
    }
)


def _encode_fields(fields):
    text = json.dumps(fields, sort_keys=True, separators=(",", ":"), ensure_ascii=False)
    return text.translate(_JSON_ESCAPES)


class OrderBuilder:
    """Collects the details of an order before it is registered."""

    def __init__(self):
        self._order_number = None
        self._amount = None
        self._currency = CURRENCY_DZD
        self._language = LANGUAGE_FR
        self._return_url = None
        self._fail_url = None
        self._description = None
        self._user_defined_fields = {}

    def with_order_number(self, order_number):
        self._order_number = order_number
        return self

    def with_amount(self, amount):
        self._amount = amount
        return self

    def with_currency(self, currency):
        self._currency = currency
        return self

    def with_language(self, language):
        self._language = language
        return self

    def with_return_url(self, return_url):
        self._return_url = return_url
        return self

    def with_fail_url(self, fail_url):
        self._fail_url = fail_url
        return self

    def with_description(self, description):
        self._description = description
        return self

    def with_user_defined_field(self, key, value):
        self._user_defined_fields[key] = value
        return self

    def _validate(self):
        if self._order_number is None:
            raise ValueError("orderNumber is required")
        if self._amount is None:
            raise ValueError("amount is required")
        if self._amount < _MIN_AMOUNT:
            raise ValueError("amount must be greater than 5000")
        if self._return_url is None:
            raise ValueError("returnUrl is required")
        for key, value in self._user_defined_fields.items():
            if value == "":
                raise ValueError("userDefinedFields must have a value")
            if len(key.encode("utf-8")) > _MAX_FIELD_LENGTH:
                raise ValueError(
                    "userDefinedFields must not have a length greater than 20 characters"
                )
            if len(value.encode("utf-8")) > _MAX_FIELD_LENGTH:
                raise ValueError(
                    "userDefinedFields values must not have a length more than 20 characters"
                )

    def generate_order_details(self):
        """Validate the order and return its data and user-defined fields."""
        self._validate()
        data = {
            "amount": self._amount,
            "currency": self._currency,
            "language": self._language,
            "returnUrl": self._return_url,
            "orderNumber": self._order_number,
        }
        if self._fail_url is not None:
            data["failUrl"] = self._fail_url
        if self._description is not None:
            data["description"] = self._description
        return {"data": data, "userDefinedFields": dict(self._user_defined_fields)}


class SatimClient:
    """Merchant access to the SATIM gateway."""

    def __init__(self, username, password, terminal_id, test_mode=False):
        self._http = SatimHttpClient(TEST_ENDPOINT if test_mode else LIVE_ENDPOINT)
        self._username = username
        self._password = password
        self._terminal_id = terminal_id

    def _credentials(self):
        return {"userName": self._username, "password": self._password}

    def new_order(self):
        return OrderBuilder()

    def register_order(self, order_data):
        """Register an order produced by OrderBuilder.generate_order_details."""
        query = {**order_data["data"], **self._credentials()}
        fields = dict(order_data["userDefinedFields"])
        fields["force_terminal_id"] = self._terminal_id
        query["jsonParams"] = _encode_fields(fields)
        return self._http.register_order_query(query)

    def confirm_order(self, order_id):
        return self._http.confirm_order_query({**self._credentials(), "orderId": order_id})

    def get_order_status(self, order_id):
        return self._http.get_order_status_query({**self._credentials(), "orderId": order_id})

    def refund_order(self, order_id, amount):
        query = {**self._credentials(), "orderId": order_id, "amount": amount}
        return self._http.refund_order_query(query)