"""HTTP access to the SATIM REST endpoints."""

from __future__ import annotations

import json
from urllib.parse import urlencode

import requests

from .types import (
    OrderAlreadyConfirmedError,
    OrderConfirmResponse,
    OrderRefundResponse,
    OrderStatusResponse,
    RegisterOrderResponse,
    SatimError,
)

_UNMARSHAL_ERROR = "failed to unmarshal response body"


def _format(value):
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


class SatimHttpClient:
    """Sends queries to one gateway endpoint and decodes the answers."""

    def __init__(self, endpoint):
        self.endpoint = endpoint

    def _get(self, path, query, response_type):
        params = urlencode(sorted((key, _format(value)) for key, value in query.items()))
        url = f"{self.endpoint}/{path}?{params}"
        try:
            http_response = requests.get(url)
        except requests.RequestException as exc:
            raise SatimError(f"HTTP request failed: {exc}") from exc
        with http_response:
            if http_response.status_code != 200:
                raise SatimError(
                    f"HTTP request failed with status code: {http_response.status_code}"
                )
            try:
                payload = json.loads(http_response.content)
            except ValueError as exc:
                raise SatimError(_UNMARSHAL_ERROR) from exc
        response = response_type.from_dict(payload)
        if response.error_code is None:
            raise SatimError(_UNMARSHAL_ERROR)
        return response

    def register_order_query(self, query):
        response = self._get("register.do", query, RegisterOrderResponse)
        if response.error_code == "0":
            return response
        raise SatimError("failed to register order")

    def get_order_status_query(self, query):
        response = self._get("getOrderStatus.do", query, OrderStatusResponse)
        if response.error_code in ("0", "2"):
            return response
        raise SatimError("failed to get order status")

    def confirm_order_query(self, query):
        response = self._get("confirmOrder.do", query, OrderConfirmResponse)
        if response.error_code == "0":
            return response
        if response.error_code == "2":
            raise OrderAlreadyConfirmedError(response)
        raise SatimError("failed to confirm order")

    def refund_order_query(self, query):
        response = self._get("refund.do", query, OrderRefundResponse)
        if response.error_code == "0":
            return response
        raise SatimError("failed to refund order")