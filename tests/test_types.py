import pytest

from satim.types import (
    OrderAlreadyConfirmedError,
    OrderConfirmResponse,
    OrderRefundResponse,
    OrderStatusResponse,
    RegisterOrderResponse,
    SatimError,
    order_status_from_code,
)


@pytest.mark.parametrize(
    "code, name",
    [
        (0, "Pending"),
        (1, "PartiallyPaid"),
        (2, "Paid"),
        (3, "Failed"),
        (4, "Refunded"),
        (5, "Pending"),
        (6, "Declined"),
        (7, "Cancelled"),
        (99, "Failed"),
        (-1, "Failed"),
    ],
)
def test_order_status_from_code(code, name):
    assert order_status_from_code(code) == name


def test_register_response_from_dict_reads_fields():
    data = {"orderId": "abc", "formUrl": "https://pay.example.com/f", "errorCode": "0"}
    response = RegisterOrderResponse.from_dict(data)
    assert response.order_id == "abc"
    assert response.form_url == "https://pay.example.com/f"
    assert response.error_code == "0"
    assert response.error_message is None


def test_keys_match_without_case():
    response = RegisterOrderResponse.from_dict({"ERRORCODE": "7", "errormessage": "bad"})
    assert response.error_code == "7"
    assert response.error_message == "bad"


def test_unknown_keys_are_ignored():
    response = OrderRefundResponse.from_dict({"errorCode": "0", "extra": [1, 2]})
    assert response == OrderRefundResponse(error_code="0")


def test_none_document_gives_empty_response():
    assert OrderRefundResponse.from_dict(None) == OrderRefundResponse()


@pytest.mark.parametrize("data", [[], "text", 3])
def test_non_object_document_is_rejected(data):
    with pytest.raises(SatimError, match="failed to unmarshal response body"):
        RegisterOrderResponse.from_dict(data)


@pytest.mark.parametrize(
    "data",
    [
        {"errorCode": 0},
        {"ErrorCode": "0", "Amount": "5000"},
        {"ErrorCode": "0", "Amount": 50.5},
        {"ErrorCode": "0", "OrderStatus": True},
    ],
)
def test_wrong_types_are_rejected(data):
    with pytest.raises(SatimError):
        if "errorCode" in data:
            RegisterOrderResponse.from_dict(data)
        else:
            OrderStatusResponse.from_dict(data)


def test_null_values_leave_fields_unset():
    response = OrderStatusResponse.from_dict({"ErrorCode": "0", "Amount": None})
    assert response.amount is None
    assert response.error_code == "0"


def test_params_accepts_any_value():
    params = {"respCode": "00", "list": [1, 2]}
    response = OrderConfirmResponse.from_dict({"ErrorCode": "0", "params": params})
    assert response.params == params


@pytest.mark.parametrize("code, expected", [(None, True), ("0", True), ("5", False)])
def test_register_is_successful(code, expected):
    assert RegisterOrderResponse(error_code=code).is_successful() is expected


@pytest.mark.parametrize("code, expected", [(None, True), ("0", True), ("2", False)])
def test_confirm_is_successful(code, expected):
    assert OrderConfirmResponse(error_code=code).is_successful() is expected


@pytest.mark.parametrize("code, expected", [(None, False), ("0", False), ("2", True)])
def test_confirm_is_already_confirmed(code, expected):
    assert OrderConfirmResponse(error_code=code).is_already_confirmed() is expected


def test_status_response_is_successful_only_for_zero():
    assert OrderStatusResponse(error_code="0").is_successful() is True
    assert OrderStatusResponse(error_code="2").is_successful() is False


def test_status_names_order_status():
    response = OrderStatusResponse.from_dict({"ErrorCode": "0", "OrderStatus": 2})
    assert response.status() == "Paid"


def test_status_without_order_status_raises():
    with pytest.raises(SatimError, match="failed to get order status"):
        OrderStatusResponse(error_code="0").status()


def test_already_confirmed_error_keeps_response():
    response = OrderConfirmResponse(error_code="2")
    error = OrderAlreadyConfirmedError(response)
    assert error.response is response
    assert str(error) == "order already confirmed"
    assert isinstance(error, SatimError)