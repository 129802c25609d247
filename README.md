# satim

A small client for the SATIM payment gateway, which handles CIB and
Edahabia card payments in Algerian dinars.

It covers the four operations a merchant site needs:

- registering an order and getting the payment form address,
- reading the status of an order,
- confirming an order after the customer returns,
- refunding an order, fully or in part.

## Installation

```
pip install satim
```

## Usage

Create a `satim.client.SatimClient` with the merchant user name,
password and terminal id issued by SATIM. The fourth argument,
`test_mode`, defaults to `False` (the live platform at
`satim.types.LIVE_ENDPOINT`); pass `True` to use the test platform at
`satim.types.TEST_ENDPOINT`.

```python
from satim.client import SatimClient

password = "password"
client = SatimClient("merchant", password, "TERMINAL-01", True)
```

### Registering an order

Orders are built with `new_order()`, which returns an `OrderBuilder`.
Every `with_...` method returns the builder, so calls can be chained.
Order number, amount and return URL are required. The amount is in the
smallest currency unit and must be at least 5000. The currency defaults
to `"012"` (`satim.types.CURRENCY_DZD`) and the language to `"FR"`
(`LANGUAGE_FR`; `LANGUAGE_AR` and `LANGUAGE_EN` are also defined).

```python
order = (
    client.new_order()
    .with_order_number("ORD-000042")
    .with_amount(250000)
    .with_return_url("https://shop.example.com/payment/return")
    .with_fail_url("https://shop.example.com/payment/failed")
    .with_description("Order 42")
    .with_language("EN")
    .with_user_defined_field("customer", "c-1001")
)

details = order.generate_order_details()
registered = client.register_order(details)

print(registered.order_id)
print(registered.form_url)   # send the customer here to pay
```

`generate_order_details()` returns a dictionary with two entries:
`"data"` (amount, currency, language, returnUrl, orderNumber, and
failUrl and description when they were set) and `"userDefinedFields"`.
It raises `ValueError` when the order number, amount or return URL is
missing, when the amount is below 5000, or when a user-defined field has
an empty value or a key or value longer than 20 bytes in UTF-8.

`register_order()` adds the user name and password to the query, adds
the terminal id to the user-defined fields under `force_terminal_id`,
and sends those fields as a compact JSON string in the `jsonParams`
parameter.

### Checking and confirming

```python
from satim.types import OrderAlreadyConfirmedError

status = client.get_order_status(registered.order_id)
print(status.status())   # "Paid", "Pending", "Declined", ...

try:
    confirmation = client.confirm_order(registered.order_id)
except OrderAlreadyConfirmedError as exc:
    confirmation = exc.response
```

`get_order_status()` returns the response when the gateway's error code
is `"0"` or `"2"`. `OrderStatusResponse.status()` raises `SatimError`
when the answer carries no order status.

`satim.types.order_status_from_code()` turns a numeric gateway status
into the names that `status()` returns:

| code | name |
|------|------|
| 0, 5 | Pending |
| 1 | PartiallyPaid |
| 2 | Paid |
| 4 | Refunded |
| 6 | Declined |
| 7 | Cancelled |
| anything else | Failed |

### Refunding

```python
refund = client.refund_order(registered.order_id, 250000)
```

### Responses

The operations return dataclasses from `satim.types`:
`RegisterOrderResponse`, `OrderStatusResponse`, `OrderConfirmResponse`
and `OrderRefundResponse`. Their fields use snake_case names
(`order_id`, `error_code`, `deposit_amount`, `approval_code`, `pan`, ...)
and are `None` when the gateway left them out. Each has a `from_dict()`
class method that builds it from a decoded JSON document; keys are
matched without regard to case. `is_successful()` is available on the
register, status and confirm responses, and `is_already_confirmed()` on
the confirm response.

### Errors

Every operation raises `satim.types.SatimError` when the request fails,
the gateway answers with a status other than 200, the body is not valid
JSON or has no error code, or the gateway reports an error code other
than the accepted ones. When confirming an order that was already
confirmed (error code `"2"`), `OrderAlreadyConfirmedError` (a subclass of
`SatimError`) is raised and carries the gateway's response in its
`response` attribute.

Lower-level access is available through `satim.transport.SatimHttpClient`,
which sends a query dictionary to one endpoint and decodes the answer.

## What it does not do

This is a library only. It has no command-line tool, and it does not
serve the return or failure URLs: the merchant site must handle the
customer's return itself and then call `get_order_status()` or
`confirm_order()`.

## Running the tests

```
pip install -e ".[test]"
pytest
```