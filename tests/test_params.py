"""
Tests for outbound parameter encoding.
"""
import pytest

from paysdk.core.errors import InvalidParamsError
from paysdk.core.form import encode_form
from paysdk.schemas import (
    AddressParams,
    OrderItemParams,
    OrderItemType,
    OrderListParams,
    OrderParams,
    OrderPayParams,
    OrderReturnParams,
    OrderStatus,
    OrderUpdateParams,
    OrderUpdateShippingParams,
    RangeQueryParams,
    ShippingParams,
)


class TestEncodeForm:
    """Tests for bracket-notation form flattening."""

    def test_flat_values(self):
        """Scalars are stringified, None is dropped, booleans are lowercase."""
        pairs = encode_form({"amount": 100, "email": None, "livemode": True, "rate": 1.5})

        assert pairs == [("amount", "100"), ("livemode", "true"), ("rate", "1.5")]

    def test_nested_and_indexed(self):
        """Mappings use brackets and sequences are indexed."""
        pairs = encode_form({"a": {"b": {"c": "x"}}, "ids": ["o1", "o2"]})

        assert pairs == [("a[b][c]", "x"), ("ids[0]", "o1"), ("ids[1]", "o2")]

    def test_unsupported_value(self):
        """Values with no form representation are rejected."""
        with pytest.raises(InvalidParamsError, match="created"):
            encode_form({"created": object()})


class TestOrderParams:
    """Tests for create/update/pay/return/list parameter shapes."""

    def test_create(self):
        """Create params flatten shipping and items."""
        params = OrderParams(
            currency="usd",
            email="jenny@example.com",
            items=[
                OrderItemParams(type=OrderItemType.SKU, parent="sku_1", quantity=2),
                OrderItemParams(type=OrderItemType.DISCOUNT, amount=-100, currency="usd"),
            ],
            shipping=ShippingParams(
                name="Jenny Rosen",
                address=AddressParams(line1="1234 Main street", city="Anytown", country="US"),
            ),
        )

        assert params.to_form() == [
            ("currency", "usd"),
            ("email", "jenny@example.com"),
            ("items[0][parent]", "sku_1"),
            ("items[0][quantity]", "2"),
            ("items[0][type]", "sku"),
            ("items[1][amount]", "-100"),
            ("items[1][currency]", "usd"),
            ("items[1][type]", "discount"),
            ("shipping[address][line1]", "1234 Main street"),
            ("shipping[address][city]", "Anytown"),
            ("shipping[address][country]", "US"),
            ("shipping[name]", "Jenny Rosen"),
        ]

    def test_update(self):
        """Update params encode status and the shipping tracking hash."""
        params = OrderUpdateParams(
            status=OrderStatus.FULFILLED,
            shipping=OrderUpdateShippingParams(carrier="UPS", tracking_number="1Z999"),
        )

        assert params.to_form() == [
            ("shipping[carrier]", "UPS"),
            ("shipping[tracking_number]", "1Z999"),
            ("status", "fulfilled"),
        ]

    def test_common_params(self):
        """Expand and metadata are encoded; the idempotency key is not."""
        params = OrderUpdateParams(coupon="SUMMER", idempotency_key="idem_1")
        params.add_expand("customer")
        params.add_expand("charge")
        params.add_metadata("order_ref", "A-1")

        form = params.to_form()

        assert ("expand[0]", "customer") in form
        assert ("expand[1]", "charge") in form
        assert ("metadata[order_ref]", "A-1") in form
        assert ("coupon", "SUMMER") in form
        assert all(key != "idempotency_key" for key, _ in form)

    def test_pay_with_token(self):
        """A string source is sent as a single value."""
        params = OrderPayParams(email="jenny@example.com")
        params.set_source("tok_visa")

        assert params.to_form() == [("email", "jenny@example.com"), ("source", "tok_visa")]

    def test_pay_with_card_details(self):
        """A mapping source is flattened under source[...]."""
        params = OrderPayParams(application_fee=30)
        params.set_source({"object": "card", "number": "4242424242424242", "exp_month": 12})

        assert params.to_form() == [
            ("application_fee", "30"),
            ("source[object]", "card"),
            ("source[number]", "4242424242424242"),
            ("source[exp_month]", "12"),
        ]

    def test_pay_with_unsupported_source(self):
        """Sources that are neither strings nor mappings are rejected."""
        params = OrderPayParams()

        with pytest.raises(InvalidParamsError):
            params.set_source(12345)

    def test_return(self):
        """Return params list the returned items."""
        params = OrderReturnParams(
            items=[OrderItemParams(type=OrderItemType.SKU, parent="sku_1", quantity=1)]
        )

        assert params.to_form() == [
            ("items[0][parent]", "sku_1"),
            ("items[0][quantity]", "1"),
            ("items[0][type]", "sku"),
        ]

    def test_list_exact_created(self):
        """List params accept an exact created timestamp."""
        params = OrderListParams(created=1500000000, status=OrderStatus.PAID, limit=10)

        assert params.to_form() == [
            ("created", "1500000000"),
            ("status", "paid"),
            ("limit", "10"),
        ]

    def test_list_created_range(self):
        """List params accept a created range and ID filters."""
        params = OrderListParams(
            created=RangeQueryParams(gte=100, lt=200),
            ids=["order_1", "order_2"],
            starting_after="order_0",
        )

        assert params.to_form() == [
            ("created[gte]", "100"),
            ("created[lt]", "200"),
            ("ids[0]", "order_1"),
            ("ids[1]", "order_2"),
            ("starting_after", "order_0"),
        ]

    def test_empty_params(self):
        """No fields set means no form pairs."""
        assert OrderReturnParams().to_form() == []
