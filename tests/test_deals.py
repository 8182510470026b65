from decimal import Decimal

import pytest

from crm.errors import DocumentNotFound, DocumentValidationError
from crm.models import Deal, DealProduct

from .factories import customer_factory, deal_factory, product_factory

pytestmark = pytest.mark.django_db


def test_create_deal_with_products():
    product = product_factory(unit_price=Decimal("5.00"))
    customer = customer_factory()

    deal = Deal.objects.create_deal(
        {
            "name": "Renewal",
            "customer_ids": [customer.id],
            "products_data": [
                {"product_id": product.id, "quantity": 2},
                {"product_id": product.id, "quantity": 1, "unit_price": Decimal("4.00")},
            ],
        }
    )

    assert list(deal.customers.all()) == [customer]
    assert deal.products_data.count() == 2
    assert deal.amount == Decimal("14.00")


def test_create_deal_with_unknown_product():
    with pytest.raises(DocumentNotFound, match="Product not found"):
        Deal.objects.create_deal({"name": "Broken", "products_data": [{"product_id": "fakeId"}]})

    assert Deal.objects.count() == 0


def test_update_deal_replaces_products():
    first, second = product_factory(), product_factory()
    deal = deal_factory(products=[first])

    Deal.objects.update_deal(deal.id, {"products_data": [{"product_id": second.id, "quantity": 4}]})

    items = list(DealProduct.objects.filter(deal=deal))
    assert [(item.product_id, item.quantity) for item in items] == [(second.id, 4)]


def test_get_and_remove_deal():
    deal = deal_factory()

    with pytest.raises(DocumentNotFound, match="Deal not found"):
        Deal.objects.get_deal("fakeId")

    assert Deal.objects.remove_deal(deal.id) is True
    assert Deal.objects.count() == 0


@pytest.mark.parametrize("quantity", [0, -2, 1.5])
def test_create_deal_with_invalid_quantity(quantity):
    product = product_factory()

    with pytest.raises(DocumentValidationError, match="Quantity must be a positive number"):
        Deal.objects.create_deal(
            {"name": "Broken", "products_data": [{"product_id": product.id, "quantity": quantity}]}
        )

    assert Deal.objects.count() == 0


def test_create_deal_defaults_quantity():
    product = product_factory()

    deal = Deal.objects.create_deal(
        {"name": "Default", "products_data": [{"product_id": product.id, "quantity": None}]}
    )

    assert deal.products_data.get().quantity == 1
