"""
Tests for the product and product category managers.
"""
from unittest.mock import patch

import pytest
from django.db.models import QuerySet

from crm.errors import DocumentNotFound, DocumentValidationError
from crm.models import Deal, DealProduct, Product, ProductCategory

from .factories import (
    deal_factory,
    field_factory,
    product_category_factory,
    product_factory,
)

pytestmark = pytest.mark.django_db


@pytest.fixture
def product():
    return product_factory(type="service")


@pytest.fixture
def product_category():
    return product_category_factory()


@pytest.fixture
def deals(product):
    return [deal_factory(products=[product]), deal_factory(products=[product])]


class TestProducts:
    def test_get_product(self, product):
        with pytest.raises(DocumentNotFound, match="Product not found"):
            Product.objects.get_product(pk="fakeId")

        assert Product.objects.get_product(pk=product.pk) == product

    def test_create_product(self, product, product_category):
        args = {
            "name": product.name,
            "type": product.type,
            "description": product.description,
            "sku": product.sku,
            "category_id": product_category.id,
            "code": "123",
        }

        created = Product.objects.create_product(args)

        assert created.name == product.name
        assert created.type == product.type
        assert created.description == product.description
        assert created.sku == product.sku
        assert created.category == product_category

    def test_create_product_with_category_code(self, product_category):
        created = Product.objects.create_product(
            {"name": "Phone", "code": "234", "category_code": product_category.code}
        )

        assert created.category_id == product_category.id

    def test_create_product_with_unknown_category_code(self):
        with pytest.raises(DocumentNotFound, match="Product & service category not found"):
            Product.objects.create_product({"name": "Phone", "code": "345", "category_code": "missing"})

    def test_create_product_with_duplicated_code(self, product):
        with pytest.raises(DocumentValidationError, match="Code must be unique"):
            Product.objects.create_product({"name": "Copy", "code": product.code})

    def test_create_product_with_invalid_type(self):
        with pytest.raises(DocumentValidationError, match="Invalid product type"):
            Product.objects.create_product({"name": "Thing", "code": "456", "type": "gadget"})

    def test_update_product(self, product, product_category):
        args = {
            "name": f"{product.name}-update",
            "type": "product",
            "description": f"{product.description}-update",
            "sku": f"{product.sku}-update",
            "category_id": product_category.id,
            "code": "321",
        }

        updated = Product.objects.update_product(product.id, args)

        assert updated.name == f"{product.name}-update"
        assert updated.type == "product"
        assert updated.description == f"{product.description}-update"
        assert updated.sku == f"{product.sku}-update"
        assert updated.code == "321"

    def test_update_product_custom_fields_data(self, product):
        field = field_factory(content_type="product")
        other = field_factory(content_type="product")

        Product.objects.update_product(product.id, {"custom_fields_data": {other.id: "kept"}})
        updated = Product.objects.update_product(product.id, {"custom_fields_data": {field.id: 10}})

        assert updated.custom_fields_data[field.id] == 10
        assert updated.custom_fields_data[other.id] == "kept"

        product.refresh_from_db()
        assert product.custom_fields_data == {other.id: "kept", field.id: 10}

    def test_update_product_with_unknown_custom_field(self, product):
        with pytest.raises(DocumentValidationError, match="Field not found"):
            Product.objects.update_product(product.id, {"custom_fields_data": {"fakeId": 1}})

    def test_cannot_remove_products_used_in_deals(self, product, deals):
        with pytest.raises(DocumentValidationError) as excinfo:
            Product.objects.remove_products([product.id])

        prefix = "Can not remove products. Following deals are used "
        message = excinfo.value.message
        assert message.startswith(prefix)
        assert sorted(message[len(prefix):].split(",")) == sorted(deal.name for deal in deals)
        assert Product.objects.filter(pk=product.pk).exists()

    def test_remove_products(self, product, deals):
        DealProduct.objects.filter(deal__in=deals).delete()

        assert Product.objects.remove_products([product.id]) is True
        assert not Product.objects.filter(pk=product.pk).exists()
        assert Deal.objects.count() == 2

    def test_remove_products_referenced_after_check(self, product, deals):
        # Deal lookup misses, the PROTECT foreign key still refuses the delete
        with patch.object(QuerySet, "values_list", return_value=[]):
            with pytest.raises(DocumentValidationError) as excinfo:
                Product.objects.remove_products([product.id])

        prefix = "Can not remove products. Following deals are used "
        message = excinfo.value.message
        assert message.startswith(prefix)
        assert sorted(message[len(prefix):].split(",")) == sorted(deal.name for deal in deals)
        assert Product.objects.filter(pk=product.pk).exists()

    def test_update_product_with_empty_code(self, product):
        with pytest.raises(DocumentValidationError, match="Code is required"):
            Product.objects.update_product(product.id, {"code": ""})

        product.refresh_from_db()
        assert product.code != ""

    def test_update_product_ignores_null_name(self, product):
        updated = Product.objects.update_product(product.id, {"name": None, "sku": "SKU-X"})

        assert updated.name == product.name
        assert updated.sku == "SKU-X"


class TestProductCategories:
    def test_get_product_category(self, product_category):
        with pytest.raises(DocumentNotFound, match="Product & service category not found"):
            ProductCategory.objects.get_product_category(pk="fakeId")

        found = ProductCategory.objects.get_product_category(pk=product_category.pk)

        assert found == product_category

    def test_create_product_category(self, product_category):
        doc = {"name": "Product name", "code": "create1234"}

        created = ProductCategory.objects.create_product_category(doc)

        assert created.name == doc["name"]
        assert created.code == doc["code"]
        assert created.parent is None
        assert created.order == "Product namecreate1234"

        doc.update(parent_id=product_category.id, code="create12345")
        child = ProductCategory.objects.create_product_category(doc)

        assert child.parent_id == product_category.id
        assert child.order == f"{product_category.order}/Product namecreate12345"

    def test_create_product_category_with_duplicated_code(self, product_category):
        with pytest.raises(DocumentValidationError, match="Code must be unique"):
            ProductCategory.objects.create_product_category({"name": "Copy", "code": product_category.code})

    def test_update_product_category_cannot_change_parent(self, product_category):
        child = product_category_factory(parent=product_category)

        doc = {
            "name": "Updated product name",
            "code": "error1234",
            "parent_id": child.id,
        }

        with pytest.raises(DocumentValidationError, match="Cannot change category"):
            ProductCategory.objects.update_product_category(product_category.id, doc)

        with pytest.raises(DocumentValidationError, match="Cannot change category"):
            ProductCategory.objects.update_product_category(child.id, {"parent_id": None})

    def test_update_product_category(self, product_category):
        doc = {"name": "Updated product name", "code": "update1234"}

        updated = ProductCategory.objects.update_product_category(product_category.id, doc)

        assert updated.name == doc["name"]
        assert updated.code == doc["code"]
        assert updated.order == "Updated product nameupdate1234"

        # a category sharing the order value keeps its own code
        sibling = product_category_factory(code="create123456", order=updated.order)

        del doc["code"]
        updated_sibling = ProductCategory.objects.update_product_category(sibling.id, doc)

        assert updated_sibling.code == sibling.code

    def test_update_product_category_reorders_descendants(self, product_category):
        child = ProductCategory.objects.create_product_category(
            {"name": "Child", "code": "child-1", "parent_id": product_category.id}
        )
        grandchild = ProductCategory.objects.create_product_category(
            {"name": "Grandchild", "code": "grandchild-1", "parent_id": child.id}
        )

        ProductCategory.objects.update_product_category(product_category.id, {"name": "Renamed"})

        child.refresh_from_db()
        grandchild.refresh_from_db()
        root_order = f"Renamed{product_category.code}"

        assert child.order == f"{root_order}/Childchild-1"
        assert grandchild.order == f"{root_order}/Childchild-1/Grandchildgrandchild-1"

    def test_remove_product_category(self, product_category):
        assert ProductCategory.objects.remove_product_category(product_category.id) is True

        assert ProductCategory.objects.count() == 0

    def test_cannot_remove_product_category_with_products(self, product_category):
        product_factory(category=product_category)
        product_factory(category=product_category)

        with pytest.raises(DocumentValidationError, match="Can't remove a product category"):
            ProductCategory.objects.remove_product_category(product_category.id)

        assert ProductCategory.objects.count() == 1

    def test_cannot_remove_product_category_with_children(self, product_category):
        product_category_factory(parent=product_category)

        with pytest.raises(DocumentValidationError, match="Can't remove a product category"):
            ProductCategory.objects.remove_product_category(product_category.id)

    def test_remove_product_category_referenced_after_check(self, product_category):
        product_factory(category=product_category)

        with patch.object(QuerySet, "exists", return_value=False):
            with pytest.raises(DocumentValidationError, match="Can't remove a product category"):
                ProductCategory.objects.remove_product_category(product_category.id)

        assert ProductCategory.objects.count() == 1

    def test_update_product_category_with_empty_code(self, product_category):
        with pytest.raises(DocumentValidationError, match="Code is required"):
            ProductCategory.objects.update_product_category(product_category.id, {"code": ""})

        product_category.refresh_from_db()
        assert product_category.code != ""

    def test_update_product_category_ignores_null_name(self, product_category):
        updated = ProductCategory.objects.update_product_category(
            product_category.id, {"name": None, "description": "Updated"}
        )

        assert updated.name == product_category.name
        assert updated.description == "Updated"
