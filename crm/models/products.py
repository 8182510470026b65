import logging

from django.db import models, transaction
from django.db.models.deletion import ProtectedError

from crm.errors import DocumentNotFound, DocumentValidationError

from .base import Document, assign_fields
from .fields import Field

logger = logging.getLogger(__name__)

CANNOT_REMOVE_CATEGORY = "Can't remove a product category"


def category_order(name, code, parent=None):
    order = f"{name}{code}"

    if parent is not None:
        return f"{parent.order}/{order}"

    return order


class ProductCategoryManager(models.Manager):
    def get_product_category(self, **selector):
        category = self.filter(**selector).first()

        if category is None:
            raise DocumentNotFound("Product & service category not found")

        return category

    def check_code_duplication(self, code, exclude_id=None):
        if not code:
            raise DocumentValidationError("Code is required")

        categories = self.filter(code=code)

        if exclude_id is not None:
            categories = categories.exclude(pk=exclude_id)

        if categories.exists():
            raise DocumentValidationError("Code must be unique")

    def create_product_category(self, doc):
        self.check_code_duplication(doc.get("code"))

        parent = None
        if doc.get("parent_id"):
            parent = self.get_product_category(pk=doc["parent_id"])

        category = self.model(parent=parent)
        assign_fields(category, doc, ProductCategory.EDITABLE_FIELDS)
        category.order = category_order(category.name, category.code, parent)
        category.save()

        logger.info("Product category %s created", category.id)

        return category

    @transaction.atomic
    def update_product_category(self, pk, doc):
        """
        Update name, code and description of a category.

        The parent is fixed once the category exists. Every other category
        whose order sits on or under the old order is rewritten to the new
        one.
        """
        category = self.get_product_category(pk=pk)

        if "parent_id" in doc and (doc["parent_id"] or None) != category.parent_id:
            raise DocumentValidationError("Cannot change category")

        if "code" in doc and doc["code"] != category.code:
            self.check_code_duplication(doc["code"], exclude_id=pk)

        old_order = category.order

        assign_fields(category, doc, ProductCategory.EDITABLE_FIELDS)
        category.order = category_order(category.name, category.code, category.parent)
        category.save()

        if category.order != old_order:
            self._reorder(old_order, category)

        logger.info("Product category %s updated", category.id)

        return category

    def _reorder(self, old_order, category):
        related = self.exclude(pk=category.pk).filter(
            models.Q(order=old_order) | models.Q(order__startswith=f"{old_order}/")
        )
        moved = []

        for item in related:
            item.order = category.order + item.order[len(old_order):]
            moved.append(item)

        self.bulk_update(moved, ["order"])

    @transaction.atomic
    def remove_product_category(self, pk):
        category = self.get_product_category(pk=pk)

        if category.products.exists() or category.children.exists():
            raise DocumentValidationError(CANNOT_REMOVE_CATEGORY)

        try:
            category.delete()
        except ProtectedError:
            raise DocumentValidationError(CANNOT_REMOVE_CATEGORY)

        logger.info("Product category %s removed", pk)

        return True


class ProductCategory(Document):
    EDITABLE_FIELDS = ("name", "code", "description")

    name = models.CharField(max_length=255)
    code = models.CharField(max_length=255, unique=True)
    description = models.TextField(blank=True)
    parent = models.ForeignKey(
        "self",
        null=True,
        blank=True,
        on_delete=models.PROTECT,
        related_name="children",
    )
    order = models.CharField(max_length=1024, db_index=True, blank=True)

    objects = ProductCategoryManager()

    class Meta:
        ordering = ("order",)
        verbose_name_plural = "product categories"
        permissions = (
            ("productCategoriesAdd", "Can add product categories"),
            ("productCategoriesEdit", "Can edit product categories"),
            ("productCategoriesRemove", "Can remove product categories"),
        )

    def __str__(self):
        return self.name


class ProductManager(models.Manager):
    def get_product(self, **selector):
        product = self.filter(**selector).first()

        if product is None:
            raise DocumentNotFound("Product not found")

        return product

    def check_code_duplication(self, code, exclude_id=None):
        if not code:
            raise DocumentValidationError("Code is required")

        products = self.filter(code=code)

        if exclude_id is not None:
            products = products.exclude(pk=exclude_id)

        if products.exists():
            raise DocumentValidationError("Code must be unique")

    def create_product(self, doc):
        self.check_code_duplication(doc.get("code"))

        product = self.model()
        self._apply(product, doc)
        product.save()

        logger.info("Product %s created", product.id)

        return product

    def update_product(self, pk, doc):
        product = self.get_product(pk=pk)

        if "code" in doc and doc["code"] != product.code:
            self.check_code_duplication(doc["code"], exclude_id=pk)

        self._apply(product, doc)
        product.save()

        logger.info("Product %s updated", product.id)

        return product

    @transaction.atomic
    def remove_products(self, product_ids):
        # Local import, deals reference products
        from .deals import Deal

        deal_names = list(
            Deal.objects.filter(products_data__product__in=product_ids)
            .distinct()
            .values_list("name", flat=True)
        )

        if deal_names:
            raise DocumentValidationError(
                f"Can not remove products. Following deals are used {','.join(deal_names)}"
            )

        try:
            self.filter(pk__in=product_ids).delete()
        except ProtectedError as e:
            names = sorted({item.deal.name for item in e.protected_objects})
            raise DocumentValidationError(
                f"Can not remove products. Following deals are used {','.join(names)}"
            )

        logger.info("Products %s removed", ",".join(product_ids))

        return True

    def _apply(self, product, doc):
        assign_fields(product, doc, Product.EDITABLE_FIELDS)

        if product.type not in dict(Product.TYPES):
            raise DocumentValidationError("Invalid product type")

        if doc.get("category_code"):
            product.category = ProductCategory.objects.get_product_category(
                code=doc["category_code"]
            )
        elif "category_id" in doc:
            product.category = (
                ProductCategory.objects.get_product_category(pk=doc["category_id"])
                if doc["category_id"]
                else None
            )

        if doc.get("custom_fields_data") is not None:
            product.custom_fields_data = {
                **product.custom_fields_data,
                **Field.objects.clean_multi(doc["custom_fields_data"]),
            }


class Product(Document):
    TYPES = (
        ("product", "Product"),
        ("service", "Service"),
    )
    EDITABLE_FIELDS = ("name", "code", "type", "description", "sku", "unit_price")

    name = models.CharField(max_length=255)
    code = models.CharField(max_length=255, unique=True)
    type = models.CharField(max_length=32, choices=TYPES, default="product")
    description = models.TextField(blank=True)
    sku = models.CharField(max_length=255, blank=True)
    unit_price = models.DecimalField(max_digits=14, decimal_places=2, default=0)
    category = models.ForeignKey(
        ProductCategory,
        null=True,
        blank=True,
        on_delete=models.PROTECT,
        related_name="products",
    )
    custom_fields_data = models.JSONField(default=dict, blank=True)

    objects = ProductManager()

    class Meta(Document.Meta):
        permissions = (
            ("productsAdd", "Can add products"),
            ("productsEdit", "Can edit products"),
            ("productsRemove", "Can remove products"),
        )

    def __str__(self):
        return self.name
