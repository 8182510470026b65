import logging

from django.db import models, transaction

from crm.errors import DocumentNotFound, DocumentValidationError

from .base import Document, assign_fields
from .customers import Customer
from .products import Product

logger = logging.getLogger(__name__)


class DealManager(models.Manager):
    def get_deal(self, pk):
        deal = self.filter(pk=pk).first()

        if deal is None:
            raise DocumentNotFound("Deal not found")

        return deal

    @transaction.atomic
    def create_deal(self, doc):
        deal = self.model()
        assign_fields(deal, doc, Deal.EDITABLE_FIELDS)
        deal.save()

        self._set_relations(deal, doc)

        logger.info("Deal %s created", deal.id)

        return deal

    @transaction.atomic
    def update_deal(self, pk, doc):
        deal = self.get_deal(pk)
        assign_fields(deal, doc, Deal.EDITABLE_FIELDS)
        deal.save()

        self._set_relations(deal, doc)

        logger.info("Deal %s updated", deal.id)

        return deal

    def remove_deal(self, pk):
        deal = self.get_deal(pk)
        deal.delete()

        logger.info("Deal %s removed", pk)

        return True

    def _set_relations(self, deal, doc):
        if doc.get("customer_ids") is not None:
            customer_ids = list(dict.fromkeys(doc["customer_ids"]))
            customers = list(Customer.objects.filter(pk__in=customer_ids))

            if len(customers) != len(customer_ids):
                raise DocumentNotFound("Customer not found")

            deal.customers.set(customers)

        if doc.get("products_data") is not None:
            items = []

            for data in doc["products_data"]:
                product = Product.objects.get_product(pk=data["product_id"])
                quantity = data.get("quantity")
                if quantity is None:
                    quantity = 1
                elif isinstance(quantity, bool) or not isinstance(quantity, int) or quantity < 1:
                    raise DocumentValidationError("Quantity must be a positive number")
                unit_price = data.get("unit_price")

                items.append(
                    DealProduct(
                        deal=deal,
                        product=product,
                        quantity=quantity,
                        unit_price=product.unit_price if unit_price is None else unit_price,
                    )
                )

            deal.products_data.all().delete()
            DealProduct.objects.bulk_create(items)


class Deal(Document):
    EDITABLE_FIELDS = ("name", "description", "close_date")

    name = models.CharField(max_length=255)
    description = models.TextField(blank=True)
    close_date = models.DateTimeField(null=True, blank=True)
    customers = models.ManyToManyField(Customer, blank=True, related_name="deals")
    modified_at = models.DateTimeField(auto_now=True)

    objects = DealManager()

    class Meta(Document.Meta):
        permissions = (
            ("dealsAdd", "Can add deals"),
            ("dealsEdit", "Can edit deals"),
            ("dealsRemove", "Can remove deals"),
        )

    def __str__(self):
        return self.name

    @property
    def amount(self):
        return sum((item.amount for item in self.products_data.all()), 0)


class DealProduct(Document):
    """Product line item of a deal."""

    deal = models.ForeignKey(Deal, on_delete=models.CASCADE, related_name="products_data")
    product = models.ForeignKey(Product, on_delete=models.PROTECT, related_name="deal_items")
    quantity = models.PositiveIntegerField(default=1)
    unit_price = models.DecimalField(max_digits=14, decimal_places=2, default=0)

    def __str__(self):
        return f"{self.product} x {self.quantity}"

    @property
    def amount(self):
        return self.quantity * self.unit_price
