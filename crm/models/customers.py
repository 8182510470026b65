import logging
from dataclasses import dataclass
from typing import List, Optional

from django.conf import settings
from django.contrib.auth import get_user_model
from django.db import models, transaction

from crm.errors import DocumentNotFound, DocumentValidationError

from .base import Document, assign_fields
from .companies import Company
from .fields import Field

logger = logging.getLogger(__name__)


@dataclass
class EngageUpdate:
    """Id remapping the engagement service must apply after a merge."""

    new_customer_id: str
    customer_ids: List[str]


@dataclass
class MergeResult:
    customer: "Customer"
    update_engage: Optional[EngageUpdate] = None


def unique(values):
    return [value for value in dict.fromkeys(values) if value]


class CustomerManager(models.Manager):
    def get_customer(self, pk):
        customer = self.filter(pk=pk).first()

        if customer is None:
            raise DocumentNotFound("Customer not found")

        return customer

    def check_duplication(self, doc, exclude_ids=()):
        customers = self.exclude(pk__in=list(exclude_ids))

        primary_email = doc.get("primary_email")
        if primary_email and customers.filter(primary_email__iexact=primary_email).exists():
            raise DocumentValidationError("Duplicated email")

        primary_phone = doc.get("primary_phone")
        if primary_phone and customers.filter(primary_phone=primary_phone).exists():
            raise DocumentValidationError("Duplicated phone")

    def create_customer(self, doc, user=None):
        self.check_duplication(doc)

        customer = self.model(owner=user)
        self._apply(customer, doc)
        customer.save()

        if doc.get("company_ids") is not None:
            customer.companies.set(Company.objects.get_companies(doc["company_ids"]))

        logger.info("Customer %s created", customer.id)

        return customer

    def update_customer(self, pk, doc):
        customer = self.get_customer(pk)

        self.check_duplication(doc, exclude_ids=[pk])
        self._apply(customer, doc)
        customer.save()

        logger.info("Customer %s updated", customer.id)

        return customer

    def update_companies(self, pk, company_ids):
        customer = self.get_customer(pk)
        customer.companies.set(Company.objects.get_companies(company_ids))

        return customer

    @transaction.atomic
    def merge_customers(self, customer_ids, customer_fields):
        """
        Collapse ``customer_ids`` into one new customer built from
        ``customer_fields``.

        The new customer collects the emails, phones, companies and deals of
        every source customer. Sources are removed afterwards.
        """
        customer_ids = list(dict.fromkeys(customer_ids))

        if len(customer_ids) < 2:
            raise DocumentValidationError("At least two customers are required to merge")

        sources = list(
            self.filter(pk__in=customer_ids).prefetch_related("companies", "deals")
        )

        if len(sources) != len(customer_ids):
            raise DocumentNotFound("Customer not found")

        self.check_duplication(customer_fields, exclude_ids=customer_ids)

        emails = [customer_fields.get("primary_email")]
        phones = [customer_fields.get("primary_phone")]
        companies = []
        deals = []

        for source in sources:
            emails.extend([source.primary_email, *source.emails])
            phones.extend([source.primary_phone, *source.phones])
            companies.extend(source.companies.all())
            deals.extend(source.deals.all())

        customer = self.model(
            emails=unique(emails),
            phones=unique(phones),
            merged_ids=customer_ids,
        )
        self._apply(customer, customer_fields)
        customer.save()

        customer.companies.set(unique(companies))
        for deal in unique(deals):
            deal.customers.add(customer)

        self.filter(pk__in=customer_ids).delete()

        logger.info("Customers %s merged into %s", ",".join(customer_ids), customer.id)

        return MergeResult(
            customer=customer,
            update_engage=EngageUpdate(
                new_customer_id=customer.id,
                customer_ids=customer_ids,
            ),
        )

    def remove_customer(self, pk):
        _, deleted = self.filter(pk=pk).delete()
        count = deleted.get(self.model._meta.label, 0)

        if count:
            logger.info("Customer %s removed", pk)

        return count

    def _apply(self, customer, doc):
        assign_fields(customer, doc, Customer.EDITABLE_FIELDS)

        if doc.get("owner_id"):
            customer.owner = get_user_model().objects.get_user(doc["owner_id"])

        if doc.get("custom_fields_data") is not None:
            customer.custom_fields_data = {
                **customer.custom_fields_data,
                **Field.objects.clean_multi(doc["custom_fields_data"]),
            }

        if customer.primary_email and customer.primary_email not in customer.emails:
            customer.emails = [customer.primary_email, *customer.emails]

        if customer.primary_phone and customer.primary_phone not in customer.phones:
            customer.phones = [customer.primary_phone, *customer.phones]


class Customer(Document):
    EDITABLE_FIELDS = (
        "first_name",
        "middle_name",
        "last_name",
        "primary_email",
        "emails",
        "primary_phone",
        "phones",
        "position",
        "department",
        "description",
        "do_not_disturb",
    )

    first_name = models.CharField(max_length=255, blank=True)
    middle_name = models.CharField(max_length=255, blank=True)
    last_name = models.CharField(max_length=255, blank=True)
    primary_email = models.EmailField(blank=True, db_index=True)
    emails = models.JSONField(default=list, blank=True)
    primary_phone = models.CharField(max_length=64, blank=True, db_index=True)
    phones = models.JSONField(default=list, blank=True)
    position = models.CharField(max_length=255, blank=True)
    department = models.CharField(max_length=255, blank=True)
    description = models.TextField(blank=True)
    do_not_disturb = models.BooleanField(default=False)
    owner = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        null=True,
        blank=True,
        on_delete=models.SET_NULL,
        related_name="owned_customers",
    )
    companies = models.ManyToManyField(Company, blank=True, related_name="customers")
    custom_fields_data = models.JSONField(default=dict, blank=True)
    merged_ids = models.JSONField(default=list, blank=True)
    modified_at = models.DateTimeField(auto_now=True)

    objects = CustomerManager()

    class Meta(Document.Meta):
        permissions = (
            ("customersAdd", "Can add customers"),
            ("customersEdit", "Can edit customers"),
            ("customersEditCompanies", "Can edit customer companies"),
            ("customersMerge", "Can merge customers"),
            ("customersRemove", "Can remove customers"),
        )

    def __str__(self):
        return self.full_name or self.primary_email or self.primary_phone or self.id

    @property
    def full_name(self):
        parts = (self.first_name, self.middle_name, self.last_name)
        return " ".join(part for part in parts if part)
