import graphene
from graphene import relay
from graphene_django import DjangoObjectType

from .filters import CustomerFilter, DealFilter, ProductCategoryFilter, ProductFilter
from .models import (
    AuditLog,
    Company,
    Customer,
    Deal,
    DealProduct,
    Field,
    MessengerApp,
    Product,
    ProductCategory,
    User,
)


CUSTOMER_FIELDS = (
    "id",
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
    "owner",
    "companies",
    "custom_fields_data",
    "merged_ids",
    "created_at",
    "modified_at",
)

PRODUCT_FIELDS = (
    "id",
    "name",
    "code",
    "type",
    "description",
    "sku",
    "unit_price",
    "category",
    "custom_fields_data",
    "created_at",
)

PRODUCT_CATEGORY_FIELDS = ("id", "name", "code", "description", "parent", "order", "created_at")

DEAL_FIELDS = (
    "id",
    "name",
    "description",
    "close_date",
    "customers",
    "products_data",
    "created_at",
    "modified_at",
)


class UserType(DjangoObjectType):
    class Meta:
        model = User
        fields = ("id", "username", "first_name", "last_name", "email", "is_owner")


class CompanyType(DjangoObjectType):
    class Meta:
        model = Company
        fields = ("id", "primary_name", "website", "industry", "description", "customers")


class FieldType(DjangoObjectType):
    class Meta:
        model = Field
        fields = ("id", "content_type", "text", "type", "validation", "is_required", "order")
        convert_choices_to_enum = False


class CustomerType(DjangoObjectType):
    full_name = graphene.String()

    class Meta:
        model = Customer
        fields = CUSTOMER_FIELDS + ("deals",)


class ProductCategoryType(DjangoObjectType):
    product_count = graphene.Int()

    class Meta:
        model = ProductCategory
        fields = PRODUCT_CATEGORY_FIELDS + ("children",)

    def resolve_product_count(self, info):
        return self.products.count()


class ProductType(DjangoObjectType):
    class Meta:
        model = Product
        fields = PRODUCT_FIELDS
        convert_choices_to_enum = False


class DealProductType(DjangoObjectType):
    amount = graphene.Decimal()

    class Meta:
        model = DealProduct
        fields = ("id", "product", "quantity", "unit_price")


class DealType(DjangoObjectType):
    amount = graphene.Decimal()

    class Meta:
        model = Deal
        fields = DEAL_FIELDS


class MessengerAppType(DjangoObjectType):
    class Meta:
        model = MessengerApp
        fields = ("id", "kind", "name", "show_in_inbox", "credentials", "created_at")
        convert_choices_to_enum = False


class AuditLogType(DjangoObjectType):
    class Meta:
        model = AuditLog
        fields = (
            "id",
            "action",
            "type",
            "object_id",
            "object_data",
            "new_data",
            "description",
            "created_by",
            "created_at",
        )
        convert_choices_to_enum = False


class CustomerNode(DjangoObjectType):
    full_name = graphene.String()

    class Meta:
        model = Customer
        interfaces = (relay.Node,)
        fields = CUSTOMER_FIELDS
        filterset_class = CustomerFilter
        skip_registry = True


class ProductNode(DjangoObjectType):
    class Meta:
        model = Product
        interfaces = (relay.Node,)
        fields = PRODUCT_FIELDS
        filterset_class = ProductFilter
        convert_choices_to_enum = False
        skip_registry = True


class ProductCategoryNode(DjangoObjectType):
    class Meta:
        model = ProductCategory
        interfaces = (relay.Node,)
        fields = PRODUCT_CATEGORY_FIELDS
        filterset_class = ProductCategoryFilter
        skip_registry = True


class DealNode(DjangoObjectType):
    amount = graphene.Decimal()

    class Meta:
        model = Deal
        interfaces = (relay.Node,)
        fields = DEAL_FIELDS
        filterset_class = DealFilter
        skip_registry = True
