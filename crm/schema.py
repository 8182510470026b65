import graphene
from graphene.types.generic import GenericScalar
from graphene_django.filter import DjangoFilterConnectionField

from .audit import put_create_log, put_delete_log, put_update_log
from .models import AuditLog, Customer, Deal, Field, MessengerApp, Product, ProductCategory
from .permissions import check_login, check_permission
from .types import (
    AuditLogType,
    CustomerNode,
    CustomerType,
    DealNode,
    DealType,
    FieldType,
    MessengerAppType,
    ProductCategoryNode,
    ProductCategoryType,
    ProductNode,
    ProductType,
)


def to_doc(input):
    return dict(input) if input else {}


class CustomerInput(graphene.InputObjectType):
    first_name = graphene.String()
    middle_name = graphene.String()
    last_name = graphene.String()
    primary_email = graphene.String()
    emails = graphene.List(graphene.String)
    primary_phone = graphene.String()
    phones = graphene.List(graphene.String)
    position = graphene.String()
    department = graphene.String()
    description = graphene.String()
    do_not_disturb = graphene.Boolean()
    owner_id = graphene.ID()
    company_ids = graphene.List(graphene.ID)
    custom_fields_data = GenericScalar()


class ProductInput(graphene.InputObjectType):
    name = graphene.String()
    code = graphene.String()
    type = graphene.String()
    description = graphene.String()
    sku = graphene.String()
    unit_price = graphene.Decimal()
    category_id = graphene.ID()
    category_code = graphene.String()
    custom_fields_data = GenericScalar()


class ProductCategoryInput(graphene.InputObjectType):
    name = graphene.String()
    code = graphene.String()
    description = graphene.String()
    parent_id = graphene.ID()


class DealProductInput(graphene.InputObjectType):
    product_id = graphene.ID(required=True)
    quantity = graphene.Int()
    unit_price = graphene.Decimal()


class DealInput(graphene.InputObjectType):
    name = graphene.String()
    description = graphene.String()
    close_date = graphene.DateTime()
    customer_ids = graphene.List(graphene.ID)
    products_data = graphene.List(DealProductInput)


class MessengerAppInput(graphene.InputObjectType):
    kind = graphene.String()
    name = graphene.String()
    show_in_inbox = graphene.Boolean()
    credentials = GenericScalar()


class CustomersAdd(graphene.Mutation):
    """Create a new customer and record a registration log."""

    class Arguments:
        input = CustomerInput(required=True)

    customer = graphene.Field(CustomerType)

    @check_permission("customersAdd")
    def mutate(self, info, input):
        user = info.context.user
        doc = to_doc(input)

        customer = Customer.objects.create_customer(doc, user)

        put_create_log(
            {
                "type": "customer",
                "new_data": doc,
                "object": customer,
                "description": f"{customer.first_name} has been created",
            },
            user,
        )

        return CustomersAdd(customer=customer)


class CustomersEdit(graphene.Mutation):
    class Arguments:
        id = graphene.ID(required=True)
        input = CustomerInput(required=True)

    customer = graphene.Field(CustomerType)

    @check_permission("customersEdit")
    def mutate(self, info, id, input):
        doc = to_doc(input)

        customer = Customer.objects.filter(pk=id).first()
        updated = Customer.objects.update_customer(id, doc)

        if customer:
            put_update_log(
                {
                    "type": "customer",
                    "object": customer,
                    "new_data": doc,
                    "description": f"{customer.first_name} has been updated",
                },
                info.context.user,
            )

        return CustomersEdit(customer=updated)


class CustomersEditCompanies(graphene.Mutation):
    class Arguments:
        id = graphene.ID(required=True)
        company_ids = graphene.List(graphene.ID, required=True)

    customer = graphene.Field(CustomerType)

    @check_permission("customersEditCompanies")
    def mutate(self, info, id, company_ids):
        customer = Customer.objects.update_companies(id, company_ids)

        return CustomersEditCompanies(customer=customer)


class CustomersMerge(graphene.Mutation):
    """
    Merge customers into a new one and tell the engagement service about
    the new customer id.
    """

    class Arguments:
        customer_ids = graphene.List(graphene.ID, required=True)
        customer_fields = CustomerInput()

    customer = graphene.Field(CustomerType)

    @check_permission("customersMerge")
    def mutate(self, info, customer_ids, customer_fields=None):
        result = Customer.objects.merge_customers(customer_ids, to_doc(customer_fields))

        if result.update_engage:
            info.context.data_sources.engages.engages_change_customer(
                new_customer_id=result.update_engage.new_customer_id,
                customer_ids=result.update_engage.customer_ids,
            )

        return CustomersMerge(customer=result.customer)


class CustomersRemove(graphene.Mutation):
    class Arguments:
        customer_ids = graphene.List(graphene.ID, required=True)

    customer_ids = graphene.List(graphene.ID)

    @check_permission("customersRemove")
    def mutate(self, info, customer_ids):
        for customer_id in customer_ids:
            customer = Customer.objects.filter(pk=customer_id).first()
            removed = Customer.objects.remove_customer(customer_id)

            if customer and removed:
                put_delete_log(
                    {
                        "type": "customer",
                        "object": customer,
                        "description": f"{customer.first_name} has been deleted",
                    },
                    info.context.user,
                )

        return CustomersRemove(customer_ids=customer_ids)


class ProductsAdd(graphene.Mutation):
    class Arguments:
        input = ProductInput(required=True)

    product = graphene.Field(ProductType)

    @check_permission("productsAdd")
    def mutate(self, info, input):
        doc = to_doc(input)
        product = Product.objects.create_product(doc)

        put_create_log(
            {
                "type": "product",
                "new_data": doc,
                "object": product,
                "description": f"{product.name} has been created",
            },
            info.context.user,
        )

        return ProductsAdd(product=product)


class ProductsEdit(graphene.Mutation):
    class Arguments:
        id = graphene.ID(required=True)
        input = ProductInput(required=True)

    product = graphene.Field(ProductType)

    @check_permission("productsEdit")
    def mutate(self, info, id, input):
        doc = to_doc(input)

        product = Product.objects.get_product(pk=id)
        updated = Product.objects.update_product(id, doc)

        put_update_log(
            {
                "type": "product",
                "object": product,
                "new_data": doc,
                "description": f"{product.name} has been edited",
            },
            info.context.user,
        )

        return ProductsEdit(product=updated)


class ProductsRemove(graphene.Mutation):
    class Arguments:
        product_ids = graphene.List(graphene.ID, required=True)

    success = graphene.Boolean()

    @check_permission("productsRemove")
    def mutate(self, info, product_ids):
        products = list(Product.objects.filter(pk__in=product_ids))

        Product.objects.remove_products(product_ids)

        for product in products:
            put_delete_log(
                {
                    "type": "product",
                    "object": product,
                    "description": f"{product.name} has been removed",
                },
                info.context.user,
            )

        return ProductsRemove(success=True)


class ProductCategoriesAdd(graphene.Mutation):
    class Arguments:
        input = ProductCategoryInput(required=True)

    product_category = graphene.Field(ProductCategoryType)

    @check_permission("productCategoriesAdd")
    def mutate(self, info, input):
        doc = to_doc(input)
        category = ProductCategory.objects.create_product_category(doc)

        put_create_log(
            {
                "type": "product-category",
                "new_data": doc,
                "object": category,
                "description": f"{category.name} has been created",
            },
            info.context.user,
        )

        return ProductCategoriesAdd(product_category=category)


class ProductCategoriesEdit(graphene.Mutation):
    class Arguments:
        id = graphene.ID(required=True)
        input = ProductCategoryInput(required=True)

    product_category = graphene.Field(ProductCategoryType)

    @check_permission("productCategoriesEdit")
    def mutate(self, info, id, input):
        doc = to_doc(input)

        category = ProductCategory.objects.get_product_category(pk=id)
        updated = ProductCategory.objects.update_product_category(id, doc)

        put_update_log(
            {
                "type": "product-category",
                "object": category,
                "new_data": doc,
                "description": f"{category.name} has been edited",
            },
            info.context.user,
        )

        return ProductCategoriesEdit(product_category=updated)


class ProductCategoriesRemove(graphene.Mutation):
    class Arguments:
        id = graphene.ID(required=True)

    success = graphene.Boolean()

    @check_permission("productCategoriesRemove")
    def mutate(self, info, id):
        category = ProductCategory.objects.get_product_category(pk=id)

        ProductCategory.objects.remove_product_category(id)

        put_delete_log(
            {
                "type": "product-category",
                "object": category,
                "description": f"{category.name} has been removed",
            },
            info.context.user,
        )

        return ProductCategoriesRemove(success=True)


class DealsAdd(graphene.Mutation):
    class Arguments:
        input = DealInput(required=True)

    deal = graphene.Field(DealType)

    @check_permission("dealsAdd")
    def mutate(self, info, input):
        doc = to_doc(input)
        deal = Deal.objects.create_deal(doc)

        put_create_log(
            {
                "type": "deal",
                "new_data": doc,
                "object": deal,
                "description": f"{deal.name} has been created",
            },
            info.context.user,
        )

        return DealsAdd(deal=deal)


class DealsEdit(graphene.Mutation):
    class Arguments:
        id = graphene.ID(required=True)
        input = DealInput(required=True)

    deal = graphene.Field(DealType)

    @check_permission("dealsEdit")
    def mutate(self, info, id, input):
        doc = to_doc(input)

        deal = Deal.objects.get_deal(id)
        updated = Deal.objects.update_deal(id, doc)

        put_update_log(
            {
                "type": "deal",
                "object": deal,
                "new_data": doc,
                "description": f"{deal.name} has been edited",
            },
            info.context.user,
        )

        return DealsEdit(deal=updated)


class DealsRemove(graphene.Mutation):
    class Arguments:
        id = graphene.ID(required=True)

    success = graphene.Boolean()

    @check_permission("dealsRemove")
    def mutate(self, info, id):
        deal = Deal.objects.get_deal(id)

        Deal.objects.remove_deal(id)

        put_delete_log(
            {
                "type": "deal",
                "object": deal,
                "description": f"{deal.name} has been removed",
            },
            info.context.user,
        )

        return DealsRemove(success=True)


class MessengerAppsAdd(graphene.Mutation):
    class Arguments:
        input = MessengerAppInput(required=True)

    messenger_app = graphene.Field(MessengerAppType)

    @check_permission("messengerAppsAdd")
    def mutate(self, info, input):
        doc = to_doc(input)
        app = MessengerApp.objects.create_app(doc)

        put_create_log(
            {
                "type": "messenger-app",
                "new_data": doc,
                "object": app,
                "description": f"{app.name} has been created",
            },
            info.context.user,
        )

        return MessengerAppsAdd(messenger_app=app)


class MessengerAppsEdit(graphene.Mutation):
    class Arguments:
        id = graphene.ID(required=True)
        input = MessengerAppInput(required=True)

    messenger_app = graphene.Field(MessengerAppType)

    @check_permission("messengerAppsEdit")
    def mutate(self, info, id, input):
        doc = to_doc(input)

        app = MessengerApp.objects.get_app(id)
        updated = MessengerApp.objects.update_app(id, doc)

        put_update_log(
            {
                "type": "messenger-app",
                "object": app,
                "new_data": doc,
                "description": f"{app.name} has been edited",
            },
            info.context.user,
        )

        return MessengerAppsEdit(messenger_app=updated)


class MessengerAppsRemove(graphene.Mutation):
    class Arguments:
        id = graphene.ID(required=True)

    success = graphene.Boolean()

    @check_permission("messengerAppsRemove")
    def mutate(self, info, id):
        app = MessengerApp.objects.get_app(id)

        MessengerApp.objects.remove_app(id)

        put_delete_log(
            {
                "type": "messenger-app",
                "object": app,
                "description": f"{app.name} has been removed",
            },
            info.context.user,
        )

        return MessengerAppsRemove(success=True)


class Mutation(graphene.ObjectType):
    customers_add = CustomersAdd.Field()
    customers_edit = CustomersEdit.Field()
    customers_edit_companies = CustomersEditCompanies.Field()
    customers_merge = CustomersMerge.Field()
    customers_remove = CustomersRemove.Field()

    products_add = ProductsAdd.Field()
    products_edit = ProductsEdit.Field()
    products_remove = ProductsRemove.Field()

    product_categories_add = ProductCategoriesAdd.Field()
    product_categories_edit = ProductCategoriesEdit.Field()
    product_categories_remove = ProductCategoriesRemove.Field()

    deals_add = DealsAdd.Field()
    deals_edit = DealsEdit.Field()
    deals_remove = DealsRemove.Field()

    messenger_apps_add = MessengerAppsAdd.Field()
    messenger_apps_edit = MessengerAppsEdit.Field()
    messenger_apps_remove = MessengerAppsRemove.Field()


class Query(graphene.ObjectType):
    all_customers = DjangoFilterConnectionField(CustomerNode)
    all_products = DjangoFilterConnectionField(ProductNode)
    all_product_categories = DjangoFilterConnectionField(ProductCategoryNode)
    all_deals = DjangoFilterConnectionField(DealNode)

    customer_detail = graphene.Field(CustomerType, id=graphene.ID(required=True))
    product_detail = graphene.Field(ProductType, id=graphene.ID(required=True))
    product_category_detail = graphene.Field(ProductCategoryType, id=graphene.ID(required=True))
    deal_detail = graphene.Field(DealType, id=graphene.ID(required=True))

    messenger_apps = graphene.List(MessengerAppType, kind=graphene.String())
    messenger_app_detail = graphene.Field(MessengerAppType, id=graphene.ID(required=True))

    custom_fields = graphene.List(FieldType, content_type=graphene.String())
    audit_logs = graphene.List(AuditLogType, object_id=graphene.ID(), type=graphene.String())

    engage_messages = GenericScalar()

    def resolve_customer_detail(self, info, id):
        return Customer.objects.get_customer(id)

    def resolve_product_detail(self, info, id):
        return Product.objects.get_product(pk=id)

    def resolve_product_category_detail(self, info, id):
        return ProductCategory.objects.get_product_category(pk=id)

    def resolve_deal_detail(self, info, id):
        return Deal.objects.get_deal(id)

    def resolve_messenger_apps(self, info, kind=None):
        apps = MessengerApp.objects.all()
        if kind:
            apps = apps.filter(kind=kind)
        return apps

    def resolve_messenger_app_detail(self, info, id):
        return MessengerApp.objects.get_app(id)

    def resolve_custom_fields(self, info, content_type=None):
        fields = Field.objects.order_by("order", "created_at")
        if content_type:
            fields = fields.filter(content_type=content_type)
        return fields

    def resolve_audit_logs(self, info, object_id=None, type=None):
        check_login(getattr(info.context, "user", None))

        logs = AuditLog.objects.order_by("-created_at")
        if object_id:
            logs = logs.filter(object_id=object_id)
        if type:
            logs = logs.filter(type=type)
        return logs

    def resolve_engage_messages(self, info):
        check_login(getattr(info.context, "user", None))
        return info.context.data_sources.engages.list()
