import os
from decimal import Decimal

import django

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "crm_backend.settings")
django.setup()

from crm.models import (  # noqa: E402
    Company,
    Customer,
    Deal,
    MessengerApp,
    Product,
    ProductCategory,
    User,
)


def run():
    # Optional: clear existing data
    Deal.objects.all().delete()
    Product.objects.all().delete()
    ProductCategory.objects.filter(parent__isnull=False).delete()
    ProductCategory.objects.all().delete()
    Customer.objects.all().delete()
    Company.objects.all().delete()
    MessengerApp.objects.all().delete()

    owner, _ = User.objects.get_or_create(
        username="owner",
        defaults={"email": "owner@example.com", "is_owner": True},
    )

    # Companies and customers
    acme = Company.objects.create(primary_name="Acme Corp", industry="Manufacturing")
    globex = Company.objects.create(primary_name="Globex", industry="Energy")

    alice = Customer.objects.create_customer(
        {
            "first_name": "Alice",
            "last_name": "Johnson",
            "primary_email": "alice@example.com",
            "primary_phone": "+1234567890",
            "company_ids": [acme.id],
        },
        owner,
    )
    bob = Customer.objects.create_customer(
        {
            "first_name": "Bob",
            "last_name": "Smith",
            "primary_email": "bob@example.com",
            "company_ids": [globex.id],
        },
        owner,
    )

    # Product categories
    hardware = ProductCategory.objects.create_product_category(
        {"name": "Hardware", "code": "HW"},
    )
    laptops = ProductCategory.objects.create_product_category(
        {"name": "Laptops", "code": "HW-LAP", "parent_id": hardware.id},
    )
    services = ProductCategory.objects.create_product_category(
        {"name": "Services", "code": "SRV"},
    )

    # Products
    laptop = Product.objects.create_product(
        {
            "name": "Laptop",
            "code": "LAP-001",
            "sku": "LAP-001",
            "unit_price": Decimal("999.99"),
            "category_id": laptops.id,
        }
    )
    support = Product.objects.create_product(
        {
            "name": "Support plan",
            "code": "SUP-001",
            "type": "service",
            "unit_price": Decimal("49.00"),
            "category_code": services.code,
        }
    )

    # Deals
    Deal.objects.create_deal(
        {
            "name": "Acme laptops",
            "customer_ids": [alice.id],
            "products_data": [{"product_id": laptop.id, "quantity": 10}],
        }
    )
    Deal.objects.create_deal(
        {
            "name": "Globex support",
            "customer_ids": [bob.id],
            "products_data": [{"product_id": support.id, "quantity": 12}],
        }
    )

    MessengerApp.objects.create_app({"kind": "knowledgebase", "name": "Help center"})

    print("Database seeded successfully.")


if __name__ == "__main__":
    run()
