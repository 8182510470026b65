import django.contrib.auth.validators
import django.db.models.deletion
import django.utils.timezone
from django.conf import settings
from django.db import migrations, models

import crm.models.base
import crm.models.users


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("auth", "0012_alter_user_first_name_max_length"),
    ]

    operations = [
        migrations.CreateModel(
            name="User",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("password", models.CharField(max_length=128, verbose_name="password")),
                ("last_login", models.DateTimeField(blank=True, null=True, verbose_name="last login")),
                (
                    "is_superuser",
                    models.BooleanField(
                        default=False,
                        help_text="Designates that this user has all permissions without explicitly assigning them.",
                        verbose_name="superuser status",
                    ),
                ),
                (
                    "username",
                    models.CharField(
                        error_messages={"unique": "A user with that username already exists."},
                        help_text="Required. 150 characters or fewer. Letters, digits and @/./+/-/_ only.",
                        max_length=150,
                        unique=True,
                        validators=[django.contrib.auth.validators.UnicodeUsernameValidator()],
                        verbose_name="username",
                    ),
                ),
                ("first_name", models.CharField(blank=True, max_length=150, verbose_name="first name")),
                ("last_name", models.CharField(blank=True, max_length=150, verbose_name="last name")),
                ("email", models.EmailField(blank=True, max_length=254, verbose_name="email address")),
                (
                    "is_staff",
                    models.BooleanField(
                        default=False,
                        help_text="Designates whether the user can log into this admin site.",
                        verbose_name="staff status",
                    ),
                ),
                (
                    "is_active",
                    models.BooleanField(
                        default=True,
                        help_text=(
                            "Designates whether this user should be treated as active. "
                            "Unselect this instead of deleting accounts."
                        ),
                        verbose_name="active",
                    ),
                ),
                ("date_joined", models.DateTimeField(default=django.utils.timezone.now, verbose_name="date joined")),
                ("is_owner", models.BooleanField(default=False)),
                (
                    "groups",
                    models.ManyToManyField(
                        blank=True,
                        help_text=(
                            "The groups this user belongs to. A user will get all permissions "
                            "granted to each of their groups."
                        ),
                        related_name="user_set",
                        related_query_name="user",
                        to="auth.group",
                        verbose_name="groups",
                    ),
                ),
                (
                    "user_permissions",
                    models.ManyToManyField(
                        blank=True,
                        help_text="Specific permissions for this user.",
                        related_name="user_set",
                        related_query_name="user",
                        to="auth.permission",
                        verbose_name="user permissions",
                    ),
                ),
            ],
            options={
                "verbose_name": "user",
                "verbose_name_plural": "users",
                "abstract": False,
            },
            managers=[
                ("objects", crm.models.users.UserManager()),
            ],
        ),
        migrations.CreateModel(
            name="Field",
            fields=[
                ("id", models.CharField(default=crm.models.base.generate_id, editable=False, max_length=32, primary_key=True, serialize=False)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                (
                    "content_type",
                    models.CharField(
                        choices=[("customer", "Customer"), ("company", "Company"), ("product", "Product")],
                        max_length=32,
                    ),
                ),
                ("text", models.CharField(max_length=255)),
                ("type", models.CharField(default="input", max_length=32)),
                (
                    "validation",
                    models.CharField(
                        blank=True,
                        choices=[("", "None"), ("number", "Number"), ("email", "Email"), ("date", "Date")],
                        default="",
                        max_length=16,
                    ),
                ),
                ("is_required", models.BooleanField(default=False)),
                ("order", models.PositiveIntegerField(default=0)),
            ],
            options={
                "ordering": ("created_at",),
                "abstract": False,
            },
        ),
        migrations.CreateModel(
            name="Company",
            fields=[
                ("id", models.CharField(default=crm.models.base.generate_id, editable=False, max_length=32, primary_key=True, serialize=False)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("primary_name", models.CharField(max_length=255)),
                ("website", models.URLField(blank=True)),
                ("industry", models.CharField(blank=True, max_length=255)),
                ("description", models.TextField(blank=True)),
            ],
            options={
                "verbose_name_plural": "companies",
                "ordering": ("created_at",),
                "abstract": False,
            },
        ),
        migrations.CreateModel(
            name="Customer",
            fields=[
                ("id", models.CharField(default=crm.models.base.generate_id, editable=False, max_length=32, primary_key=True, serialize=False)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("first_name", models.CharField(blank=True, max_length=255)),
                ("middle_name", models.CharField(blank=True, max_length=255)),
                ("last_name", models.CharField(blank=True, max_length=255)),
                ("primary_email", models.EmailField(blank=True, db_index=True, max_length=254)),
                ("emails", models.JSONField(blank=True, default=list)),
                ("primary_phone", models.CharField(blank=True, db_index=True, max_length=64)),
                ("phones", models.JSONField(blank=True, default=list)),
                ("position", models.CharField(blank=True, max_length=255)),
                ("department", models.CharField(blank=True, max_length=255)),
                ("description", models.TextField(blank=True)),
                ("do_not_disturb", models.BooleanField(default=False)),
                ("custom_fields_data", models.JSONField(blank=True, default=dict)),
                ("merged_ids", models.JSONField(blank=True, default=list)),
                ("modified_at", models.DateTimeField(auto_now=True)),
                ("companies", models.ManyToManyField(blank=True, related_name="customers", to="crm.company")),
                (
                    "owner",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="owned_customers",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
            ],
            options={
                "ordering": ("created_at",),
                "abstract": False,
                "permissions": (
                    ("customersAdd", "Can add customers"),
                    ("customersEdit", "Can edit customers"),
                    ("customersEditCompanies", "Can edit customer companies"),
                    ("customersMerge", "Can merge customers"),
                    ("customersRemove", "Can remove customers"),
                ),
            },
        ),
        migrations.CreateModel(
            name="ProductCategory",
            fields=[
                ("id", models.CharField(default=crm.models.base.generate_id, editable=False, max_length=32, primary_key=True, serialize=False)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("name", models.CharField(max_length=255)),
                ("code", models.CharField(max_length=255, unique=True)),
                ("description", models.TextField(blank=True)),
                ("order", models.CharField(blank=True, db_index=True, max_length=1024)),
                (
                    "parent",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="children",
                        to="crm.productcategory",
                    ),
                ),
            ],
            options={
                "verbose_name_plural": "product categories",
                "ordering": ("order",),
                "permissions": (
                    ("productCategoriesAdd", "Can add product categories"),
                    ("productCategoriesEdit", "Can edit product categories"),
                    ("productCategoriesRemove", "Can remove product categories"),
                ),
            },
        ),
        migrations.CreateModel(
            name="Product",
            fields=[
                ("id", models.CharField(default=crm.models.base.generate_id, editable=False, max_length=32, primary_key=True, serialize=False)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("name", models.CharField(max_length=255)),
                ("code", models.CharField(max_length=255, unique=True)),
                (
                    "type",
                    models.CharField(
                        choices=[("product", "Product"), ("service", "Service")],
                        default="product",
                        max_length=32,
                    ),
                ),
                ("description", models.TextField(blank=True)),
                ("sku", models.CharField(blank=True, max_length=255)),
                ("unit_price", models.DecimalField(decimal_places=2, default=0, max_digits=14)),
                ("custom_fields_data", models.JSONField(blank=True, default=dict)),
                (
                    "category",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="products",
                        to="crm.productcategory",
                    ),
                ),
            ],
            options={
                "ordering": ("created_at",),
                "abstract": False,
                "permissions": (
                    ("productsAdd", "Can add products"),
                    ("productsEdit", "Can edit products"),
                    ("productsRemove", "Can remove products"),
                ),
            },
        ),
        migrations.CreateModel(
            name="Deal",
            fields=[
                ("id", models.CharField(default=crm.models.base.generate_id, editable=False, max_length=32, primary_key=True, serialize=False)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("name", models.CharField(max_length=255)),
                ("description", models.TextField(blank=True)),
                ("close_date", models.DateTimeField(blank=True, null=True)),
                ("modified_at", models.DateTimeField(auto_now=True)),
                ("customers", models.ManyToManyField(blank=True, related_name="deals", to="crm.customer")),
            ],
            options={
                "ordering": ("created_at",),
                "abstract": False,
                "permissions": (
                    ("dealsAdd", "Can add deals"),
                    ("dealsEdit", "Can edit deals"),
                    ("dealsRemove", "Can remove deals"),
                ),
            },
        ),
        migrations.CreateModel(
            name="DealProduct",
            fields=[
                ("id", models.CharField(default=crm.models.base.generate_id, editable=False, max_length=32, primary_key=True, serialize=False)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("quantity", models.PositiveIntegerField(default=1)),
                ("unit_price", models.DecimalField(decimal_places=2, default=0, max_digits=14)),
                (
                    "deal",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="products_data",
                        to="crm.deal",
                    ),
                ),
                (
                    "product",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="deal_items",
                        to="crm.product",
                    ),
                ),
            ],
            options={
                "ordering": ("created_at",),
                "abstract": False,
            },
        ),
        migrations.CreateModel(
            name="MessengerApp",
            fields=[
                ("id", models.CharField(default=crm.models.base.generate_id, editable=False, max_length=32, primary_key=True, serialize=False)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                (
                    "kind",
                    models.CharField(
                        choices=[
                            ("googleMeet", "Google Meet"),
                            ("knowledgebase", "Knowledge base"),
                            ("lead", "Lead"),
                            ("website", "Website"),
                        ],
                        max_length=32,
                    ),
                ),
                ("name", models.CharField(max_length=255)),
                ("show_in_inbox", models.BooleanField(default=False)),
                ("credentials", models.JSONField(blank=True, default=dict)),
            ],
            options={
                "ordering": ("created_at",),
                "abstract": False,
                "permissions": (
                    ("messengerAppsAdd", "Can add messenger apps"),
                    ("messengerAppsEdit", "Can edit messenger apps"),
                    ("messengerAppsRemove", "Can remove messenger apps"),
                ),
            },
        ),
        migrations.CreateModel(
            name="AuditLog",
            fields=[
                ("id", models.CharField(default=crm.models.base.generate_id, editable=False, max_length=32, primary_key=True, serialize=False)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                (
                    "action",
                    models.CharField(
                        choices=[("create", "Create"), ("update", "Update"), ("delete", "Delete")],
                        max_length=16,
                    ),
                ),
                ("type", models.CharField(db_index=True, max_length=64)),
                ("object_id", models.CharField(db_index=True, max_length=32)),
                ("object_data", models.JSONField(blank=True, default=dict)),
                ("new_data", models.JSONField(blank=True, null=True)),
                ("description", models.TextField(blank=True)),
                (
                    "created_by",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="audit_logs",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
            ],
            options={
                "ordering": ("created_at",),
                "abstract": False,
            },
        ),
    ]
