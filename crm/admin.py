from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as DjangoUserAdmin

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


@admin.register(User)
class UserAdmin(DjangoUserAdmin):
    list_display = ("username", "email", "first_name", "last_name", "is_owner", "is_staff")
    fieldsets = DjangoUserAdmin.fieldsets + (("CRM", {"fields": ("is_owner",)}),)


@admin.register(Customer)
class CustomerAdmin(admin.ModelAdmin):
    list_display = ("id", "first_name", "last_name", "primary_email", "primary_phone", "created_at")
    search_fields = ("first_name", "last_name", "primary_email", "primary_phone")
    list_filter = ("created_at", "do_not_disturb")
    filter_horizontal = ("companies",)


@admin.register(Company)
class CompanyAdmin(admin.ModelAdmin):
    list_display = ("id", "primary_name", "industry", "created_at")
    search_fields = ("primary_name",)


@admin.register(ProductCategory)
class ProductCategoryAdmin(admin.ModelAdmin):
    list_display = ("id", "name", "code", "parent", "order")
    search_fields = ("name", "code")


@admin.register(Product)
class ProductAdmin(admin.ModelAdmin):
    list_display = ("id", "name", "code", "type", "sku", "unit_price", "category")
    search_fields = ("name", "code", "sku")
    list_filter = ("type", "category")


class DealProductInline(admin.TabularInline):
    model = DealProduct
    extra = 0


@admin.register(Deal)
class DealAdmin(admin.ModelAdmin):
    list_display = ("id", "name", "close_date", "created_at")
    search_fields = ("name",)
    list_filter = ("close_date",)
    inlines = (DealProductInline,)


@admin.register(MessengerApp)
class MessengerAppAdmin(admin.ModelAdmin):
    list_display = ("id", "name", "kind", "show_in_inbox", "created_at")
    list_filter = ("kind",)


@admin.register(Field)
class FieldAdmin(admin.ModelAdmin):
    list_display = ("id", "text", "content_type", "validation", "is_required")
    list_filter = ("content_type",)


@admin.register(AuditLog)
class AuditLogAdmin(admin.ModelAdmin):
    list_display = ("id", "action", "type", "object_id", "created_by", "created_at")
    list_filter = ("action", "type")
    search_fields = ("object_id", "description")
