import django_filters
from django.db.models import Q

from .models import Customer, Deal, Product, ProductCategory


class CustomerFilter(django_filters.FilterSet):
    search = django_filters.CharFilter(method="filter_search")
    company = django_filters.CharFilter(field_name="companies__id")
    created_at_gte = django_filters.IsoDateTimeFilter(field_name="created_at", lookup_expr="gte")
    created_at_lte = django_filters.IsoDateTimeFilter(field_name="created_at", lookup_expr="lte")

    class Meta:
        model = Customer
        fields = {
            "first_name": ["exact", "icontains"],
            "last_name": ["exact", "icontains"],
            "primary_email": ["exact", "icontains"],
            "primary_phone": ["exact", "startswith"],
            "do_not_disturb": ["exact"],
        }

    def filter_search(self, queryset, name, value):
        return queryset.filter(
            Q(first_name__icontains=value)
            | Q(last_name__icontains=value)
            | Q(primary_email__icontains=value)
            | Q(primary_phone__icontains=value)
        )


class ProductFilter(django_filters.FilterSet):
    category_code = django_filters.CharFilter(field_name="category__code")
    unit_price_gte = django_filters.NumberFilter(field_name="unit_price", lookup_expr="gte")
    unit_price_lte = django_filters.NumberFilter(field_name="unit_price", lookup_expr="lte")

    class Meta:
        model = Product
        fields = {
            "name": ["exact", "icontains"],
            "code": ["exact"],
            "sku": ["exact"],
            "type": ["exact"],
            "category": ["exact"],
        }


class ProductCategoryFilter(django_filters.FilterSet):
    # Whole subtree under the category with this code
    under = django_filters.CharFilter(method="filter_under")

    class Meta:
        model = ProductCategory
        fields = {
            "name": ["exact", "icontains"],
            "code": ["exact"],
            "parent": ["exact", "isnull"],
        }

    def filter_under(self, queryset, name, value):
        category = ProductCategory.objects.filter(code=value).first()
        if category is None:
            return queryset.none()
        return queryset.filter(order__startswith=f"{category.order}/")


class DealFilter(django_filters.FilterSet):
    product = django_filters.CharFilter(field_name="products_data__product__id", distinct=True)
    customer = django_filters.CharFilter(field_name="customers__id", distinct=True)

    class Meta:
        model = Deal
        fields = {
            "name": ["exact", "icontains"],
            "close_date": ["gte", "lte"],
        }
