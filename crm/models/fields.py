from decimal import Decimal, InvalidOperation

from django.core.exceptions import ValidationError
from django.core.validators import validate_email
from django.db import models
from django.utils.dateparse import parse_date, parse_datetime

from crm.errors import DocumentValidationError

from .base import Document


class FieldManager(models.Manager):
    def clean_multi(self, data):
        """
        Validate a sparse custom field map keyed by field id.

        Only the given keys are checked. Returns a new dict with numeric
        strings of ``number`` fields converted to numbers.
        """
        if not data:
            return {}

        fields = {field.id: field for field in self.filter(pk__in=list(data.keys()))}
        cleaned = {}

        for field_id, value in data.items():
            field = fields.get(field_id)

            if field is None:
                raise DocumentValidationError("Field not found")

            cleaned[field_id] = field.clean_value(value)

        return cleaned


class Field(Document):
    CONTENT_TYPES = (
        ("customer", "Customer"),
        ("company", "Company"),
        ("product", "Product"),
    )
    VALIDATIONS = (
        ("", "None"),
        ("number", "Number"),
        ("email", "Email"),
        ("date", "Date"),
    )

    content_type = models.CharField(max_length=32, choices=CONTENT_TYPES)
    text = models.CharField(max_length=255)
    type = models.CharField(max_length=32, default="input")
    validation = models.CharField(max_length=16, choices=VALIDATIONS, blank=True, default="")
    is_required = models.BooleanField(default=False)
    order = models.PositiveIntegerField(default=0)

    objects = FieldManager()

    def __str__(self):
        return self.text

    def clean_value(self, value):
        if value in (None, "", []):
            if self.is_required:
                raise DocumentValidationError(f"{self.text}: required")
            return value

        if self.validation == "number":
            return self._clean_number(value)

        if self.validation == "email":
            if not isinstance(value, str):
                raise DocumentValidationError(f"{self.text}: Invalid email")

            try:
                validate_email(value)
            except ValidationError:
                raise DocumentValidationError(f"{self.text}: Invalid email")

        if self.validation == "date":
            return self._clean_date(value)

        return value

    def _clean_date(self, value):
        if not isinstance(value, str):
            raise DocumentValidationError(f"{self.text}: Invalid date")

        try:
            parsed = parse_date(value) or parse_datetime(value)
        except ValueError:
            parsed = None

        if parsed is None:
            raise DocumentValidationError(f"{self.text}: Invalid date")

        return value

    def _clean_number(self, value):
        if isinstance(value, bool):
            raise DocumentValidationError(f"{self.text}: Invalid number")

        if isinstance(value, (int, float)):
            return value

        try:
            number = Decimal(str(value))
        except (InvalidOperation, TypeError):
            raise DocumentValidationError(f"{self.text}: Invalid number")

        if not number.is_finite():
            raise DocumentValidationError(f"{self.text}: Invalid number")

        return int(number) if number == number.to_integral_value() else float(number)
