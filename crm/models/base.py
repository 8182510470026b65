from django.db import models
from django.utils.crypto import get_random_string

ID_LENGTH = 17


def generate_id():
    return get_random_string(ID_LENGTH)


class Document(models.Model):
    """
    Abstract base for every stored entity.

    Ids are opaque random strings, so looking up any unknown string is an
    ordinary miss.
    """

    id = models.CharField(
        primary_key=True,
        max_length=32,
        default=generate_id,
        editable=False,
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        abstract = True
        ordering = ("created_at",)


def assign_fields(instance, doc, allowed):
    """
    Copy the keys of ``doc`` listed in ``allowed`` onto ``instance``.

    A null value for a column that is not nullable keeps the current value.
    """
    for name in allowed:
        if name not in doc:
            continue

        value = doc[name]

        if value is None and not instance._meta.get_field(name).null:
            continue

        setattr(instance, name, value)
