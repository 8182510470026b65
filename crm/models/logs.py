from django.conf import settings
from django.db import models

from .base import Document


class AuditLog(Document):
    ACTIONS = (
        ("create", "Create"),
        ("update", "Update"),
        ("delete", "Delete"),
    )

    action = models.CharField(max_length=16, choices=ACTIONS)
    type = models.CharField(max_length=64, db_index=True)
    object_id = models.CharField(max_length=32, db_index=True)
    object_data = models.JSONField(default=dict, blank=True)
    new_data = models.JSONField(null=True, blank=True)
    description = models.TextField(blank=True)
    created_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        null=True,
        blank=True,
        on_delete=models.SET_NULL,
        related_name="audit_logs",
    )

    def __str__(self):
        return f"{self.action} {self.type} {self.object_id}"
