import logging

from django.db import models

from crm.errors import DocumentNotFound, DocumentValidationError

from .base import Document, assign_fields

logger = logging.getLogger(__name__)


class MessengerAppManager(models.Manager):
    def get_app(self, pk):
        app = self.filter(pk=pk).first()

        if app is None:
            raise DocumentNotFound("Messenger app not found")

        return app

    def create_app(self, doc):
        app = self.model()
        self._apply(app, doc)
        app.save()

        logger.info("Messenger app %s (%s) created", app.id, app.kind)

        return app

    def update_app(self, pk, doc):
        app = self.get_app(pk)
        self._apply(app, doc)
        app.save()

        logger.info("Messenger app %s updated", app.id)

        return app

    def remove_app(self, pk):
        app = self.get_app(pk)
        app.delete()

        logger.info("Messenger app %s removed", pk)

        return True

    def _apply(self, app, doc):
        assign_fields(app, doc, MessengerApp.EDITABLE_FIELDS)

        if app.kind not in dict(MessengerApp.KINDS):
            raise DocumentValidationError("Invalid messenger app kind")


class MessengerApp(Document):
    KINDS = (
        ("googleMeet", "Google Meet"),
        ("knowledgebase", "Knowledge base"),
        ("lead", "Lead"),
        ("website", "Website"),
    )
    EDITABLE_FIELDS = ("kind", "name", "show_in_inbox", "credentials")

    kind = models.CharField(max_length=32, choices=KINDS)
    name = models.CharField(max_length=255)
    show_in_inbox = models.BooleanField(default=False)
    credentials = models.JSONField(default=dict, blank=True)

    objects = MessengerAppManager()

    class Meta(Document.Meta):
        permissions = (
            ("messengerAppsAdd", "Can add messenger apps"),
            ("messengerAppsEdit", "Can edit messenger apps"),
            ("messengerAppsRemove", "Can remove messenger apps"),
        )

    def __str__(self):
        return f"{self.name} ({self.kind})"
