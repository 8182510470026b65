import pytest

from crm.errors import DocumentNotFound, DocumentValidationError
from crm.models import MessengerApp

from .factories import messenger_app_factory

pytestmark = pytest.mark.django_db


def test_get_messenger_app():
    messenger_app = messenger_app_factory()

    with pytest.raises(DocumentNotFound, match="Messenger app not found"):
        MessengerApp.objects.get_app("fakeId")

    assert MessengerApp.objects.get_app(messenger_app.id) == messenger_app


def test_create_messenger_app():
    app = MessengerApp.objects.create_app({"kind": "googleMeet", "name": "name"})

    assert app.id
    assert app.kind == "googleMeet"
    assert app.name == "name"


def test_create_messenger_app_with_unknown_kind():
    with pytest.raises(DocumentValidationError, match="Invalid messenger app kind"):
        MessengerApp.objects.create_app({"kind": "fax", "name": "name"})

    assert MessengerApp.objects.count() == 0


def test_update_messenger_app():
    app = messenger_app_factory(kind="lead")

    updated = MessengerApp.objects.update_app(app.id, {"name": "renamed", "show_in_inbox": True})

    assert updated.name == "renamed"
    assert updated.kind == "lead"
    assert updated.show_in_inbox is True


def test_remove_messenger_app():
    app = messenger_app_factory()

    assert MessengerApp.objects.remove_app(app.id) is True
    assert MessengerApp.objects.count() == 0

    with pytest.raises(DocumentNotFound):
        MessengerApp.objects.remove_app(app.id)
