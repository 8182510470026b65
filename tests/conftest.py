"""
Pytest fixtures shared by the CRM test modules.
"""
from types import SimpleNamespace
from unittest.mock import Mock

import pytest
from django.contrib.auth.models import AnonymousUser, Permission

from crm.data_sources import DataSources, EngagesAPI
from crm_backend.schema import schema as crm_schema

from .factories import user_factory


@pytest.fixture
def owner(db):
    """A user allowed to run every mutation."""
    return user_factory(is_owner=True)


@pytest.fixture
def staff_user(db):
    """A user without any CRM permission."""
    return user_factory()


@pytest.fixture
def grant(db):
    """Give a user the named CRM permissions and return a fresh copy of it."""

    def _grant(user, *actions):
        user.user_permissions.add(
            *Permission.objects.filter(content_type__app_label="crm", codename__in=actions)
        )
        return type(user).objects.get(pk=user.pk)

    return _grant


@pytest.fixture
def engages():
    return Mock(spec=EngagesAPI)


@pytest.fixture
def make_context(engages):
    def _make_context(user=None):
        return SimpleNamespace(
            user=user or AnonymousUser(),
            data_sources=DataSources(engages=engages),
        )

    return _make_context


@pytest.fixture
def execute(make_context):
    """Run a GraphQL operation against the project schema."""

    def _execute(query, user=None, **variables):
        return crm_schema.execute(
            query,
            variable_values=variables,
            context_value=make_context(user),
        )

    return _execute
