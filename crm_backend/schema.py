import graphene
from django.conf import settings
from graphene_django.debug import DjangoDebug

from crm.schema import Mutation as CRMMutation
from crm.schema import Query as CRMQuery


class Query(CRMQuery, graphene.ObjectType):
    """
    Root query of the CRM API.

    In debug mode ``_debug`` exposes the SQL run while resolving a query.
    """

    if settings.DEBUG:
        debug = graphene.Field(DjangoDebug, name="_debug")


class Mutation(CRMMutation, graphene.ObjectType):
    """Root mutation: every field is gated by a permission of the same name."""


schema = graphene.Schema(
    query=Query,
    mutation=Mutation,
)
