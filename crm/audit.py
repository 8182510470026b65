"""
Audit log side effects for mutations.

Writing a log never fails the mutation that triggered it.
"""
import json
import logging

from django.core.serializers.json import DjangoJSONEncoder
from django.db import DatabaseError

from crm.models import AuditLog

logger = logging.getLogger(__name__)


def snapshot(instance):
    data = {
        field.attname: getattr(instance, field.attname)
        for field in instance._meta.concrete_fields
    }
    return json.loads(json.dumps(data, cls=DjangoJSONEncoder))


def put_log(action, params, user=None):
    instance = params["object"]
    new_data = params.get("new_data")

    if new_data is not None:
        new_data = json.loads(json.dumps(new_data, cls=DjangoJSONEncoder))

    try:
        log = AuditLog.objects.create(
            action=action,
            type=params["type"],
            object_id=instance.pk,
            object_data=snapshot(instance),
            new_data=new_data,
            description=params.get("description", ""),
            created_by=user if user is not None and user.is_authenticated else None,
        )
    except DatabaseError:
        logger.exception("Could not write %s log for %s %s", action, params["type"], instance.pk)
        return None

    logger.info("%s: %s", params["type"], log.description)

    return log


def put_create_log(params, user=None):
    return put_log("create", params, user)


def put_update_log(params, user=None):
    return put_log("update", params, user)


def put_delete_log(params, user=None):
    return put_log("delete", params, user)
