# -*- coding: utf-8 -*-

import logging

from django.core.exceptions import ImproperlyConfigured
from django.http import HttpResponse, HttpResponseBadRequest, HttpResponseNotAllowed
from django.utils.module_loading import import_string
from django.views.decorators.csrf import csrf_exempt

from djangoredsys.conf import get_setting
from djangoredsys.defs import SOAP_CONTENT_TYPES
from djangoredsys.exceptions import RedsysInvalidNotification, RedsysSoapException
from djangoredsys.soap import build_notification_response, detect_soap_version, extract_notification_payload

logger = logging.getLogger(__name__)


def get_notification_handler(handler=None):
    """
    Returns the callable that processes the notification payload.
    It can be passed from the urlconf or configured as a dotted path in REDSYS_NOTIFICATION_HANDLER.
    """
    if handler is None:
        handler = get_setting("REDSYS_NOTIFICATION_HANDLER")

    if not handler:
        raise ImproperlyConfigured("REDSYS_NOTIFICATION_HANDLER is not set")

    if isinstance(handler, str):
        handler = import_string(handler)

    return handler


# SOAP notification
@csrf_exempt
def soap_notification(request, handler=None):
    """
    This view will be called by the bank (procesaNotificacionSIS).

    The handler receives the request and the unescaped notification payload and must return
    the answer for the bank, usually built with djangoredsys.soap.build_merchant_answer.
    """
    if request.method != "POST":
        return HttpResponseNotAllowed(["POST"])

    handler = get_notification_handler(handler)

    try:
        version = detect_soap_version(request)
        payload = extract_notification_payload(request.body)
    except RedsysSoapException as e:
        logger.info("Request is not a SOAP notification: {0}".format(e))
        return HttpResponseBadRequest("Not a valid SOAP request")
    except RedsysInvalidNotification as e:
        logger.info("Invalid SOAP notification: {0}".format(e))
        return HttpResponseBadRequest("Invalid notification")

    logger.info("SOAP {0} notification received".format(version))
    answer = handler(request, payload)

    return HttpResponse(build_notification_response(answer, version), content_type=SOAP_CONTENT_TYPES[version])
