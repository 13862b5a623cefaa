# -*- coding: utf-8 -*-

import datetime
from urllib.parse import unquote

import pytz
from django.utils import timezone

from djangoredsys.defs import REDSYS_TIME_ZONE


def localize_datetime(_datetime, time_zone=REDSYS_TIME_ZONE):
    """Localiza la marca de tiempo en la zona indicada. Sólo y exclusivamente si no está localizada ya."""
    if timezone.is_naive(_datetime):
        return pytz.timezone(time_zone).localize(_datetime)
    return _datetime


def localize_datetime_from_format(str_datetime, datetime_format="%d/%m/%Y %H:%M", time_zone=REDSYS_TIME_ZONE):
    _datetime = datetime.datetime.strptime(str_datetime, datetime_format)
    return localize_datetime(_datetime, time_zone=time_zone)


def parse_notification_datetime(ds_date, ds_hour):
    """
    Fecha y hora de una operación a partir de los campos Ds_Date (dd/mm/aaaa) y Ds_Hour (HH:MM) de una notificación.
    En las notificaciones HTTP POST las barras llegan codificadas (20%2F10%2F2016).
    :return: datetime  con la zona horaria de la pasarela
    """
    str_datetime = "{0} {1}".format(unquote(ds_date).strip(), unquote(ds_hour).strip())
    return localize_datetime_from_format(str_datetime)
