# coding=utf-8
from django.conf import settings
from django.core.exceptions import ImproperlyConfigured

# Valores por defecto de la configuración. Se pueden sobrescribir en los settings del proyecto Django.
DEFAULTS = {
    # Moneda usada cuando no se indica ninguna
    "REDSYS_DEFAULT_CURRENCY": "EUR",
    # Terminal usado cuando no se indica ninguno
    "REDSYS_DEFAULT_TERMINAL": "1",
    # Entorno del TPV: "testing" o "production"
    "REDSYS_ENVIRONMENT": "testing",
    # Ruta (python dotted path) de la función que atiende las notificaciones SOAP
    "REDSYS_NOTIFICATION_HANDLER": None,
}


def get_setting(name):
    """
    Obtiene el valor de una opción de configuración.
    Si los settings de Django no están disponibles se usa el valor por defecto.
    """
    # El acceso carga los settings de DJANGO_SETTINGS_MODULE aunque todavía no se hayan usado
    try:
        return getattr(settings, name, DEFAULTS[name])
    except ImproperlyConfigured:
        return DEFAULTS[name]
