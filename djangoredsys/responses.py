# coding=utf-8
import math
import re

from djangoredsys.codes import AUTHORIZED_MESSAGE, DS_ERROR_CODES, DS_RESPONSE_CODES

# Los Ds_Response entre 0000 y 0099 indican un pago o preautorización autorizados
MAX_AUTHORIZED_RESPONSE = 99

# Como parseInt: se toma el entero con el que empieza la cadena, p.ej. "12abc" es 12
regex_response_code = re.compile(r"[+-]?[0-9]+")


def _parse_response_code(code):
    """
    Obtiene el valor numérico de un Ds_Response. Devuelve None si no es un entero no negativo.
    :param code: int|str  código, p.ej. 0, "0000" o " 0190 "
    """
    if isinstance(code, bool):
        return None

    if isinstance(code, int):
        number = code
    elif isinstance(code, float):
        if not math.isfinite(code) or not code.is_integer():
            return None
        number = int(code)
    elif isinstance(code, str):
        code = code.strip()
        matches = regex_response_code.match(code)
        if not matches:
            return None
        number = int(matches.group(0))
    else:
        return None

    if number < 0:
        return None
    return number


def get_response_code_message(code):
    """
    Mensaje asociado a un código de respuesta Ds_Response.

    Los códigos menores de 100 que no tienen entrada propia en la tabla son variantes de
    "operación autorizada". Un código desconocido o mal formado devuelve None.
    """
    number = _parse_response_code(code)
    if number is None:
        return None

    message = DS_RESPONSE_CODES.get(str(number))
    if not message and number <= MAX_AUTHORIZED_RESPONSE:
        return AUTHORIZED_MESSAGE

    return message


def get_sis_error_code_message(code):
    """
    Mensaje asociado a un código de error SISxxxx (Ds_ErrorCode), o None si no se conoce.
    """
    if not code or not isinstance(code, str):
        return None

    return DS_ERROR_CODES.get(code.strip())


def is_authorized(code):
    """
    Indica si el Ds_Response corresponde a un pago o preautorización autorizados (0000 a 0099).
    """
    number = _parse_response_code(code)
    return number is not None and number <= MAX_AUTHORIZED_RESPONSE


def format_ds_response_code(ds_response):
    """
    Formatea el mensaje asociado a un Ds_Response
    :param ds_response: str  código Ds_Response
    :return: str  mensaje formateado
    """
    if not ds_response:
        return None

    message = get_response_code_message(ds_response) or "código de respuesta Ds_Response desconocido"
    return "{0}. {1}".format(ds_response, message)


def format_ds_error_code(ds_errorcode):
    """
    Formatea el mensaje asociado a un Ds_ErrorCode
    :param ds_errorcode: str  código Ds_ErrorCode
    :return: str  mensaje formateado
    """
    if not ds_errorcode:
        return ""

    message = get_sis_error_code_message(ds_errorcode) or "Código de respuesta Ds_ErrorCode desconocido"
    return "{0}. {1}".format(ds_errorcode, message)
