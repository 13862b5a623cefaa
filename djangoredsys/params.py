# coding=utf-8
import base64
import binascii
import json
import logging
import re
from decimal import Decimal, Overflow, ROUND_FLOOR

from djangoredsys.conf import get_setting
from djangoredsys.defs import CURRENCIES, LANGUAGES, REDSYS_URL, SIGNATURE_VERSION
from djangoredsys.exceptions import RedsysParameterException, RedsysUnsupportedCurrency
from djangoredsys.signature import sign, signatures_match

logger = logging.getLogger(__name__)

# Longitud máxima del importe en unidades mínimas
MAX_AMOUNT_LENGTH = 12

# Fecha de caducidad de la tarjeta: cuatro dígitos AAMM
regex_expiry_date = re.compile(r"[0-9]{4}")


def _clean_amount(amount):
    """
    El importe ha de ser un número finito y no negativo. Se devuelve como Decimal construido a partir de su
    representación literal, para que 0.29 EUR sean 29 céntimos y no 28.
    """
    if isinstance(amount, bool) or not isinstance(amount, (int, float, Decimal)):
        raise RedsysParameterException("Invalid amount to charge", field="amount")

    amount = Decimal(str(amount))
    if not amount.is_finite() or amount < 0:
        raise RedsysParameterException("Invalid amount to charge", field="amount")
    return amount


def _format_amount(amount, currency):
    """
    Convierte el importe a unidades mínimas de la moneda (p.ej. céntimos), redondeando hacia abajo.
    El resultado no puede tener más de MAX_AMOUNT_LENGTH dígitos.
    """
    try:
        minor_units = (amount * currency["multiplier"]).to_integral_value(rounding=ROUND_FLOOR)
    except Overflow as e:
        raise RedsysParameterException("Amount to charge is too large", field="amount") from e

    # Se compara antes de pasar a int para no construir enteros gigantes
    if minor_units >= 10 ** MAX_AMOUNT_LENGTH:
        raise RedsysParameterException("Amount to charge is too large", field="amount")
    return str(int(minor_units))


def _format_expiry_date(expiry_date):
    """
    Redsys espera la caducidad como MMAA y se recibe como AAMM, así que se intercambian las dos mitades.
    """
    if not isinstance(expiry_date, str) or not regex_expiry_date.fullmatch(expiry_date):
        raise RedsysParameterException("Invalid expiryDate", field="expiry_date")
    return expiry_date[2:4] + expiry_date[0:2]


####################################################################
## Parámetros de la operación
def format_params(amount=None, merchant_code=None, transaction_type=None, order=None, terminal=None,
                  currency=None, merchant_name=None, merchant_url=None, merchant_signature=None,
                  success_url=None, error_url=None, date_frecuency=None, charge_expiry_date=None,
                  sum_total=None, direct_payment=None, identifier=None, group=None, pan=None,
                  expiry_date=None, cvv2=None, card_country=None, lang=None, merchant_data=None,
                  client_ip=None):
    """
    Valida los datos de la operación y los traduce a los campos DS_MERCHANT_* que espera Redsys.

    :param amount: int|float|Decimal  importe en unidades de la moneda (p.ej. euros)
    :param merchant_code: str  código FUC asignado al comercio
    :param transaction_type: str  tipo de transacción (ver defs.TRANSACTION_TYPES)
    :param order: str  número de pedido
    :param currency: str  código ISO 4217 alfabético, por defecto REDSYS_DEFAULT_CURRENCY
    :param terminal: str  número de terminal, por defecto REDSYS_DEFAULT_TERMINAL
    :param expiry_date: str  caducidad de la tarjeta en formato AAMM
    :param lang: str  código de idioma; si no está soportado se ignora
    :return: dict  campos del protocolo, en el orden en el que se construyen
    """
    if not currency:
        currency = get_setting("REDSYS_DEFAULT_CURRENCY")

    # El importe se valida antes que el resto de campos
    amount = _clean_amount(amount)

    if not merchant_code:
        raise RedsysParameterException("The merchant code is mandatory", field="merchant_code")
    if not transaction_type:
        raise RedsysParameterException("The transaction type is mandatory", field="transaction_type")
    if not order:
        raise RedsysParameterException("No order reference provided.", field="order")

    params = {
        "DS_MERCHANT_ORDER": str(order),
        "DS_MERCHANT_MERCHANTCODE": str(merchant_code),
        "DS_MERCHANT_TRANSACTIONTYPE": str(transaction_type),
        "DS_MERCHANT_TERMINAL": str(terminal or get_setting("REDSYS_DEFAULT_TERMINAL")),
    }

    currency_data = CURRENCIES.get(currency)
    if not currency_data:
        raise RedsysUnsupportedCurrency(currency)

    params["DS_MERCHANT_CURRENCY"] = currency_data["num"]

    params["DS_MERCHANT_AMOUNT"] = _format_amount(amount, currency_data)

    optional_fields = (
        ("DS_MERCHANT_MERCHANTNAME", merchant_name),
        ("DS_MERCHANT_MERCHANTURL", merchant_url),
        ("DS_MERCHANT_MERCHANTSIGNATURE", merchant_signature),
        ("DS_MERCHANT_URLOK", success_url),
        ("DS_MERCHANT_URLKO", error_url),
        ("DS_MERCHANT_DATEFRECUENCY", date_frecuency),
        ("DS_MERCHANT_CHARGEEXPIRYDATE", charge_expiry_date),
        ("DS_MERCHANT_SUMTOTAL", sum_total),
        ("DS_MERCHANT_DIRECTPAYMENT", direct_payment),
        ("DS_MERCHANT_IDENTIFIER", identifier),
        ("DS_MERCHANT_GROUP", group),
        ("DS_MERCHANT_PAN", pan),
    )
    for field_name, value in optional_fields:
        if value:
            params[field_name] = str(value)

    if expiry_date:
        params["DS_MERCHANT_EXPIRYDATE"] = _format_expiry_date(expiry_date)

    if cvv2:
        params["DS_MERCHANT_CVV2"] = str(cvv2)
    if card_country:
        params["DS_CARD_COUNTRY"] = str(card_country)

    # Idioma de la pasarela. Si no está soportado no se envía y Redsys usa el suyo por defecto
    if lang:
        if lang in LANGUAGES:
            params["DS_MERCHANT_CONSUMERLANGUAGE"] = LANGUAGES[lang]
        else:
            logger.debug("Idioma {0} no soportado por Redsys, se omite".format(lang))

    if merchant_data:
        params["DS_MERCHANT_MERCHANTDATA"] = str(merchant_data)
    if client_ip:
        params["DS_MERCHANT_CLIENTIP"] = str(client_ip)

    logger.info("Parámetros del pedido {0} preparados: importe {1} moneda {2}".format(
        params["DS_MERCHANT_ORDER"], params["DS_MERCHANT_AMOUNT"], params["DS_MERCHANT_CURRENCY"]))
    return params


####################################################################
## Ds_MerchantParameters: parámetros en JSON codificados en base64
def encode_merchant_parameters(params):
    """
    Empaqueta los parámetros de la operación tal y como se envían en Ds_MerchantParameters.
    :param params: dict  campos del protocolo
    :return: str  JSON codificado en base64
    """
    json_order_data = json.dumps(params)
    return base64.b64encode(json_order_data.encode("utf-8")).decode("ascii")


def decode_merchant_parameters(merchant_parameters):
    """
    Desempaqueta el Ds_MerchantParameters recibido de la pasarela.
    Acepta base64 estándar o URL-safe, con o sin relleno.
    :param merchant_parameters: str
    :return: dict
    """
    if not merchant_parameters or not isinstance(merchant_parameters, str):
        raise RedsysParameterException("Empty Ds_MerchantParameters", field="merchant_parameters")

    data = merchant_parameters.strip()
    padding = "=" * (-len(data) % 4)

    try:
        operation_data = json.loads(base64.urlsafe_b64decode(data + padding).decode("utf-8"))
    except (binascii.Error, UnicodeDecodeError, ValueError) as e:
        raise RedsysParameterException("Invalid Ds_MerchantParameters", field="merchant_parameters") from e

    if not isinstance(operation_data, dict):
        raise RedsysParameterException("Invalid Ds_MerchantParameters", field="merchant_parameters")
    return operation_data


def create_payment_form(merchant_key, params, environment=None):
    """
    Genera los datos del formulario de pago que se envía por POST a la pasarela.

    :param merchant_key: str  clave del comercio codificada en base64
    :param params: dict  campos devueltos por format_params
    :param environment: str  "testing" o "production", por defecto REDSYS_ENVIRONMENT
    :return: dict
    """
    if environment is None:
        environment = get_setting("REDSYS_ENVIRONMENT")

    if environment not in REDSYS_URL:
        raise RedsysParameterException("Entorno {0} no válido".format(environment), field="environment")

    packed_order_data = encode_merchant_parameters(params)

    data = {
        "Ds_SignatureVersion": SIGNATURE_VERSION,
        "Ds_MerchantParameters": packed_order_data,
        "Ds_Signature": sign(merchant_key, params["DS_MERCHANT_ORDER"], packed_order_data),
    }

    form_data = {
        "data": data,
        "action": REDSYS_URL[environment],
        "enctype": "application/x-www-form-urlencoded",
        "method": "post",
    }

    return form_data


def verify_merchant_parameters(merchant_key, merchant_parameters, signature):
    """
    Comprueba la firma de una notificación HTTP POST (Ds_MerchantParameters + Ds_Signature).
    La firma se calcula sobre la cadena base64 tal y como se recibe.
    :return: bool
    """
    operation_data = decode_merchant_parameters(merchant_parameters)

    # Según la operación el número de pedido llega con una u otra capitalización
    order = operation_data.get("Ds_Order") or operation_data.get("DS_ORDER")
    if not order:
        logger.info("Ds_MerchantParameters sin Ds_Order, no se puede comprobar la firma")
        return False

    computed = sign(merchant_key, order, merchant_parameters)
    if not signatures_match(signature, computed):
        logger.info("Las firmas no coinciden para el pedido {0}".format(order))
        return False

    logger.info("Firma verificada correctamente para el pedido {0}".format(order))
    return True
