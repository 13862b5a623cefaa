# coding=utf-8
import base64
import binascii
import hmac
import logging

from Crypto.Cipher import DES3
from Crypto.Hash import HMAC, SHA256

from djangoredsys.defs import SIGNED_FIELDS_XML_RESPONSE
from djangoredsys.exceptions import RedsysKeyException

logger = logging.getLogger(__name__)

# La clave de comercio es una clave 3DES de tres claves (192 bits)
MERCHANT_KEY_LENGTH = 24

# Tamaño de bloque de 3DES
DES3_BLOCK_SIZE = 8


def _zero_pad(value, block_size=DES3_BLOCK_SIZE):
    """
    Rellena con bytes a cero (no PKCS) hasta un múltiplo del tamaño de bloque.
    :param value: str|bytes  valor a rellenar, las cadenas se codifican en UTF-8
    :return: bytes
    """
    if isinstance(value, bytes):
        data = value
    else:
        data = str(value).encode("utf-8")

    if len(data) % block_size != 0:
        data += b"\x00" * (block_size - len(data) % block_size)
    return data


def _decode_merchant_key(merchant_key):
    try:
        key = base64.b64decode(merchant_key, validate=True)
    except (binascii.Error, TypeError, ValueError) as e:
        raise RedsysKeyException("La clave de comercio no es un base64 válido") from e

    if len(key) != MERCHANT_KEY_LENGTH:
        raise RedsysKeyException("La clave de comercio debe tener {0} bytes y tiene {1}".format(
            MERCHANT_KEY_LENGTH, len(key)))
    return key


####################################################################
## Clave de firma específica de cada pedido
def derive_order_key(merchant_key, order):
    """
    Cifra el número de pedido con la clave del comercio para obtener la clave con la que se firma esa operación.

    Usa 3DES en modo CBC con un vector de inicialización de ocho bytes a cero y relleno con ceros, tal y como
    exige el protocolo de Redsys. No debe usarse como primitiva de cifrado para ningún otro fin.

    :param merchant_key: str  clave del comercio codificada en base64 (24 bytes)
    :param order: str  número de pedido
    :return: str  clave de la operación codificada en base64
    """
    encryption_key = _decode_merchant_key(merchant_key)

    try:
        des3_obj = DES3.new(encryption_key, DES3.MODE_CBC, iv=b"\x00" * DES3_BLOCK_SIZE)
    except ValueError as e:
        raise RedsysKeyException("La clave de comercio no es una clave 3DES válida") from e

    padded_order = _zero_pad(order)
    logger.debug("derive_order_key: pedido {0} rellenado a {1} bytes".format(order, len(padded_order)))

    return base64.b64encode(des3_obj.encrypt(padded_order)).decode("ascii")


####################################################################
## Generador de firma de mensajes
def sign(merchant_key, order, data):
    """
    Firma la cadena de texto recibida usando 3DES y HMAC SHA-256

    :param merchant_key: str  clave del comercio codificada en base64
    :param order: str  número de pedido con el que se deriva la clave de firma
    :param data: str  cadena de texto que se va a firmar
    :return: str  firma codificada en base64
    """
    signature_key = base64.b64decode(derive_order_key(merchant_key, order))

    if not isinstance(data, bytes):
        data = data.encode("utf-8")

    hash_obj = HMAC.new(key=signature_key, msg=data, digestmod=SHA256)
    signature = base64.b64encode(hash_obj.digest()).decode("ascii")
    logger.debug("Firma del pedido {0}: {1}".format(order, signature))
    return signature


def signatures_match(received, computed):
    """
    Compara la firma recibida de la pasarela con la calculada por el comercio.
    Redsys envía la firma en base64 URL-safe, así que se traducen '-' y '_' al alfabeto base64 estándar.
    """
    if not received or not computed:
        return False

    translated = received.replace("-", "+").replace("_", "/")
    if translated != received:
        logger.debug("Firma traducida {0}".format(translated))

    return hmac.compare_digest(translated.encode("utf-8"), computed.encode("utf-8"))


####################################################################
## Firma de las respuestas XML del servicio web
def response_signature_data(fields):
    """
    Cadena sobre la que se calcula la firma de una respuesta XML: concatenación de los campos
    SIGNED_FIELDS_XML_RESPONSE en ese orden. Los campos ausentes no aportan nada.
    :param fields: dict  campos Ds_* de la respuesta
    :return: str
    """
    return "".join(fields.get(name) or "" for name in SIGNED_FIELDS_XML_RESPONSE)


def verify_response_signature(merchant_key, fields, signature):
    """
    Comprueba la firma de una respuesta XML del servicio web.
    :param merchant_key: str  clave del comercio codificada en base64
    :param fields: dict  campos Ds_* de la respuesta
    :param signature: str  firma recibida (Ds_Signature)
    :return: bool
    """
    order = fields.get("Ds_Order")
    if not order:
        logger.info("Respuesta sin Ds_Order, no se puede comprobar la firma")
        return False

    computed = sign(merchant_key, order, response_signature_data(fields))
    if not signatures_match(signature, computed):
        logger.info("Las firmas no coinciden para el pedido {0}".format(order))
        return False

    return True
