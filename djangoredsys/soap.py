# coding=utf-8
import logging
import re

from lxml import etree

from djangoredsys.defs import SOAP_11, SOAP_12, SOAP_11_ENVELOPE_NS, SOAP_12_ENVELOPE_NS
from djangoredsys.exceptions import RedsysInvalidNotification, RedsysSoapException
from djangoredsys.signature import sign, signatures_match
from djangoredsys.util import parse_notification_datetime
from djangoredsys.xmlutils import escape_xml, unescape_xml

logger = logging.getLogger(__name__)

# Elemento XML de procesaNotificacionSIS. Según el WSDL es un xsd:string, nunca un CDATA ni XML anidado.
regex_notification = re.compile(r"<(?:\w+:)?XML(?: [^<>]+)?>([^<>]+)</(?:\w+:)?XML>")

# <Request>...</Request> tal y como llega. Es necesario para calcular la firma
regex_request = re.compile(r"<Request.+</Request>", re.DOTALL)

# Respuestas de procesaNotificacionSISResponse. No deben tener espacios en blanco ni saltos de línea entre marcas.
SOAP_11_RESPONSE_TEMPLATE = (
    '<?xml version="1.0" encoding="utf-8"?>'
    '<soap:Envelope xmlns:xsi="http://www.w3.org/2001/XMLSchema-instance" '
    'xmlns:xsd="http://www.w3.org/2001/XMLSchema" '
    'xmlns:soapenc="http://schemas.xmlsoap.org/soap/encoding/" '
    'xmlns:tns="https://sis.sermepa.es/sis/InotificacionSIS.wsdl" '
    'xmlns:types="https://sis.sermepa.es/sis/InotificacionSIS.wsdl/encodedTypes" '
    'xmlns:soap="http://schemas.xmlsoap.org/soap/envelope/">'
    '<soap:Body soap:encodingStyle="http://schemas.xmlsoap.org/soap/encoding/">'
    '<q2:procesaNotificacionSISResponse xmlns:q2="InotificacionSIS">'
    '<return xsi:type="xsd:string">{answer}</return>'
    '</q2:procesaNotificacionSISResponse>'
    '</soap:Body>'
    '</soap:Envelope>'
)

SOAP_12_RESPONSE_TEMPLATE = (
    '<?xml version="1.0" encoding="utf-8"?>'
    '<soap12:Envelope xmlns:xsi="http://www.w3.org/2001/XMLSchema-instance" '
    'xmlns:xsd="http://www.w3.org/2001/XMLSchema" '
    'xmlns:soapenc="http://www.w3.org/2003/05/soap-encoding" '
    'xmlns:tns="https://sis.sermepa.es/sis/InotificacionSIS.wsdl" '
    'xmlns:types="https://sis.sermepa.es/sis/InotificacionSIS.wsdl/encodedTypes" '
    'xmlns:rpc="http://www.w3.org/2003/05/soap-rpc" '
    'xmlns:soap12="http://www.w3.org/2003/05/soap-envelope">'
    '<soap12:Body soap12:encodingStyle="http://www.w3.org/2003/05/soap-encoding">'
    '<q4:procesaNotificacionSISResponse xmlns:q4="InotificacionSIS">'
    '<rpc:result xmlns="">return</rpc:result>'
    '<return xsi:type="xsd:string">{answer}</return>'
    '</q4:procesaNotificacionSISResponse>'
    '</soap12:Body>'
    '</soap12:Envelope>'
)

RESPONSE_TEMPLATES = {
    SOAP_11: SOAP_11_RESPONSE_TEMPLATE,
    SOAP_12: SOAP_12_RESPONSE_TEMPLATE,
}

# Respuesta del comercio a la notificación, firmada con la clave del pedido
MERCHANT_ANSWER_RESPONSE = '<Response Ds_Version="0.0"><Ds_Response_Merchant>{0}</Ds_Response_Merchant></Response>'
MERCHANT_ANSWER_MESSAGE = "<Message>{response}<Signature>{signature}</Signature></Message>"


def _as_text(value):
    if isinstance(value, bytes):
        return value.decode("utf-8", "replace")
    return value


def _get_content_type(headers):
    if not headers:
        return None

    content_type = headers.get("Content-Type")
    if content_type is None:
        for name, value in headers.items():
            if name.lower() == "content-type":
                return value
    return content_type


####################################################################
## Versión de SOAP de la petición
def detect_soap_version(request):
    """
    Detecta la versión de SOAP de una petición entrante.

    Se mira primero la cabecera Content-Type (application/soap+xml en SOAP 1.2) y, si no la hay, el espacio
    de nombres del sobre en el cuerpo de la petición.

    :param request: HttpRequest de Django o cualquier objeto (o dict) con "headers" y "body"
    :return: str  "1.1" o "1.2"
    """
    if isinstance(request, dict):
        headers = request.get("headers")
        body = request.get("body")
    else:
        headers = getattr(request, "headers", None)
        body = getattr(request, "body", None)

    content_type = _get_content_type(headers)
    if content_type:
        if "soap+xml" in content_type:
            return SOAP_12
        return SOAP_11

    body = _as_text(body)
    if body:
        if SOAP_12_ENVELOPE_NS in body:
            return SOAP_12
        elif SOAP_11_ENVELOPE_NS in body:
            return SOAP_11

    raise RedsysSoapException("Not a valid SOAP request")


####################################################################
## Notificación procesaNotificacionSIS
def extract_notification_payload(xml):
    """
    Extrae el contenido del elemento XML de una notificación SOAP, ya desescapado.
    Normalmente será la cadena completa <Message>...</Message>.
    """
    xml = _as_text(xml) or ""

    matches = regex_notification.search(xml)
    if not matches or not matches.group(1):
        raise RedsysInvalidNotification("Invalid notification")

    return unescape_xml(matches.group(1))


def build_notification_response(answer, version):
    """
    Sobre SOAP de respuesta a procesaNotificacionSIS en la misma versión que la notificación.
    :param answer: str  respuesta del comercio, se escapa antes de incluirla
    :param version: str  "1.1" o "1.2"
    :return: str
    """
    try:
        template = RESPONSE_TEMPLATES[version]
    except KeyError:
        raise RedsysSoapException("Unknown SOAP version {0}".format(version))

    return template.format(answer=escape_xml(answer))


def parse_notification_message(payload):
    """
    Analiza el mensaje <Message><Request>...</Request><Signature>...</Signature></Message> de una notificación.

    :param payload: str  contenido devuelto por extract_notification_payload
    :return: dict  con "fields" (campos Ds_* de Request), "signature", "request" (texto de <Request> tal y
        como llega, usado para la firma) y "date" (fecha de la operación o None)
    """
    try:
        root = etree.fromstring(payload.encode("utf-8"))
    except etree.XMLSyntaxError as e:
        raise RedsysInvalidNotification("Invalid notification message") from e

    request_element = root.find("Request")
    matches = regex_request.search(payload)
    if root.tag != "Message" or request_element is None or not matches:
        raise RedsysInvalidNotification("Notification message without Request")

    fields = {}
    for element in request_element:
        # Se ignoran comentarios e instrucciones de procesamiento
        if isinstance(element.tag, str):
            fields[element.tag] = element.text or ""

    # Las notificaciones SOAP traen Fecha y Hora, las respuestas del servicio web Ds_Date y Ds_Hour
    date = None
    ds_date = fields.get("Ds_Date") or fields.get("Fecha")
    ds_hour = fields.get("Ds_Hour") or fields.get("Hora")
    if ds_date and ds_hour:
        try:
            date = parse_notification_datetime(ds_date, ds_hour)
        except ValueError:
            logger.info("Fecha {0} / hora {1} con formato desconocido".format(ds_date, ds_hour))

    message = {
        "fields": fields,
        "signature": root.findtext("Signature") or "",
        "request": matches.group(0),
        "date": date,
    }
    logger.info("Notificación SOAP del pedido {0} Ds_Response={1} Ds_ErrorCode={2}".format(
        fields.get("Ds_Order"), fields.get("Ds_Response"), fields.get("Ds_ErrorCode")))
    return message


def verify_notification(merchant_key, message):
    """
    Comprueba la firma de una notificación SOAP ya analizada con parse_notification_message.
    :return: bool
    """
    order = message["fields"].get("Ds_Order")
    if not order:
        logger.info("Notificación sin Ds_Order, no se puede comprobar la firma")
        return False

    computed = sign(merchant_key, order, message["request"])
    if not signatures_match(message["signature"], computed):
        logger.info("Las firmas no coinciden para el pedido {0}".format(order))
        return False

    logger.info("Firma verificada correctamente para el pedido {0}".format(order))
    return True


def build_merchant_answer(merchant_key, order, accepted=True):
    """
    Respuesta firmada del comercio a una notificación SOAP, que se envía dentro de build_notification_response.
    :param accepted: bool  OK si el comercio acepta la operación, KO en caso contrario
    :return: str  <Message>...</Message>
    """
    response = MERCHANT_ANSWER_RESPONSE.format("OK" if accepted else "KO")
    signature = sign(merchant_key, order, response)
    return MERCHANT_ANSWER_MESSAGE.format(response=response, signature=signature)
