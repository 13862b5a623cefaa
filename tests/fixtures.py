# -*- coding: utf-8 -*-
from djangoredsys.signature import sign
from djangoredsys.xmlutils import escape_xml

# Test key published by Redsys for its testing environment
MERCHANT_KEY = 'sq7HjrUOBfKmC576ILgskD5srU870gJ7'

MERCHANT_CODE = '999008881'

ORDER = '123456789012'

SOAP_11_NOTIFICATION = (
    '<?xml version="1.0" encoding="UTF-8"?>'
    '<soapenv:Envelope xmlns:soapenv="http://schemas.xmlsoap.org/soap/envelope/" '
    'xmlns:xsd="http://www.w3.org/2001/XMLSchema" xmlns:xsi="http://www.w3.org/2001/XMLSchema-instance">'
    '<soapenv:Body>'
    '<ns0:procesaNotificacionSIS xmlns:ns0="InotificacionSIS" '
    'soapenv:encodingStyle="http://schemas.xmlsoap.org/soap/encoding/">'
    '<XML xsi:type="xsd:string">{payload}</XML>'
    '</ns0:procesaNotificacionSIS>'
    '</soapenv:Body>'
    '</soapenv:Envelope>'
)

SOAP_12_NOTIFICATION = (
    '<?xml version="1.0" encoding="UTF-8"?>'
    '<soap12:Envelope xmlns:soap12="http://www.w3.org/2003/05/soap-envelope" '
    'xmlns:xsd="http://www.w3.org/2001/XMLSchema" xmlns:xsi="http://www.w3.org/2001/XMLSchema-instance">'
    '<soap12:Body>'
    '<ns0:procesaNotificacionSIS xmlns:ns0="InotificacionSIS">'
    '<ns0:XML>{payload}</ns0:XML>'
    '</ns0:procesaNotificacionSIS>'
    '</soap12:Body>'
    '</soap12:Envelope>'
)

SAMPLE_REQUEST = (
    "<Request Ds_Version='0.0'>"
    "<Fecha>20/10/2016</Fecha>"
    "<Hora>10:30</Hora>"
    "<Ds_SecurePayment>1</Ds_SecurePayment>"
    "<Ds_Amount>1050</Ds_Amount>"
    "<Ds_Currency>978</Ds_Currency>"
    "<Ds_Order>{order}</Ds_Order>"
    "<Ds_MerchantCode>999008881</Ds_MerchantCode>"
    "<Ds_Terminal>001</Ds_Terminal>"
    "<Ds_Response>{response}</Ds_Response>"
    "<Ds_TransactionType>0</Ds_TransactionType>"
    "<Ds_MerchantData></Ds_MerchantData>"
    "<Ds_AuthorisationCode>123456</Ds_AuthorisationCode>"
    "<Ds_ConsumerLanguage>1</Ds_ConsumerLanguage>"
    "</Request>"
)


def notification_request(order=ORDER, response='0000'):
    return SAMPLE_REQUEST.format(order=order, response=response)


def notification_payload(order=ORDER, response='0000', signature=None, merchant_key=MERCHANT_KEY):
    """
    <Message> as sent by the bank, signed with the merchant key unless a signature is given
    """
    request = notification_request(order=order, response=response)
    if signature is None:
        signature = sign(merchant_key, order, request)
    return '<Message>{0}<Signature>{1}</Signature></Message>'.format(request, signature)


def soap_notification(payload, template=SOAP_11_NOTIFICATION):
    return template.format(payload=escape_xml(payload))
