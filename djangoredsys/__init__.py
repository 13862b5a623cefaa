# coding=utf-8

# Signature
from djangoredsys.signature import derive_order_key, sign, signatures_match, response_signature_data, \
    verify_response_signature

# Request parameters
from djangoredsys.params import format_params, encode_merchant_parameters, decode_merchant_parameters, \
    create_payment_form, verify_merchant_parameters

# Response codes
from djangoredsys.responses import get_response_code_message, get_sis_error_code_message, is_authorized, \
    format_ds_response_code, format_ds_error_code

# XML and SOAP
from djangoredsys.xmlutils import escape_xml, unescape_xml
from djangoredsys.soap import detect_soap_version, extract_notification_payload, build_notification_response, \
    parse_notification_message, verify_notification, build_merchant_answer

# Defs
from djangoredsys.defs import CURRENCIES, LANGUAGES, TRANSACTION_TYPES, SIGNED_FIELDS_XML_RESPONSE, SOAP_11, SOAP_12

# Exceptions
from djangoredsys.exceptions import RedsysException, RedsysParameterException, RedsysUnsupportedCurrency, \
    RedsysKeyException, RedsysSoapException, RedsysInvalidNotification
