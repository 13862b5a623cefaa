# coding=utf-8

########################################################################
# Monedas soportadas. Para cada código ISO 4217 alfabético se indica el
# código numérico que espera Redsys y el multiplicador que convierte el
# importe en unidades de la moneda a unidades mínimas (céntimos, etc.)
CURRENCIES = {
    "EUR": {"num": "978", "multiplier": 100},
    "USD": {"num": "840", "multiplier": 100},
    "GBP": {"num": "826", "multiplier": 100},
    "JPY": {"num": "392", "multiplier": 1},
    "CHF": {"num": "756", "multiplier": 100},
    "CAD": {"num": "124", "multiplier": 100},
    "AUD": {"num": "036", "multiplier": 100},
    "SEK": {"num": "752", "multiplier": 100},
    "NOK": {"num": "578", "multiplier": 100},
    "DKK": {"num": "208", "multiplier": 100},
    "PLN": {"num": "985", "multiplier": 100},
    "CZK": {"num": "203", "multiplier": 100},
    "HUF": {"num": "348", "multiplier": 100},
    "RON": {"num": "946", "multiplier": 100},
    "BGN": {"num": "975", "multiplier": 100},
    "RUB": {"num": "643", "multiplier": 100},
    "TRY": {"num": "949", "multiplier": 100},
    "CNY": {"num": "156", "multiplier": 100},
    "INR": {"num": "356", "multiplier": 100},
    "MAD": {"num": "504", "multiplier": 100},
    "MXN": {"num": "484", "multiplier": 100},
    "BRL": {"num": "986", "multiplier": 100},
    "ARS": {"num": "032", "multiplier": 100},
    "CLP": {"num": "152", "multiplier": 1},
    "COP": {"num": "170", "multiplier": 100},
    "PEN": {"num": "604", "multiplier": 100},
    "UYU": {"num": "858", "multiplier": 100},
    "VEF": {"num": "937", "multiplier": 100},
}

# Idiomas soportados por Redsys (Ds_Merchant_ConsumerLanguage)
LANGUAGES = {
    "es": "001",
    "en": "002",
    "ca": "003",
    "fr": "004",
    "de": "005",
    "nl": "006",
    "it": "007",
    "sv": "008",
    "pt": "009",
    "va": "010",
    "pl": "011",
    "gl": "012",
    "eu": "013",
}

########################################################################
# Tipos de transacción. Ver https://pagosonline.redsys.es/tipos-operacion.html
AUTHORIZATION = "0"
PREAUTHORIZATION = "1"
PREAUTHORIZATION_CONFIRMATION = "2"
REFUND = "3"
RECURRING = "5"
SUCCESSIVE = "6"
AUTHENTICATION = "7"
AUTHENTICATION_CONFIRMATION = "8"
PREAUTHORIZATION_CANCELLATION = "9"
DEFERRED_AUTHORIZATION = "O"
DEFERRED_AUTHORIZATION_CONFIRMATION = "P"
DEFERRED_AUTHORIZATION_CANCELLATION = "Q"
DEFERRED_INITIAL_RECURRING = "R"
DEFERRED_SUCCESSIVE_RECURRING = "S"

TRANSACTION_TYPES = {
    "AUTHORIZATION": AUTHORIZATION,
    "PREAUTHORIZATION": PREAUTHORIZATION,
    "PREAUTHORIZATION_CONFIRMATION": PREAUTHORIZATION_CONFIRMATION,
    "REFUND": REFUND,
    "RECURRING": RECURRING,
    "SUCCESSIVE": SUCCESSIVE,
    "AUTHENTICATION": AUTHENTICATION,
    "AUTHENTICATION_CONFIRMATION": AUTHENTICATION_CONFIRMATION,
    "PREAUTHORIZATION_CANCELLATION": PREAUTHORIZATION_CANCELLATION,
    "DEFERRED_AUTHORIZATION": DEFERRED_AUTHORIZATION,
    "DEFERRED_AUTHORIZATION_CONFIRMATION": DEFERRED_AUTHORIZATION_CONFIRMATION,
    "DEFERRED_AUTHORIZATION_CANCELLATION": DEFERRED_AUTHORIZATION_CANCELLATION,
    "DEFERRED_INITIAL_RECURRING": DEFERRED_INITIAL_RECURRING,
    "DEFERRED_SUCCESSIVE_RECURRING": DEFERRED_SUCCESSIVE_RECURRING,
}

########################################################################
# Campos firmados en las respuestas XML del servicio web.
# El orden es importante: forma parte del cálculo de la firma.
SIGNED_FIELDS_XML_RESPONSE = (
    "Ds_Amount",
    "Ds_Order",
    "Ds_MerchantCode",
    "Ds_Currency",
    "Ds_Response",
    "Ds_CardNumber",
    "Ds_TransactionType",
    "Ds_SecurePayment",
)

# Versión del método de firma que se indica en el formulario de pago
SIGNATURE_VERSION = "HMAC_SHA256_V1"

# El TPV de RedSys consta de dos entornos en funcionamiento, uno para pruebas y otro para producción
REDSYS_URL = {
    "production": "https://sis.redsys.es/sis/realizarPago",
    "testing": "https://sis-t.redsys.es:25443/sis/realizarPago",
}

# Zona horaria en la que la pasarela indica la fecha y hora de las operaciones
REDSYS_TIME_ZONE = "Europe/Madrid"

########################################################################
# Versiones de SOAP
SOAP_11 = "1.1"
SOAP_12 = "1.2"

SOAP_11_ENVELOPE_NS = "schemas.xmlsoap.org/soap/envelope"
SOAP_12_ENVELOPE_NS = "www.w3.org/2003/05/soap-envelope"

# Content-Type de la respuesta según la versión de SOAP
SOAP_CONTENT_TYPES = {
    SOAP_11: "text/xml; charset=utf-8",
    SOAP_12: "application/soap+xml; charset=utf-8",
}
