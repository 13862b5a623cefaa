# coding=utf-8


class RedsysException(Exception):
    """
    Excepción base de todos los errores que se producen al preparar o validar datos para el TPV de Redsys.
    """
    pass


class RedsysParameterException(RedsysException, ValueError):
    """
    Parámetro de entrada inválido o ausente. El atributo field indica el parámetro que ha fallado.
    """

    def __init__(self, message, field=None):
        super(RedsysParameterException, self).__init__(message)
        self.field = field


class RedsysUnsupportedCurrency(RedsysParameterException):
    """
    La moneda indicada no está en la tabla de monedas soportadas.
    """

    def __init__(self, currency):
        super(RedsysUnsupportedCurrency, self).__init__("Unsupported currency {0}".format(currency),
                                                        field="currency")
        self.currency = currency


class RedsysKeyException(RedsysException, ValueError):
    """
    La clave de comercio no es un base64 válido o no tiene la longitud requerida por 3DES.
    """
    pass


class RedsysSoapException(RedsysException):
    """
    La petición recibida no se reconoce como una petición SOAP.
    """
    pass


class RedsysInvalidNotification(RedsysException):
    """
    La notificación SOAP no contiene el mensaje esperado o éste está mal formado.
    """
    pass
