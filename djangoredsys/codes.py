# coding=utf-8

# Mensaje usado para todos los códigos Ds_Response entre 0 y 99, que indican una operación autorizada
AUTHORIZED_MESSAGE = "Transacción autorizada para pagos y preautorizaciones"

# Códigos de respuesta (Ds_Response). Las claves son el valor numérico sin ceros a la izquierda.
DS_RESPONSE_CODES = {
    "0": AUTHORIZED_MESSAGE,
    "101": "Tarjeta caducada.",
    "102": "Tarjeta en excepción transitoria o bajo sospecha de fraude.",
    "104": "Operación no permitida para esa tarjeta o terminal.",
    "106": "Intentos de PIN excedidos.",
    "116": "Disponible insuficiente.",
    "118": "Tarjeta no registrada.",
    "125": "Tarjeta no efectiva.",
    "129": "Código de seguridad (CVV2/CVC2) incorrecto.",
    "172": "Denegada, no repetir.",
    "173": "Denegada, no repetir sin actualizar datos de tarjeta.",
    "174": "Denegada, no repetir antes de 72 horas.",
    "180": "Tarjeta ajena al servicio.",
    "184": "Error en la autenticación del titular.",
    "190": "Denegación del emisor sin especificar motivo.",
    "191": "Fecha de caducidad errónea.",
    "195": "Requiere autenticación SCA.",
    "202": "Tarjeta en excepción transitoria o bajo sospecha de fraude con retirada de tarjeta.",
    "400": "Transacción autorizada para anulaciones.",
    "900": "Transacción autorizada para devoluciones y confirmaciones.",
    "904": "Comercio no registrado en FUC.",
    "909": "Error de sistema.",
    "912": "Emisor no disponible.",
    "913": "Pedido repetido.",
    "944": "Sesión incorrecta.",
    "950": "Operación de devolución no permitida.",
    "9064": "Número de posiciones de la tarjeta incorrecto.",
    "9078": "No existe método de pago válido para esa tarjeta.",
    "9093": "Tarjeta no existente.",
    "9094": "Rechazo servidores internacionales.",
    "9104": "Comercio con “titular seguro” y titular sin clave de compra segura.",
    "9218": "El comercio no permite op. seguras por entrada /operaciones.",
    "9253": "Tarjeta no cumple el check-digit.",
    "9256": "El comercio no puede realizar preautorizaciones.",
    "9257": "Esta tarjeta no permite operativa de preautorizaciones.",
    "9261": "Operación detenida por superar el control de restricciones en la entrada al SIS.",
    "9912": "Emisor no disponible.",
    "9913": "Error en la confirmación que el comercio envía al TPV Virtual (solo aplicable en la opción de "
            "sincronización SOAP).",
    "9914": "Confirmación “KO” del comercio (solo aplicable en la opción de sincronización SOAP).",
    "9915": "A petición del usuario se ha cancelado el pago.",
    "9928": "Anulación de autorización en diferido realizada por el SIS (proceso batch).",
    "9929": "Anulación de autorización en diferido realizada por el comercio.",
    "9997": "Se está procesando otra transacción en SIS con la misma tarjeta.",
    "9998": "Operación en proceso de solicitud de datos de tarjeta.",
    "9999": "Operación que ha sido redirigida al emisor a autenticar.",
}

# Códigos de error SISxxxx (Ds_ErrorCode)
DS_ERROR_CODES = {
    'SIS0001': 'Error en la generación de HTML',
    'SIS0002': 'Error al generar el XML de la clase de datos',
    'SIS0003': 'Error al crear el gestor de mensajes price',
    'SIS0004': 'Error al montar el mensaje para pago móvil',
    'SIS0005': 'Error al desmontar la respuesta de un pago móvil',
    'SIS0006': 'Error al provocar un ROLLBACK de una transacción',
    'SIS0007': 'Error al desmontar XML',
    'SIS0008': 'Error falta Ds_Merchant_MerchantCode ',
    'SIS0009': 'Error de formato en Ds_Merchant_MerchantCode',
    'SIS0010': 'Error falta Ds_Merchant_Terminal',
    'SIS0011': 'Error de formato en Ds_Merchant_Terminal',
    'SIS0012': 'Error, no se pudo crear el componente de conexión con Stratus',
    'SIS0013': 'Error, no se pudo cerrar el componente de conexión con Stratus',
    'SIS0014': 'Error de formato en Ds_Merchant_Order',
    'SIS0015': 'Error falta Ds_Merchant_Currency',
    'SIS0016': 'Error de formato en Ds_Merchant_Currency',
    'SIS0017': 'Error no se admiten operaciones en pesetas -- DEPRECATED !!!!',
    'SIS0018': 'Error falta Ds_Merchant_Amount',
    'SIS0019': 'Error de formato en Ds_Merchant_Amount',
    'SIS0020': 'Error falta Ds_Merchant_MerchantSignature',
    'SIS0021': 'Error la Ds_Merchant_MerchantSignature viene vacía',
    'SIS0022': 'Error de formato en Ds_Merchant_TransactionType',
    'SIS0023': 'Error Ds_Merchant_TransactionType desconocido. Pago Adicional: Si no se permite pago Adicional '
               '(porque el comercio no es de la Entidad o no hay pago adicional en métodos de pago -> SIS0023 '
               'Transation type invalido)',
    'SIS0024': 'Error Ds_Merchant_ConsumerLanguage tiene mas de 3 posiciones',
    'SIS0025': 'Error de formato en Ds_Merchant_ConsumerLanguage',
    'SIS0026': 'Error No existe el comercio / terminal enviado en TZF',
    'SIS0027': 'Error Moneda enviada por el comercio es diferente a la de la TZF',
    'SIS0028': 'Error Comercio / terminal está dado de baja',
    'SIS0029': 'Error al montar el mensaje para pago con tarjeta',
    'SIS0030': 'Error en un pago con tarjeta ha llegado un tipo de operación que no es ni pago ni preautorización',
    'SIS0031': 'Método de pago no definido',
    'SIS0032': 'Error al montar el mensaje para una devolución',
    'SIS0033': 'Error en un pago con móvil ha llegado un tipo de operación que no es ni pago ni preautorización',
    'SIS0034': 'Error de acceso a la base de datos',
    'SIS0035': 'Error al recuperar los datos de la sesión desde un XML',
    'SIS0036': 'Error al tomar los datos para Pago Móvil desde el XML',
    'SIS0037': 'El número de teléfono no es válido',
    'SIS0038': 'Error en java (errores varios)',
    'SIS0039': 'Error al tomar los datos para Pago Tarjeta desde el XML',
    'SIS0040': 'Error el comercio / terminal no tiene ningún método de pago asignado',
    'SIS0041': 'Error en el cálculo de la HASH de datos del comercio.',
    'SIS0042': 'La firma enviada no es correcta',
    'SIS0043': 'Error al realizar la notificación on-line',
    'SIS0044': 'Error al tomar los datos para Pago Finanet desde el XML',
    'SIS0045': 'Error al montar el mensaje para pago Finanet',
    'SIS0046': 'El bin de la tarjeta no está dado de alta en FINANET',
    'SIS0047': 'Error al montar el mensaje para preautorización móvil',
    'SIS0048': 'Error al montar el mensaje para preautorización tarjeta',
    'SIS0049': 'Error al montar un mensaje de anulación',
    'SIS0050': 'Error al montar un mensaje de repetición de anulación',
    'SIS0051': 'Error número de pedido repetido',
    'SIS0052': 'Error al montar el mensaje para una confirmación',
    'SIS0053': 'Error al montar el mensaje para una preautenticación por referencia',
    'SIS0054': 'Error no existe operación sobre la que realizar la devolución',
    'SIS0055': 'Error existe más de un pago con el mismo número de pedido',
    'SIS0056': 'La operación sobre la que se desea devolver no está autorizada',
    'SIS0057': 'El importe a devolver supera el permitido',
    'SIS0058': 'Inconsistencia de datos, en la validación de una confirmación ',
    'SIS0059': 'Error no existe operación sobre la que realizar la confirmación',
    'SIS0060': 'Ya existe una confirmación asociada a la preautorización',
    'SIS0061': 'La preautorización sobre la que se desea confirmar no está autorizada',
    'SIS0062': 'El importe a confirmar supera el permitido',
    'SIS0063': 'Error. Número de tarjeta no disponible',
    'SIS0064': 'Error. Número de posiciones de la tarjeta incorrecto',
    'SIS0065': 'Error. El número de tarjeta no es numérico',
    'SIS0066': 'Error. Mes de caducidad no disponible',
    'SIS0067': 'Error. El mes de la caducidad no es numérico',
    'SIS0068': 'Error. El mes de la caducidad no es válido',
    'SIS0069': 'Error. Año de caducidad no disponible',
    'SIS0070': 'Error. El Año de la caducidad no es numérico',
    'SIS0071': 'Tarjeta caducada',
    'SIS0072': 'Operación no anulable',
    'SIS0073': 'Error al analizar la respuesta de una anulación',
    'SIS0074': 'Error falta Ds_Merchant_Order',
    'SIS0075': 'Error el Ds_Merchant_Order tiene menos de 4 posiciones o más de 12 (Para algunas operativas el '
               'límite es 10 en lugar de 12)',
    'SIS0076': 'Error el Ds_Merchant_Order no tiene las cuatro primeras posiciones numéricas',
    'SIS0077': 'Error de formato en Ds_Merchant_Order',
    'SIS0078': 'Método de pago no disponible',
    'SIS0079': 'Error en realizar pago tarjeta',
    'SIS0080': 'Error al tomar los datos para Pago tarjeta desde el XML',
    'SIS0081': 'La sesión es nueva, se han perdido los datos almacenados',
    'SIS0082': 'Error procesando operaciones pendientes en el arranque',
    'SIS0083': 'El sistema no está arrancado (Se está arrancado)',
    'SIS0084': 'El valor de Ds_Merchant_Conciliation es nulo',
    'SIS0085': 'El valor de Ds_Merchant_Conciliation no es numérico',
    'SIS0086': 'El valor de Ds_Merchant_Conciliation no ocupa 6 posiciones',
    'SIS0087': 'El valor de Ds_Merchant_Session es nulo',
    'SIS0088': 'El valor de Ds_Merchant_Session no es numérico',
    'SIS0089': 'El valor de caducidad no ocupa 4 posiciones',
    'SIS0090': 'El valor del ciers representado de BBVA es nulo',
    'SIS0091': 'El valor del ciers representado de BBVA no es numérico',
    'SIS0092': 'El valor de caducidad es nulo',
    'SIS0093': 'Tarjeta no encontrada en la tabla de rangos',
    'SIS0094': 'La tarjeta no fue autenticada como 3D Secure',
    'SIS0095': 'Error al intentar validar la tarjeta como 3DSecure',
    'SIS0096': 'El formato utilizado para los datos 3DSecure es incorrecto',
    'SIS0097': 'Valor del campo Ds_Merchant_CComercio no válido',
    'SIS0098': 'Valor del campo Ds_Merchant_CVentana no válido',
    'SIS0099': 'Error al desmontar los datos para Pago 3D Secure desde el XML',
    'SIS0100': 'Error al desmontar los datos para PagoPIN desde el XML',
    'SIS0101': 'Error al desmontar los datos para PantallaPIN desde el XML',
    'SIS0102': 'Error No se recibió el resultado de la autenticación',
    'SIS0103': 'Error Mandando SisMpiTransactionRequestMessage al Merchant Plugin',
    'SIS0104': 'Error calculando el bloque de PIN',
    'SIS0105': 'Error, la referencia es nula o vacía',
    'SIS0106': 'Error al montar los datos para RSisPantallaSPAUCAF.xsl',
    'SIS0107': 'Error al desmontar los datos para PantallaSPAUCAF desde el XML',
    'SIS0108': 'Error al desmontar los datos para pagoSPAUCAF desde el XML',
    'SIS0109': 'Error El número de tarjeta no se corresponde con el seleccionado originalmente ',
    'SIS0110': 'Error La fecha de caducidad de la tarjeta no se corresponde con el seleccionado originalmente',
    'SIS0111': 'Error El campo Ucaf_Authentication_Data no tiene la longitud requerida',
    'SIS0112': 'Error El tipo de transacción especificado en Ds_Merchant_Transaction_Type no está permitido',
    'SIS0113': 'Excepción producida en el servlet de operaciones',
    'SIS0114': 'Error, se ha llamado con un GET al servlet de operaciones',
    'SIS0115': 'Error no existe operación sobre la que realizar el pago de la cuota',
    'SIS0116': 'La operación sobre la que se desea pagar una cuota no es una operación válida',
    'SIS0117': 'La operación sobre la que se desea pagar una cuota no está autorizada',
    'SIS0118': 'Se ha excedido el importe total de las cuotas',
    'SIS0119': 'Valor del campo Ds_Merchant_DateFrecuency no válido',
    'SIS0120': 'Valor del campo Ds_Merchant_ChargeExpiryDate no válido',
    'SIS0121': 'Valor del campo Ds_Merchant_SumTotal no válido',
    'SIS0122': 'Error en formato numérico. Antiguo Valor del campo Ds_Merchant_DateFrecuency o no '
               'Ds_Merchant_SumTotal tiene formato incorrecto',
    'SIS0123': 'Se ha excedido la fecha tope para realizar transacciones',
    'SIS0124': 'No ha transcurrido la frecuencia mínima en un pago recurrente sucesivo',
    'SIS0125': 'Error en código java validando cuota',
    'SIS0126': 'Error la operación no se puede marcar como pendiente',
    'SIS0127': 'Error la generando datos Url OK CANCEL',
    'SIS0128': 'Error se quiere generar una anulación sin p2',
    'SIS0129': 'Error, se ha detectado un intento masivo de peticiones desde la ip',
    'SIS0130': 'Error al regenerar el mensaje',
    'SIS0131': 'Error en la firma de los datos del SAS',
    'SIS0132': 'La fecha de Confirmación de Autorización no puede superar en más de 7 días a la de '
               'Preautorización.',
    'SIS0133': 'La fecha de Confirmación de Autenticación no puede superar en más de 45 días a la de '
               'Autenticación Previa.',
    'SIS0134': 'El valor del Ds_MerchantCiers enviado por BBVA no es válido',
    'SIS0135': 'Error generando un nuevo valor para el IDETRA',
    'SIS0136': 'Error al montar el mensaje de notificación',
    'SIS0137': 'Error al intentar validar la tarjeta como 3DSecure NACIONAL',
    'SIS0138': 'Error debido a que existe una Regla del ficheros de reglas que evita que se produzca la '
               'Autorización',
    'SIS0139': 'Error el pago recurrente inicial está duplicado',
    'SIS0140': 'Error al interpretar la respuesta de Stratus para una preautenticación por referencia',
    'SIS0141': 'Error formato no correcto para 3DSecure',
    'SIS0142': 'Tiempo excedido para el pago',
    'SIS0143': 'No viene el campo laOpcion en el formulario enviado',
    'SIS0144': 'El campo laOpcion recibido del formulario tiene un valor desconocido para el servlet',
    'SIS0145': 'Error al montar el mensaje para P2P',
    'SIS0146': 'Transacción P2P no reconocida',
    'SIS0147': 'Error al tomar los datos para Pago P2P desde el XML',
    'SIS0148': 'Método de pago no disponible o no válido para P2P',
    'SIS0149': 'Error al obtener la referencia para operación P2P',
    'SIS0150': 'Error al obtener la clave para operación P2P',
    'SIS0151': 'Error al generar un objeto desde el XML',
    'SIS0152': 'Error en operación P2P. Se carece de datos',
    'SIS0153': 'Error, el número de días de operación P2P no es correcto',
    'SIS0154': 'Error el mail o el teléfono de T2 son obligatorios (operación P2P)',
    'SIS0155': 'Error obteniendo datos de operación P2P',
    'SIS0156': 'Error la operación no es P2P Tipo 3',
    'SIS0157': 'Error no se encuentra la operación P2P original',
    'SIS0158': 'Error, la operación P2P original no está en el estado correcto',
    'SIS0159': 'Error, la clave de control de operación P2P no es válida ',
    'SIS0160': 'Error al tomar los datos para una operación P2P tipo 3',
    'SIS0161': 'Error en el envío de notificación P2P',
    'SIS0162': 'Error tarjeta de carga micropago no tiene pool asociado',
    'SIS0163': 'Error tarjeta de carga micropago no autenticable',
    'SIS0164': 'Error la recarga para micropagos sólo permite euros',
    'SIS0165': 'Error la T1 de la consulta no coincide con la de la operación P2P original',
    'SIS0166': 'Error el nombre del titular de T1 es obligatorio',
    'SIS0167': 'Error la operación está bloqueada por superar el número de intentos fallidosde introducción del '
               'código por parte de T2',
    'SIS0168': 'No existe terminal AMEX asociada',
    'SIS0169': 'Valor PUCE Ds_Merchant_MatchingData no válido',
    'SIS0170': 'Valor PUCE Ds_Acquirer_Identifier no válido',
    'SIS0171': 'Valor PUCE Ds_Merchant_Csb no válido',
    'SIS0172': 'Valor PUCE Ds_Merchant_MerchantCode no válido',
    'SIS0173': 'Valor PUCE Ds_Merchant_UrlOK no válido',
    'SIS0174': 'Error calculando el resultado PUCE',
    'SIS0175': 'Error al montar el mensaje PUCE',
    'SIS0176': 'Error al tratar el mensaje de petición P2P procedente de Stratus.',
    'SIS0177': 'Error al descomponer el mensaje de Envío de fondos en una operación P2P iniciada por Stratus.',
    'SIS0178': 'Error al montar el XML con los datos de envío para una operación P2P',
    'SIS0179': 'Error P2P Móvil, el teléfono no tiene asociada tarjeta',
    'SIS0180': 'El telecode es nulo o vacía para operación P2P',
    'SIS0181': 'Error al montar el XML con los datos recibidos',
    'SIS0182': 'Error al montar el mensaje PRICE / Error al tratar el mensaje de petición Cobro de Recibo',
    'SIS0183': 'Error al montar el XML de respuesta',
    'SIS0184': 'Error al tratar el XML de Recibo',
    'SIS0186': 'Error en entrada Banco Sabadell. Faltan datos',
    'SIS0187': 'Error al montar el mensaje de respuesta a Stratus (Error Formato)',
    'SIS0188': 'Error al desmontar el mensaje price en una petición P2P procedente de Stratus',
    'SIS0190': 'Error al intentar mandar el mensaje SMS',
    'SIS0191': 'Error, El mail del beneficiario no coincide con el indicado en la recepción P2P',
    'SIS0192': 'Error, La clave de mail del beneficiario no es correcta en la recepción P2P',
    'SIS0193': 'Error comprobando monedas para DCC',
    'SIS0194': 'Error problemas con la aplicación del cambio y el mostrado al titular',
    'SIS0195': 'Error en pago PIN. No llegan los datos',
    'SIS0196': 'Error las tarjetas de operación P2P no son del mismo procesador',
    'SIS0197': 'Error al obtener los datos de cesta de la compra en operación tipo pasarela',
    'SIS0198': 'Error el importe supera el límite permitido para el comercio',
    'SIS0199': 'Error el número de operaciones supera el límite permitido para el comercio',
    'SIS0200': 'Error el importe acumulado supera el límite permitido para el comercio',
    'SIS0201': 'Se ha producido un error inesperado al realizar la conexión con el VDS',
    'SIS0202': 'Se ha producido un error en el envío del mensaje',
    'SIS0203': 'No existe ningún método definido para el envío del mensaje',
    'SIS0204': 'No se ha definido una URL válida para el envío de mensajes',
    'SIS0205': 'Error al generar la firma, es posible que el mensaje no sea válido o esté incompleto',
    'SIS0206': 'No existe una clave asociada al BID especificado',
    'SIS0207': 'La consulta no ha devuelto ningún resultado',
    'SIS0208': 'La operación devuelta por el SIS no coincide con la petición',
    'SIS0209': 'No se han definido parámetros para realizar la consulta',
    'SIS0210': 'Error al validar el mensaje, faltan datos: BID',
    'SIS0211': 'Error en la validación de la firma ',
    'SIS0212': 'La respuesta recibida no se corresponde con la petición. Referencias de mensaje distintas',
    'SIS0213': 'Errores devueltos por el VDS',
    'SIS0214': 'El comercio no permite devoluciones. Se requiere usar firma ampliada.',
    'SIS0215': 'Operación no permitida para TPV’s virtuales de esta entidad.',
    'SIS0216': 'Error Ds_Merchant_CVV2 tiene más de 3 posiciones',
    'SIS0217': 'Error de formato en Ds_Merchant_CVV2',
    'SIS0218': 'El comercio no permite operaciones seguras por entrada XML',
    'SIS0219': 'Error el número de operaciones de la tarjeta supera el límite permitido para el comercio',
    'SIS0220': 'Error el importe acumulado de la tarjeta supera el límite permitido para el comercio',
    'SIS0221': 'Error el CVV2 es obligatorio',
    'SIS0222': 'Ya existe una anulación asociada a la preautorización',
    'SIS0223': 'La preautorización que se desea anular no está autorizada',
    'SIS0224': 'El comercio no permite anulaciones por no tener firma ampliada',
    'SIS0225': 'Error no existe operación sobre la que realizar la anulación',
    'SIS0226': 'Inconsistencia de datos, en la validación de una anulación',
    'SIS0227': 'Valor del campo Ds_Merchant_TransactionDate no válido',
    'SIS0228': 'Sólo se puede hacer pago aplazado con tarjeta de crédito On-us',
    'SIS0229': 'No existe el código de pago aplazado solicitado',
    'SIS0230': 'El comercio no permite pago fraccionado',
    'SIS0231': 'No hay forma de pago aplicable para el cliente',
    'SIS0232': 'Error. Forma de pago no disponible',
    'SIS0233': 'Error. Forma de pago desconocida',
    'SIS0234': 'Error. Nombre del titular de la cuenta no disponible',
    'SIS0235': 'Error. Campo Sis_Numero_Entidad no disponible',
    'SIS0236': 'Error. El campo Sis_Numero_Entidad no tiene la longitud requerida',
    'SIS0237': 'Error. El campo Sis_Numero_Entidad no es numérico',
    'SIS0238': 'Error. Campo Sis_Numero_Oficina no disponible',
    'SIS0239': 'Error. El campo Sis_Numero_Oficina no tiene la longitud requerida',
    'SIS0240': 'Error. El campo Sis_Numero_Oficina no es numérico',
    'SIS0241': 'Error. Campo Sis_Numero_DC no disponible',
    'SIS0242': 'Error. El campo Sis_Numero_DC no tiene la longitud requerida',
    'SIS0243': 'Error. El campo Sis_Numero_DC no es numérico',
    'SIS0244': 'Error. Campo Sis_Numero_Cuenta no disponible',
    'SIS0245': 'Error. El campo Sis_Numero_Cuenta no tiene la longitud requerida',
    'SIS0246': 'Error. El campo Sis_Numero_Cuenta no es numérico',
    'SIS0247': 'Dígito de Control de Cuenta Cliente no válido',
    'SIS0248': 'El comercio no permite pago por domiciliación',
    'SIS0249': 'Error al realizar pago por domiciliación',
    'SIS0250': 'Error al tomar los datos del XML para realizar Pago por Transferencia',
    'SIS0251': 'El comercio no permite pago por transferencia',
    'SIS0252': 'El comercio no permite el envío de tarjeta',
    'SIS0253': 'Tarjeta no cumple check-digit',
    'SIS0254': 'El número de operaciones de la IP supera el límite permitido por el comercio',
    'SIS0255': 'El importe acumulado por la IP supera el límite permitido por el comercio',
    'SIS0256': 'El comercio no puede realizar preautorizaciones',
    'SIS0257': 'Esta tarjeta no permite operativa de preautorizaciones',
    'SIS0258': 'Inconsistencia de datos, en la validación de una confirmación',
    'SIS0259': 'No existe la operación original para notificar o consultar',
    'SIS0260': 'Entrada incorrecta al SIS',
    'SIS0261': 'Operación detenida por superar el control de restricciones en la entrada al SIS',
    'SIS0262': 'Moneda no permitida para operación de transferencia o domiciliación ',
    'SIS0263': 'Error calculando datos para procesar operación en su banca online',
    'SIS0264': 'Error procesando datos de respuesta recibidos desde su banca online',
    'SIS0265': 'Error de firma en los datos recibidos desde su banca online',
    'SIS0266': 'No se pueden recuperar los datos de la operación recibida desde su banca online',
    'SIS0267': 'La operación no se puede procesar por no existir Código Cuenta Cliente',
    'SIS0268': 'La operación no se puede procesar por este canal',
    'SIS0269': 'No se pueden realizar devoluciones de operaciones de domiciliación no descargadas',
    'SIS0270': 'El comercio no puede realizar preautorizaciones en diferido',
    'SIS0271': 'Error realizando pago-autenticación por WebService',
    'SIS0272': 'La operación a autorizar por WebService no se puede encontrar',
    'SIS0273': 'La operación a autorizar por WebService está en un estado incorrecto',
    'SIS0274': 'Tipo de operación desconocida o no permitida por esta entrada al SIS',
    'SIS0275': 'Error Premio: Premio sin IdPremio',
    'SIS0276': 'Error Premio: Unidades del Premio a redimir no numéricas.',
    'SIS0277': 'Error Premio: Error general en el proceso.',
    'SIS0278': 'Error Premio: Error en el proceso de consulta de premios',
    'SIS0279': 'Error Premio: El comercio no tiene activada la operativa de fidelización',
    'SIS0280': 'Reglas V3.0 : excepción por regla con Nivel de gestión usuario Interno.',
    'SIS0281': 'Reglas V3.0 : excepción por regla con Nivel de gestión usuario Entidad.',
    'SIS0282': 'Reglas V3.0 : excepción por regla con Nivel de gestión usuario Comercio/MultiComercio de una '
               'entidad.',
    'SIS0283': 'Reglas V3.0 : excepción por regla con Nivel de gestión usuario Comercio-Terminal.',
    'SIS0284': 'Pago Adicional: error no existe operación sobre la que realizar el PagoAdicional',
    'SIS0285': 'Pago Adicional: error tiene más de una operación sobre la que realizar el Pago Adicional',
    'SIS0286': 'Pago Adicional: La operación sobre la que se quiere hacer la operación adicional no está Aceptada',
    'SIS0287': 'Pago Adicional: la Operación ha sobrepasado el importe para el Pago Adicional.',
    'SIS0288': 'Pago Adicional: No se puede realizar otro pago Adicional. Se ha superado el número de pagos '
               'adicionales permitidos sobre la operación.',
    'SIS0289': 'Pago Adicional: El importe del pago Adicional supera el máximo días permitido.',
    'SIS0290': 'Control de Fraude: Bloqueo por control de Seguridad',
    'SIS0291': 'Control de Fraude: Bloqueo por lista Negra control de IP',
    'SIS0292': 'Control de Fraude: Bloqueo por lista Negra control de Tarjeta',
    'SIS0293': 'Control de Fraude: Bloqueo por Lista negra evaluación de Regla',
    'SIS0294': 'Tarjetas Privadas BBVA: La tarjeta no es Privada de BBVA (uno-e). No seadmite el envío de '
               'DS_MERCHANT_PAY_TYPE.',
    'SIS0295': 'Error de duplicidad de operación. Se puede intentar de nuevo',
    'SIS0296': 'Error al validar los datos de la Operación de Tarjeta en Archivo Inicial',
    'SIS0297': 'Número de operaciones sucesivas de Tarjeta en Archivo superado',
    'SIS0298': 'El comercio no permite realizar operaciones de Tarjeta en Archivo',
    'SIS0299': 'Error en la llamada a PayPal',
    'SIS0300': 'Error en los datos recibidos de PayPal',
    'SIS0301': 'Error en pago con PayPal',
    'SIS0302': 'Moneda no válida para pago con PayPal',
    'SIS0303': 'Esquema de la entidad es 4B',
    'SIS0304': 'No se permite pago fraccionado si la tarjeta no es de FINCONSUM',
    'SIS0305': 'No se permite pago fraccionado FINCONSUM en moneda diferente de euro',
    'SIS0306': 'Valor de Ds_Merchant_PrepaidCard no válido',
    'SIS0307': 'Operativa de tarjeta regalo no permitida',
    'SIS0308': 'Tiempo límite para recarga de tarjeta regalo superado',
    'SIS0309': 'Error faltan datos adicionales para realizar la recarga de tarjeta prepago',
    'SIS0310': 'Valor de Ds_Merchant_Prepaid_Expiry no válido',
    'SIS0311': 'Error al montar el mensaje para consulta de comisión en recarga de tarjeta prepago ',
    'SIS0312': 'Error en petición StartCheckoutSession con V.me',
    'SIS0313': 'Petición de compra mediante V.me no permitida',
    'SIS0314': 'Error en pago V.me',
    'SIS0315': 'Error analizando petición de autorización de V.me',
    'SIS0316': 'Error en petición de autorización de V.me',
    'SIS0317': 'Error montando respuesta a autorización de V.me',
    'SIS0318': 'Error en retorno del pago desde V.me',
    'SIS0319': 'El comercio no pertenece al grupo especificado en Ds_Merchant_Group',
    'SIS0321': 'El identificador indicado en Ds_Merchant_Identifier no está asociado al comercio',
    'SIS0322': 'Error de formato en Ds_Merchant_Group',
    'SIS0323': 'Para tipo de operación F es necesario el campo Ds_Merchant_Customer_Mobile o '
               'Ds_Merchant_Customer_Mail',
    'SIS0324': 'Para tipo de operación F. Imposible enviar link al titular',
    'SIS0325': 'Se ha pedido no mostrar pantallas pero no se ha enviado ningún identificador de tarjeta',
    'SIS0326': 'Se han enviado datos de tarjeta en fase primera de un pago con dos fases',
    'SIS0327': 'No se ha enviado ni móvil ni email en fase primera de un pago con dos fases',
    'SIS0328': 'Token de pago en dos fases inválido',
    'SIS0329': 'No se puede recuperar el registro en la tabla temporal de pago en dos fases',
    'SIS0330': 'Fechas incorrectas de pago dos fases',
    'SIS0331': 'La operación no tiene un estado válido o no existe.',
    'SIS0332': 'El importe de la operación original y de la devolución debe ser idéntico',
    'SIS0333': 'Error en una petición a MasterPass Wallet',
    'SIS0334': 'Bloqueo regla operativa grupos definidos por la entidad',
    'SIS0335': 'Ds_Merchant_Recharge_Commission no válido',
    'SIS0336': 'Error realizando petición de redirección a Oasys',
    'SIS0337': 'Error calculando datos de firma para redirección a Oasys',
    'SIS0338': 'No se encuentra la operación Oasys en la BD',
    'SIS0339': 'El comercio no dispone de pago Oasys',
    'SIS0340': 'Respuesta recibida desde Oasys no válida',
    'SIS0341': 'Error en la firma recibida desde Oasys',
    'SIS0342': 'El comercio no permite realizar operaciones de pago de tributos',
    'SIS0343': 'El parámetro Ds_Merchant_Tax_Reference falta o es incorrecto',
    'SIS0344': 'El usuario ha elegido aplazar el pago, pero no ha aceptado las condiciones de las cuotas',
    'SIS0345': 'El usuario ha elegido un número de plazos incorrecto',
    'SIS0346': 'Error de formato en parámetro DS_MERCHANT_PAY_TYPE',
    'SIS0347': 'El comercio no está configurado para realizar la consulta de BIN.',
    'SIS0348': 'El BIN indicado en la consulta no se reconoce',
    'SIS0349': 'Los datos de importe y DCC enviados no coinciden con los registrados en SIS',
    'SIS0350': 'No hay datos DCC registrados en SIS para este número de pedido',
    'SIS0351': 'Autenticación prepago incorrecta',
    'SIS0352': 'El tipo de firma del comercio no permite esta operativa',
    'SIS0353': 'El comercio no tiene definida una clave 3DES válida',
    'SIS0354': 'Error descifrando petición al SIS',
    'SIS0355': 'El comercio-terminal enviado en los datos cifrados no coincide con el enviado en la petición',
    'SIS0356': 'Existen datos de entrada para control de fraude y el comercio no tiene activo control de fraude',
    'SIS0357': 'Error en parametros enviados. El comercio tiene activo control de fraude y no existe campo '
               'ds_merchant_merchantscf',
    'SIS0358': 'La entidad no dispone de pago Oasys',
    'SIS0370': 'Error en formato Scf_Merchant_Nif. Longitud máxima 16',
    'SIS0371': 'Error en formato Scf_Merchant_Name. Longitud máxima 30',
    'SIS0372': 'Error en formato Scf_Merchant_First_Name. Longitud máxima 30 ',
    'SIS0373': 'Error en formato Scf_Merchant_Last_Name. Longitud máxima 30',
    'SIS0374': 'Error en formato Scf_Merchant_User. Longitud máxima 45',
    'SIS0375': 'Error en formato Scf_Affinity_Card. Valores posibles \'S\' o \'N\'. Longitud máxima 1',
    'SIS0376': 'Error en formato Scf_Payment_Financed. Valores posibles \'S\' o \'N\'. Longitud máxima 1',
    'SIS0377': 'Error en formato Scf_Ticket_Departure_Point. Longitud máxima 30',
    'SIS0378': 'Error en formato Scf_Ticket_Destination. Longitud máxima 30',
    'SIS0379': 'Error en formato Scf_Ticket_Departure_Date. Debe tener formato yyyyMMddHHmmss.',
    'SIS0380': 'Error en formato Scf_Ticket_Num_Passengers. Longitud máxima 1.',
    'SIS0381': 'Error en formato Scf_Passenger_Dni. Longitud máxima 16.',
    'SIS0382': 'Error en formato Scf_Passenger_Name. Longitud máxima 30.',
    'SIS0383': 'Error en formato Scf_Passenger_First_Name. Longitud máxima 30.',
    'SIS0384': 'Error en formato Scf_Passenger_Last_Name. Longitud máxima 30.',
    'SIS0385': 'Error en formato Scf_Passenger_Check_Luggage. Valores posibles \'S\' o \'N\'. Longitud máxima 1.',
    'SIS0386': 'Error en formato Scf_Passenger_Special_luggage. Valores posibles \'S\' o \'N\'. Longitud máxima '
               '1.',
    'SIS0387': 'Error en formato Scf_Passenger_Insurance_Trip. Valores posibles \'S\' o \'N\'. Longitud máxima 1.',
    'SIS0388': 'Error en formato Scf_Passenger_Type_Trip. Valores posibles \'N\' o \'I\'. Longitud máxima 1.',
    'SIS0389': 'Error en formato Scf_Passenger_Pet. Valores posibles \'S\' o \'N\'. Longitud máxima 1.',
    'SIS0390': 'Error en formato Scf_Order_Channel. Valores posibles \'M\'(móvil), \'P\'(PC) o \'T\'(Tablet)',
    'SIS0391': 'Error en formato Scf_Order_Total_Products. Debe tener formato numérico y longitud máxima de 3.',
    'SIS0392': 'Error en formato Scf_Order_Different_Products. Debe tener formato numérico y longitud máxima de '
               '3.',
    'SIS0393': 'Error en formato Scf_Order_Amount. Debe tener formato numérico y longitud máxima de 19.',
    'SIS0394': 'Error en formato Scf_Order_Max_Amount. Debe tener formato numérico y longitud máxima de 19.',
    'SIS0395': 'Error en formato Scf_Order_Coupon. Valores posibles \'S\' o \'N\'',
    'SIS0396': 'Error en formato Scf_Order_Show_Type. Debe longitud máxima de 30.',
    'SIS0397': 'Error en formato Scf_Wallet_Identifier',
    'SIS0398': 'Error en formato Scf_Wallet_Client_Identifier',
    'SIS0399': 'Error en formato Scf_Merchant_Ip_Address',
    'SIS0400': 'Error en formato Scf_Merchant_Proxy',
    'SIS0401': 'Error en formato Ds_Merchant_Mail_Phone_Number. Debe ser numérico y de longitud máxima 19',
    'SIS0402': 'Error en llamada a SafetyPay para solicitar token url',
    'SIS0403': 'Error en proceso de solicitud de token url a SafetyPay',
    'SIS0404': 'Error en una petición a SafetyPay',
    'SIS0405': 'Solicitud de token url denegada',
    'SIS0406': 'El sector del comercio no está permitido para realizar un pago de premio de apuesta',
    'SIS0407': 'El importe de la operación supera el máximo permitido para realizar un pago de premio de apuesta',
    'SIS0408': 'La tarjeta debe de haber operado durante el último año para poder realizar un pago de premio de '
               'apuesta',
    'SIS0409': 'La tarjeta debe ser una Visa o MasterCard nacional para realizar un pago de premio de apuesta',
    'SIS0410': 'Bloqueo por Operación con Tarjeta Privada del Cajamar, en comercio que no es de Cajamar',
    'SIS0411': 'No existe el comercio en la tabla de datos adicionales de RSI Directo',
    'SIS0412': 'La firma enviada por RSI Directo no es correcta',
    'SIS0413': 'La operación ha sido denegada por Lynx',
    'SIS0414': 'El plan de ventas no es correcto',
    'SIS0415': 'El tipo de producto no es correcto',
    'SIS0416': 'Importe no permitido en devolución ',
    'SIS0417': 'Fecha de devolución no permitida',
    'SIS0418': 'No existe plan de ventas vigente',
    'SIS0419': 'Tipo de cuenta no permitida',
    'SIS0420': 'El comercio no dispone de formas de pago para esta operación',
    'SIS0421': 'Tarjeta no permitida. No es producto Agro',
    'SIS0422': 'Faltan datos para operación Agro',
    'SIS0423': 'CNPJ del comercio incorrecto',
    'SIS0424': 'No se ha encontrado el establecimiento',
    'SIS0425': 'No se ha encontrado la tarjeta',
    'SIS0426': 'Enrutamiento no valido para comercio Corte Ingles.',
    'SIS0427': 'La conexión con CECA no ha sido posible para el comercio Corte Ingles.',
    'SIS0428': 'Operación debito no segura',
    'SIS0429': 'Error en la versión enviada por el comercio (Ds_SignatureVersion)',
    'SIS0430': 'Error al decodificar el parámetro Ds_MerchantParameters',
    'SIS0431': 'Error del objeto JSON que se envía codificado en el parámetro Ds_MerchantParameters',
    'SIS0432': 'Error FUC del comercio erróneo',
    'SIS0433': 'Error Terminal del comercio erróneo',
    'SIS0434': 'Error ausencia de número de pedido en la op. del comercio',
    'SIS0435': 'Error en el cálculo de la firma',
    'SIS0436': 'Error en la construcción del elemento padre <REQUEST>',
    'SIS0437': 'Error en la construcción del elemento <DS_SIGNATUREVERSION>',
    'SIS0438': 'Error en la construcción del elemento <DATOSENTRADA>',
    'SIS0439': 'Error en la construcción del elemento <DS_SIGNATURE>',
    'SIS0440': 'Error al crear pantalla MyBank',
    'SIS0441': 'Error no tenemos bancos para Mybank',
    'SIS0442': 'Error al realizar el pago Mybank',
    'SIS0443': 'No se permite pago en terminales ONEY con tarjetas ajenas',
    'SIS0445': 'Error gestionando referencias con Stratus',
    'SIS0444': 'Se está intentando acceder usando firmas antiguas y el comercio está configurado como HMAC SHA256',
    'SIS0446': 'Para terminales Oney es obligatorio indicar la forma de pago',
    'SIS0447': 'Error, se está utilizando una referencia que se generó con un adquirente distinto al adquirente '
               'que la utiliza.',
    'SIS0448': 'Error, la tarjeta de la operación es DINERS y el comercio no tiene el método de pago "Pago '
               'DINERS"',
    'SIS0449': 'Error, el tipo de pago de la operación es Tradicional(A), la tarjeta de la operación no es '
               'DINERS ni JCB ni AMEX y el comercio tiene el método de pago "Prohibir Pago A"',
    'SIS0450': 'Error, el tipo de pago de la operación es Tradicional(A), la tarjeta de la operación es AMEX y el '
               'comercio tiene los métodos de pago "Pago Amex y Prohibir Pago A AMEX"',
    'SIS0451': 'Error, la operación es Host to Host con tipo de pago Tradicional(A), la tarjeta de la operación '
               'no es DINERS ni JCB ni AMEX y el comercio tiene el método de pago "Prohibir Pago A"',
    'SIS0452': 'Error, la tarjeta de la operación es 4B y el comercio no tiene el método de pago "Tarjeta 4B"',
    'SIS0453': 'Error, la tarjeta de la operación es JCB y el comercio no tiene el método de pago "Pago JCB"',
    'SIS0454': 'Error, la tarjeta de la operación es AMEX y el comercio no tiene el método de pago "Pago Amex"',
    'SIS0455': 'Error, el comercio no tiene el método de pago "Tarjetas Propias" y la tarjeta no está registrada '
               'como propia. ',
    'SIS0456': 'Error, se aplica el método de pago "Verified By Visa" con Respuesta [VEReq, VERes] = U y el '
               'comercio no tiene los métodos de pago "Pago U y Pago U Nacional"',
    'SIS0457': 'Error, se aplica el método de pago "MasterCard SecureCode" con Respuesta [VEReq, VERes] = N con '
               'tarjeta MasterCard Comercial y el comercio no tiene el método de pago "MasterCard Comercial"',
    'SIS0458': 'Error, se aplica el método de pago "MasterCard SecureCode" con Respuesta [VEReq, VERes] = U con '
               'tarjeta MasterCard Comercial y el comercio no tiene el método de pago "MasterCard Comercial"',
    'SIS0459': 'Error, se aplica el método de pago "JCB Secure" con Respuesta [VEReq, VERes]= U y el comercio no '
               'tiene el método de pago "Pago JCB"',
    'SIS0460': 'Error, se aplica el método de pago "AMEX SafeKey" con Respuesta [VEReq, VERes] = N y el comercio '
               'no tiene el método de pago "Pago AMEX"',
    'SIS0461': 'Error, se aplica el método de pago "AMEX SafeKey" con Respuesta [VEReq, VERes] = U y el comercio '
               'no tiene el método de pago "Pago AMEX"',
    'SIS0462': 'Error, se aplica el método de pago "Verified By Visa","MasterCard SecureCode","JCB Secure" o '
               '"AMEX SafeKey" y la operación es Host To Host',
    'SIS0463': 'Error, se selecciona un método de pago que no está entre los permitidos por el SIS para ser '
               'ejecutado',
    'SIS0464': 'Error, el resultado de la autenticación 3DSecure es "NO_3DSECURE" con tarjeta MasterCard '
               'Comercial y el comercio no tiene el método de pago "MasterCard Comercial"',
    'SIS0465': 'Error, el resultado de la autenticación 3DSecure es "NO_3DSECURE", la tarjeta no es Visa, ni '
               'Amex, ni JCB, ni Master y el comercio no tiene el método de pago "Tradicional Mundial" ',
}
