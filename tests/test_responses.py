# -*- coding: utf-8 -*-
from django.test import SimpleTestCase

from djangoredsys.codes import AUTHORIZED_MESSAGE
from djangoredsys.responses import get_response_code_message, get_sis_error_code_message, is_authorized, \
    format_ds_response_code, format_ds_error_code


class TestResponseCodeMessage(SimpleTestCase):

    def test_zero_is_authorized(self):
        self.assertEqual(AUTHORIZED_MESSAGE, get_response_code_message(0))

    def test_codes_below_100_fall_back_to_authorized(self):
        self.assertEqual(AUTHORIZED_MESSAGE, get_response_code_message(50))
        self.assertEqual(AUTHORIZED_MESSAGE, get_response_code_message('0099'))

    def test_padded_string_code(self):
        self.assertEqual('Tarjeta caducada.', get_response_code_message('0101'))

    def test_string_code_is_trimmed(self):
        self.assertEqual('Denegación del emisor sin especificar motivo.', get_response_code_message(' 0190 '))

    def test_integral_float_code(self):
        self.assertEqual('Pedido repetido.', get_response_code_message(913.0))

    def test_unknown_code(self):
        self.assertIsNone(get_response_code_message(99999))
        self.assertIsNone(get_response_code_message('0100'))

    def test_negative_code(self):
        self.assertIsNone(get_response_code_message(-5))
        self.assertIsNone(get_response_code_message('-5'))

    def test_leading_integer_of_string_code(self):
        self.assertEqual(AUTHORIZED_MESSAGE, get_response_code_message('12abc'))
        self.assertEqual('Pedido repetido.', get_response_code_message(' 0913 rechazado'))
        self.assertEqual('Tarjeta caducada.', get_response_code_message('101.0'))

    def test_malformed_code(self):
        for code in ('abc', 'abc12', '', '+', None, True, float('nan'), 1.5, ['0000']):
            self.assertIsNone(get_response_code_message(code))


class TestSISErrorCodeMessage(SimpleTestCase):

    def test_known_code(self):
        self.assertEqual('La firma enviada no es correcta', get_sis_error_code_message('SIS0042'))

    def test_code_is_trimmed(self):
        self.assertEqual('La firma enviada no es correcta', get_sis_error_code_message(' SIS0042\n'))

    def test_unknown_code(self):
        self.assertIsNone(get_sis_error_code_message('SIS9999'))

    def test_malformed_code(self):
        for code in ('', None, 42):
            self.assertIsNone(get_sis_error_code_message(code))


class TestIsAuthorized(SimpleTestCase):

    def test_authorized_range(self):
        self.assertTrue(is_authorized('0000'))
        self.assertTrue(is_authorized(99))

    def test_not_authorized(self):
        self.assertFalse(is_authorized('0190'))
        self.assertFalse(is_authorized('9915'))
        self.assertFalse(is_authorized('abc'))


class TestFormattedCodes(SimpleTestCase):

    def test_response_code(self):
        self.assertEqual('0000. ' + AUTHORIZED_MESSAGE, format_ds_response_code('0000'))
        self.assertEqual('0101. Tarjeta caducada.', format_ds_response_code('0101'))

    def test_unknown_response_code(self):
        self.assertEqual('0100. código de respuesta Ds_Response desconocido', format_ds_response_code('0100'))

    def test_empty_response_code(self):
        self.assertIsNone(format_ds_response_code(''))

    def test_error_code(self):
        self.assertEqual('SIS0042. La firma enviada no es correcta', format_ds_error_code('SIS0042'))

    def test_unknown_error_code(self):
        self.assertEqual('SIS9999. Código de respuesta Ds_ErrorCode desconocido', format_ds_error_code('SIS9999'))

    def test_empty_error_code(self):
        self.assertEqual('', format_ds_error_code(None))
