import base64
import hashlib
import hmac

from Crypto.Cipher import DES3
from django.test import SimpleTestCase

from djangoredsys.exceptions import RedsysKeyException
from djangoredsys.signature import derive_order_key, sign, signatures_match, response_signature_data, \
    verify_response_signature

from .fixtures import MERCHANT_KEY, ORDER

# 3DES-CBC of ORDER with MERCHANT_KEY and HMAC-SHA256 of SIGNED_DATA, obtained with openssl
ORDER_KEY = 'ntVrJPxp2xknOmuiIiyQpg=='
SIGNED_DATA = '{"DS_MERCHANT_AMOUNT": "1050"}'
SIGNATURE = 'nZqYjACDPaH43FxGtkhKL17h3t0ZP5DYTQV4+6UyZ+U='


class TestDeriveOrderKey(SimpleTestCase):

    def test_is_deterministic(self):
        self.assertEqual(derive_order_key(MERCHANT_KEY, ORDER), derive_order_key(MERCHANT_KEY, ORDER))

    def test_order_is_zero_padded(self):
        self.assertEqual(derive_order_key(MERCHANT_KEY, '1234'),
                         derive_order_key(MERCHANT_KEY, '1234\x00\x00\x00\x00'))

    def test_aligned_order_is_not_padded(self):
        order_key = base64.b64decode(derive_order_key(MERCHANT_KEY, '12345678'))
        self.assertEqual(8, len(order_key))

    def test_order_is_padded_to_next_block(self):
        order_key = base64.b64decode(derive_order_key(MERCHANT_KEY, '123456789'))
        self.assertEqual(16, len(order_key))

    def test_matches_triple_des_cbc_with_zero_iv(self):
        des3_obj = DES3.new(base64.b64decode(MERCHANT_KEY), DES3.MODE_CBC, iv=b'\x00' * 8)
        expected = base64.b64encode(des3_obj.encrypt(b'1234\x00\x00\x00\x00')).decode('ascii')
        self.assertEqual(expected, derive_order_key(MERCHANT_KEY, '1234'))

    def test_known_order_key(self):
        self.assertEqual(ORDER_KEY, derive_order_key(MERCHANT_KEY, ORDER))

    def test_different_orders_give_different_keys(self):
        self.assertNotEqual(derive_order_key(MERCHANT_KEY, '1234'), derive_order_key(MERCHANT_KEY, '1235'))

    def test_short_key_raises_exception(self):
        short_key = base64.b64encode(b'0123456789abcdef').decode('ascii')
        with self.assertRaises(RedsysKeyException):
            derive_order_key(short_key, ORDER)

    def test_invalid_base64_raises_exception(self):
        with self.assertRaises(RedsysKeyException):
            derive_order_key('not base64!', ORDER)

    def test_key_exception_is_a_value_error(self):
        with self.assertRaises(ValueError):
            derive_order_key('', ORDER)


class TestSign(SimpleTestCase):

    def test_known_signature(self):
        self.assertEqual(SIGNATURE, sign(MERCHANT_KEY, ORDER, SIGNED_DATA))

    def test_matches_hmac_sha256_with_order_key(self):
        data = '{"DS_MERCHANT_AMOUNT": "1050"}'
        order_key = base64.b64decode(derive_order_key(MERCHANT_KEY, ORDER))
        expected = base64.b64encode(hmac.new(order_key, data.encode('utf-8'), hashlib.sha256).digest())
        self.assertEqual(expected.decode('ascii'), sign(MERCHANT_KEY, ORDER, data))

    def test_signature_is_base64_sha256_digest(self):
        signature = sign(MERCHANT_KEY, ORDER, 'data')
        self.assertEqual(32, len(base64.b64decode(signature)))

    def test_bytes_and_text_give_same_signature(self):
        self.assertEqual(sign(MERCHANT_KEY, ORDER, 'año'), sign(MERCHANT_KEY, ORDER, 'año'.encode('utf-8')))

    def test_signature_depends_on_order(self):
        self.assertNotEqual(sign(MERCHANT_KEY, '1234', 'data'), sign(MERCHANT_KEY, '1235', 'data'))


class TestSignaturesMatch(SimpleTestCase):

    def test_url_safe_signature_matches(self):
        computed = 'ab+cd/ef=='
        self.assertTrue(signatures_match('ab-cd_ef==', computed))

    def test_same_signature_matches(self):
        computed = sign(MERCHANT_KEY, ORDER, 'data')
        self.assertTrue(signatures_match(computed, computed))

    def test_different_signature_does_not_match(self):
        self.assertFalse(signatures_match(sign(MERCHANT_KEY, ORDER, 'other'), sign(MERCHANT_KEY, ORDER, 'data')))

    def test_empty_signature_does_not_match(self):
        self.assertFalse(signatures_match('', sign(MERCHANT_KEY, ORDER, 'data')))
        self.assertFalse(signatures_match(None, sign(MERCHANT_KEY, ORDER, 'data')))


class TestResponseSignature(SimpleTestCase):

    def setUp(self):
        self.fields = {
            'Ds_Amount': '1050',
            'Ds_Order': ORDER,
            'Ds_MerchantCode': '999008881',
            'Ds_Currency': '978',
            'Ds_Response': '0000',
            'Ds_CardNumber': '454881******0004',
            'Ds_TransactionType': 'A',
            'Ds_SecurePayment': '0',
            'Ds_AuthorisationCode': '123456',
        }

    def test_fields_are_concatenated_in_order(self):
        self.assertEqual('1050' + ORDER + '9990088819780000454881******0004A0', response_signature_data(self.fields))

    def test_missing_fields_are_empty(self):
        del self.fields['Ds_CardNumber']
        self.assertEqual('1050' + ORDER + '9990088819780000A0', response_signature_data(self.fields))

    def test_valid_signature_is_verified(self):
        signature = sign(MERCHANT_KEY, ORDER, response_signature_data(self.fields))
        self.assertTrue(verify_response_signature(MERCHANT_KEY, self.fields, signature))

    def test_tampered_response_is_not_verified(self):
        signature = sign(MERCHANT_KEY, ORDER, response_signature_data(self.fields))
        self.fields['Ds_Amount'] = '1'
        self.assertFalse(verify_response_signature(MERCHANT_KEY, self.fields, signature))

    def test_response_without_order_is_not_verified(self):
        signature = sign(MERCHANT_KEY, ORDER, response_signature_data(self.fields))
        del self.fields['Ds_Order']
        self.assertFalse(verify_response_signature(MERCHANT_KEY, self.fields, signature))
