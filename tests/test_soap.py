# -*- coding: utf-8 -*-
import datetime
from types import SimpleNamespace

from django.test import RequestFactory, SimpleTestCase

from djangoredsys.exceptions import RedsysInvalidNotification, RedsysSoapException
from djangoredsys.signature import sign
from djangoredsys.soap import detect_soap_version, extract_notification_payload, build_notification_response, \
    parse_notification_message, verify_notification, build_merchant_answer

from . import XmlTestingMixin, fixtures


class TestDetectSoapVersion(SimpleTestCase):

    def setUp(self):
        self.factory = RequestFactory()

    def test_soap_12_content_type(self):
        request = self.factory.post('/', data='<x/>', content_type='application/soap+xml; charset=utf-8')
        self.assertEqual('1.2', detect_soap_version(request))

    def test_other_content_type_is_soap_11(self):
        request = self.factory.post('/', data=fixtures.soap_notification('x', fixtures.SOAP_12_NOTIFICATION),
                                    content_type='text/xml; charset=utf-8')
        self.assertEqual('1.1', detect_soap_version(request))

    def test_soap_11_body(self):
        request = SimpleNamespace(headers={}, body=fixtures.soap_notification('x'))
        self.assertEqual('1.1', detect_soap_version(request))

    def test_soap_12_body(self):
        request = SimpleNamespace(headers=None, body=fixtures.soap_notification('x', fixtures.SOAP_12_NOTIFICATION))
        self.assertEqual('1.2', detect_soap_version(request))

    def test_bytes_body(self):
        body = fixtures.soap_notification('x', fixtures.SOAP_12_NOTIFICATION).encode('utf-8')
        self.assertEqual('1.2', detect_soap_version({'body': body}))

    def test_header_name_is_case_insensitive(self):
        self.assertEqual('1.2', detect_soap_version({'headers': {'content-type': 'application/soap+xml'}}))

    def test_without_header_nor_body(self):
        with self.assertRaises(RedsysSoapException):
            detect_soap_version(SimpleNamespace(headers={}, body=''))
        with self.assertRaises(RedsysSoapException):
            detect_soap_version({})

    def test_body_without_envelope(self):
        with self.assertRaises(RedsysSoapException):
            detect_soap_version({'body': '<Message/>'})


class TestExtractNotificationPayload(SimpleTestCase):

    def test_payload_is_unescaped(self):
        self.assertEqual('Ds_Order=123&Ds_Response=0000',
                         extract_notification_payload('<XML>Ds_Order=123&amp;Ds_Response=0000</XML>'))

    def test_prefixed_element_with_attributes(self):
        xml = '<ns0:XML xsi:type="xsd:string">&lt;Message&gt;&lt;/Message&gt;</ns0:XML>'
        self.assertEqual('<Message></Message>', extract_notification_payload(xml))

    def test_full_envelope(self):
        payload = fixtures.notification_payload()
        for template in (fixtures.SOAP_11_NOTIFICATION, fixtures.SOAP_12_NOTIFICATION):
            self.assertEqual(payload, extract_notification_payload(fixtures.soap_notification(payload, template)))

    def test_missing_element(self):
        with self.assertRaises(RedsysInvalidNotification):
            extract_notification_payload('<soap:Envelope><soap:Body></soap:Body></soap:Envelope>')

    def test_empty_element(self):
        with self.assertRaises(RedsysInvalidNotification):
            extract_notification_payload('<XML></XML>')

    def test_nested_xml_is_not_accepted(self):
        with self.assertRaises(RedsysInvalidNotification):
            extract_notification_payload('<XML><![CDATA[<Message></Message>]]></XML>')
        with self.assertRaises(RedsysInvalidNotification):
            extract_notification_payload('<XML><Message></Message></XML>')


class TestBuildNotificationResponse(SimpleTestCase, XmlTestingMixin):

    answer = '<Message><Response Ds_Version="0.0">OK & \'done\'</Response></Message>'

    def test_soap_11_envelope(self):
        xml = build_notification_response(self.answer, '1.1')
        self.assertTrue(xml.startswith('<?xml version="1.0" encoding="utf-8"?><soap:Envelope'))
        self.assertIn('xmlns:soap="http://schemas.xmlsoap.org/soap/envelope/"', xml)
        self.assertXmlElementEquals(xml, self.answer, 'Body.procesaNotificacionSISResponse.return')

    def test_soap_12_envelope(self):
        xml = build_notification_response(self.answer, '1.2')
        self.assertTrue(xml.startswith('<?xml version="1.0" encoding="utf-8"?><soap12:Envelope'))
        self.assertIn('xmlns:soap12="http://www.w3.org/2003/05/soap-envelope"', xml)
        self.assertXmlElementEquals(xml, 'return', 'Body.procesaNotificacionSISResponse.result')
        self.assertXmlElementEquals(xml, self.answer, 'Body.procesaNotificacionSISResponse.return')

    def test_answer_is_escaped(self):
        xml = build_notification_response('<Message>', '1.1')
        self.assertIn('<return xsi:type="xsd:string">&lt;Message&gt;</return>', xml)

    def test_unknown_version(self):
        with self.assertRaises(RedsysSoapException):
            build_notification_response(self.answer, '1.0')


class TestParseNotificationMessage(SimpleTestCase):

    def test_fields(self):
        message = parse_notification_message(fixtures.notification_payload())
        self.assertEqual(fixtures.ORDER, message['fields']['Ds_Order'])
        self.assertEqual('0000', message['fields']['Ds_Response'])
        self.assertEqual('', message['fields']['Ds_MerchantData'])

    def test_raw_request_is_kept(self):
        message = parse_notification_message(fixtures.notification_payload())
        self.assertEqual(fixtures.notification_request(), message['request'])

    def test_signature(self):
        message = parse_notification_message(fixtures.notification_payload(signature='abc'))
        self.assertEqual('abc', message['signature'])

    def test_date(self):
        date = parse_notification_message(fixtures.notification_payload())['date']
        self.assertEqual(datetime.datetime(2016, 10, 20, 10, 30), date.replace(tzinfo=None))
        self.assertEqual(datetime.timedelta(hours=2), date.utcoffset())

    def test_invalid_xml(self):
        with self.assertRaises(RedsysInvalidNotification):
            parse_notification_message('Ds_Order=123')

    def test_message_without_request(self):
        with self.assertRaises(RedsysInvalidNotification):
            parse_notification_message('<Message><Signature>abc</Signature></Message>')


class TestVerifyNotification(SimpleTestCase):

    def test_valid_signature(self):
        message = parse_notification_message(fixtures.notification_payload())
        self.assertTrue(verify_notification(fixtures.MERCHANT_KEY, message))

    def test_signature_of_other_request(self):
        other_signature = sign(fixtures.MERCHANT_KEY, fixtures.ORDER, fixtures.notification_request(response='0190'))
        message = parse_notification_message(fixtures.notification_payload(signature=other_signature))
        self.assertFalse(verify_notification(fixtures.MERCHANT_KEY, message))

    def test_signed_with_other_key(self):
        other_key = 'Mk9m98IfEblmPfrpsawt7BmxObt98Jev'
        message = parse_notification_message(fixtures.notification_payload(merchant_key=other_key))
        self.assertFalse(verify_notification(fixtures.MERCHANT_KEY, message))


class TestBuildMerchantAnswer(SimpleTestCase):

    def test_accepted_answer_is_signed(self):
        answer = build_merchant_answer(fixtures.MERCHANT_KEY, fixtures.ORDER)
        response = '<Response Ds_Version="0.0"><Ds_Response_Merchant>OK</Ds_Response_Merchant></Response>'
        signature = sign(fixtures.MERCHANT_KEY, fixtures.ORDER, response)
        self.assertEqual('<Message>{0}<Signature>{1}</Signature></Message>'.format(response, signature), answer)

    def test_rejected_answer(self):
        answer = build_merchant_answer(fixtures.MERCHANT_KEY, fixtures.ORDER, accepted=False)
        self.assertIn('<Ds_Response_Merchant>KO</Ds_Response_Merchant>', answer)
