import django
from django.conf import settings
from lxml import etree

if not settings.configured:
    settings.configure(
        DATABASES={},
        INSTALLED_APPS=[
            'djangoredsys',
        ],
        MIDDLEWARE=[],
        ROOT_URLCONF='tests.urls',
        SECRET_KEY='djangoredsys-tests',
        DEBUG=False,
        USE_TZ=True,
        TIME_ZONE='Europe/Madrid',
    )
    django.setup()


class XmlTestingMixin(object):

    def assertXmlElementEquals(self, xml_str, value, element_path):
        parent = etree.fromstring(xml_str.encode('utf-8'))
        for element_name in element_path.split('.'):
            sub_elements = [element for element in parent.iter()
                            if element is not parent and isinstance(element.tag, str)
                            and etree.QName(element).localname == element_name]
            if len(sub_elements) == 0:
                self.fail("No element matching '%s' found using XML string '%s'" % (element_name, element_path))
                return
            parent = sub_elements[0]
        self.assertEqual(value, parent.text)
