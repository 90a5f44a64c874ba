import datetime

import pytest

from xrpc import xr_unmarshal
from xrpc.xr_marshal import Marshaller, tostring
from xrpc.xr_envelope import Fault
from xrpc.xr_unmarshal import Unmarshaller
from xrpc.exceptions import MalformedResponseError


def response_of(value_xml):
    return ('<?xml version="1.0"?>\n<methodResponse><params><param>'
            '<value>%s</value></param></params></methodResponse>' % (
                value_xml))


def round_trip(value):
    text = tostring(Marshaller().marshal(value))
    return xr_unmarshal.loads(response_of(text)).result()


@pytest.mark.parametrize("value", [
    0, 42, -17, 2 ** 40, 2.5, -0.125, 'hello', '', 'x < y & z',
    u'café 日本', b'', b'\x00\x01\xff', b'abcd',
    datetime.datetime(2024, 1, 5, 10, 20, 30), None,
])
def test_scalar_round_trip(value):
    assert round_trip(value) == value


@pytest.mark.parametrize("value", [True, False])
def test_boolean_round_trip(value):
    res = round_trip(value)
    assert res is value


def test_nested_round_trip():
    value = [{'name': 'a', 'items': [1, 2, [3, {'deep': ['x']}]]},
             {'name': 'b', 'items': [], 'meta': {}},
             [[], [[]]]]
    assert round_trip(value) == value


def test_deeply_nested_round_trip():
    value = 1
    for i in range(120):
        value = [value]
    assert round_trip(value) == value

    value = {'leaf': 'x'}
    for i in range(120):
        value = {'next': value}
    assert round_trip(value) == value


def test_empty_containers():
    assert round_trip([]) == []
    assert round_trip({}) == {}


def test_struct_member_order_does_not_matter():
    one = ('<struct>'
           '<member><name>a</name><value><int>1</int></value></member>'
           '<member><name>b</name><value><string>x</string></value></member>'
           '</struct>')
    two = ('<struct>'
           '<member><name>b</name><value><string>x</string></value></member>'
           '<member><name>a</name><value><int>1</int></value></member>'
           '</struct>')
    for xml in (one, two):
        assert xr_unmarshal.loads(response_of(xml)).result() == \
            {'a': 1, 'b': 'x'}


def test_pretty_printed_response():
    text = """<?xml version='1.0'?>
<methodResponse>
  <params>
    <param>
      <value>
        <array>
          <data>
            <value><i4>1</i4></value>
            <value>
              <struct>
                <member>
                  <name>when</name>
                  <value><dateTime.iso8601>20240105T03:04:05</dateTime.iso8601></value>
                </member>
                <member>
                  <name>blob</name>
                  <value><base64>
YWJj
</base64></value>
                </member>
              </struct>
            </value>
          </data>
        </array>
      </value>
    </param>
  </params>
</methodResponse>
"""
    assert xr_unmarshal.loads(text).result() == [
        1, {'when': datetime.datetime(2024, 1, 5, 3, 4, 5), 'blob': b'abc'}]


def test_untyped_value_is_string():
    assert xr_unmarshal.loads(response_of('plain')).result() == 'plain'
    assert xr_unmarshal.loads(response_of('')).result() == ''


def test_empty_scalars_are_zero():
    xml = ('<array><data>'
           '<value><string></string></value>'
           '<value><int/></value>'
           '<value><boolean/></value>'
           '<value><base64></base64></value>'
           '</data></array>')
    assert xr_unmarshal.loads(response_of(xml)).result() == \
        ['', 0, False, b'']


def test_only_first_param_is_used():
    text = ('<methodResponse><params>'
            '<param><value><int>1</int></value></param>'
            '<param><value><int>2</int></value></param>'
            '</params></methodResponse>')
    assert xr_unmarshal.loads(text).result() == 1


def test_fault():
    text = ('<methodResponse><fault><value><struct>'
            '<member><name>faultCode</name><value><int>4</int></value></member>'
            '<member><name>faultString</name>'
            '<value><string>Too many parameters.</string></value></member>'
            '</struct></value></fault></methodResponse>')
    res = xr_unmarshal.loads(text)
    assert res.is_fault()
    assert res.fault == Fault(4, 'Too many parameters.')
    assert res.value is None


def test_fault_with_incomplete_struct_is_still_a_fault():
    text = ('<methodResponse><fault><value><struct>'
            '<member><name>faultString</name><value>oops</value></member>'
            '</struct></value></fault></methodResponse>')
    res = xr_unmarshal.loads(text)
    assert res.is_fault()
    assert res.fault == Fault(None, 'oops')

    with pytest.raises(MalformedResponseError):
        xr_unmarshal.loads(text, strict=True)


def test_namespaced_and_upper_case_tags():
    text = ('<methodResponse xmlns:ex="http://ws.apache.org/xmlrpc/namespaces/extensions">'
            '<params><param><value><array><data>'
            '<value><ex:nil/></value><value><I4>5</I4></value>'
            '</data></array></value></param></params></methodResponse>')
    assert xr_unmarshal.loads(text).result() == [None, 5]


def test_lenient_on_missing_structure():
    assert xr_unmarshal.loads('<methodResponse/>').result() is None
    # member without a name is dropped
    xml = ('<struct><member><value><int>1</int></value></member>'
           '<member><name>b</name><value><int>2</int></value></member>'
           '</struct>')
    assert xr_unmarshal.loads(response_of(xml)).result() == {'b': 2}


def test_strict_on_missing_structure():
    with pytest.raises(MalformedResponseError):
        xr_unmarshal.loads('<methodResponse/>', strict=True)
    with pytest.raises(MalformedResponseError):
        xr_unmarshal.loads('<other><params/></other>', strict=True)


def test_strict_rejects_name_outside_struct():
    text = ('<methodResponse><params><param><value><name>x</name>'
            '<int>1</int></value></param></params></methodResponse>')
    assert xr_unmarshal.loads(text).result() == 1
    with pytest.raises(MalformedResponseError):
        xr_unmarshal.loads(text, strict=True)


def test_strict_rejects_member_without_name():
    xml = '<struct><member><value><int>1</int></value></member></struct>'
    assert xr_unmarshal.loads(response_of(xml)).result() == {}
    with pytest.raises(MalformedResponseError):
        xr_unmarshal.loads(response_of(xml), strict=True)


def test_bad_scalar_text():
    with pytest.raises(MalformedResponseError):
        xr_unmarshal.loads(response_of('<int>many</int>'))
    with pytest.raises(MalformedResponseError):
        xr_unmarshal.loads(response_of(
            '<dateTime.iso8601>05/01/2024</dateTime.iso8601>'))


def test_not_xml():
    with pytest.raises(MalformedResponseError):
        xr_unmarshal.loads('this is not xml')
    with pytest.raises(MalformedResponseError):
        xr_unmarshal.loads(b'')


def test_parse_accepts_element_tree():
    root = xr_unmarshal.parse_text(response_of('<int>9</int>'))
    assert Unmarshaller().parse(root.getroottree()).result() == 9


def test_parser_state_is_per_call():
    unmarshaller = Unmarshaller()
    first = unmarshaller.parse(xr_unmarshal.parse_text(response_of(
        '<struct><member><name>a</name><value>1</value></member></struct>')))
    second = unmarshaller.parse(xr_unmarshal.parse_text(response_of(
        '<array><data><value><int>2</int></value></data></array>')))
    assert first.result() == {'a': '1'}
    assert second.result() == [2]
