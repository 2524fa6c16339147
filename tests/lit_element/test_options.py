import pytest

from litanalyzer.lit_element.options import (
    decode_property_options,
    get_object_property,
    get_property_attribute,
    get_property_converter,
    get_property_reflect,
    get_property_type,
)


def test_no_options_use_defaults():
    assert decode_property_options(None, 'myValue') == {
        'attribute': 'myvalue',
        'type_option': None,
        'reflect': False,
        'converter': None,
    }


@pytest.mark.parametrize('options, expected', [
    ("{}", 'myprop'),
    ("{attribute: 'data-x'}", 'data-x'),
    ('{attribute: "data-y"}', 'data-y'),
    ('{attribute: false}', None),
    ('{attribute: true}', 'myprop'),
    ('{attribute: undefined}', 'myprop'),
    ('{attribute: computeName()}', None),
    ('{attribute: `tmpl`}', None),
    ("{'attribute': 'quoted-key'}", 'myprop'),
])
def test_attribute_option(parse_expression, options, expected):
    assert get_property_attribute(parse_expression(options), 'myProp') == expected


@pytest.mark.parametrize('options, expected', [
    ('{type: Number}', 'Number'),
    ('{type: String}', 'String'),
    ('{type: lit.Number}', None),
    ("{type: 'Number'}", None),
    ('{}', None),
])
def test_type_option(parse_expression, options, expected):
    assert get_property_type(parse_expression(options)) == expected


@pytest.mark.parametrize('options, expected', [
    ('{reflect: true}', True),
    ('{reflect: false}', False),
    ('{reflect: isOn}', False),
    ('{}', False),
])
def test_reflect_option(parse_expression, options, expected):
    assert get_property_reflect(parse_expression(options)) is expected


def test_converter_is_raw_expression(parse_expression):
    obj = parse_expression('{converter: {fromAttribute: (v) => v}}')
    converter = get_property_converter(obj)
    assert converter is not None
    assert converter.type == 'object'
    assert get_property_converter(parse_expression('{}')) is None


def test_object_property_ignores_shorthand_and_spread(parse_expression):
    obj = parse_expression('{reflect, ...rest, type() { return 1; }}')
    assert get_object_property(obj, 'reflect') is None
    assert get_object_property(obj, 'type') is None


def test_decoded_options_example(parse_expression):
    obj = parse_expression("{attribute: 'data-x', reflect: true, type: Number}")
    decoded = decode_property_options(obj, 'x')
    assert decoded['attribute'] == 'data-x'
    assert decoded['reflect'] is True
    assert decoded['type_option'] == 'Number'
    assert decoded['converter'] is None
