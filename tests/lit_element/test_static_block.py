import pytest

from litanalyzer.core.engine.syntax import class_members
from litanalyzer.core.error_handling import (
    UnsupportedStaticPropertiesEntryError,
    UnsupportedStaticPropertiesFormatError,
)
from litanalyzer.lit_element.static_block import (
    get_static_properties_object_literal,
    iter_static_entries,
)


def test_field_initializer(parse_class):
    cls = parse_class("""
        class A extends LitElement {
          static properties = {foo: {type: String}, bar: {}};
        }
    """)
    obj = get_static_properties_object_literal(class_members(cls)[0])
    assert [name for name, _, _ in iter_static_entries(obj)] == ['foo', 'bar']


def test_getter_return(parse_class):
    cls = parse_class("""
        class A extends LitElement {
          static get properties() {
            const unused = 1;
            // trailing comment
            return {foo: {}};
          }
        }
    """)
    obj = get_static_properties_object_literal(class_members(cls)[0])
    assert obj.type == 'object'


@pytest.mark.parametrize('member', [
    "static properties = makeProperties();",
    "static properties;",
    "static get properties() { if (x) { return {}; } }",
    "static get properties() { return ({foo: {}}); }",
    "static get properties() { return props; }",
    "static get properties() { }",
])
def test_unsupported_format(parse_class, member):
    cls = parse_class("class A extends LitElement {\n  %s\n}" % member)
    properties = class_members(cls)[0]
    with pytest.raises(UnsupportedStaticPropertiesFormatError) as exc_info:
        get_static_properties_object_literal(properties)
    assert exc_info.value.node == properties
    assert exc_info.value.range.start_line == 2
    assert 'static initializer' in exc_info.value.message
    assert 'static getter' in exc_info.value.message


@pytest.mark.parametrize('entries', [
    "42: {}",
    "foo: 'bar'",
    "'foo': {}",
    "[key]: {}",
    "foo",
    "...base",
])
def test_unsupported_entry(parse_class, entries):
    cls = parse_class("class A extends LitElement { static properties = {ok: {}, %s}; }" % entries)
    obj = get_static_properties_object_literal(class_members(cls)[0])
    with pytest.raises(UnsupportedStaticPropertiesEntryError) as exc_info:
        list(iter_static_entries(obj))
    assert exc_info.value.node.parent == obj
    assert 'object literal value' in exc_info.value.message
