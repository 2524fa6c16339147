from litanalyzer.core.config import config
from litanalyzer.core.engine.syntax import class_members
from litanalyzer.lit_element.decorators import (
    get_custom_element_tag,
    get_property_decorator,
    get_property_options,
)


def _member(class_node, index=0):
    return class_members(class_node)[index]


def test_decorated_field_with_options(parse_class):
    cls = parse_class("""
        class A extends LitElement {
          @property({reflect: true}) foo = 1;
        }
    """)
    decorator = get_property_decorator(_member(cls))
    assert decorator is not None
    options = get_property_options(decorator)
    assert options is not None and options.type == 'object'


def test_decorator_without_arguments(parse_class):
    cls = parse_class("""
        class A extends LitElement {
          @property() foo = 1;
          @property bar = 2;
        }
    """)
    for index in (0, 1):
        decorator = get_property_decorator(_member(cls, index))
        assert decorator is not None
        assert get_property_options(decorator) is None


def test_non_object_argument_gives_no_options(parse_class):
    cls = parse_class("""
        class A extends LitElement {
          @property(sharedOptions) foo = 1;
        }
    """)
    assert get_property_options(get_property_decorator(_member(cls))) is None


def test_unrelated_decorators_are_ignored(parse_class):
    cls = parse_class("""
        class A extends LitElement {
          @state() foo = 1;
          @query('#x') bar;
          @lit.property() baz = 3;
        }
    """)
    for member in class_members(cls):
        assert get_property_decorator(member) is None


def test_decorated_getter(parse_class):
    cls = parse_class("""
        class A extends LitElement {
          @property({type: Number})
          get foo() { return 1; }
        }
    """)
    decorator = get_property_decorator(_member(cls))
    assert decorator is not None
    assert get_property_options(decorator) is not None


def test_configured_decorator_name(parse_class):
    config.set('analysis', 'property_decorator', 'prop')
    cls = parse_class("""
        class A extends LitElement {
          @prop() foo = 1;
          @property() bar = 1;
        }
    """)
    assert get_property_decorator(_member(cls, 0)) is not None
    assert get_property_decorator(_member(cls, 1)) is None


def test_custom_element_tag(parse_class):
    cls = parse_class("""
        @customElement('my-element')
        export class MyElement extends LitElement {}
    """)
    assert get_custom_element_tag(cls) == 'my-element'


def test_custom_element_tag_missing(parse_class):
    cls = parse_class("class MyElement extends LitElement {}")
    assert get_custom_element_tag(cls) is None
