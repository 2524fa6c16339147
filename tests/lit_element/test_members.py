import pytest

from litanalyzer.core.diagnostics import DiagnosticCollector
from litanalyzer.core.error_handling import UnsupportedPropertyNameError
from litanalyzer.lit_element.members import classify_members


def test_partitions(parse_class):
    cls = parse_class("""
        class A extends LitElement {
          @property() decorated = 1;
          static properties = {};
          plain: string;
          static other = 2;
          get computed() { return 1; }
          set computed(v) {}
          method() {}
        }
    """)
    members = classify_members(cls)
    assert [name for name, _, _ in members.decorated] == ['decorated']
    assert members.static_properties is not None
    assert list(members.undecorated) == ['plain', 'computed']


@pytest.mark.parametrize('member', [
    "['computed'] = 1;",
    "'quoted' = 1;",
    "#secret = 1;",
    "42 = 1;",
])
def test_rejects_non_identifier_names(parse_class, member):
    cls = parse_class("class A extends LitElement {\n  %s\n}" % member)
    with pytest.raises(UnsupportedPropertyNameError) as exc_info:
        classify_members(cls)
    assert exc_info.value.message == 'Unsupported property name'
    assert exc_info.value.range.start_line == 2


def test_first_static_properties_wins(parse_class):
    cls = parse_class("""
        class A extends LitElement {
          static properties = {a: {}};
          static get properties() { return {b: {}}; }
        }
    """)
    diagnostics = DiagnosticCollector()
    members = classify_members(cls, diagnostics)
    assert members.static_properties.type == 'public_field_definition'
    assert len(diagnostics) == 1
    assert not diagnostics.has_errors
