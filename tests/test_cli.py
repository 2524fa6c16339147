import json
import sys

import pytest

from litanalyzer import cli

SOURCE = """
class CounterElement extends LitElement {
  @property({type: Number}) count = 0;
  @property({converter: numberConverter}) step = 1;
}
"""


def _run(monkeypatch, *args):
    monkeypatch.setattr(sys, 'argv', ['litanalyzer', *args])
    cli.main()


def test_raw_json(monkeypatch, capsys, tmp_path):
    source = tmp_path / 'counter.ts'
    source.write_text(SOURCE)
    _run(monkeypatch, 'analyze', str(source), '--raw-json')
    data = json.loads(capsys.readouterr().out)
    props = data['modules'][0]['elements'][0]['reactiveProperties']
    assert [p['name'] for p in props] == ['count', 'step']
    assert props[1]['converter'] == 'numberConverter'


def test_output_file_and_error_status(monkeypatch, tmp_path):
    source = tmp_path / 'broken.ts'
    source.write_text("class B extends LitElement { static properties = {a: 1}; }")
    output = tmp_path / 'out.json'
    with pytest.raises(SystemExit) as exc_info:
        _run(monkeypatch, 'analyze', str(source), '--output', str(output))
    assert exc_info.value.code == 1
    data = json.loads(output.read_text())
    assert data['modules'][0]['diagnostics'][0]['class_name'] == 'B'


def test_strict_failure(monkeypatch, tmp_path):
    source = tmp_path / 'broken.ts'
    source.write_text("class B extends LitElement { static get properties() { return x; } }")
    with pytest.raises(SystemExit) as exc_info:
        _run(monkeypatch, 'analyze', str(source), '--strict')
    assert exc_info.value.code == 1


def test_missing_path(monkeypatch, tmp_path):
    with pytest.raises(SystemExit):
        _run(monkeypatch, 'analyze', str(tmp_path / 'nope.ts'))
