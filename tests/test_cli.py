# tests/test_cli.py
import json

import pytest

from palette_intelligence import cli
from palette_intelligence.engine import orchestrator as orch_mod
from palette_intelligence.engine.color.providers import RuleBasedProvider


@pytest.fixture(autouse=True)
def _offline(monkeypatch):
    # only the rule tables: no network, no env-dependent heuristics
    monkeypatch.setattr(orch_mod, "default_providers", lambda: (RuleBasedProvider(),))


def test_case_01_list_formats(capsys):
    assert cli.main(["--list-formats"]) == 0
    out = capsys.readouterr().out
    assert "Available token formats" in out
    for name in ("w3c", "style-dictionary", "figma", "tokens-studio"):
        assert name in out


def test_case_02_prints_document_to_stdout(capsys):
    assert cli.main(["#3b82f6", "--format", "style-dictionary", "--size", "10"]) == 0
    captured = capsys.readouterr()
    doc = json.loads(captured.out)
    assert list(doc["color"]["ai-generated"]["primary"]) == [
        "50", "100", "200", "300", "400", "500", "600", "700", "800", "900"
    ]
    assert "Provider: rule-based" in captured.err
    assert "Accessibility: score" in captured.err


def test_case_03_writes_output_file(tmp_path, capsys):
    target = tmp_path / "tokens" / "palette.json"
    code = cli.main(["3b82f6", "--format", "figma", "--namespace", "acme", "-o", str(target)])
    assert code == 0
    doc = json.loads(target.read_text(encoding="utf-8"))
    assert doc["tokens"]["acme/primary/500"] == {"value": "#3b82f6", "type": "color"}
    assert "Wrote Figma Variables tokens" in capsys.readouterr().out


def test_case_04_invalid_color_exits_with_error(capsys):
    assert cli.main(["#12345", "--format", "w3c"]) == 1
    assert "Error during generation" in capsys.readouterr().err


def test_case_05_unknown_context_value_exits_with_error(capsys):
    assert cli.main(["#3b82f6", "--industry", "spaceflight", "--format", "w3c"]) == 1
    assert "Error during request" in capsys.readouterr().err


def test_case_06_missing_base_color_is_usage_error():
    with pytest.raises(SystemExit) as exc:
        cli.main([])
    assert exc.value.code == 2
