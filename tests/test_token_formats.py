# tests/test_token_formats.py
import json

import pytest

from palette_intelligence.engine.errors import PaletteError, UnknownTokenFormat
from palette_intelligence.engine.tokens import (
    DEFAULT_FORMAT,
    TOKEN_FORMATS,
    TokenLeaf,
    convert,
    convert_document,
    detect_document_format,
    detect_format,
    get_token_format,
    iter_leaves,
    list_available_formats,
    parse,
)

TREE = {
    "primary": {"50": TokenLeaf("#eff6ff"), "500": TokenLeaf("#3b82f6")},
    "semantic": {"error": TokenLeaf("#ef4444")},
}


# ── Registry ──────────────────────────────────────────────────────────────────
def test_case_01_registry_has_four_formats():
    assert set(TOKEN_FORMATS) == {"w3c", "style-dictionary", "figma", "tokens-studio"}
    assert DEFAULT_FORMAT.name == "w3c"
    with pytest.raises(TypeError):
        TOKEN_FORMATS["new"] = DEFAULT_FORMAT  # type: ignore[index]


def test_case_02_lookup_is_case_insensitive():
    assert get_token_format("W3C") is TOKEN_FORMATS["w3c"]
    assert get_token_format(" Figma ").name == "figma"


def test_case_03_unknown_format_raises():
    with pytest.raises(UnknownTokenFormat) as exc:
        get_token_format("sketch")
    assert isinstance(exc.value, KeyError)
    assert isinstance(exc.value, PaletteError)
    assert exc.value.name == "sketch"
    assert "sketch" in str(exc.value)


def test_case_04_list_available_formats_mentions_all():
    text = list_available_formats()
    for name in TOKEN_FORMATS:
        assert name in text
    assert "colors → $value" in text


# ── convert ───────────────────────────────────────────────────────────────────
def test_case_05_convert_w3c_with_namespace_and_description():
    doc = convert(TREE, "w3c", "brand", description="Calm blues")
    assert doc == {
        "colors": {
            "$description": "Calm blues",
            "brand": {
                "primary": {
                    "50": {"$value": "#eff6ff", "$type": "color"},
                    "500": {"$value": "#3b82f6", "$type": "color"},
                },
                "semantic": {"error": {"$value": "#ef4444", "$type": "color"}},
            },
        }
    }


def test_case_06_convert_style_dictionary_has_no_type():
    doc = convert(TREE, TOKEN_FORMATS["style-dictionary"], description="ignored")
    assert doc == {
        "color": {
            "primary": {"50": {"value": "#eff6ff"}, "500": {"value": "#3b82f6"}},
            "semantic": {"error": {"value": "#ef4444"}},
        }
    }


def test_case_07_convert_figma_flattens_paths():
    doc = convert(TREE, "figma", "brand")
    assert doc == {
        "tokens": {
            "brand/primary/50": {"value": "#eff6ff", "type": "color"},
            "brand/primary/500": {"value": "#3b82f6", "type": "color"},
            "brand/semantic/error": {"value": "#ef4444", "type": "color"},
        }
    }


def test_case_08_convert_tokens_studio_root():
    doc = convert(TREE, "tokens-studio", "brand")
    assert doc["global"]["brand"]["semantic"]["error"] == {"value": "#ef4444", "type": "color"}


def test_case_09_flat_format_rejects_separator_in_segment():
    with pytest.raises(ValueError):
        convert({"a/b": TokenLeaf("#000000")}, "figma")
    with pytest.raises(ValueError):
        convert(TREE, "figma", "my/brand")


def test_case_10_nested_formats_reject_reserved_segments():
    with pytest.raises(ValueError):
        convert({"$value": TokenLeaf("#000000")}, "w3c")
    with pytest.raises(ValueError):
        convert({"value": TokenLeaf("#000000")}, "style-dictionary")
    with pytest.raises(ValueError):
        convert({"": TokenLeaf("#000000")}, "tokens-studio")


# ── parse / convert_document ──────────────────────────────────────────────────
@pytest.mark.parametrize("name", ["w3c", "style-dictionary", "figma", "tokens-studio"])
def test_case_11_parse_inverts_convert(name):
    doc = convert(TREE, name, "brand", description="x")
    assert parse(json.loads(json.dumps(doc)), name, "brand") == TREE


def test_case_12_parse_errors():
    with pytest.raises(ValueError):
        parse({"tokens": {}}, "w3c")
    with pytest.raises(ValueError):
        parse({"colors": {"other": {}}}, "w3c", "brand")


def test_case_13_convert_document_between_formats():
    w3c = convert(TREE, "w3c", "brand")
    figma = convert_document(w3c, "w3c", "figma", "brand")
    assert figma == convert(TREE, "figma", "brand")
    back = convert_document(figma, "figma", "w3c", "brand")
    assert back == w3c


def test_case_14_iter_leaves_order():
    paths = [path for path, _ in iter_leaves(TREE)]
    assert paths == [("primary", "50"), ("primary", "500"), ("semantic", "error")]


# ── detection ─────────────────────────────────────────────────────────────────
@pytest.mark.parametrize(
    "content, expected",
    [
        ({"colors": {"brand": {"$value": "#fff", "$type": "color"}}}, "w3c"),
        ({"color": {"brand": {"value": "#fff"}}}, "style-dictionary"),
        ({"global": {"brand": {"value": "#fff", "type": "color"}}}, "tokens-studio"),
        ({"tokens": {"brand/500": {"value": "#fff", "type": "color"}}}, "figma"),
        ({"something": "else"}, None),
        ([1, 2, 3], None),
    ],
)
def test_case_15_detect_document_format(content, expected):
    found = detect_document_format(content)
    assert (found.name if found else None) == expected


def test_case_16_detect_format_from_directory(tmp_path):
    (tmp_path / "notes.txt").write_text("not json", encoding="utf-8")
    (tmp_path / "a_broken.json").write_text("{oops", encoding="utf-8")
    (tmp_path / "b_tokens.json").write_text(json.dumps(convert(TREE, "figma")), encoding="utf-8")
    found = detect_format(tmp_path)
    assert found is not None and found.name == "figma"


def test_case_17_detect_format_first_file_wins(tmp_path):
    (tmp_path / "b.json").write_text(json.dumps(convert(TREE, "w3c")), encoding="utf-8")
    (tmp_path / "a.json").write_text(json.dumps(convert(TREE, "tokens-studio")), encoding="utf-8")
    assert detect_format(tmp_path).name == "tokens-studio"


def test_case_18_detect_format_returns_none(tmp_path):
    assert detect_format(tmp_path) is None
    assert detect_format(tmp_path / "missing") is None
    (tmp_path / "x.json").write_text('{"unrelated": 1}', encoding="utf-8")
    assert detect_format(tmp_path) is None
