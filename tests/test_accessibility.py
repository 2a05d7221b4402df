# tests/test_accessibility.py
import pytest

from palette_intelligence.engine.accessibility import color_blindness as cb
from palette_intelligence.engine.accessibility.analyzer import analyze
from palette_intelligence.engine.accessibility.contrast import contrast_ratio, evaluate_pair, relative_luminance


# ── Contrast ──────────────────────────────────────────────────────────────────
def test_case_01_contrast_extremes_and_symmetry():
    assert contrast_ratio("#000000", "#ffffff") == pytest.approx(21.0)
    assert contrast_ratio("#ffffff", "#ffffff") == pytest.approx(1.0)
    assert contrast_ratio("#3b82f6", "#ffffff") == contrast_ratio("#ffffff", "#3b82f6")
    assert relative_luminance("#ffffff") == pytest.approx(1.0)
    assert relative_luminance("#000000") == 0.0


def test_case_02_known_ratio_and_thresholds():
    # #767676 on white is the classic 4.54:1 AA boundary gray
    res = evaluate_pair("#767676", "#fff")
    assert res.ratio == pytest.approx(4.54, abs=0.01)
    assert res.passes_aa and res.passes_aa_large and res.passes_aaa_large
    assert not res.passes_aaa

    res = evaluate_pair("#949494", "#ffffff")  # ≈ 3.03:1
    assert res.passes_aa_large and not res.passes_aa and not res.passes_aaa_large


# ── Color blindness ───────────────────────────────────────────────────────────
def test_case_03_matrices_keep_grays_gray():
    for deficiency in cb.DEFICIENCIES:
        assert cb.simulate("#ffffff", deficiency) == "#ffffff"
        assert cb.simulate("#000000", deficiency) == "#000000"


def test_case_04_delta_e76_basics():
    assert cb.delta_e76("#3b82f6", "#3b82f6") == 0.0
    assert cb.delta_e76("#000000", "#ffffff") == pytest.approx(100.0, abs=0.1)


def test_case_05_lightness_only_pairs_are_never_problematic():
    sim = cb.simulate_palette(["#000000", "#ffffff", "#808080"], "deuteranopia")
    assert sim.issues == ()
    assert set(sim.perceived) == {"#000000", "#ffffff", "#808080"}


# ── analyze ───────────────────────────────────────────────────────────────────
def test_case_06_black_and_white_report():
    report = analyze({"ink": "#000000", "paper": "#ffffff"})
    # identical fg/bg pairs are skipped: ink-on-white and paper-on-black only
    assert len(report.contrast) == 2
    assert report.wcag_compliance == "aaa"
    assert report.color_blindness.score == 100.0
    assert report.score == 100
    assert report.degraded is False
    assert report.matrix()["#000000"]["#ffffff"] == pytest.approx(21.0)


def test_case_07_compliance_levels():
    assert analyze(["#767676"], backgrounds=["#ffffff"]).wcag_compliance == "aa"
    assert analyze(["#767676", "#cccccc"], backgrounds=["#ffffff"]).wcag_compliance == "partial"
    assert analyze(["#eeeeee"], backgrounds=["#ffffff"]).wcag_compliance == "none"
    assert analyze([]).wcag_compliance == "none"


def test_case_08_invalid_inputs_degrade_instead_of_raising():
    report = analyze({"good": "#3b82f6", "bad": "not-a-color", "worse": 42})
    assert report.degraded is True
    assert len(report.excluded) == 2
    assert report.colors == {"good": "#3b82f6"}
    assert any(r.category == "analysis" for r in report.recommendations)


@pytest.mark.parametrize("bad_background", ["nope", None])
def test_case_08b_invalid_background_degrades_instead_of_raising(bad_background):
    report = analyze({"a": "#3b82f6"}, backgrounds=("#ffffff", bad_background))
    assert report.degraded is True
    assert report.excluded == (f"background 1={bad_background!r}",)
    assert [c.background for c in report.contrast] == ["#ffffff"]
    assert any(r.category == "analysis" for r in report.recommendations)


def test_case_09_score_formula():
    report = analyze(["#3b82f6", "#ef4444", "#10b981"])
    expected = round(0.6 * report.aa_pass_rate * 100 + 0.4 * report.color_blindness.score)
    assert report.score == max(0, min(100, expected))
    assert 0 <= report.score <= 100


def test_case_10_single_color_has_perfect_color_blind_score():
    report = analyze(["#3b82f6"])
    assert report.color_blindness.intended_pair_count == 0
    assert report.color_blindness.score == 100.0


def test_case_11_problematic_pairs_lower_the_score(monkeypatch):
    # raise the "looks the same" threshold so every intended pair collapses
    monkeypatch.setattr(cb, "JUST_NOTICEABLE_DELTA_E", 1000.0)
    report = analyze(["#3b82f6", "#ef4444", "#10b981"])
    assert report.color_blindness.score == 0.0
    assert len(report.color_blindness.problematic_pairs) == report.color_blindness.intended_pair_count == 3
    assert all(s.severity in ("moderate", "severe") for s in report.color_blindness.simulations.values())
    categories = [r.category for r in report.recommendations]
    assert "color-blindness" in categories


def test_case_12_recommendations_sorted_and_capped():
    report = analyze(["#eeeeee", "#dddddd", "#cccccc", "#bbbbbb", "#aaaaaa"], backgrounds=["#ffffff"])
    order = {"critical": 0, "high": 1, "medium": 2, "low": 3}
    ranks = [order[r.priority] for r in report.recommendations]
    assert ranks == sorted(ranks)
    assert sum(1 for r in report.recommendations if r.category == "contrast") <= 3
    assert report.recommendations[0].priority == "critical"


def test_case_13_report_to_dict_is_json_ready():
    import json

    report = analyze({"primary": "#3b82f6"})
    data = report.to_dict()
    json.dumps(data)
    assert set(data) >= {"score", "wcag_compliance", "contrast", "color_blindness", "recommendations", "degraded"}
    assert set(data["color_blindness"]["simulations"]) == {"protanopia", "deuteranopia", "tritanopia"}
