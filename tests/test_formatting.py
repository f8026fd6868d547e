import json
from dataclasses import dataclass

import pytest

from linkedin_ads.formatting import (
    apply_compact,
    apply_limit,
    format_int,
    format_money,
    format_money_string,
    format_percent,
    pretty_raw_json,
    render_json,
    render_output,
    render_output_with_resolved,
    truncate,
    truncate_urn,
)


@dataclass
class Item:
    id: int
    name: str


def test_render_output_json():
    out = render_output([Item(1, "a"), Item(2, "b")], lambda: "terminal", json_output=True)
    assert '"id": 1' in out
    assert "terminal" not in out


def test_render_output_terminal():
    out = render_output([Item(1, "a")], lambda: "TERMINAL")
    assert out == "TERMINAL"


def test_render_output_limit():
    out = render_output([Item(1, "a"), Item(2, "b"), Item(3, "c")], lambda: "", json_output=True, limit=2)
    assert '"id": 3' not in out
    assert len(json.loads(out)) == 2


def test_render_output_compact():
    out = render_output(
        [Item(1, "a")], lambda: "", json_output=True, compact=True,
        projector=lambda item: {"id": item.id},
    )
    assert "name" not in out and '"a"' not in out
    assert '"id": 1' in out


def test_render_output_compact_without_projector_is_noop():
    out = render_output([Item(1, "a")], lambda: "", json_output=True, compact=True)
    assert '"name": "a"' in out


def test_apply_limit_default_is_passthrough():
    items = [1, 2, 3]
    assert apply_limit(items, 0) == [1, 2, 3]
    assert apply_limit({"a": 1}, 1) == {"a": 1}


def test_apply_compact_single_value():
    assert apply_compact(Item(7, "x"), lambda item: item.id) == 7
    assert apply_compact([Item(1, "a"), Item(2, "b")], lambda item: item.name) == ["a", "b"]


def test_render_with_resolved_envelope():
    out = render_output_with_resolved(
        [{"id": 10}], {"urn:li:sponsoredCampaignGroup:111": "Q1 Push"}, lambda: "T", json_output=True
    )
    decoded = json.loads(out)
    assert decoded["data"] == [{"id": 10}]
    assert decoded["_resolved"]["urn:li:sponsoredCampaignGroup:111"] == "Q1 Push"


def test_render_with_resolved_degrades():
    assert render_output_with_resolved([{"id": 1}], {}, lambda: "T", json_output=False) == "T"
    assert render_output_with_resolved([{"id": 1}], {"u": "n"}, lambda: "T") == "T"
    out = render_output_with_resolved([{"id": 1}], None, lambda: "T", json_output=True)
    assert json.loads(out) == [{"id": 1}]


def test_render_json_round_trips_html_chars():
    out = render_json({"name": "a<b>&c"})
    assert "<" not in out
    assert json.loads(out) == {"name": "a<b>&c"}


def test_pretty_raw_json_keeps_untyped_fields():
    raw = '{"id":10,"pacingStrategy":"LIFETIME","changeAuditStamps":{"created":{"time":1700000000000}}}'
    out = pretty_raw_json(raw)
    assert '"pacingStrategy": "LIFETIME"' in out
    assert '"changeAuditStamps"' in out


def test_pretty_raw_json_rejects_invalid():
    with pytest.raises(ValueError):
        pretty_raw_json("{not json")


@pytest.mark.parametrize(
    "value,expected",
    [
        ("urn:li:sponsoredCampaign:420247104", "...sponsoredCampaign:4202…"),
        ("urn:li:sponsoredCampaign:42", "...sponsoredCampaign:42"),
        ("urn:li:sponsoredCampaignGroup:674217704", "...sponsoredCampaignGroup:6742…"),
        ("plain string", "plain string"),
        ("urn:li:title:1", "...title:1"),
    ],
)
def test_truncate_urn(value, expected):
    assert truncate_urn(value, 4) == expected


@pytest.mark.parametrize(
    "value,expected",
    [
        ("1406.4072831443331", "$1,406.41"),
        ("22.500000000000001", "$22.50"),
        ("0", "$0.00"),
        ("", ""),
        ("abc", "abc"),
        ("1000000.5", "$1,000,000.50"),
    ],
)
def test_format_money_string(value, expected):
    assert format_money_string(value) == expected


@pytest.mark.parametrize(
    "value,expected",
    [(0.0046, "0.46%"), (0.0, "0.00%"), (1.0, "100.00%"), (0.59, "59.00%")],
)
def test_format_percent(value, expected):
    assert format_percent(value) == expected


def test_format_money_values():
    assert format_money(183.45) == "$183.45"
    assert format_money(40) == "$40.00"
    assert format_money(-5.25).startswith("-$")


def test_format_int():
    assert format_int(15000) == "15,000"
    assert format_int(75) == "75"
    assert format_int(-1234567) == "-1,234,567"


def test_truncate_invariants():
    assert truncate("short", 19) == "short"
    cut = truncate("a rather long campaign name", 19)
    assert len(cut) == 19
    assert cut.startswith("a rather long")
    assert truncate("anything", 0) == ""