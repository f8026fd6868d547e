import json

from linkedin_ads.campaign_diff import (
    abbreviate_values,
    build_campaign_diff,
    diff_facet_maps,
    diff_string_sets,
    format_campaign_diff,
    locale_text,
    money_text,
    unique_sorted,
)
from linkedin_ads.formatting import render_json
from linkedin_ads.models import Campaign, Locale, Money, TargetingCriteria

TITLES = "urn:li:adTargetingFacet:titles"
LOCATIONS = "urn:li:adTargetingFacet:profileLocations"


def test_diff_string_sets_basic():
    only_a, only_b, shared = diff_string_sets(unique_sorted(["x", "y", "z"]), unique_sorted(["y", "z", "w"]))
    assert only_a == ["x"]
    assert only_b == ["w"]
    assert shared == ["y", "z"]


def test_unique_sorted_dedupes():
    assert unique_sorted(["b", "a", "b"]) == ["a", "b"]
    assert unique_sorted(None) == []


def test_build_campaign_diff_top_level_and_targeting():
    a = Campaign(
        id=1, name="A", status="ACTIVE", objective="WEBSITE_VISIT", cost_type="CPM",
        daily_budget=Money(amount="100", currency_code="USD"),
        targeting_criteria=TargetingCriteria(include=[{
            TITLES: ["urn:li:title:1", "urn:li:title:2", "urn:li:title:3"],
            LOCATIONS: ["urn:li:geo:101"],
        }]),
    )
    b = Campaign(
        id=2, name="B", status="PAUSED", objective="WEBSITE_VISIT", cost_type="CPC",
        daily_budget=Money(amount="100", currency_code="USD"),
        targeting_criteria=TargetingCriteria(include=[{
            TITLES: ["urn:li:title:2", "urn:li:title:4"],
            LOCATIONS: ["urn:li:geo:101"],
        }]),
    )
    diff = build_campaign_diff(a, b)
    assert "status" in diff.top_level
    assert "costType" in diff.top_level
    assert "dailyBudget" not in diff.top_level
    assert "objectiveType" not in diff.top_level
    titles = next(d for d in diff.include if d.facet == TITLES)
    assert len(titles.only_a) == 2
    assert len(titles.only_b) == 1
    assert len(titles.shared) == 1
    assert diff.exclude == []


def _pair():
    a = Campaign.from_dict({
        "id": 10, "name": "Architect", "status": "ACTIVE", "objectiveType": "WEBSITE_VISIT",
        "costType": "CPM",
        "targetingCriteria": {"include": {"and": [{"or": {TITLES: ["urn:li:title:1", "urn:li:title:2"]}}]}},
    })
    b = Campaign.from_dict({
        "id": 20, "name": "Developer", "status": "PAUSED", "objectiveType": "WEBSITE_VISIT",
        "costType": "CPM",
        "targetingCriteria": {"include": {"and": [{"or": {TITLES: ["urn:li:title:2", "urn:li:title:3"]}}]}},
    })
    return a, b


def test_format_campaign_diff_terminal():
    text = format_campaign_diff(build_campaign_diff(*_pair()))
    for want in (
        "━━━ Campaign diff ━━━",
        "A: Architect (10)",
        "B: Developer (20)",
        "status:",
        "titles:",
        "A only: 1",
        "B only: 1",
        "shared: 1",
    ):
        assert want in text
    assert "    A only: 1 value (urn:li:title:1)\n" in text
    assert "TARGETING — EXCLUDE:\n  (no facets)\n" in text


def test_campaign_diff_json():
    data = json.loads(render_json(build_campaign_diff(*_pair())))
    assert data["a"]["id"] == 10
    assert data["b"]["id"] == 20
    assert data["topLevel"]["status"] == {"a": "ACTIVE", "b": "PAUSED"}
    assert data["targeting"]["include"][0]["only_a"] == ["urn:li:title:1"]
    assert data["targeting"]["exclude"] == []


def test_unset_values_and_no_differences():
    a = Campaign(id=1, name="A", locale=Locale(language="en", country="US"))
    b = Campaign(id=2, name="B")
    text = format_campaign_diff(build_campaign_diff(a, b))
    assert "  locale:\n    A: en_US\n    B: (unset)\n" in text
    same = format_campaign_diff(build_campaign_diff(b, b))
    assert "TOP-LEVEL:\n  (no differences)\n" in same


def test_abbreviate_values():
    assert abbreviate_values(["a", "b", "c"]) == "a, b, c"
    assert abbreviate_values(["a", "b", "c", "d", "e"]) == "a, b, c ... (2 more)"


def test_money_and_locale_text():
    assert money_text(None) == ""
    assert money_text(Money(currency_code="USD", amount="50")) == "50 USD"
    assert locale_text(None) == ""
    assert locale_text(Locale(language="fr", country="FR")) == "fr_FR"


def test_diff_facet_maps_union_sorted():
    diffs = diff_facet_maps({"b": ["1"]}, {"a": ["2"]})
    assert [d.facet for d in diffs] == ["a", "b"]
    assert diffs[0].only_b == ["2"] and diffs[1].only_a == ["1"]