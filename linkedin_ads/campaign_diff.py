"""Side-by-side comparison of two campaigns: top-level fields and targeting facets."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, Mapping, Optional, Sequence

from linkedin_ads.campaign_targeting import short_facet_name
from linkedin_ads.models import Campaign, Locale, Money, TargetingCriteria


@dataclass
class FacetDiff:
    """Values of one facet found only in A, only in B, or in both."""

    facet: str
    only_a: list[str] = field(default_factory=list)
    only_b: list[str] = field(default_factory=list)
    shared: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class CampaignRef:
    id: int
    name: str


@dataclass(frozen=True)
class TopLevelChange:
    a: Any
    b: Any


@dataclass
class CampaignDiff:
    """Structured diff shared by the terminal and JSON renderers."""

    a: CampaignRef
    b: CampaignRef
    top_level: dict[str, TopLevelChange] = field(default_factory=dict)
    include: list[FacetDiff] = field(default_factory=list)
    exclude: list[FacetDiff] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "a": {"id": self.a.id, "name": self.a.name},
            "b": {"id": self.b.id, "name": self.b.name},
            "topLevel": {k: {"a": v.a, "b": v.b} for k, v in self.top_level.items()},
            "targeting": {
                "include": [_facet_dict(d) for d in self.include],
                "exclude": [_facet_dict(d) for d in self.exclude],
            },
        }


def _facet_dict(diff: FacetDiff) -> dict[str, Any]:
    out: dict[str, Any] = {"facet": diff.facet}
    if diff.only_a:
        out["only_a"] = list(diff.only_a)
    if diff.only_b:
        out["only_b"] = list(diff.only_b)
    if diff.shared:
        out["shared"] = list(diff.shared)
    return out


def money_text(money: Optional[Money]) -> str:
    """"<amount> <currency>", or "" when unset."""
    if money is None:
        return ""
    return f"{money.amount} {money.currency_code}"


def locale_text(locale: Optional[Locale]) -> str:
    """"lang_COUNTRY", or "" when unset."""
    if locale is None:
        return ""
    return f"{locale.language}_{locale.country}"


def unique_sorted(values: Optional[Iterable[str]]) -> list[str]:
    """Deduplicated values in sorted order."""
    return sorted(set(values or ()))


def diff_string_sets(a: Sequence[str], b: Sequence[str]) -> tuple[list[str], list[str], list[str]]:
    """Return (only in a, only in b, in both), keeping the input order."""
    a_set, b_set = set(a), set(b)
    only_a = [v for v in a if v not in b_set]
    shared = [v for v in a if v in b_set]
    only_b = [v for v in b if v not in a_set]
    return only_a, only_b, shared


def diff_facet_maps(
    a: Mapping[str, Sequence[str]], b: Mapping[str, Sequence[str]]
) -> list[FacetDiff]:
    """One FacetDiff per facet in either map, sorted by facet name."""
    out = []
    for facet in sorted(set(a) | set(b)):
        only_a, only_b, shared = diff_string_sets(unique_sorted(a.get(facet)), unique_sorted(b.get(facet)))
        out.append(FacetDiff(facet=facet, only_a=only_a, only_b=only_b, shared=shared))
    return out


def _facets(criteria: Optional[TargetingCriteria], include: bool) -> dict[str, list[str]]:
    if criteria is None:
        return {}
    return criteria.included_facets() if include else criteria.excluded_facets()


def build_campaign_diff(a: Campaign, b: Campaign) -> CampaignDiff:
    """Compare top-level fields and include/exclude facets of two campaigns."""
    diff = CampaignDiff(a=CampaignRef(a.id, a.name), b=CampaignRef(b.id, b.name))
    for name, x, y in (
        ("status", a.status, b.status),
        ("objectiveType", a.objective, b.objective),
        ("costType", a.cost_type, b.cost_type),
        ("dailyBudget", money_text(a.daily_budget), money_text(b.daily_budget)),
        ("unitCost", money_text(a.unit_cost), money_text(b.unit_cost)),
        ("locale", locale_text(a.locale), locale_text(b.locale)),
    ):
        if str(x) != str(y):
            diff.top_level[name] = TopLevelChange(x, y)
    diff.include = diff_facet_maps(
        _facets(a.targeting_criteria, True), _facets(b.targeting_criteria, True)
    )
    diff.exclude = diff_facet_maps(
        _facets(a.targeting_criteria, False), _facets(b.targeting_criteria, False)
    )
    return diff


def abbreviate_values(values: Sequence[str]) -> str:
    """Comma-join up to three values; longer lists end in "... (N more)"."""
    if len(values) <= 3:
        return ", ".join(values)
    return f"{', '.join(values[:3])} ... ({len(values) - 3} more)"


def _plural(n: int) -> str:
    return "value" if n == 1 else "values"


def _top_level_value(value: Any) -> str:
    if value == "":
        return "(unset)"
    return str(value)


def _facet_diff_lines(diffs: Sequence[FacetDiff]) -> list[str]:
    lines: list[str] = []
    for d in diffs:
        if not (d.only_a or d.only_b or d.shared):
            continue
        lines.append(f"  {short_facet_name(d.facet)}:\n")
        for label, vals in (("A only", d.only_a), ("B only", d.only_b), ("shared", d.shared)):
            if vals:
                lines.append(f"    {label}: {len(vals)} {_plural(len(vals))} ({abbreviate_values(vals)})\n")
    return lines or ["  (no facets)\n"]


def format_campaign_diff(diff: CampaignDiff) -> str:
    """Render the human-readable diff block."""
    parts = [
        "━━━ Campaign diff ━━━\n",
        f"A: {diff.a.name} ({diff.a.id})\n",
        f"B: {diff.b.name} ({diff.b.id})\n",
        "\nTOP-LEVEL:\n",
    ]
    if not diff.top_level:
        parts.append("  (no differences)\n")
    for key in sorted(diff.top_level):
        change = diff.top_level[key]
        parts.append(
            f"  {key}:\n    A: {_top_level_value(change.a)}\n    B: {_top_level_value(change.b)}\n"
        )
    parts.append("\nTARGETING — INCLUDE:\n")
    parts.extend(_facet_diff_lines(diff.include))
    parts.append("\nTARGETING — EXCLUDE:\n")
    parts.extend(_facet_diff_lines(diff.exclude))
    return "".join(parts)