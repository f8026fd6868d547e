"""Campaign targeting criteria: summaries, terminal breakdowns and JSON payloads."""

from __future__ import annotations

from typing import Any, Callable, Iterable, Mapping, Optional, Sequence

from linkedin_ads.models import Campaign

Resolver = Callable[[str], str]

_FACET_PREFIX = "urn:li:adTargetingFacet:"


def short_facet_name(facet: str) -> str:
    """Strip the urn:li:adTargetingFacet: prefix from a facet URN."""
    if facet.startswith(_FACET_PREFIX):
        return facet[len(_FACET_PREFIX):]
    return facet


def summarize_facets(facets: Mapping[str, Sequence[str]]) -> str:
    """Render facets as "name(n), ..." sorted by facet; "" when there are none."""
    return ", ".join(f"{short_facet_name(k)}({len(facets[k])})" for k in sorted(facets))


def _facet_lines(facets: Mapping[str, Sequence[str]], resolver: Optional[Resolver]) -> Iterable[str]:
    for key in sorted(facets):
        values = facets[key]
        yield f"  {short_facet_name(key)} ({len(values)})\n"
        for value in values:
            name = resolver(value) if resolver is not None else ""
            if name and name != value:
                yield f"    {value} — {name}\n"
            else:
                yield f"    {value}\n"


def format_targeting(campaign: Campaign, resolver: Optional[Resolver] = None) -> str:
    """Render a campaign's INCLUDE/EXCLUDE facets; resolved names follow an em-dash."""
    parts = [f"Targeting for {campaign.name} ({campaign.id})\n"]
    criteria = campaign.targeting_criteria
    if criteria is None:
        parts.append("\n(no targeting criteria)\n")
        return "".join(parts)
    inc = criteria.included_facets()
    exc = criteria.excluded_facets()
    if not inc and not exc:
        parts.append("\n(empty targeting criteria)\n")
        return "".join(parts)
    if inc:
        parts.append("\nINCLUDE:\n")
        parts.extend(_facet_lines(inc, resolver))
    if exc:
        parts.append("\nEXCLUDE:\n")
        parts.extend(_facet_lines(exc, resolver))
    return "".join(parts)


def format_targeting_many(campaigns: Sequence[Campaign], resolver: Optional[Resolver] = None) -> str:
    """Render several campaigns, each under a banner when there is more than one."""
    multiple = len(campaigns) > 1
    parts: list[str] = []
    for position, campaign in enumerate(campaigns):
        if multiple:
            if position > 0:
                parts.append("\n")
            parts.append(f"━━━ {campaign.name} ({campaign.id}) ━━━\n")
        parts.append(format_targeting(campaign, resolver))
    return "".join(parts)


def _criteria_dict(campaign: Campaign) -> Optional[dict[str, Any]]:
    criteria = campaign.targeting_criteria
    return criteria.to_dict() if criteria is not None else None


def targeting_payload(campaigns: Sequence[Campaign]) -> Any:
    """JSON shape: the bare criteria for one campaign, a list of entries for several."""
    if len(campaigns) == 1:
        return _criteria_dict(campaigns[0])
    return [
        {"id": c.id, "name": c.name, "targetingCriteria": _criteria_dict(c)}
        for c in campaigns
    ]


def check_targeting_modes(ids: Sequence[str], all_active: bool = False, group_id: str = "") -> None:
    """Require exactly one of positional ids, all_active or group_id."""
    modes = sum((bool(ids), bool(all_active), bool(group_id)))
    if modes == 0:
        raise ValueError("provide at least one campaign id, --all-active, or --group <id>")
    if modes > 1:
        raise ValueError("positional ids, --all-active, and --group are mutually exclusive")


def active_campaign_ids(campaigns: Iterable[Campaign]) -> list[str]:
    """Ids of campaigns whose status is ACTIVE, compared case-insensitively."""
    return [str(c.id) for c in campaigns if c.status.casefold() == "active"]


def campaign_ids(campaigns: Iterable[Campaign]) -> list[str]:
    """Ids of every campaign, as strings, in order."""
    return [str(c.id) for c in campaigns]