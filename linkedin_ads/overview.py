"""One-screen account snapshot: resource counts, last-7-day totals and leaders."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any, Iterable, Optional, Sequence

from linkedin_ads.formatting import format_int, format_money, truncate
from linkedin_ads.models import Account, AnalyticsRow, Campaign, CampaignGroup

_CAMPAIGN_PREFIX = "urn:li:sponsoredCampaign:"
_INTEGER = re.compile(r"[+-]?[0-9]+")


def _parse_float(text: str) -> Optional[float]:
    if not text or text != text.strip() or "_" in text:
        return None
    try:
        return float(text)
    except ValueError:
        return None


def _cost(row: AnalyticsRow) -> float:
    value = _parse_float(row.cost_in_usd)
    return value if value is not None else 0.0


def _campaign_id(row: AnalyticsRow) -> Optional[int]:
    urn = row.pivot_display()
    if not urn.startswith(_CAMPAIGN_PREFIX):
        return None
    tail = urn[len(_CAMPAIGN_PREFIX):]
    if not _INTEGER.fullmatch(tail):
        return None
    return int(tail)


@dataclass
class TopRow:
    """A top-N entry ranked by spend or by leads; cpl is set for the leads ranking."""

    name: str
    spend: float = 0.0
    leads: int = 0
    cpl: float = 0.0

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {"name": self.name}
        if self.spend:
            out["spend"] = self.spend
        if self.leads:
            out["leads"] = self.leads
        if self.cpl:
            out["cpl"] = self.cpl
        return out


@dataclass
class Overview:
    """Account snapshot rendered by the overview command."""

    account: Account
    campaign_groups: dict[str, int]
    campaigns: dict[str, int]
    spend_last_7d: float = 0.0
    impressions_last_7d: int = 0
    clicks_last_7d: int = 0
    top_spend: list[TopRow] = field(default_factory=list)
    top_leads: list[TopRow] = field(default_factory=list)
    budget_cap: float = 0.0
    budget_utilization: float = 0.0
    conversion_tracking: str = ""
    analytics_unavailable: bool = False

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {
            "account": {
                "id": self.account.id,
                "name": self.account.name,
                "currency": self.account.currency,
            },
            "campaign_groups": dict(self.campaign_groups),
            "campaigns": dict(self.campaigns),
            "spend_last_7d": self.spend_last_7d,
            "impressions_last_7d": self.impressions_last_7d,
            "clicks_last_7d": self.clicks_last_7d,
        }
        if self.top_spend:
            out["top_spend"] = [t.to_dict() for t in self.top_spend]
        if self.top_leads:
            out["top_leads"] = [t.to_dict() for t in self.top_leads]
        if self.budget_cap:
            out["budget_cap"] = self.budget_cap
        if self.budget_utilization:
            out["budget_utilization"] = self.budget_utilization
        if self.conversion_tracking:
            out["conversion_tracking"] = self.conversion_tracking
        if self.analytics_unavailable:
            out["analytics_unavailable"] = True
        return out


def count_campaign_groups(groups: Sequence[CampaignGroup]) -> dict[str, int]:
    """Counts of ACTIVE groups and of all groups."""
    return {
        "active": sum(1 for g in groups if g.status == "ACTIVE"),
        "total": len(groups),
    }


def count_campaigns(campaigns: Sequence[Campaign]) -> dict[str, int]:
    """Counts of ACTIVE, PAUSED and all campaigns."""
    return {
        "active": sum(1 for c in campaigns if c.status == "ACTIVE"),
        "paused": sum(1 for c in campaigns if c.status == "PAUSED"),
        "total": len(campaigns),
    }


def sum_analytics(rows: Iterable[AnalyticsRow]) -> tuple[float, int, int]:
    """Total (spend, impressions, clicks); unparseable costs count as zero."""
    spend = 0.0
    impressions = 0
    clicks = 0
    for row in rows:
        spend += _cost(row)
        impressions += row.impressions
        clicks += row.clicks
    return spend, impressions, clicks


def top3_campaigns_by_spend(campaigns: Sequence[Campaign], rows: Sequence[AnalyticsRow]) -> list[TopRow]:
    """Active campaigns with positive spend, highest first, at most three."""
    spend_by_id: dict[int, float] = {}
    for row in rows:
        ident = _campaign_id(row)
        if ident is not None:
            spend_by_id[ident] = spend_by_id.get(ident, 0.0) + _cost(row)
    ranked = [
        TopRow(name=c.name, spend=spend_by_id[c.id])
        for c in campaigns
        if c.status == "ACTIVE" and spend_by_id.get(c.id, 0.0) > 0
    ]
    ranked.sort(key=lambda t: t.spend, reverse=True)
    return ranked[:3]


def top3_campaigns_by_leads(campaigns: Sequence[Campaign], rows: Sequence[AnalyticsRow]) -> list[TopRow]:
    """Active campaigns by one-click leads plus website conversions, at most three."""
    leads_by_id: dict[int, int] = {}
    spend_by_id: dict[int, float] = {}
    for row in rows:
        ident = _campaign_id(row)
        if ident is None:
            continue
        leads_by_id[ident] = leads_by_id.get(ident, 0) + row.one_click_leads + row.conversions
        spend_by_id[ident] = spend_by_id.get(ident, 0.0) + _cost(row)
    ranked: list[TopRow] = []
    for c in campaigns:
        if c.status != "ACTIVE":
            continue
        leads = leads_by_id.get(c.id, 0)
        if leads == 0:
            continue
        cpl = spend_by_id.get(c.id, 0.0) / leads if leads > 0 else 0.0
        ranked.append(TopRow(name=c.name, leads=leads, cpl=cpl))
    ranked.sort(key=lambda t: t.leads, reverse=True)
    return ranked[:3]


def infer_conversion_tracking_status(rows: Iterable[AnalyticsRow]) -> str:
    """IDLE without spend, BROKEN when spend brought no conversions or leads, else OK."""
    total_spend = 0.0
    total_conversions = 0
    total_leads = 0
    for row in rows:
        total_spend += _cost(row)
        total_conversions += row.conversions
        total_leads += row.one_click_leads
    if total_spend == 0:
        return "IDLE"
    if total_conversions == 0 and total_leads == 0:
        return "BROKEN"
    return "OK"


def build_overview(
    account: Account,
    groups: Sequence[CampaignGroup],
    campaigns: Sequence[Campaign],
    rows: Sequence[AnalyticsRow],
    analytics_available: bool = True,
) -> Overview:
    """Assemble the snapshot; without analytics only the counts are filled in."""
    usable_rows: Sequence[AnalyticsRow] = rows if analytics_available else ()
    spend, impressions, clicks = sum_analytics(usable_rows)
    overview = Overview(
        account=account,
        campaign_groups=count_campaign_groups(groups),
        campaigns=count_campaigns(campaigns),
        spend_last_7d=spend,
        impressions_last_7d=impressions,
        clicks_last_7d=clicks,
        analytics_unavailable=not analytics_available,
    )
    if not analytics_available:
        return overview
    overview.top_spend = top3_campaigns_by_spend(campaigns, usable_rows)
    overview.top_leads = top3_campaigns_by_leads(campaigns, usable_rows)
    daily_cap = 0.0
    for c in campaigns:
        if c.status == "ACTIVE" and c.daily_budget is not None:
            value = _parse_float(c.daily_budget.amount)
            if value is not None:
                daily_cap += value
    overview.budget_cap = daily_cap * 7
    if overview.budget_cap > 0:
        overview.budget_utilization = spend / overview.budget_cap * 100
    overview.conversion_tracking = infer_conversion_tracking_status(usable_rows)
    return overview


def format_overview(overview: Overview) -> str:
    """Render the terminal snapshot."""
    o = overview
    parts = [
        f"Account:             {o.account.name} ({o.account.id})\n",
        f"Currency:            {o.account.currency}\n",
        "\n",
        f"Campaign Groups:     {o.campaign_groups.get('active', 0)} active / "
        f"{o.campaign_groups.get('total', 0)} total\n",
        f"Campaigns:           {o.campaigns.get('active', 0)} active / "
        f"{o.campaigns.get('paused', 0)} paused / {o.campaigns.get('total', 0)} total\n",
    ]
    if o.analytics_unavailable:
        parts.append("\nLast 7d:\n  (unavailable)\n")
        return "".join(parts)
    parts.append("\nLast 7d:\n")
    parts.append(f"  Spend:             {format_money(o.spend_last_7d)}\n")
    parts.append(f"  Impressions:       {format_int(o.impressions_last_7d)}\n")
    parts.append(f"  Clicks:            {format_int(o.clicks_last_7d)}\n")
    if o.top_spend:
        parts.append("\nTop 3 by spend:\n")
        for t in o.top_spend:
            parts.append(f"  {truncate(t.name, 30):<30s} {format_money(t.spend)}\n")
    if o.top_leads:
        parts.append("\nTop 3 by leads:\n")
        for t in o.top_leads:
            cpl = f" ({format_money(t.cpl)} CPL)" if t.cpl > 0 else ""
            parts.append(f"  {truncate(t.name, 30):<30s} {t.leads} leads{cpl}\n")
    if o.budget_cap > 0:
        parts.append(
            f"\nBudget utilization:  {format_money(o.spend_last_7d)} / "
            f"{format_money(o.budget_cap)} cap ({o.budget_utilization:.0f}%)\n"
        )
    if o.conversion_tracking:
        icon = "⚠️" if o.conversion_tracking in ("BROKEN", "WARN") else "✓"
        parts.append(f"Conversion tracking: {icon} {o.conversion_tracking}\n")
    return "".join(parts)