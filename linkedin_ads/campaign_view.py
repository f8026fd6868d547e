"""Campaign listing, detail, create, update and delete helpers."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any, Iterable, Optional, Sequence

from linkedin_ads.formatting import format_money, truncate
from linkedin_ads.models import AnalyticsRow, Campaign, DateRange, Locale, Money

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_FACET_PREFIX = "urn:li:adTargetingFacet:"


def _parse_float(text: str) -> Optional[float]:
    if not text or text != text.strip() or "_" in text:
        return None
    try:
        return float(text)
    except ValueError:
        return None


def _wrap_urn(kind: str, ident: str) -> str:
    return ident if ident.startswith("urn:") else f"urn:li:{kind}:{ident}"


def _summarize(facets: dict[str, list[str]]) -> str:
    return ", ".join(
        f"{name[len(_FACET_PREFIX):] if name.startswith(_FACET_PREFIX) else name}({len(facets[name])})"
        for name in sorted(facets)
    )


def filter_by_status(campaigns: Iterable[Campaign], status: str = "", limit: int = 0) -> list[Campaign]:
    """Keep campaigns whose status matches case-insensitively, then cap at limit."""
    wanted = status.casefold()
    out = [c for c in campaigns if not status or c.status.casefold() == wanted]
    if limit > 0:
        out = out[:limit]
    return out


def format_campaign_list(campaigns: Sequence[Campaign], account_id: str) -> str:
    """Render the campaign table, or an actionable hint when there are none."""
    if not campaigns:
        return (
            f"No campaigns in account {account_id}.\n"
            "Create one with: linkedin-ads campaigns create --group <id> --name ... --daily-budget ...\n"
        )
    lines = ["ID         NAME                STATUS    TYPE                 OBJECTIVE          COST\n"]
    for c in campaigns:
        lines.append(
            f"{c.id:<10d} {truncate(c.name, 19):<19s} {c.status:<9s} "
            f"{truncate(c.type, 20):<20s} {truncate(c.objective, 18):<18s} {c.cost_type}\n"
        )
    return "".join(lines)


def format_campaign_get(
    campaign: Campaign,
    rows: Sequence[AnalyticsRow] = (),
    now: Optional[datetime] = None,
) -> str:
    """Render the detail block with targeting summary and 30-day pacing."""
    now = now or datetime.now(timezone.utc)
    c = campaign
    parts = [
        f"ID:             {c.id}\n"
        f"Name:           {c.name}\n"
        f"Status:         {c.status}\n"
        f"Type:           {c.type}\n"
        f"Objective:      {c.objective}\n"
        f"CostType:       {c.cost_type}\n"
        f"Group:          {c.campaign_group}\n"
        f"Account:        {c.account}\n"
    ]
    if c.targeting_criteria is not None:
        inc = _summarize(c.targeting_criteria.included_facets())
        exc = _summarize(c.targeting_criteria.excluded_facets())
        if inc or exc:
            parts.append("Targeting:\n")
            if inc:
                parts.append(f"  include: {inc}\n")
            if exc:
                parts.append(f"  exclude: {exc}\n")

    parts.append("\n")
    run_days = 0
    if c.run_schedule is not None and c.run_schedule.start > 0:
        started = _EPOCH + timedelta(milliseconds=c.run_schedule.start)
        run_days = max(0, int((now - started).total_seconds() / 86400))
        parts.append(f"Run duration:   {run_days} days (started {started:%Y-%m-%d})\n")

    daily_budget = 0.0
    if c.daily_budget is not None:
        value = _parse_float(c.daily_budget.amount)
        if value is not None:
            daily_budget = value
            parts.append(f"Daily budget:   {format_money(value)}\n")

    spend = sum(v for v in (_parse_float(r.cost_in_usd) for r in rows) if v is not None)
    if daily_budget > 0 or spend > 0 or rows:
        parts.append(f"Last 30d spend: {format_money(spend)}\n")
    if daily_budget > 0 and (run_days > 0 or spend > 0):
        denom = run_days if 0 < run_days <= 30 else 30
        avg = spend / denom
        pct = avg / daily_budget * 100
        parts.append(f"Avg daily:      {format_money(avg)} ({pct:.0f}% of cap)\n")
    if c.serving_statuses:
        parts.append(f"Serving:        {', '.join(c.serving_statuses)}\n")
    return "".join(parts)


def parse_locale(text: str) -> Optional[Locale]:
    """Parse "lang_COUNTRY" into a Locale; empty input gives None."""
    if text == "":
        return None
    pieces = text.split("_")
    if len(pieces) != 2 or not pieces[0] or not pieces[1]:
        raise ValueError(f'invalid --locale "{text}" (want lang_COUNTRY, e.g. en_US)')
    return Locale(language=pieces[0], country=pieces[1])


def unique_campaign_group_urns(campaigns: Iterable[Campaign]) -> list[str]:
    """Non-empty campaign group URNs, deduplicated in first-seen order."""
    return list(dict.fromkeys(c.campaign_group for c in campaigns if c.campaign_group))


def build_create_payload(
    account_id: str,
    group_id: str,
    name: str,
    daily_budget: int,
    objective: str,
    campaign_type: str,
    cost_type: str = "CPM",
    currency: str = "USD",
    locale: str = "en_US",
    run_schedule: Optional[DateRange] = None,
) -> dict[str, Any]:
    """Body for creating a campaign; new campaigns always start as DRAFT."""
    parsed_locale = parse_locale(locale)
    payload: dict[str, Any] = {
        "account": _wrap_urn("sponsoredAccount", account_id),
        "campaignGroup": _wrap_urn("sponsoredCampaignGroup", group_id),
        "name": name,
        "status": "DRAFT",
        "type": campaign_type,
        "objectiveType": objective,
        "costType": cost_type,
    }
    if parsed_locale is not None:
        payload["locale"] = parsed_locale.to_dict()
    payload["dailyBudget"] = Money(currency_code=currency, amount=str(int(daily_budget))).to_dict()
    if run_schedule is not None:
        payload["runSchedule"] = run_schedule.to_dict()
    return payload


@dataclass(frozen=True)
class FieldDiff:
    field: str
    old: str
    new: str


def format_money_value(money: Optional[Money]) -> str:
    """Render money as "<amount> <currency>", or "(none)" when unset."""
    if money is None:
        return "(none)"
    return f"{money.amount} {money.currency_code}"


def build_update_patch(
    current: Campaign,
    name: Optional[str] = None,
    status: Optional[str] = None,
    daily_budget: Optional[int] = None,
    bid: Optional[int] = None,
    currency: str = "USD",
) -> tuple[dict[str, Any], list[FieldDiff]]:
    """Compare requested values against the current campaign.

    Returns the partial-update payload and the list of fields that change.
    Arguments left as None were not requested.
    """
    changes: dict[str, Any] = {}
    diffs: list[FieldDiff] = []
    if status is not None and status != current.status:
        changes["status"] = status
        diffs.append(FieldDiff("status", current.status, status))
    if name is not None and name != current.name:
        changes["name"] = name
        diffs.append(FieldDiff("name", current.name, name))
    for label, key, amount, existing in (
        ("dailyBudget", "dailyBudget", daily_budget, current.daily_budget),
        ("bid", "unitCost", bid, current.unit_cost),
    ):
        if amount is None:
            continue
        new_money = Money(currency_code=currency, amount=str(int(amount)))
        old_text, new_text = format_money_value(existing), format_money_value(new_money)
        if old_text != new_text:
            changes[key] = new_money.to_dict()
            diffs.append(FieldDiff(label, old_text, new_text))
    return {"patch": {"$set": changes}}, diffs


def format_field_diffs(header: str, diffs: Sequence[FieldDiff]) -> str:
    """Render a header followed by one "field: old  →  new" line per change."""
    lines = [f"{header}\n"]
    lines.extend(f"  {d.field}: {d.old}  →  {d.new}\n" for d in diffs)
    return "".join(lines)


@dataclass(frozen=True)
class DeletePlan:
    """How a campaign is removed: hard delete for drafts, soft delete otherwise."""

    hard_delete: bool
    summary: str
    payload: dict[str, Any]
    success_message: str


def plan_delete(account_id: str, campaign: Campaign) -> DeletePlan:
    """Choose hard or soft deletion from the campaign's current status."""
    ident = str(campaign.id)
    path = f"/adAccounts/{account_id}/adCampaigns/{ident}"
    if campaign.status == "DRAFT":
        return DeletePlan(
            hard_delete=True,
            summary=f"DELETE {path}",
            payload={"id": ident},
            success_message=f"Deleted campaign {ident}\n",
        )
    return DeletePlan(
        hard_delete=False,
        summary=f"POST {path} (soft-delete)",
        payload={"patch": {"$set": {"status": "PENDING_DELETION"}}},
        success_message=(
            f"Campaign {ident} set to PENDING_DELETION (non-draft cannot be hard-deleted)\n"
        ),
    )