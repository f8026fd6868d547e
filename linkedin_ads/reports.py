"""Terminal tables for conversion definitions, lead forms and their performance."""

from __future__ import annotations

from typing import Optional, Sequence

from linkedin_ads.formatting import (
    format_int,
    format_money,
    format_money_string,
    format_percent,
    truncate,
    truncate_urn,
)
from linkedin_ads.models import AnalyticsRow, Conversion, LeadForm


def _parse_float(text: str) -> Optional[float]:
    if not text or text != text.strip() or "_" in text:
        return None
    try:
        return float(text)
    except ValueError:
        return None


def _ctr_cpm(row: AnalyticsRow) -> tuple[float, float]:
    if row.impressions <= 0:
        return 0.0, 0.0
    ctr = row.clicks / row.impressions
    cost = _parse_float(row.cost_in_usd)
    cpm = cost / row.impressions * 1000 if cost is not None else 0.0
    return ctr, cpm


def format_conversion_list(conversions: Sequence[Conversion], account_id: str) -> str:
    """Render conversion definitions, or a hint when the account has none."""
    if not conversions:
        return f"No conversion definitions for account {account_id}.\n"
    lines = ["ID         NAME                TYPE         ENABLED  ATTRIBUTION\n"]
    for c in conversions:
        enabled = "true" if c.enabled else "false"
        lines.append(
            f"{c.id:<10d} {truncate(c.name, 19):<19s} {truncate(c.type, 12):<12s} "
            f"{enabled:<8s} {c.attribution_type}\n"
        )
    return "".join(lines)


def format_conversion_performance(rows: Sequence[AnalyticsRow], derived: bool = True) -> str:
    """Render per-conversion performance; derived adds CTR and CPM columns."""
    if derived:
        lines = ["CONVERSION                              IMPRESSIONS   CLICKS   CONV    SPEND       CTR     CPM\n"]
    else:
        lines = ["CONVERSION                              IMPRESSIONS   CLICKS   CONV    COST\n"]
    for r in rows:
        name = truncate(truncate_urn(r.conversion, 4), 40)
        head = f"{name:<40s} {format_int(r.impressions):>11s} {format_int(r.clicks):>8s} {r.conversions:>7d}"
        if derived:
            ctr, cpm = _ctr_cpm(r)
            lines.append(
                f"{head} {format_money_string(r.cost_in_usd):>10s} "
                f"{format_percent(ctr):>7s} {format_money(cpm):>8s}\n"
            )
        else:
            lines.append(f"{head} {format_money_string(r.cost_in_usd)}\n")
    return "".join(lines)


def format_lead_forms(forms: Sequence[LeadForm], account_id: str) -> str:
    """Render lead-gen forms, or a hint when the account has none."""
    if not forms:
        return f"No lead-gen forms for account {account_id}.\n"
    lines = ["ID         NAME                STATE     VERSION\n"]
    for f in forms:
        lines.append(f"{f.id:<10d} {truncate(f.name, 19):<19s} {f.state:<9s} {f.version_id}\n")
    return "".join(lines)


def format_lead_performance(rows: Sequence[AnalyticsRow], derived: bool = True) -> str:
    """Render per-form lead performance; derived adds CTR and CPM columns."""
    if derived:
        lines = ["FORM                                    IMPRESSIONS   CLICKS   OPENS   SUBMITS  SPEND       CTR     CPM\n"]
    else:
        lines = ["FORM                                    IMPRESSIONS   CLICKS   OPENS   SUBMITS  COST\n"]
    for r in rows:
        name = truncate(truncate_urn(r.form, 4), 40)
        head = (
            f"{name:<40s} {format_int(r.impressions):>11s} {format_int(r.clicks):>8s} "
            f"{r.lead_gen_form_opens:>7d} {r.lead_submissions:>8d}"
        )
        if derived:
            ctr, cpm = _ctr_cpm(r)
            lines.append(
                f"{head} {format_money_string(r.cost_in_usd):>10s} "
                f"{format_percent(ctr):>7s} {format_money(cpm):>8s}\n"
            )
        else:
            lines.append(f"{head} {format_money_string(r.cost_in_usd)}\n")
    return "".join(lines)