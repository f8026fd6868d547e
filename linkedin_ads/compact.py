"""Whitelisted projections used by --json --compact output."""

from __future__ import annotations

from typing import Any

from linkedin_ads.models import Account, AnalyticsRow, Campaign, CampaignGroup, Creative


def compact_account(account: Account) -> dict[str, Any]:
    """Keep id, name, status, type and currency."""
    return {
        "id": account.id,
        "name": account.name,
        "status": account.status,
        "type": account.type,
        "currency": account.currency,
    }


def compact_campaign_group(group: CampaignGroup) -> dict[str, Any]:
    """Keep id, name, status and, when set, totalBudget and runSchedule."""
    out: dict[str, Any] = {"id": group.id, "name": group.name, "status": group.status}
    if group.total_budget is not None:
        out["totalBudget"] = group.total_budget.to_dict()
    if group.run_schedule is not None:
        out["runSchedule"] = group.run_schedule.to_dict()
    return out


def compact_campaign(campaign: Campaign) -> dict[str, Any]:
    """Keep id, name, status, campaignGroup and, when set, dailyBudget and objectiveType."""
    out: dict[str, Any] = {
        "id": campaign.id,
        "name": campaign.name,
        "status": campaign.status,
        "campaignGroup": campaign.campaign_group,
    }
    if campaign.daily_budget is not None:
        out["dailyBudget"] = campaign.daily_budget.to_dict()
    if campaign.objective:
        out["objectiveType"] = campaign.objective
    return out


def compact_creative(creative: Creative) -> dict[str, Any]:
    """Keep id, status, intendedStatus, campaign and, when set, review."""
    out: dict[str, Any] = {
        "id": creative.id,
        "status": creative.status,
        "intendedStatus": creative.intended_status,
        "campaign": creative.campaign,
    }
    if creative.review is not None:
        out["review"] = creative.review.to_dict()
    return out


def compact_analytics_row(row: AnalyticsRow) -> dict[str, Any]:
    """Keep dateRange, impressions, clicks, costInUsd and conversions."""
    out: dict[str, Any] = {}
    if row.date_range:
        out["dateRange"] = dict(row.date_range)
    out["impressions"] = row.impressions
    out["clicks"] = row.clicks
    out["costInUsd"] = row.cost_in_usd
    if row.conversions:
        out["externalWebsiteConversions"] = row.conversions
    return out


def compact_reach_row(row: AnalyticsRow) -> dict[str, Any]:
    """Keep dateRange, impressions, member reach and audience penetration."""
    out: dict[str, Any] = {}
    if row.date_range:
        out["dateRange"] = dict(row.date_range)
    out["impressions"] = row.impressions
    if row.member_reach:
        out["approximateMemberReach"] = row.member_reach
    if row.audience_penetration:
        out["audiencePenetration"] = row.audience_penetration
    return out