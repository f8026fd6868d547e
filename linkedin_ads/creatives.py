"""Creative listing, detail rendering and write payloads."""

from __future__ import annotations

from typing import Any, Sequence

from linkedin_ads.formatting import truncate
from linkedin_ads.models import Creative

VALID_CREATIVE_STATUSES = frozenset({"ACTIVE", "PAUSED", "ARCHIVED"})


def _wrap_urn(kind: str, ident: str) -> str:
    return ident if ident.startswith("urn:") else f"urn:li:{kind}:{ident}"


def format_creative_list(creatives: Sequence[Creative], campaign_id: str) -> str:
    """Render the creatives table, or a hint when the campaign has none."""
    if not creatives:
        return f"No creatives on campaign {campaign_id}.\n"
    lines = ["ID                                 STATUS    REVIEW    CAMPAIGN\n"]
    for cr in creatives:
        lines.append(
            f"{truncate(cr.id, 34):<34s} {cr.status:<9s} {cr.review_status():<9s} {cr.campaign}\n"
        )
    return "".join(lines)


def format_creative(creative: Creative) -> str:
    """Render the detail block of a single creative."""
    return (
        f"ID:       {creative.id}\n"
        f"Status:   {creative.status}\n"
        f"Intended: {creative.intended_status}\n"
        f"Review:   {creative.review_status()}\n"
        f"Campaign: {creative.campaign}\n"
    )


def validate_creative_status(status: str) -> str:
    """Upper-case status and check it is ACTIVE, PAUSED or ARCHIVED."""
    normalized = status.upper()
    if normalized not in VALID_CREATIVE_STATUSES:
        raise ValueError(
            f'invalid --status "{normalized}" (want ACTIVE, PAUSED, or ARCHIVED)'
        )
    return normalized


def creative_status_patch(status: str) -> dict[str, Any]:
    """Partial-update body that sets a creative's intended status."""
    return {"patch": {"$set": {"intendedStatus": validate_creative_status(status)}}}


def build_create_creative_payload(
    campaign_id: str,
    content_reference: str = "",
    status: str = "ACTIVE",
    name: str = "",
) -> dict[str, Any]:
    """Body for creating a creative that references an existing post or share."""
    payload: dict[str, Any] = {
        "campaign": _wrap_urn("sponsoredCampaign", campaign_id),
        "intendedStatus": status.upper(),
    }
    if content_reference:
        payload["content"] = {"reference": content_reference}
    if name:
        payload["name"] = name
    return payload