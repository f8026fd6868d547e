"""Typed views of the LinkedIn Marketing API resources used by the CLI."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

_MISSING = dataclasses.MISSING


def _f(json_name: str, default: Any = _MISSING, *, factory: Any = _MISSING, omit: bool = False) -> Any:
    """Declare a dataclass field with its wire name and omit-when-empty rule."""
    metadata = {"json": json_name, "omitempty": omit}
    if factory is not _MISSING:
        return field(default_factory=factory, metadata=metadata)
    return field(default=default, metadata=metadata)


def _is_empty(value: Any) -> bool:
    if value is None or value is False:
        return True
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return value == 0
    if isinstance(value, (str, list, tuple, dict)):
        return len(value) == 0
    return False


def _encode(value: Any) -> Any:
    if hasattr(value, "to_dict"):
        return value.to_dict()
    if isinstance(value, Mapping):
        return {str(k): _encode(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_encode(v) for v in value]
    return value


def _dump(obj: Any) -> dict[str, Any]:
    out: dict[str, Any] = {}
    for f in dataclasses.fields(obj):
        value = getattr(obj, f.name)
        if f.metadata.get("omitempty") and _is_empty(value):
            continue
        out[f.metadata.get("json", f.name)] = _encode(value)
    return out


def _int(value: Any) -> int:
    if value is None or value == "":
        return 0
    return int(value)


def _float(value: Any) -> float:
    if value is None or value == "":
        return 0.0
    return float(value)


def _str(value: Any) -> str:
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


def _facet_map(raw: Any) -> dict[str, list[str]]:
    return {str(k): [_str(v) for v in (vals or [])] for k, vals in (raw or {}).items()}


class _Model:
    """Shared JSON encoding for the resource dataclasses."""

    def to_dict(self) -> dict[str, Any]:
        return _dump(self)


@dataclass
class Money(_Model):
    currency_code: str = _f("currencyCode", "")
    amount: str = _f("amount", "")

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Money":
        return cls(currency_code=_str(data.get("currencyCode")), amount=_str(data.get("amount")))

    def to_dict(self) -> dict[str, Any]:
        return _dump(self)


@dataclass
class Locale(_Model):
    country: str = _f("country", "")
    language: str = _f("language", "")

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Locale":
        return cls(country=_str(data.get("country")), language=_str(data.get("language")))

    def to_dict(self) -> dict[str, Any]:
        return _dump(self)


@dataclass
class DateRange(_Model):
    """A run schedule in epoch milliseconds."""

    start: int = _f("start", 0)
    end: int = _f("end", 0, omit=True)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "DateRange":
        return cls(start=_int(data.get("start")), end=_int(data.get("end")))

    def to_dict(self) -> dict[str, Any]:
        return _dump(self)


@dataclass
class TargetingCriteria:
    """Include clauses are AND-ed; each clause ORs facet values."""

    include: list[dict[str, list[str]]] = field(default_factory=list)
    exclude: dict[str, list[str]] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "TargetingCriteria":
        include = data.get("include") or {}
        clauses = [_facet_map(clause.get("or")) for clause in include.get("and") or []]
        exclude = _facet_map((data.get("exclude") or {}).get("or"))
        return cls(include=clauses, exclude=exclude)

    def included_facets(self) -> dict[str, list[str]]:
        merged: dict[str, list[str]] = {}
        for clause in self.include:
            for facet, values in clause.items():
                merged.setdefault(facet, []).extend(values)
        return merged

    def excluded_facets(self) -> dict[str, list[str]]:
        return {facet: list(values) for facet, values in self.exclude.items()}

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {}
        if self.include:
            out["include"] = {"and": [{"or": {k: list(v) for k, v in c.items()}} for c in self.include]}
        if self.exclude:
            out["exclude"] = {"or": self.excluded_facets()}
        return out


def _optional(cls: Any, raw: Any) -> Any:
    return cls.from_dict(raw) if raw else None


@dataclass
class Campaign(_Model):
    id: int = _f("id", 0)
    name: str = _f("name", "")
    status: str = _f("status", "")
    type: str = _f("type", "")
    objective: str = _f("objectiveType", "", omit=True)
    cost_type: str = _f("costType", "", omit=True)
    campaign_group: str = _f("campaignGroup", "")
    account: str = _f("account", "")
    targeting_criteria: Optional[TargetingCriteria] = _f("targetingCriteria", None, omit=True)
    run_schedule: Optional[DateRange] = _f("runSchedule", None, omit=True)
    daily_budget: Optional[Money] = _f("dailyBudget", None, omit=True)
    unit_cost: Optional[Money] = _f("unitCost", None, omit=True)
    locale: Optional[Locale] = _f("locale", None, omit=True)
    serving_statuses: list[str] = _f("servingStatuses", factory=list, omit=True)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Campaign":
        return cls(
            id=_int(data.get("id")),
            name=_str(data.get("name")),
            status=_str(data.get("status")),
            type=_str(data.get("type")),
            objective=_str(data.get("objectiveType")),
            cost_type=_str(data.get("costType")),
            campaign_group=_str(data.get("campaignGroup")),
            account=_str(data.get("account")),
            targeting_criteria=_optional(TargetingCriteria, data.get("targetingCriteria")),
            run_schedule=_optional(DateRange, data.get("runSchedule")),
            daily_budget=_optional(Money, data.get("dailyBudget")),
            unit_cost=_optional(Money, data.get("unitCost")),
            locale=_optional(Locale, data.get("locale")),
            serving_statuses=[_str(s) for s in data.get("servingStatuses") or []],
        )

    def to_dict(self) -> dict[str, Any]:
        return _dump(self)


@dataclass
class Account(_Model):
    id: int = _f("id", 0)
    name: str = _f("name", "")
    status: str = _f("status", "")
    type: str = _f("type", "")
    currency: str = _f("currency", "")

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Account":
        return cls(
            id=_int(data.get("id")),
            name=_str(data.get("name")),
            status=_str(data.get("status")),
            type=_str(data.get("type")),
            currency=_str(data.get("currency")),
        )


@dataclass
class CampaignGroup(_Model):
    id: int = _f("id", 0)
    name: str = _f("name", "")
    status: str = _f("status", "")
    account: str = _f("account", "", omit=True)
    total_budget: Optional[Money] = _f("totalBudget", None, omit=True)
    run_schedule: Optional[DateRange] = _f("runSchedule", None, omit=True)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "CampaignGroup":
        return cls(
            id=_int(data.get("id")),
            name=_str(data.get("name")),
            status=_str(data.get("status")),
            account=_str(data.get("account")),
            total_budget=_optional(Money, data.get("totalBudget")),
            run_schedule=_optional(DateRange, data.get("runSchedule")),
        )


@dataclass
class CreativeReview(_Model):
    status: str = _f("status", "")
    rejection_reasons: list[str] = _f("rejectionReasons", factory=list, omit=True)


@dataclass
class Creative(_Model):
    id: str = _f("id", "")
    status: str = _f("status", "")
    intended_status: str = _f("intendedStatus", "")
    campaign: str = _f("campaign", "")
    name: str = _f("name", "", omit=True)
    review: Optional[CreativeReview] = _f("review", None, omit=True)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Creative":
        raw_review = data.get("review")
        review = None
        if raw_review:
            review = CreativeReview(
                status=_str(raw_review.get("status")),
                rejection_reasons=[_str(r) for r in raw_review.get("rejectionReasons") or []],
            )
        return cls(
            id=_str(data.get("id")),
            status=_str(data.get("status")),
            intended_status=_str(data.get("intendedStatus")),
            campaign=_str(data.get("campaign")),
            name=_str(data.get("name")),
            review=review,
        )

    def review_status(self) -> str:
        return self.review.status if self.review else ""


@dataclass
class Conversion(_Model):
    id: int = _f("id", 0)
    name: str = _f("name", "")
    type: str = _f("type", "")
    enabled: bool = _f("enabled", False)
    attribution_type: str = _f("attributionType", "", omit=True)
    account: str = _f("account", "", omit=True)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Conversion":
        return cls(
            id=_int(data.get("id")),
            name=_str(data.get("name")),
            type=_str(data.get("type")),
            enabled=bool(data.get("enabled")),
            attribution_type=_str(data.get("attributionType")),
            account=_str(data.get("account")),
        )


@dataclass
class LeadForm(_Model):
    id: int = _f("id", 0)
    name: str = _f("name", "")
    state: str = _f("state", "")
    version_id: int = _f("versionId", 0)
    owner: dict[str, Any] = _f("owner", factory=dict, omit=True)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "LeadForm":
        return cls(
            id=_int(data.get("id")),
            name=_str(data.get("name")),
            state=_str(data.get("state")),
            version_id=_int(data.get("versionId")),
            owner=dict(data.get("owner") or {}),
        )


@dataclass
class AnalyticsRow(_Model):
    date_range: dict[str, Any] = _f("dateRange", factory=dict, omit=True)
    pivot_value: str = _f("pivotValue", "", omit=True)
    pivot_values: list[str] = _f("pivotValues", factory=list, omit=True)
    impressions: int = _f("impressions", 0)
    clicks: int = _f("clicks", 0)
    cost_in_usd: str = _f("costInUsd", "")
    conversions: int = _f("externalWebsiteConversions", 0, omit=True)
    one_click_leads: int = _f("oneClickLeads", 0, omit=True)
    lead_gen_form_opens: int = _f("oneClickLeadFormOpens", 0, omit=True)
    lead_submissions: int = _f("leadSubmissions", 0, omit=True)
    member_reach: int = _f("approximateMemberReach", 0, omit=True)
    audience_penetration: float = _f("audiencePenetration", 0.0, omit=True)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "AnalyticsRow":
        return cls(
            date_range=dict(data.get("dateRange") or {}),
            pivot_value=_str(data.get("pivotValue")),
            pivot_values=[_str(v) for v in data.get("pivotValues") or []],
            impressions=_int(data.get("impressions")),
            clicks=_int(data.get("clicks")),
            cost_in_usd=_str(data.get("costInUsd")),
            conversions=_int(data.get("externalWebsiteConversions")),
            one_click_leads=_int(data.get("oneClickLeads")),
            lead_gen_form_opens=_int(data.get("oneClickLeadFormOpens")),
            lead_submissions=_int(data.get("leadSubmissions")),
            member_reach=_int(data.get("approximateMemberReach")),
            audience_penetration=_float(data.get("audiencePenetration")),
        )

    def pivot_display(self) -> str:
        """The URN this row is pivoted on, or "" when unpivoted."""
        if self.pivot_value:
            return self.pivot_value
        return self.pivot_values[0] if self.pivot_values else ""

    @property
    def conversion(self) -> str:
        return self.pivot_display()

    @property
    def form(self) -> str:
        return self.pivot_display()