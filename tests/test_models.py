from linkedin_ads.models import (
    Account,
    AnalyticsRow,
    Campaign,
    CampaignGroup,
    Conversion,
    Creative,
    DateRange,
    LeadForm,
    Locale,
    Money,
    TargetingCriteria,
)

CAMPAIGN = {
    "id": 10,
    "name": "Architect NAMER",
    "status": "ACTIVE",
    "type": "SPONSORED_UPDATES",
    "objectiveType": "WEBSITE_VISIT",
    "costType": "CPC",
    "campaignGroup": "urn:li:sponsoredCampaignGroup:111",
    "account": "urn:li:sponsoredAccount:777",
    "targetingCriteria": {
        "include": {
            "and": [
                {"or": {"urn:li:adTargetingFacet:titles": ["urn:li:title:1", "urn:li:title:2"]}},
                {"or": {"urn:li:adTargetingFacet:profileLocations": ["urn:li:geo:101174742"]}},
            ]
        },
        "exclude": {"or": {"urn:li:adTargetingFacet:employers": ["urn:li:organization:1009"]}},
    },
    "runSchedule": {"start": 1700000000000},
    "dailyBudget": {"currencyCode": "USD", "amount": "40"},
    "servingStatuses": ["PAUSED", "STOPPED"],
}


def test_campaign_round_trip():
    assert Campaign.from_dict(CAMPAIGN).to_dict() == CAMPAIGN


def test_campaign_fields_decoded():
    camp = Campaign.from_dict(CAMPAIGN)
    assert camp.id == 10
    assert camp.objective == "WEBSITE_VISIT"
    assert camp.daily_budget == Money(currency_code="USD", amount="40")
    assert camp.run_schedule.start == 1700000000000
    assert camp.unit_cost is None


def test_campaign_omits_empty_optionals():
    data = Campaign.from_dict({"id": 1, "name": "A"}).to_dict()
    for key in ("dailyBudget", "unitCost", "locale", "targetingCriteria", "servingStatuses"):
        assert key not in data
    assert data["id"] == 1


def test_included_facets_merge_clauses():
    tc = TargetingCriteria.from_dict(
        {
            "include": {
                "and": [
                    {"or": {"urn:li:adTargetingFacet:titles": ["urn:li:title:1"]}},
                    {"or": {"urn:li:adTargetingFacet:titles": ["urn:li:title:2"]}},
                ]
            }
        }
    )
    assert tc.included_facets() == {"urn:li:adTargetingFacet:titles": ["urn:li:title:1", "urn:li:title:2"]}
    assert tc.excluded_facets() == {}


def test_excluded_facets():
    camp = Campaign.from_dict(CAMPAIGN)
    assert camp.targeting_criteria.excluded_facets() == {
        "urn:li:adTargetingFacet:employers": ["urn:li:organization:1009"]
    }
    assert set(camp.targeting_criteria.included_facets()) == {
        "urn:li:adTargetingFacet:titles",
        "urn:li:adTargetingFacet:profileLocations",
    }


def test_money_locale_daterange_round_trip():
    money = {"currencyCode": "USD", "amount": "100"}
    locale = {"country": "US", "language": "en"}
    dates = {"start": 1700000000000, "end": 1710000000000}
    assert Money.from_dict(money).to_dict() == money
    assert Locale.from_dict(locale).to_dict() == locale
    assert DateRange.from_dict(dates).to_dict() == dates


def test_creative_review_status():
    with_review = Creative.from_dict(
        {"id": "urn:li:sponsoredCreative:1", "status": "ACTIVE", "review": {"status": "APPROVED"}}
    )
    assert with_review.review_status() == "APPROVED"
    assert Creative.from_dict({"id": "urn:li:sponsoredCreative:1"}).review_status() == ""


def test_account_and_group():
    acct = Account.from_dict({"id": 12345678, "name": "Acme", "status": "ACTIVE", "type": "BUSINESS", "currency": "USD"})
    assert (acct.name, acct.currency) == ("Acme", "USD")
    group = CampaignGroup.from_dict({"id": 1, "name": "G1", "status": "ACTIVE", "totalBudget": {"amount": "5", "currencyCode": "USD"}})
    assert group.total_budget.amount == "5"
    assert group.run_schedule is None


def test_conversion_and_lead_form():
    conv = Conversion.from_dict({"id": 1, "name": "Signup", "type": "LANDING", "enabled": True, "attributionType": "LAST_TOUCH_BY_CAMPAIGN"})
    assert conv.enabled is True
    assert conv.attribution_type == "LAST_TOUCH_BY_CAMPAIGN"
    form = LeadForm.from_dict({"id": 1, "name": "Form A", "state": "SUBMITTED", "versionId": 1})
    assert form.version_id == 1
    assert form.to_dict()["versionId"] == 1


def test_analytics_row_pivot_display():
    row = AnalyticsRow.from_dict({"pivotValue": "urn:li:lmsConversion:1", "impressions": 1000, "costInUsd": "12.34"})
    assert row.pivot_display() == "urn:li:lmsConversion:1"
    assert row.conversion == "urn:li:lmsConversion:1"
    multi = AnalyticsRow.from_dict({"pivotValues": ["urn:li:sponsoredCampaign:1", "x"]})
    assert multi.pivot_display() == "urn:li:sponsoredCampaign:1"
    assert AnalyticsRow.from_dict({}).pivot_display() == ""


def test_analytics_row_wire_names():
    row = AnalyticsRow.from_dict({"impressions": 1000, "clicks": 50, "externalWebsiteConversions": 7, "costInUsd": "12.34"})
    data = row.to_dict()
    assert data["externalWebsiteConversions"] == 7
    assert data["costInUsd"] == "12.34"
    assert "oneClickLeads" not in data