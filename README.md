# linkedin-ads

Building blocks for tools that manage LinkedIn advertising accounts: typed
models decoded from API JSON, terminal and JSON renderers, request payload
builders for campaigns and creatives, campaign-to-campaign diffs, account
overviews, and helpers for offline conversion events.

The package uses only the Python standard library and supports Python 3.10
and later.

## Modules

| Module | Purpose |
| --- | --- |
| `linkedin_ads.models` | Dataclasses with `from_dict`: `Campaign`, `CampaignGroup`, `Account`, `Creative`, `CreativeReview`, `Conversion`, `LeadForm`, `AnalyticsRow`, `Money`, `Locale`, `DateRange`, `TargetingCriteria` |
| `linkedin_ads.formatting` | `format_money`, `format_money_string`, `format_int`, `format_percent`, `truncate`, `truncate_urn`; `apply_limit`, `apply_compact`, `render_output`, `render_output_with_resolved`, `render_json`, `pretty_raw_json` |
| `linkedin_ads.compact` | Whitelisted projections: `compact_account`, `compact_campaign_group`, `compact_campaign`, `compact_creative`, `compact_analytics_row`, `compact_reach_row` |
| `linkedin_ads.campaign_view` | Campaign table and detail block with 30-day pacing, status filtering, create and update payloads, `FieldDiff` rendering, `plan_delete` |
| `linkedin_ads.campaign_targeting` | Targeting breakdowns (`format_targeting`, `format_targeting_many`), `summarize_facets`, JSON payloads, id selection rules |
| `linkedin_ads.campaign_diff` | `build_campaign_diff` / `format_campaign_diff`: top-level fields plus per-facet targeting differences |
| `linkedin_ads.settings` | `Settings`, environment overrides and the `ClientOptions` an HTTP client needs; version validation |
| `linkedin_ads.overview` | `build_overview` / `format_overview`: counts, 7-day totals, top campaigns, budget use, conversion-tracking health |
| `linkedin_ads.reports` | Conversion definition and lead-gen form tables, with optional CTR/CPM columns |
| `linkedin_ads.creatives` | Creative tables, status validation, status patch and create payloads |
| `linkedin_ads.conversions` | Email hashing, CSV import, event building and batch sending of offline conversions |

## Examples

### Formatting values

```python
from linkedin_ads.formatting import format_money_string, format_percent, truncate_urn

format_money_string("1406.4072831443331")   # "$1,406.41"
format_money_string("abc")                  # "abc" (unparseable values pass through)
format_percent(0.0046)                      # "0.46%"
truncate_urn("urn:li:sponsoredCampaign:420247104", 4)  # "...sponsoredCampaign:4202…"
```

### Shaping list output

```python
from linkedin_ads.campaign_view import format_campaign_list
from linkedin_ads.compact import compact_campaign
from linkedin_ads.formatting import render_output

text = render_output(
    campaigns,
    lambda: format_campaign_list(campaigns, "777"),
    json_output=True,
    limit=1,
    compact=True,
    projector=compact_campaign,
)
```

With `json_output=False` the terminal callable's text is returned instead.

### Targeting

```python
from linkedin_ads.models import Campaign
from linkedin_ads.campaign_targeting import format_targeting, summarize_facets

campaign = Campaign.from_dict({
    "id": 10,
    "name": "Architect NAMER",
    "status": "ACTIVE",
    "targetingCriteria": {
        "include": {"and": [
            {"or": {"urn:li:adTargetingFacet:titles": ["urn:li:title:1", "urn:li:title:2"]}},
        ]},
        "exclude": {"or": {"urn:li:adTargetingFacet:employers": ["urn:li:organization:1009"]}},
    },
})

summarize_facets(campaign.targeting_criteria.included_facets())  # "titles(2)"
print(format_targeting(campaign, None))
```

`format_targeting` accepts an optional resolver, a callable from URN to
name; resolved names are printed after an em-dash.

### Updating a campaign

```python
from linkedin_ads.campaign_view import build_update_patch, format_field_diffs

payload, diffs = build_update_patch(current, status="PAUSED", daily_budget=100)
print(format_field_diffs("Updating campaign 10", diffs))
# payload == {"patch": {"$set": {...}}}; an empty diffs list means no change
```

### Comparing two campaigns

```python
from linkedin_ads.campaign_diff import build_campaign_diff, format_campaign_diff

diff = build_campaign_diff(campaign_a, campaign_b)
print(format_campaign_diff(diff))
diff.to_dict()   # {"a", "b", "topLevel", "targeting"}
```

### Offline conversions

```python
from linkedin_ads.conversions import (
    build_conversion_event, hash_sha256_email, read_conversion_csv, send_conversion_batch,
)

hash_sha256_email("  USER@Example.COM ")
# "b4c9a289323b21a01c3e940f150eb9b8c542587f1abfd8f0e1cc1ffc5e475514"

records = read_conversion_csv("events.csv")   # header: email,occurred_at[,value,currency,event_id]
event = build_conversion_event("999", records[0])
result = send_conversion_batch("999", records, send=my_post_function, log=print)
```

Emails are lowercased, trimmed and SHA-256 hashed; the rule id is wrapped as
`urn:lla:llaPartnerConversion:<id>`. `send_conversion_batch` carries on past
failed rows and raises `ConversionBatchError` only when every event failed.

### Settings and client options

```python
import os
from linkedin_ads.settings import Settings, resolve_client_options

options, effective = resolve_client_options(Settings(token="token"), os.environ, "", False)
```

`LINKEDIN_ADS_TOKEN`, `LINKEDIN_ADS_ACCOUNT` and `LINKEDIN_ADS_VERSION`
override the given settings, an explicit version date (six digits, `YYYYMM`)
overrides both, and `LINKEDIN_ADS_BASE_URL` replaces the default base URL.
A missing token raises `ValueError` pointing at logging in first.

## What the package does not do

There is no command-line program, no HTTP client and no settings file
storage. The package builds payloads, decodes responses and renders output;
sending requests (for example the `send` callable given to
`send_conversion_batch`) and loading or saving `Settings` are left to the
calling code.

## Running the tests

Install the `test` extra and run `pytest` from the project directory.