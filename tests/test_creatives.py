import pytest

from linkedin_ads.creatives import (
    build_create_creative_payload,
    creative_status_patch,
    format_creative,
    format_creative_list,
    validate_creative_status,
)
from linkedin_ads.models import Creative, CreativeReview


def _creative(**kw):
    base = dict(
        id="urn:li:sponsoredCreative:1",
        status="ACTIVE",
        intended_status="ACTIVE",
        campaign="urn:li:sponsoredCampaign:42",
    )
    base.update(kw)
    return Creative(**base)


def test_list_empty_state():
    assert format_creative_list([], "42") == "No creatives on campaign 42.\n"


def test_list_rows():
    text = format_creative_list([_creative(review=CreativeReview(status="APPROVED"))], "42")
    lines = text.splitlines()
    assert lines[0].startswith("ID")
    assert "STATUS" in lines[0]
    expected = (
        f"{'urn:li:sponsoredCreative:1':<34} ACTIVE    APPROVED  urn:li:sponsoredCampaign:42"
    )
    assert lines[1] == expected


def test_list_truncates_long_ids():
    long_id = "urn:li:sponsoredCreative:" + "9" * 30
    line = format_creative_list([_creative(id=long_id)], "42").splitlines()[1]
    assert line[:34].endswith("…")
    assert long_id not in line


def test_format_creative():
    text = format_creative(_creative())
    assert text == (
        "ID:       urn:li:sponsoredCreative:1\n"
        "Status:   ACTIVE\n"
        "Intended: ACTIVE\n"
        "Review:   \n"
        "Campaign: urn:li:sponsoredCampaign:42\n"
    )


def test_validate_status_uppercases():
    assert validate_creative_status("paused") == "PAUSED"


def test_validate_status_invalid():
    with pytest.raises(ValueError, match="invalid --status"):
        validate_creative_status("INVALID")


def test_status_patch():
    assert creative_status_patch("PAUSED") == {"patch": {"$set": {"intendedStatus": "PAUSED"}}}


def test_status_patch_rejects_invalid():
    with pytest.raises(ValueError):
        creative_status_patch("DRAFT")


def test_create_payload_dry_run_contents():
    payload = build_create_creative_payload("42", "urn:li:share:999")
    assert payload["campaign"] == "urn:li:sponsoredCampaign:42"
    assert payload["content"] == {"reference": "urn:li:share:999"}
    assert payload["intendedStatus"] == "ACTIVE"
    assert "name" not in payload


def test_create_payload_optional_fields():
    payload = build_create_creative_payload("urn:li:sponsoredCampaign:7", "", "paused", "Ad")
    assert payload == {
        "campaign": "urn:li:sponsoredCampaign:7",
        "intendedStatus": "PAUSED",
        "name": "Ad",
    }