from datetime import datetime, timezone

import pytest

from partner_samples.core.client import ValidationError
from partner_samples.core.types import BillingCycleType
from partner_samples.scenarios.inputs import (
    parse_billing_cycle,
    parse_custom_term_end_date,
    parse_optional_promotion_id,
    parse_quantity,
    split_catalog_item_id,
)


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("Monthly", BillingCycleType.MONTHLY),
        ("ANNUAL", BillingCycleType.ANNUAL),
        ("one_time", BillingCycleType.ONE_TIME),
        ("OneTime", BillingCycleType.ONE_TIME),
        (" triennial ", BillingCycleType.TRIENNIAL),
        ("None", BillingCycleType.NONE),
    ],
)
def test_parse_billing_cycle(text, expected):
    assert parse_billing_cycle(text) is expected


def test_parse_billing_cycle_rejects_unknown_names():
    with pytest.raises(ValidationError) as exc_info:
        parse_billing_cycle("weekly")
    assert "monthly" in exc_info.value.details["allowed"]


@pytest.mark.parametrize("text", ["", "   ", None])
def test_blank_promotion_id_is_none(text):
    assert parse_optional_promotion_id(text) is None


def test_promotion_id_is_trimmed():
    assert parse_optional_promotion_id(" 39NFJQT1Q5KV:0002:39NFJQT1Q5KJ ") == "39NFJQT1Q5KV:0002:39NFJQT1Q5KJ"


def test_parse_quantity():
    assert parse_quantity(" 12 ") == 12
    with pytest.raises(ValidationError):
        parse_quantity("twelve")


def test_blank_custom_term_end_date_is_none():
    assert parse_custom_term_end_date("") is None
    assert parse_custom_term_end_date("  ") is None


def test_custom_term_end_date_accepts_dates_and_timestamps():
    assert parse_custom_term_end_date("2027-06-30") == datetime(2027, 6, 30)
    assert parse_custom_term_end_date("2027-06-30T00:00:00Z") == datetime(2027, 6, 30, tzinfo=timezone.utc)


def test_malformed_custom_term_end_date():
    with pytest.raises(ValidationError):
        parse_custom_term_end_date("30/06/2027")


def test_split_catalog_item_id():
    assert split_catalog_item_id("CFQ7TTC0LH18:0002:CFQ7TTC0K5BB") == ("CFQ7TTC0LH18", "0002", "CFQ7TTC0K5BB")


@pytest.mark.parametrize("text", ["CFQ7TTC0LH18", "CFQ7TTC0LH18:0002", "a::c", "a:b:c:d"])
def test_split_catalog_item_id_rejects_other_shapes(text):
    with pytest.raises(ValidationError):
        split_catalog_item_id(text)
