"""Tests for record conversion to and from JSON."""

from datetime import datetime, timezone

import pytest

from planhat.core.errors import DecodeError
from planhat.core.models import DeleteResponse, UpsertResponse, parse_datetime
from planhat.resources.assets import Asset
from planhat.resources.companies import (
    Company,
    OwnerID,
    OwnerProfile,
    decode_owner,
    encode_owner,
)
from planhat.resources.licenses import License
from planhat.resources.users import User


def test_to_dict_omits_unset_fields():
    """Test that None attributes never reach the payload."""
    asset = Asset(name="Widget", company_id="c1")

    assert asset.to_dict() == {"name": "Widget", "companyId": "c1"}


def test_to_dict_keeps_zero_values():
    """Test zero values are distinct from unset."""
    company = Company(name="", mrr=0.0, csm_score=0, products=[])

    assert company.to_dict() == {"name": "", "mrr": 0.0, "csmScore": 0, "products": []}


def test_from_dict_uses_json_names_and_ignores_unknown_keys():
    """Test decoding maps wire names and skips extras."""
    asset = Asset.from_dict({
        "_id": "a1",
        "name": "Widget",
        "companyId": "c1",
        "externalId": "ext-1",
        "custom": {"tier": "gold"},
        "somethingNew": True,
    })

    assert asset == Asset(id="a1", name="Widget", company_id="c1", external_id="ext-1",
                          custom={"tier": "gold"})


def test_from_dict_null_leaves_default():
    """Test explicit nulls decode as unset."""
    assert Asset.from_dict({"name": None}).name is None


@pytest.mark.parametrize("data", [[], "text", 42, None])
def test_from_dict_rejects_non_objects(data):
    """Test that a non-object body is a DecodeError."""
    with pytest.raises(DecodeError):
        Asset.from_dict(data)


def test_from_list_rejects_non_arrays():
    """Test that a list endpoint must return an array."""
    with pytest.raises(DecodeError):
        Asset.from_list({"_id": "a1"})


def test_datetime_fields():
    """Test ISO timestamps with a trailing Z decode as aware datetimes."""
    company = Company.from_dict({"customerFrom": "2021-03-01T12:30:00.000Z"})

    assert company.customer_from == datetime(2021, 3, 1, 12, 30, tzinfo=timezone.utc)
    assert company.to_dict() == {"customerFrom": "2021-03-01T12:30:00+00:00"}


def test_invalid_datetime_is_decode_error():
    """Test that a malformed timestamp is reported as DecodeError."""
    with pytest.raises(DecodeError):
        Company.from_dict({"renewalDate": "not a date"})


def test_owner_as_bare_id():
    """Test the single-company shape of owner."""
    assert decode_owner("u1") == OwnerID("u1")
    assert encode_owner(OwnerID("u1")) == "u1"


def test_owner_as_profile():
    """Test the list shape of owner."""
    owner = decode_owner({"_id": "u1", "nickName": "Sam"})

    assert owner == OwnerProfile(id="u1", nickname="Sam")
    assert encode_owner(owner) == {"_id": "u1", "nickName": "Sam"}


def test_company_owner_union():
    """Test owner and coOwner decode by shape within a company."""
    company = Company.from_dict({
        "_id": "c1",
        "owner": "u1",
        "coOwner": {"_id": "u2", "nickName": "Alex"},
    })

    assert company.owner == OwnerID("u1")
    assert company.co_owner == OwnerProfile(id="u2", nickname="Alex")


def test_unrecognised_owner_is_decode_error():
    """Test that an owner of neither shape fails to decode."""
    with pytest.raises(DecodeError):
        Company.from_dict({"owner": 12})


def test_company_licenses_nested():
    """Test licences decode into License records."""
    company = Company.from_dict({
        "licenses": [{
            "_id": "l1",
            "value": 1200.5,
            "_currency": {"_id": "USD", "symbol": "$", "rate": 1, "isBase": True},
            "fromDate": "2021-01-01T00:00:00.000Z",
        }],
    })

    license = company.licenses[0]
    assert isinstance(license, License)
    assert license.value == 1200.5
    assert license.currency.symbol == "$"
    assert license.currency.is_base is True
    assert license.from_date.year == 2021


def test_user_nested_records():
    """Test nested user structures decode into records."""
    user = User.from_dict({
        "_id": "u1",
        "firstName": "Sam",
        "image": {"path": "/img/u1.png"},
        "skippedGettingStartedSteps": {"email": True, "all": False},
        "roles": ["admin"],
        "__v": 3,
    })

    assert user.image.path == "/img/u1.png"
    assert user.skipped_getting_started_steps.email is True
    assert user.skipped_getting_started_steps.all is False
    assert user.roles == ["admin"]
    assert user.v == 3


def test_upsert_response_defaults_and_raw_errors():
    """Test upsert counts and opaque error arrays."""
    response = UpsertResponse.from_dict({
        "created": 2,
        "updated": 1,
        "nonupdates": 4,
        "createdErrors": [{"error": "bad", "item": {"name": "x"}}],
        "upsertedIds": ["a", "b"],
    })

    assert response.created == 2
    assert response.updated == 1
    assert response.non_updates == 4
    assert response.created_errors == [{"error": "bad", "item": {"name": "x"}}]
    assert response.upserted_ids == ["a", "b"]
    assert response.permission_errors == []


def test_delete_response():
    """Test delete count and numeric success flag."""
    response = DeleteResponse.from_dict({"n": 1, "ok": 1, "deletedCount": 1})

    assert response.n == 1
    assert response.deleted_count == 1
    assert response.succeeded is True
    assert DeleteResponse().succeeded is False


@pytest.mark.parametrize("record_cls,data", [
    (Company, {"csmScore": "high"}),
    (Company, {"mrr": "lots"}),
    (Company, {"products": "notalist"}),
    (Company, {"products": ["a", 2]}),
    (Company, {"custom": ["not", "a", "dict"]}),
    (Company, {"name": 42}),
    (Company, {"h": True}),
    (User, {"inactive": "yes"}),
    (UpsertResponse, {"created": "3"}),
    (UpsertResponse, {"createdErrors": {}}),
    (DeleteResponse, {"ok": 1.5}),
])
def test_from_dict_rejects_mismatched_types(record_cls, data):
    """Test values that do not fit the declared attribute type are DecodeError."""
    with pytest.raises(DecodeError):
        record_cls.from_dict(data)


def test_from_dict_accepts_ints_for_floats():
    """Test an integer JSON number decodes into a float attribute."""
    company = Company.from_dict({"mrr": 100, "csmScore": 3})

    assert company.mrr == 100
    assert company.csm_score == 3


def test_from_dict_leaves_untyped_values_alone():
    """Test attributes typed Any take whatever JSON the API sends."""
    company = Company.from_dict({"lastTouch": {"type": "email"}, "lastTouchType": 7})

    assert company.last_touch == {"type": "email"}
    assert company.last_touch_type == 7


@pytest.mark.parametrize("value,expected", [
    ("2021-03-01T12:30:00.12Z", datetime(2021, 3, 1, 12, 30, 0, 120000, tzinfo=timezone.utc)),
    ("2021-03-01T12:30:00.5Z", datetime(2021, 3, 1, 12, 30, 0, 500000, tzinfo=timezone.utc)),
    ("2021-03-01T12:30:00.123456789Z", datetime(2021, 3, 1, 12, 30, 0, 123456, tzinfo=timezone.utc)),
    ("2021-03-01T12:30:00Z", datetime(2021, 3, 1, 12, 30, tzinfo=timezone.utc)),
])
def test_parse_datetime_fraction_lengths(value, expected):
    """Test fractional seconds of any length parse."""
    assert parse_datetime(value) == expected
