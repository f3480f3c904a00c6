"""Tests for form model defaults, camelCase parsing and enum helpers."""
from datetime import date

import pytest

from models import (
    AgentOrLandLord,
    CommunicationsAgreement,
    FurnishingType,
    ModelTenancy,
    Person,
    RentPaymentFrequency,
    TriState,
    is_blank,
)


def test_defaults_are_empty_not_none():
    t = ModelTenancy()
    assert t.tenants == []
    assert t.landlords == []
    assert t.services_included_in_rent == []
    assert t.shared_facilities == []
    assert t.property_type == ""
    assert t.letting_agent is None
    assert t.optional_terms is not None
    assert t.must_include_terms.ending_the_tenancy == ""


def test_parses_camel_case_and_ignores_unknown_keys():
    t = ModelTenancy.model_validate(
        {
            "tenants": [{"name": "Jane", "address": {"addressLine1": "1 Main St", "postcode": "EH1"}}],
            "hasLettingAgent": "letting-agent-no",
            "hmo24ContactNumber": "0800",
            "tenancyStartDate": "2025-03-01",
            "servicesIncludedInRent": [{"name": "Water", "value": "20"}],
            "optionalTerms": {"pets": "No pets"},
            "recaptcha": "ignored",
        }
    )
    assert t.tenants[0].address.address_line1 == "1 Main St"
    assert t.has_letting_agent == "letting-agent-no"
    assert t.hmo24_contact_number == "0800"
    assert t.tenancy_start_date == date(2025, 3, 1)
    assert t.services_included_in_rent[0].value == "20"
    assert t.optional_terms.pets == "No pets"


def test_null_lists_and_text_are_coerced():
    t = ModelTenancy.model_validate(
        {
            "tenants": None,
            "sharedFacilities": None,
            "propertyAddress": None,
            "landlords": [{"name": "L", "address": None, "email": None}],
        }
    )
    assert t.tenants == []
    assert t.shared_facilities == []
    assert t.property_address == ""
    assert t.landlords[0].email == ""
    assert t.landlords[0].address.is_empty()


def test_blank_dates_are_none():
    t = ModelTenancy.model_validate({"tenancyStartDate": "", "hmoRegistrationExpiryDate": "  "})
    assert t.tenancy_start_date is None
    assert t.hmo_registration_expiry_date is None


def test_json_booleans_and_numbers_in_text_fields():
    t = ModelTenancy.model_validate({"hmoProperty": True, "inRentPressureZone": False, "rentAmount": 750})
    assert t.hmo_property == "true"
    assert t.in_rent_pressure_zone == "false"
    assert t.rent_amount == "750"


def test_dump_by_alias_round_trips():
    t = ModelTenancy(property_address="1 Main St", tenancy_start_date=date(2025, 3, 1))
    dumped = t.model_dump(mode="json", by_alias=True)
    assert dumped["propertyAddress"] == "1 Main St"
    assert dumped["tenancyStartDate"] == "2025-03-01"
    assert dumped["optionalTerms"]["localAuthorityTaxesAndCharges"] == ""
    assert ModelTenancy.model_validate(dumped).model_dump() == t.model_dump()


def test_person_is_empty():
    assert Person().is_empty()
    assert Person(name="  ").is_empty()
    assert not Person(email="a@b.c").is_empty()
    assert not Person.model_validate({"address": {"city": "Perth"}}).is_empty()


def test_agent_or_landlord_is_empty_includes_registration_number():
    assert AgentOrLandLord().is_empty()
    assert not AgentOrLandLord(registration_number="1").is_empty()


@pytest.mark.parametrize(
    "value,expected",
    [
        ("true", TriState.YES),
        ("false", TriState.NO),
        ("", TriState.UNANSWERED),
        (None, TriState.UNANSWERED),
        ("True", TriState.UNANSWERED),
    ],
)
def test_tri_state_parse(value, expected):
    assert TriState.parse(value) is expected


def test_communications_agreement_from_name():
    assert CommunicationsAgreement.from_name("EMAIL") is CommunicationsAgreement.EMAIL
    assert CommunicationsAgreement.from_name("fax") is None
    assert CommunicationsAgreement.from_name(None) is None


def test_furnishing_type_describe():
    assert FurnishingType.describe("FURNISHED") == "Furnished"
    assert FurnishingType.describe("UNFURNISHED") == "Unfurnished"
    assert FurnishingType.describe("") == ""


def test_rent_payment_frequency_phrases():
    assert RentPaymentFrequency.description("EVERY_FOUR_WEEKS") == "four weeks"
    assert RentPaymentFrequency.day_or_date("EVERY_FOUR_WEEKS") == "day"
    assert RentPaymentFrequency.description("ANNUALLY") == "year"
    assert RentPaymentFrequency.day_or_date("QUARTERLY") == "date"
    assert RentPaymentFrequency.description("HOURLY") == ""
    assert RentPaymentFrequency.day_or_date(None) == ""


def test_is_blank():
    assert is_blank(None)
    assert is_blank("")
    assert is_blank("  \n")
    assert not is_blank(" x ")
