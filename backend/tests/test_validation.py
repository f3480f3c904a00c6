"""Tests for ModelTenancyValidator rules."""
from datetime import date

import pytest

from errors import ValidationFailedError
from models import Address, AgentOrLandLord, ModelTenancy, Person
from services.template_loader import ModelTenancyJsonTemplateLoader
from services.validation import ModelTenancyValidator


def _valid_tenancy() -> ModelTenancy:
    return ModelTenancy(
        tenants=[Person(name="Jane Tenant", email="jane@example.com"), Person()],
        landlords=[AgentOrLandLord(name="Larry Landlord", address=Address(city="Glasgow"))],
        property_address="1 Main Street, Edinburgh",
        communications_agreement="HARDCOPY",
        furnishing_type="FURNISHED",
        rent_payment_frequency="WEEKLY",
        tenancy_deposit_scheme_administrator="mydeposits Scotland",
        tenancy_start_date=date(2025, 3, 1),
        first_payment_period_end=date(2025, 3, 7),
    )


def _fields(tenancy: ModelTenancy) -> list[str]:
    return [i["field"] for i in ModelTenancyValidator().issues(tenancy)]


def test_valid_tenancy_passes():
    ModelTenancyValidator().validate(_valid_tenancy())


def test_blank_template_fails_validation():
    tenancy = ModelTenancyJsonTemplateLoader().load_json_template()
    with pytest.raises(ValidationFailedError) as exc_info:
        ModelTenancyValidator().validate(tenancy)
    fields = [i["field"] for i in exc_info.value.issues]
    assert "tenants" in fields
    assert "landlords" in fields
    assert "propertyAddress" in fields


def test_tenant_without_name():
    tenancy = _valid_tenancy()
    tenancy.tenants.append(Person(email="other@example.com"))
    assert _fields(tenancy) == ["tenants[2].name"]


def test_bad_emails_are_reported():
    tenancy = _valid_tenancy()
    tenancy.tenants[0].email = "not-an-email"
    tenancy.letting_agent = AgentOrLandLord(name="Agent", email="agent-at-example")
    assert _fields(tenancy) == ["tenants[0].email", "lettingAgent.email"]


def test_blank_letting_agent_is_not_checked():
    tenancy = _valid_tenancy()
    tenancy.letting_agent = AgentOrLandLord()
    assert _fields(tenancy) == []


@pytest.mark.parametrize(
    "attr,value,field",
    [
        ("communications_agreement", "FAX", "communicationsAgreement"),
        ("furnishing_type", "SOFA", "furnishingType"),
        ("rent_payment_frequency", "HOURLY", "rentPaymentFrequency"),
        ("tenancy_deposit_scheme_administrator", "Under The Mattress", "tenancyDepositSchemeAdministrator"),
    ],
)
def test_unknown_choice_values(attr, value, field):
    tenancy = _valid_tenancy()
    setattr(tenancy, attr, value)
    assert _fields(tenancy) == [field]


def test_blank_choices_are_allowed():
    tenancy = _valid_tenancy()
    tenancy.communications_agreement = ""
    tenancy.furnishing_type = ""
    tenancy.rent_payment_frequency = ""
    tenancy.tenancy_deposit_scheme_administrator = ""
    assert _fields(tenancy) == []


def test_first_payment_period_cannot_end_before_start():
    tenancy = _valid_tenancy()
    tenancy.first_payment_period_end = date(2025, 2, 1)
    assert _fields(tenancy) == ["firstPaymentPeriodEnd"]
