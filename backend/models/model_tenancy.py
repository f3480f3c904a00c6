"""
Model Tenancy form data.

Plain records for everything the model tenancy form can submit. The wire
format is camelCase JSON; attributes are snake_case. Free-text fields default
to "" and list fields to [] so the extractor never has to null-check them.
"""
from __future__ import annotations

from datetime import date
from enum import Enum
from typing import Any, List, Optional, get_origin

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator
from pydantic.alias_generators import to_camel

LETTING_AGENT_NO = "letting-agent-no"


class TriState(str, Enum):
    """Answer to a yes/no question that the user may not have answered yet."""
    YES = "true"
    NO = "false"
    UNANSWERED = ""

    @classmethod
    def parse(cls, value: Any) -> "TriState":
        if value == "true":
            return cls.YES
        if value == "false":
            return cls.NO
        return cls.UNANSWERED


class CommunicationsAgreement(str, Enum):
    HARDCOPY = "HARDCOPY"
    EMAIL = "EMAIL"

    @classmethod
    def from_name(cls, value: Any) -> Optional["CommunicationsAgreement"]:
        try:
            return cls(value)
        except ValueError:
            return None


class FurnishingType(str, Enum):
    FURNISHED = "FURNISHED"
    UNFURNISHED = "UNFURNISHED"
    PART_FURNISHED = "PART_FURNISHED"

    @property
    def description(self) -> str:
        return _FURNISHING_DESCRIPTIONS[self]

    @classmethod
    def describe(cls, name: Any) -> str:
        """Human readable furnishing type, or "" for an unknown name."""
        try:
            return cls(name).description
        except ValueError:
            return ""


_FURNISHING_DESCRIPTIONS = {
    FurnishingType.FURNISHED: "Furnished",
    FurnishingType.UNFURNISHED: "Unfurnished",
    FurnishingType.PART_FURNISHED: "Partly furnished",
}


class RentPaymentFrequency(str, Enum):
    WEEKLY = "WEEKLY"
    FORTNIGHTLY = "FORTNIGHTLY"
    EVERY_FOUR_WEEKS = "EVERY_FOUR_WEEKS"
    CALENDAR_MONTH = "CALENDAR_MONTH"
    QUARTERLY = "QUARTERLY"
    SIX_MONTHLY = "SIX_MONTHLY"
    ANNUALLY = "ANNUALLY"

    @classmethod
    def description(cls, name: Any) -> str:
        """Period phrase used in "payable every <period>"."""
        try:
            return _FREQUENCY_PHRASES[cls(name)][0]
        except ValueError:
            return ""

    @classmethod
    def day_or_date(cls, name: Any) -> str:
        """Weekly-style frequencies are paid on a day, the rest on a date."""
        try:
            return _FREQUENCY_PHRASES[cls(name)][1]
        except ValueError:
            return ""


_FREQUENCY_PHRASES = {
    RentPaymentFrequency.WEEKLY: ("week", "day"),
    RentPaymentFrequency.FORTNIGHTLY: ("fortnight", "day"),
    RentPaymentFrequency.EVERY_FOUR_WEEKS: ("four weeks", "day"),
    RentPaymentFrequency.CALENDAR_MONTH: ("calendar month", "date"),
    RentPaymentFrequency.QUARTERLY: ("quarter", "date"),
    RentPaymentFrequency.SIX_MONTHLY: ("six months", "date"),
    RentPaymentFrequency.ANNUALLY: ("year", "date"),
}


def is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


class FormModel(BaseModel):
    """
    Base for all form records: camelCase aliases, unknown keys ignored,
    null free text read as "" and null lists read as [].
    """
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")

    @field_validator("*", mode="before")
    @classmethod
    def _coerce_form_value(cls, v: Any, info: ValidationInfo) -> Any:
        annotation = cls.model_fields[info.field_name].annotation
        if annotation is str:
            if v is None:
                return ""
            # Some form widgets post JSON booleans and numbers for text fields
            if isinstance(v, bool):
                return "true" if v else "false"
            if isinstance(v, (int, float)):
                return str(v)
        if v is None and get_origin(annotation) in (list, List):
            return []
        return v


class Address(FormModel):
    address_line1: str = ""
    address_line2: str = ""
    address_line3: str = ""
    city: str = ""
    region: str = ""
    postcode: str = ""

    def parts(self) -> list[str]:
        return [
            self.address_line1,
            self.address_line2,
            self.address_line3,
            self.city,
            self.region,
            self.postcode,
        ]

    def is_empty(self) -> bool:
        return all(is_blank(p) for p in self.parts())


class Person(FormModel):
    """A tenant. The form posts a fixed number of slots; unused slots are empty."""
    name: str = ""
    address: Address = Field(default_factory=Address)
    email: str = ""
    telephone: str = ""

    @field_validator("address", mode="before")
    @classmethod
    def _address_default(cls, v: Any) -> Any:
        return Address() if v is None else v

    def is_empty(self) -> bool:
        return (
            is_blank(self.name)
            and self.address.is_empty()
            and is_blank(self.email)
            and is_blank(self.telephone)
        )


class AgentOrLandLord(Person):
    registration_number: str = ""

    def is_empty(self) -> bool:
        return super().is_empty() and is_blank(self.registration_number)


class Guarantor(FormModel):
    name: str = ""
    address: Address = Field(default_factory=Address)

    @field_validator("address", mode="before")
    @classmethod
    def _address_default(cls, v: Any) -> Any:
        return Address() if v is None else v


class Service(FormModel):
    """Service with an optional charge, e.g. name="Water", value="20"."""
    name: str = ""
    value: str = ""


class Term(FormModel):
    title: str = ""
    content: str = ""


class OptionalTerms(FormModel):
    contents_and_conditions: str = ""
    local_authority_taxes_and_charges: str = ""
    utilities: str = ""
    common_parts: str = ""
    roof: str = ""
    bins: str = ""
    storage: str = ""
    dangerous_substances: str = ""
    pets: str = ""
    smoking: str = ""


class MustIncludeTerms(FormModel):
    ending_the_tenancy: str = ""


class ModelTenancy(FormModel):
    """Everything submitted by the model tenancy form."""

    tenants: List[Person] = Field(default_factory=list)
    guarantors: List[Guarantor] = Field(default_factory=list)
    letting_agent: Optional[AgentOrLandLord] = None
    has_letting_agent: str = ""
    landlords: List[AgentOrLandLord] = Field(default_factory=list)
    communications_agreement: str = ""

    # Property
    property_address: str = ""
    property_type: str = ""
    furnishing_type: str = ""
    in_rent_pressure_zone: str = ""
    hmo_property: str = ""
    hmo24_contact_number: str = ""
    hmo_renewal_application_submitted: Optional[bool] = None
    hmo_registration_expiry_date: Optional[date] = None

    # Rent
    tenancy_start_date: Optional[date] = None
    rent_amount: str = ""
    rent_payment_frequency: str = ""
    rent_payable_in_advance: str = ""
    first_payment_date: Optional[date] = None
    first_payment_amount: str = ""
    first_payment_period_end: Optional[date] = None
    rent_payment_day_or_date: str = ""
    rent_payment_schedule: str = ""
    rent_payment_method: str = ""

    # Services and facilities
    services_included_in_rent: List[Service] = Field(default_factory=list)
    services_provided_by_letting_agent: List[Service] = Field(default_factory=list)
    services_letting_agent_is_first_contact_for: List[Service] = Field(default_factory=list)
    included_areas_or_facilities: List[str] = Field(default_factory=list)
    excluded_areas_facilities: List[str] = Field(default_factory=list)
    shared_facilities: List[str] = Field(default_factory=list)

    # Deposit
    deposit_amount: str = ""
    tenancy_deposit_scheme_administrator: str = ""

    # Terms
    optional_terms: Optional[OptionalTerms] = Field(default_factory=OptionalTerms)
    must_include_terms: Optional[MustIncludeTerms] = Field(default_factory=MustIncludeTerms)
    additional_terms: List[Term] = Field(default_factory=list)
    excluded_terms: List[str] = Field(default_factory=list)

    @field_validator(
        "hmo_registration_expiry_date",
        "tenancy_start_date",
        "first_payment_date",
        "first_payment_period_end",
        mode="before",
    )
    @classmethod
    def _blank_date_is_none(cls, v: Any) -> Any:
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator("hmo_renewal_application_submitted", mode="before")
    @classmethod
    def _blank_flag_is_none(cls, v: Any) -> Any:
        if isinstance(v, str) and not v.strip():
            return None
        return v
