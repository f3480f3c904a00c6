"""
Extract template fields from a ModelTenancy.

Every value is display-ready: the document template only substitutes them.
Section toggles follow the template convention that "" hides a section and
" " shows it.
"""
from __future__ import annotations

import logging
from typing import Any

import deposit_schemes
from deposit_schemes import DepositSchemeAdministrator
from models import (
    LETTING_AGENT_NO,
    AgentOrLandLord,
    CommunicationsAgreement,
    FurnishingType,
    ModelTenancy,
    OptionalTerms,
    RentPaymentFrequency,
    Service,
    TriState,
    is_blank,
)

from .format_utils import (
    NEWLINE,
    NOT_APPLICABLE,
    address_multiple_lines,
    format_date,
    na_for_empty,
    name_and_address,
    numbered_value,
)

logger = logging.getLogger(__name__)

SHOW = " "
HIDE = ""
SELECTED = "X"
UNSELECTED = " "

PENDING_REGISTRATION = (
    "Pending – the Landlord will inform the Tenant of the Registration number once they have it"
)

# Template field -> OptionalTerms attribute
OPTIONAL_TERM_FIELDS: dict[str, str] = {
    "contentsAndConditions": "contents_and_conditions",
    "localAuthorityTaxesAndCharges": "local_authority_taxes_and_charges",
    "utilities": "utilities",
    "commonParts": "common_parts",
    "roof": "roof",
    "bins": "bins",
    "storage": "storage",
    "dangerousSubstances": "dangerous_substances",
    "pets": "pets",
    "smoking": "smoking",
}


class ModelTenancyFieldExtractor:
    """Maps a ModelTenancy onto the flat placeholders of the agreement template."""

    def extract_fields(self, tenancy: ModelTenancy) -> dict[str, Any]:
        fields: dict[str, Any] = {}

        # Same order as the sections of the agreement
        self._extract_tenants(tenancy, fields)
        self._extract_letting_agent(tenancy, fields)
        self._extract_landlords(tenancy, fields)
        self._extract_communications_agreement(tenancy, fields)
        self._extract_property_details(tenancy, fields)
        fields["tenancyStartDate"] = format_date(tenancy.tenancy_start_date)
        self._extract_rent(tenancy, fields)
        self._extract_deposit(tenancy, fields)
        self._extract_optional_terms(tenancy.optional_terms, fields)
        must_include = tenancy.must_include_terms
        fields["endingTheTenancy"] = must_include.ending_the_tenancy if must_include else ""
        return fields

    def _extract_tenants(self, tenancy: ModelTenancy, fields: dict[str, Any]) -> None:
        tenants = [t for t in tenancy.tenants if not t.is_empty()]
        names_and_addresses = []
        emails = []
        phones = []
        for index, tenant in enumerate(tenants, start=1):
            names_and_addresses.append(name_and_address(tenant, index))
            emails.append(numbered_value(tenant.email, index))
            phones.append(numbered_value(tenant.telephone, index))
        fields["tenantNamesAndAddresses"] = NEWLINE.join(names_and_addresses)
        fields["tenantEmails"] = NEWLINE.join(emails)
        fields["tenantPhoneNumbers"] = NEWLINE.join(phones)

    def _extract_letting_agent(self, tenancy: ModelTenancy, fields: dict[str, Any]) -> None:
        # Only an explicit "no letting agent" removes the section
        if tenancy.has_letting_agent == LETTING_AGENT_NO:
            fields["showLettingAgentService"] = HIDE
        else:
            fields["showLettingAgentService"] = SHOW

        agent = tenancy.letting_agent
        if agent is None:
            return
        fields["lettingAgentName"] = agent.name
        fields["lettingAgentAddress"] = address_multiple_lines(agent.address)
        fields["lettingAgentEmail"] = na_for_empty(agent.email)
        fields["lettingAgentPhone"] = na_for_empty(agent.telephone)
        fields["lettingAgentRegistrationNumber"] = agent.registration_number

    def _extract_landlords(self, tenancy: ModelTenancy, fields: dict[str, Any]) -> None:
        landlords = [landlord for landlord in tenancy.landlords if not landlord.is_empty()]
        names = []
        addresses = []
        emails = []
        phones = []
        reg_numbers = []
        for index, landlord in enumerate(landlords, start=1):
            names.append(f"Name ({index}): {landlord.name}")
            addresses.append(
                f"Address ({index}): {NEWLINE}{address_multiple_lines(landlord.address)}{NEWLINE}"
            )
            emails.append(numbered_value(landlord.email, index))
            phones.append(numbered_value(landlord.telephone, index))
            reg_numbers.append(f"Registration number (Landlord {index}):  {registration_number(landlord)}")
        fields["landlordNames"] = NEWLINE.join(names)
        fields["landlordAddresses"] = NEWLINE.join(addresses)
        fields["landlordEmails"] = NEWLINE.join(emails)
        fields["landlordPhones"] = NEWLINE.join(phones)
        fields["landlordRegNumbers"] = (NEWLINE + NEWLINE).join(reg_numbers)

    def _extract_communications_agreement(self, tenancy: ModelTenancy, fields: dict[str, Any]) -> None:
        hardcopy = UNSELECTED
        email = UNSELECTED
        show_email_paragraphs = SHOW

        agreement = CommunicationsAgreement.from_name(tenancy.communications_agreement)
        if agreement is CommunicationsAgreement.HARDCOPY:
            hardcopy = SELECTED
            show_email_paragraphs = HIDE
        elif agreement is CommunicationsAgreement.EMAIL:
            email = SELECTED

        fields["communicationsAgreementHardcopy"] = hardcopy
        fields["communicationsAgreementEmail"] = email
        fields["showEmailParagraphs"] = show_email_paragraphs

    def _extract_property_details(self, tenancy: ModelTenancy, fields: dict[str, Any]) -> None:
        fields["propertyAddress"] = tenancy.property_address
        fields["propertyType"] = tenancy.property_type
        fields["furnishingType"] = FurnishingType.describe(tenancy.furnishing_type)
        fields["rentPressureZoneString"] = is_or_is_not(TriState.parse(tenancy.in_rent_pressure_zone))
        self._extract_hmo(tenancy, fields)
        self._extract_services(tenancy, fields)
        self._extract_facilities(tenancy, fields)

    def _extract_hmo(self, tenancy: ModelTenancy, fields: dict[str, Any]) -> None:
        hmo = TriState.parse(tenancy.hmo_property)
        contact_number = ""
        expiry_date = ""
        renewal_application_submitted = False
        show_notification = SHOW
        show_fields = SHOW

        if hmo is TriState.YES:
            contact_number = tenancy.hmo24_contact_number
            renewal_application_submitted = bool(tenancy.hmo_renewal_application_submitted)
            expiry_date = format_date(tenancy.hmo_registration_expiry_date)
            show_notification = HIDE
        elif hmo is TriState.NO:
            contact_number = NOT_APPLICABLE
            expiry_date = NOT_APPLICABLE
            show_fields = HIDE

        fields["hmoString"] = is_or_is_not(hmo)
        fields["hmoContactNumber"] = contact_number
        fields["hmoRenewalApplicationSubmitted"] = renewal_application_submitted
        fields["hmoExpiryDate"] = expiry_date
        fields["showHmoNotification"] = show_notification
        fields["showHmoFields"] = show_fields

    def _extract_services(self, tenancy: ModelTenancy, fields: dict[str, Any]) -> None:
        fields["servicesIncludedInRent"] = join_services(tenancy.services_included_in_rent)
        fields["lettingAgentServices"] = join_services(tenancy.services_provided_by_letting_agent)
        fields["lettingAgentPointOfContactServices"] = join_services(
            tenancy.services_letting_agent_is_first_contact_for
        )

    def _extract_facilities(self, tenancy: ModelTenancy, fields: dict[str, Any]) -> None:
        fields["includedAreasOrFacilities"] = ", ".join(tenancy.included_areas_or_facilities)
        fields["excludedAreasFacilities"] = ", ".join(tenancy.excluded_areas_facilities)
        fields["sharedFacilities"] = ", ".join(tenancy.shared_facilities)

    def _extract_rent(self, tenancy: ModelTenancy, fields: dict[str, Any]) -> None:
        fields["rentAmount"] = tenancy.rent_amount
        fields["originalRentAmount"] = tenancy.rent_amount
        fields["rentPaymentFrequency"] = RentPaymentFrequency.description(tenancy.rent_payment_frequency)
        fields["rentPaymentFrequencyDayOrDate"] = RentPaymentFrequency.day_or_date(tenancy.rent_payment_frequency)

        in_advance = TriState.parse(tenancy.rent_payable_in_advance)
        advance_or_arrears = ""
        if in_advance is TriState.YES:
            advance_or_arrears = "advance"
        elif in_advance is TriState.NO:
            advance_or_arrears = "arrears"
        fields["advanceOrArrears"] = advance_or_arrears

        fields["firstPaymentDate"] = format_date(tenancy.first_payment_date)
        fields["firstPaymentAmount"] = tenancy.first_payment_amount
        fields["firstPaymentPeriodStart"] = format_date(tenancy.tenancy_start_date)
        fields["firstPaymentPeriodEnd"] = format_date(tenancy.first_payment_period_end)
        fields["rentPaymentSchedule"] = tenancy.rent_payment_schedule
        fields["rentPaymentMethod"] = tenancy.rent_payment_method

    def _extract_deposit(self, tenancy: ModelTenancy, fields: dict[str, Any]) -> None:
        name = tenancy.tenancy_deposit_scheme_administrator
        fields["depositAmount"] = tenancy.deposit_amount
        fields["depositSchemeAdministrator"] = name
        fields["depositSchemeContactDetails"] = deposit_scheme_contact_details(deposit_schemes.for_name(name))

    def _extract_optional_terms(self, optional_terms: OptionalTerms | None, fields: dict[str, Any]) -> None:
        if optional_terms is None:
            logger.warning("Failed to extract optional terms: none submitted")
            return
        for field, attr in OPTIONAL_TERM_FIELDS.items():
            try:
                fields[field] = getattr(optional_terms, attr)
            except AttributeError:
                logger.warning("Failed to extract optional term %s", field, exc_info=True)


def is_or_is_not(answer: TriState) -> str:
    if answer is TriState.YES:
        return "is"
    if answer is TriState.NO:
        return "is not"
    return ""


def registration_number(landlord: AgentOrLandLord) -> str:
    if is_blank(landlord.registration_number):
        return PENDING_REGISTRATION
    return f"[{landlord.registration_number}]"


def format_service(service: Service) -> str:
    if is_blank(service.value):
        return service.name
    return f"{service.name} £{service.value}"


def join_services(services: list[Service]) -> str:
    return ", ".join(format_service(s) for s in services)


def deposit_scheme_contact_details(administrator: DepositSchemeAdministrator | None) -> str:
    if administrator is None:
        return ""
    parts = [administrator.website, administrator.email, administrator.telephone]
    return "\n".join(p for p in parts if not is_blank(p))
