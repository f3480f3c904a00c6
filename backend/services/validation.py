"""
Validation of a submitted model tenancy before a document is generated.

Collects every problem rather than stopping at the first, so the form can
highlight all of them at once.
"""
from __future__ import annotations

import deposit_schemes
from errors import ValidationFailedError
from models import (
    CommunicationsAgreement,
    FurnishingType,
    ModelTenancy,
    Person,
    RentPaymentFrequency,
    is_blank,
)


class ModelTenancyValidator:

    def issues(self, tenancy: ModelTenancy) -> list[dict[str, str]]:
        found: list[dict[str, str]] = []

        def issue(field: str, message: str) -> None:
            found.append({"field": field, "message": message})

        self._check_people("tenants", tenancy.tenants, "tenant", issue)
        self._check_people("landlords", tenancy.landlords, "landlord", issue)

        agent = tenancy.letting_agent
        if agent is not None and not agent.is_empty():
            self._check_email("lettingAgent.email", agent.email, issue)

        if is_blank(tenancy.property_address):
            issue("propertyAddress", "Property address is required")

        if not is_blank(tenancy.communications_agreement) and (
            CommunicationsAgreement.from_name(tenancy.communications_agreement) is None
        ):
            issue("communicationsAgreement", "Must be HARDCOPY or EMAIL")

        if not is_blank(tenancy.furnishing_type) and not FurnishingType.describe(tenancy.furnishing_type):
            issue("furnishingType", f"Unknown furnishing type: {tenancy.furnishing_type}")

        if not is_blank(tenancy.rent_payment_frequency) and not RentPaymentFrequency.description(
            tenancy.rent_payment_frequency
        ):
            issue("rentPaymentFrequency", f"Unknown rent payment frequency: {tenancy.rent_payment_frequency}")

        scheme = tenancy.tenancy_deposit_scheme_administrator
        if not is_blank(scheme) and deposit_schemes.for_name(scheme) is None:
            issue("tenancyDepositSchemeAdministrator", f"Unknown deposit scheme: {scheme}")

        start, end = tenancy.tenancy_start_date, tenancy.first_payment_period_end
        if start is not None and end is not None and end < start:
            issue("firstPaymentPeriodEnd", "First payment period cannot end before the tenancy starts")

        return found

    def validate(self, tenancy: ModelTenancy) -> None:
        found = self.issues(tenancy)
        if found:
            raise ValidationFailedError(found)

    def _check_people(self, field: str, people: list[Person], label: str, issue) -> None:
        entered = [(i, p) for i, p in enumerate(people) if not p.is_empty()]
        if not entered:
            issue(field, f"At least one {label} is required")
        for i, person in entered:
            if is_blank(person.name):
                issue(f"{field}[{i}].name", f"Name is required for each {label}")
            self._check_email(f"{field}[{i}].email", person.email, issue)

    def _check_email(self, field: str, email: str, issue) -> None:
        if not is_blank(email) and "@" not in email:
            issue(field, f"Invalid email address: {email}")

