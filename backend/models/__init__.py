"""Form models for the model tenancy agreement."""

from .model_tenancy import (
    LETTING_AGENT_NO,
    Address,
    AgentOrLandLord,
    CommunicationsAgreement,
    FurnishingType,
    Guarantor,
    ModelTenancy,
    MustIncludeTerms,
    OptionalTerms,
    Person,
    RentPaymentFrequency,
    Service,
    Term,
    TriState,
    is_blank,
)

__all__ = [
    "LETTING_AGENT_NO",
    "Address",
    "AgentOrLandLord",
    "CommunicationsAgreement",
    "FurnishingType",
    "Guarantor",
    "ModelTenancy",
    "MustIncludeTerms",
    "OptionalTerms",
    "Person",
    "RentPaymentFrequency",
    "Service",
    "Term",
    "TriState",
    "is_blank",
]
