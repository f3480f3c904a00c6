"""Registry of the approved tenancy deposit schemes in Scotland."""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class DepositSchemeAdministrator(BaseModel):
    """Contact details printed in the deposit section of the agreement."""
    model_config = ConfigDict(frozen=True)

    name: str
    website: str = ""
    email: str = ""
    telephone: str = ""


DEPOSIT_SCHEME_ADMINISTRATORS: dict[str, DepositSchemeAdministrator] = {
    "SafeDeposits Scotland": DepositSchemeAdministrator(
        name="SafeDeposits Scotland",
        website="www.safedepositsscotland.com",
        email="info@safedepositsscotland.com",
        telephone="03333 213 136",
    ),
    "Letting Protection Service Scotland": DepositSchemeAdministrator(
        name="Letting Protection Service Scotland",
        website="www.lettingprotectionscotland.com",
        email="info@lettingprotectionscotland.com",
        telephone="0330 303 0031",
    ),
    "mydeposits Scotland": DepositSchemeAdministrator(
        name="mydeposits Scotland",
        website="www.mydepositsscotland.co.uk",
        email="info@mydepositsscotland.co.uk",
        telephone="0333 321 9402",
    ),
}


def for_name(name: str | None) -> DepositSchemeAdministrator | None:
    if not name:
        return None
    return DEPOSIT_SCHEME_ADMINISTRATORS.get(name)


def list_administrators() -> list[DepositSchemeAdministrator]:
    return list(DEPOSIT_SCHEME_ADMINISTRATORS.values())
