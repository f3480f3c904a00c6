"""Tests for the deposit scheme administrator registry."""
import deposit_schemes


def test_for_name_known():
    admin = deposit_schemes.for_name("Letting Protection Service Scotland")
    assert admin is not None
    assert admin.website == "www.lettingprotectionscotland.com"


def test_for_name_unknown_or_blank_is_none():
    assert deposit_schemes.for_name("Unknown Scheme") is None
    assert deposit_schemes.for_name("") is None
    assert deposit_schemes.for_name(None) is None


def test_lookup_is_exact():
    assert deposit_schemes.for_name("safedeposits scotland") is None


def test_list_administrators():
    names = [a.name for a in deposit_schemes.list_administrators()]
    assert names == ["SafeDeposits Scotland", "Letting Protection Service Scotland", "mydeposits Scotland"]
    for admin in deposit_schemes.list_administrators():
        assert deposit_schemes.for_name(admin.name) is admin
