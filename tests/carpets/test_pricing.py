from __future__ import annotations

import pytest

from carwash_ops.carpets import pricing
from carwash_ops.carpets.model import CarpetServices, CarpetSize
from carwash_ops.core.enums import CleaningService, DryingService, ProtectionService, SizeUnit


def _services(cleaning="deep", drying="dehumidifier", protection="stain-guard") -> CarpetServices:
    return CarpetServices(
        cleaning=CleaningService(cleaning),
        drying=DryingService(drying),
        protection=ProtectionService(protection),
    )


def test_large_carpet_quote_with_deposit():
    quote = pricing.quote(_services(), CarpetSize(length=12, width=10), deposit=20)

    assert quote.base_price == 45
    assert quote.additional_services == 40
    assert quote.total_price == pytest.approx(127.5)
    assert quote.deposit == 20
    assert quote.balance == pytest.approx(107.5)


@pytest.mark.parametrize(
    "length,width,expected",
    [(10, 5, 1.0), (10, 5.1, 1.2), (10, 10, 1.2), (10, 10.1, 1.5), (4, 6, 1.0)],
)
def test_area_multiplier_tiers(length, width, expected):
    assert pricing.area_multiplier(CarpetSize(length=length, width=width)) == expected


def test_multiplier_ignores_unit():
    feet = CarpetSize(length=10, width=10, unit=SizeUnit.FEET)
    meters = CarpetSize(length=10, width=10, unit=SizeUnit.METERS)
    assert pricing.area_multiplier(feet) == pricing.area_multiplier(meters)


def test_no_deposit_means_full_balance():
    quote = pricing.quote(_services("basic", "air-dry", "none"), CarpetSize(length=4, width=6))
    assert quote.total_price == 25
    assert quote.deposit == 0
    assert quote.balance == 25
