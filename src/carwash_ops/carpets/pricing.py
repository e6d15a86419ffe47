"""Carpet job price quote.

Priced once when the job is created; later edits never recompute it.
"""
from __future__ import annotations

from typing import Optional

from ..core.enums import CleaningService, DryingService, ProtectionService
from .model import CarpetPricing, CarpetServices, CarpetSize

CLEANING_PRICES = {
    CleaningService.BASIC: 25.0,
    CleaningService.DEEP: 45.0,
    CleaningService.STAIN_REMOVAL: 35.0,
    CleaningService.SANITIZATION: 30.0,
}

DRYING_PRICES = {
    DryingService.AIR_DRY: 0.0,
    DryingService.DEHUMIDIFIER: 15.0,
    DryingService.FAN_ASSISTED: 10.0,
}

PROTECTION_PRICES = {
    ProtectionService.NONE: 0.0,
    ProtectionService.STAIN_GUARD: 25.0,
    ProtectionService.ANTI_MICROBIAL: 20.0,
}

SERVICE_LABELS = {
    CleaningService.BASIC: "Basic Cleaning",
    CleaningService.DEEP: "Deep Cleaning",
    CleaningService.STAIN_REMOVAL: "Stain Removal",
    CleaningService.SANITIZATION: "Sanitization",
    DryingService.AIR_DRY: "Air Dry",
    DryingService.DEHUMIDIFIER: "Dehumidifier",
    DryingService.FAN_ASSISTED: "Fan Assisted",
    ProtectionService.NONE: "No Protection",
    ProtectionService.STAIN_GUARD: "Stain Guard",
    ProtectionService.ANTI_MICROBIAL: "Anti-Microbial",
}


def area_multiplier(size: CarpetSize) -> float:
    # Compares the raw length x width; the unit is not taken into account.
    area = size.area
    if area > 100:
        return 1.5
    if area > 50:
        return 1.2
    return 1.0


def quote(services: CarpetServices, size: CarpetSize, *, deposit: Optional[float] = None) -> CarpetPricing:
    base_price = CLEANING_PRICES.get(services.cleaning, 0.0)
    additional = DRYING_PRICES.get(services.drying, 0.0) + PROTECTION_PRICES.get(services.protection, 0.0)
    total = (base_price + additional) * area_multiplier(size)
    paid = float(deposit or 0)
    return CarpetPricing(
        base_price=base_price,
        additional_services=additional,
        total_price=total,
        deposit=paid,
        balance=total - paid,
    )
