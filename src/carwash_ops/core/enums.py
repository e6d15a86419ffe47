from __future__ import annotations

from enum import Enum


class AssignmentStatus(str, Enum):
    """Status of a car wash visit handed to an employee."""

    IN_PROGRESS = "in-progress"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class CarpetStatus(str, Enum):
    """Carpet job lifecycle, listed in the usual forward order."""

    PENDING = "pending"
    IN_PROGRESS = "in-progress"
    CLEANING = "cleaning"
    DRYING = "drying"
    COMPLETED = "completed"
    DELIVERED = "delivered"


class CarpetType(str, Enum):
    AREA = "area"
    RUNNER = "runner"
    ORIENTAL = "oriental"
    BERBER = "berber"
    SHAG = "shag"
    OTHER = "other"


class SizeUnit(str, Enum):
    FEET = "feet"
    METERS = "meters"


class CarpetCondition(str, Enum):
    EXCELLENT = "excellent"
    GOOD = "good"
    FAIR = "fair"
    POOR = "poor"


class CleaningService(str, Enum):
    BASIC = "basic"
    DEEP = "deep"
    STAIN_REMOVAL = "stain-removal"
    SANITIZATION = "sanitization"


class DryingService(str, Enum):
    AIR_DRY = "air-dry"
    DEHUMIDIFIER = "dehumidifier"
    FAN_ASSISTED = "fan-assisted"


class ProtectionService(str, Enum):
    STAIN_GUARD = "stain-guard"
    ANTI_MICROBIAL = "anti-microbial"
    NONE = "none"
