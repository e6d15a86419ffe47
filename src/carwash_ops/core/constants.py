"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

from .enums import CarpetStatus

CUSTOMERS_KEY = "carwash_customers"
EMPLOYEES_KEY = "carwash_employees"
ATTENDANCE_KEY = "carwash_attendance"
ASSIGNMENTS_KEY = "carwash_assignments"
CARPETS_KEY = "carwash_carpets"

UNKNOWN_EMPLOYEE = "Unknown Employee"
UNKNOWN_CUSTOMER = "Unknown Customer"

DEFAULT_ESTIMATED_COMPLETION_HOURS = 24
DEFAULT_RECENT_CUSTOMERS = 5
MAX_ID_IMAGE_BYTES = 5 * 1024 * 1024
MIN_VEHICLE_YEAR = 1900

# Carpet jobs that still count against an employee's workload.
ACTIVE_CARPET_STATUSES = (
    CarpetStatus.PENDING,
    CarpetStatus.IN_PROGRESS,
    CarpetStatus.CLEANING,
    CarpetStatus.DRYING,
)
# Statuses reported together as "in progress" on the statistics board.
IN_PROGRESS_CARPET_STATUSES = (
    CarpetStatus.IN_PROGRESS,
    CarpetStatus.CLEANING,
    CarpetStatus.DRYING,
)

AVAILABLE_CAR_SERVICES = (
    "Basic Wash",
    "Premium Wash",
    "Deluxe Wash",
    "Interior Cleaning",
    "Wax Treatment",
    "Tire Shine",
    "Engine Cleaning",
    "Undercarriage Wash",
)

COMMON_STAINS = ("Coffee", "Wine", "Pet Urine", "Oil", "Mud", "Blood", "Ink")
