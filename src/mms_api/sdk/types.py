"""
MMS API constants: resource roots and the string codes the server uses.
"""

from enum import Enum


# Resource roots, relative to the base URL
ACCOUNT_API_ROOT = "api/v2/accounts"
PRODUCT_API_ROOT = "api/v2/products"
TASK_API_ROOT = "api/v2/tasks"
WEBHOOK_API_ROOT = "api/v2/webhooks"
MIGRATE_API_ROOT = "api/v2/migrate"

API_KEY_HEADER = "x-api-key"
JSON_MEDIA_TYPE = "application/json"


class MembershipType(str, Enum):
    """Membership type codes."""
    BASIC = "BASIC"
    PREMIUM = "PREMIUM"
    PROSPECT = "PROSPECT"
    CORPORATE_FITNESS = "CORPORATE_FITNESS"


class TagFormat(str, Enum):
    """RFID tag formats."""
    HITAG1 = "HITAG1"
    MIFARE = "MIFARE"
    LEGIC = "LEGIC"


class TaskType(str, Enum):
    """Trainer task types."""
    GENERAL = "GENERAL"
    ANAMNESIS = "ANAMNESIS"
    COORDINATION_FITNESS_TEST = "COORDINATION_FITNESS_TEST"
    HEALTH_FITNESS_TEST = "HEALTH_FITNESS_TEST"
    PWC_FITNESS_TEST = "PWC_FITNESS_TEST"
    MAX_FORCE_FITNESS_TEST = "MAX_FORCE_FITNESS_TEST"
    MOBILITY_SCREEN_FITNESS_TEST = "MOBILITY_SCREEN_FITNESS_TEST"
    BLOOD_PRESSURE_FITNESS_TEST = "BLOOD_PRESSURE_FITNESS_TEST"
    POLAR_FITNESS_TEST = "POLAR_FITNESS_TEST"
    INBODY_FITNESS_TEST = "INBODY_FITNESS_TEST"
    JAWON_FITNESS_TEST = "JAWON_FITNESS_TEST"
