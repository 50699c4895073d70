"""Extended chassis components: suspension, brakes, gearbox, traction control."""

from enum import Enum


class SuspensionSetup(str, Enum):
    """Suspension stiffness levels."""

    SOFT = "soft"  # better over bumps, slower weight transfer
    MEDIUM = "medium"
    HARD = "hard"  # sharper response, less compliance


class BrakeCompound(str, Enum):
    """Brake pad compounds by operating temperature."""

    LOW_TEMPERATURE = "low-temperature"
    MEDIUM_TEMPERATURE = "medium-temperature"
    HIGH_TEMPERATURE = "high-temperature"


class GearboxRatio(str, Enum):
    """Gear spacing: quicker shifts vs. higher top speed."""

    CLOSE_RATIO = "close-ratio"
    WIDE_RATIO = "wide-ratio"


class TractionControlLevel(str, Enum):
    """Electronic traction assistance levels."""

    OFF = "off"
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
