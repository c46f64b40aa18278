"""Surface descriptions fed to the estimator.

Dimensions are feet. A dimension of None means the caller has not supplied it
yet; the estimator returns no breakdown for such a spec.
"""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Optional


class BaseboardProfile(Enum):
    LOW = "low"  # <4"
    HIGH = "high"  # >5"


@dataclass(frozen=True)
class RoomSpec:
    length: Optional[Decimal]
    width: Optional[Decimal]
    height: Optional[Decimal]
    coats: int = 2

    include_ceiling: bool = False
    include_baseboards: bool = False
    baseboard_profile: BaseboardProfile = BaseboardProfile.LOW
    include_trim: bool = False
    doors: int = 0
    windows: int = 0
    closets: int = 0

    # Room-type extras
    accent_walls: bool = False
    crown_molding: bool = False
    stucco_ceiling: bool = False
    ensuite_bathroom: bool = False


@dataclass(frozen=True)
class LinearRunSpec:
    """Baseboards, trim, and railings priced by the linear foot."""
    linear_feet: Optional[Decimal]
    profile: BaseboardProfile = BaseboardProfile.LOW
    coats: int = 2


@dataclass(frozen=True)
class StaircaseSpec:
    wall_area: Decimal = Decimal("0")  # sq ft of stairwell walls
    ceiling_area: Decimal = Decimal("0")
    include_railings: bool = False
    railing_feet: Decimal = Decimal("0")


@dataclass(frozen=True)
class FenceSpec:
    linear_feet: Optional[Decimal]
    height: Optional[Decimal]
    sides: int = 1
    stain: bool = False


@dataclass(frozen=True)
class CabinetSection:
    doors: int
    frames: int
    drawers: int
    height: Optional[Decimal]  # inches
    width: Optional[Decimal]  # inches
    include_hardware: bool = False
