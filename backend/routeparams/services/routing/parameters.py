"""Typed profile parameters built from validated route requests."""

from typing import ClassVar, Dict, List, Optional, Tuple, Type

from pydantic import BaseModel, Field

from routeparams.services.routing.profile_types import ProfileCategory


class ProfileWeighting(BaseModel):
    """A named soft preference with string-formatted parameters."""

    name: str
    parameters: Dict[str, str] = Field(default_factory=dict)

    def add_parameter(self, key: str, value: str) -> None:
        self.parameters[key] = value


class ProfileParameters(BaseModel):
    """
    Base profile parameters.

    Each variant declares the restriction names it accepts in
    ``valid_restrictions``. The base variant accepts none.
    """

    variant: ClassVar[str] = "base"
    valid_restrictions: ClassVar[Tuple[str, ...]] = ()

    weightings: List[ProfileWeighting] = Field(default_factory=list)
    weighting_errors: List[str] = Field(default_factory=list)

    def add(self, weighting: ProfileWeighting) -> None:
        self.weightings.append(weighting)

    def has_weightings(self) -> bool:
        return len(self.weightings) > 0

    def restriction_values(self) -> Dict[str, object]:
        """Typed restriction fields that have been set."""
        ignored = set(ProfileParameters.model_fields)
        return {
            name: value
            for name, value in self.model_dump(exclude=ignored).items()
            if value is not None
        }


class CyclingParameters(ProfileParameters):
    variant: ClassVar[str] = "cycling"
    valid_restrictions: ClassVar[Tuple[str, ...]] = ("gradient", "trail_difficulty")

    maximum_gradient: Optional[int] = None
    maximum_trail_difficulty: Optional[int] = None


class WalkingParameters(ProfileParameters):
    variant: ClassVar[str] = "walking"
    valid_restrictions: ClassVar[Tuple[str, ...]] = ("gradient", "trail_difficulty")

    maximum_gradient: Optional[int] = None
    maximum_trail_difficulty: Optional[int] = None


class VehicleParameters(ProfileParameters):
    """Heavy vehicle dimensions and load; all lengths in metres, weights in tonnes."""

    variant: ClassVar[str] = "vehicle"
    valid_restrictions: ClassVar[Tuple[str, ...]] = (
        "length",
        "width",
        "height",
        "axleload",
        "weight",
        "hazmat",
    )

    length: Optional[float] = None
    width: Optional[float] = None
    height: Optional[float] = None
    weight: Optional[float] = None
    axleload: Optional[float] = None
    load_characteristics: Optional[int] = None


class WheelchairParameters(ProfileParameters):
    variant: ClassVar[str] = "wheelchair"
    valid_restrictions: ClassVar[Tuple[str, ...]] = (
        "surface_type",
        "track_type",
        "smoothness_type",
        "maximum_sloped_kerb",
        "maximum_incline",
        "minimum_width",
    )

    surface_type: Optional[int] = None
    track_type: Optional[int] = None
    smoothness_type: Optional[int] = None
    maximum_sloped_kerb: Optional[float] = None
    maximum_incline: Optional[int] = None
    minimum_width: Optional[float] = None


VARIANTS: Dict[ProfileCategory, Type[ProfileParameters]] = {
    ProfileCategory.CYCLING: CyclingParameters,
    ProfileCategory.WALKING: WalkingParameters,
    ProfileCategory.HEAVY_VEHICLE: VehicleParameters,
    ProfileCategory.WHEELCHAIR: WheelchairParameters,
}


def variant_for(category: ProfileCategory) -> Type[ProfileParameters]:
    """Parameter variant for a profile category, defaulting to the base one."""
    return VARIANTS.get(category, ProfileParameters)
