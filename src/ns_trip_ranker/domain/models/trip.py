"""Trip and leg domain models."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from ns_trip_ranker.domain.models.journey_detail import JourneyDetail


class Product(BaseModel):
    """The train product a leg travels on."""

    model_config = ConfigDict(
        frozen=True, extra="allow", populate_by_name=True, coerce_numbers_to_str=True
    )

    number: str


class Leg(BaseModel):
    """One segment of a trip, served by a single product."""

    model_config = ConfigDict(frozen=True, extra="allow", populate_by_name=True)

    product: Product
    crowd_forecast: str | None = Field(default=None, alias="crowdForecast")
    journey_detail: JourneyDetail | None = Field(default=None, alias="journeyDetail")

    @property
    def product_number(self) -> str:
        return self.product.number

    def with_journey_detail(self, detail: JourneyDetail | None) -> "Leg":
        """Return a copy of this leg with the detail attached by reference."""
        return self.model_copy(update={"journey_detail": detail})


class Trip(BaseModel):
    """A candidate itinerary returned by the trip search.

    Fields not modelled here are kept as extras and echoed back unchanged.
    """

    model_config = ConfigDict(frozen=True, extra="allow", populate_by_name=True)

    planned_duration_in_minutes: int = Field(alias="plannedDurationInMinutes")
    actual_duration_in_minutes: int | None = Field(default=None, alias="actualDurationInMinutes")
    transfers: int = 0
    crowd_forecast: str | None = Field(default=None, alias="crowdForecast")
    legs: tuple[Leg, ...] = ()

    @property
    def effective_actual_duration(self) -> int:
        """Actual duration, falling back to the planned one when not reported."""
        if self.actual_duration_in_minutes is None:
            return self.planned_duration_in_minutes
        return self.actual_duration_in_minutes

    @property
    def product_numbers(self) -> list[str]:
        return [leg.product_number for leg in self.legs]

    def to_dict(self) -> dict[str, Any]:
        """Serialize with upstream (camelCase) field names."""
        return self.model_dump(mode="json", by_alias=True, exclude_unset=True)
