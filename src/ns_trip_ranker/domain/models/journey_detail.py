"""Journey detail domain model."""

from pydantic import BaseModel, ConfigDict, Field


class TrainPart(BaseModel):
    """A single coach or train set with its facility codes."""

    model_config = ConfigDict(frozen=True, extra="allow", populate_by_name=True)

    facilities: tuple[str, ...] = ()


class Stock(BaseModel):
    """Rolling stock composition at a stop."""

    model_config = ConfigDict(frozen=True, extra="allow", populate_by_name=True)

    train_parts: tuple[TrainPart, ...] = Field(default=(), alias="trainParts")

    @property
    def facility_count(self) -> int:
        """Total number of facility codes across all train parts."""
        return sum(len(part.facilities) for part in self.train_parts)


class JourneyStop(BaseModel):
    """A stop on a journey, optionally carrying stock composition."""

    model_config = ConfigDict(frozen=True, extra="allow", populate_by_name=True)

    actual_stock: Stock | None = Field(default=None, alias="actualStock")
    planned_stock: Stock | None = Field(default=None, alias="plannedStock")


class JourneyDetail(BaseModel):
    """Detail record for a physical train service.

    One record may enumerate several product numbers (e.g. when a train
    changes its number along the route), so matching against a leg is done
    by inclusion in ``product_numbers``.
    """

    model_config = ConfigDict(
        frozen=True, extra="allow", populate_by_name=True, coerce_numbers_to_str=True
    )

    product_numbers: tuple[str, ...] = Field(default=(), alias="productNumbers")
    stops: tuple[JourneyStop, ...] = ()

    def covers(self, product_number: str) -> bool:
        """Check whether this detail describes the given product number."""
        return product_number in self.product_numbers

    @property
    def facility_count(self) -> int:
        """Facility codes in the actual stock of every stop."""
        return sum(stop.actual_stock.facility_count for stop in self.stops if stop.actual_stock)
