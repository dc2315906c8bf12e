"""Search filters accepted by the Discovery API list endpoints."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class QueryParams(BaseModel):
    """Optional string filters, serialized under their wire names.

    Values are passed through untouched (dates, coordinates, booleans are
    all plain strings here). Empty values never reach the request.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    id: str = ""
    sort: str = ""
    page: str = ""
    size: str = ""
    locale: str = ""
    keyword: str = ""
    include_test: str = Field(default="", alias="includeTest")
    include_tba: str = Field(default="", alias="includeTBA")
    include_tbd: str = Field(default="", alias="includeTBD")
    venue_id: str = Field(default="", alias="venueId")
    start_date_time: str = Field(default="", alias="startDateTime")
    end_date_time: str = Field(default="", alias="endDateTime")
    country_code: str = Field(default="", alias="countryCode")
    state_code: str = Field(default="", alias="stateCode")
    attraction_id: str = Field(default="", alias="attractionId")
    segment_id: str = Field(default="", alias="segmentId")
    segment_name: str = Field(default="", alias="segmentName")
    classification_id: str = Field(default="", alias="classificationId")
    classification_name: str = Field(default="", alias="classificationName")
    market_id: str = Field(default="", alias="marketId")
    promoter_id: str = Field(default="", alias="promoterId")
    dma_id: str = Field(default="", alias="dmaId")
    latlong: str = ""
    radius: str = ""
    unit: str = ""

    def to_wire(self) -> dict[str, str]:
        """Non-empty fields keyed by their wire names."""
        return {
            name: value
            for name, value in self.model_dump(by_alias=True).items()
            if value
        }
