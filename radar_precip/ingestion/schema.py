from pydantic import BaseModel, Field, ConfigDict, model_validator
from typing import List, Optional

class NormalizedRadialRecord(BaseModel):
    model_config = ConfigDict(extra="forbid")

    product_id: str = Field(min_length=1)
    radial_index: int = Field(ge=0)
    azimuth_deg: float
    elevation_deg: float
    width_deg: float
    num_bins: int = Field(ge=0)
    precip_rates_in_per_hr: List[float] = Field(default_factory=list)
    max_precip_rate_in_per_hr: float = Field(ge=0)
    scan_time_ms: Optional[int] = None
    ingestion_ts: int

    @model_validator(mode="after")
    def _bins_match_rates(self) -> "NormalizedRadialRecord":
        if len(self.precip_rates_in_per_hr) != self.num_bins:
            raise ValueError(
                f"num_bins={self.num_bins} but {len(self.precip_rates_in_per_hr)} rates present"
            )
        return self
