from typing import Any, Dict, Tuple
from .schema import NormalizedRadialRecord
from pydantic import ValidationError

from ..decoding.errors import RangeViolation
from ..decoding.radials import Radial
from ..decoding.validation import check_range_inclusive

ROW_NAME = "radial row"

class RadialValidator:
    """Checks a normalized row against the schema and the radial's physical bounds."""

    def validate(self, record: Dict[str, Any]) -> Tuple[bool, str]:
        try:
            row = NormalizedRadialRecord(**record)
        except ValidationError as e:
            return False, str(e)

        try:
            check_range_inclusive(Radial.AZIMUTH_RANGE, row.azimuth_deg, "azimuth_deg", ROW_NAME)
            check_range_inclusive(Radial.ELEVATION_RANGE, row.elevation_deg, "elevation_deg", ROW_NAME)
            check_range_inclusive(Radial.WIDTH_RANGE, row.width_deg, "width_deg", ROW_NAME)
            check_range_inclusive(Radial.NUM_BINS_RANGE, row.num_bins, "num_bins", ROW_NAME)
        except RangeViolation as e:
            return False, str(e)

        expected_max = max(row.precip_rates_in_per_hr, default=0.0)
        if row.max_precip_rate_in_per_hr != expected_max:
            return False, (
                f"max_precip_rate_in_per_hr={row.max_precip_rate_in_per_hr} "
                f"does not match the largest rate {expected_max}"
            )
        return True, ""
