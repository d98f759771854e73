from typing import Any, Dict, Optional
from dateutil import parser as dt_parser
import time

from ..decoding.radials import Radial

def now_ms() -> int:
    return int(time.time() * 1000)

class RadialNormalizer:
    def _scan_time_ms(self, scan_time: Optional[str]) -> Optional[int]:
        if not scan_time:
            return None
        return int(dt_parser.isoparse(scan_time).timestamp() * 1000)

    def normalize(
        self,
        product_id: str,
        radial_index: int,
        radial: Radial,
        scan_time: Optional[str] = None,
    ) -> Dict[str, Any]:
        rates = [v.inches_per_hour for v in radial.precip_rates]

        return {
            "product_id": product_id,
            "radial_index": radial_index,
            "azimuth_deg": radial.azimuth.degrees,
            "elevation_deg": radial.elevation.degrees,
            "width_deg": radial.width.degrees,
            "num_bins": len(rates),
            "precip_rates_in_per_hr": rates,
            "max_precip_rate_in_per_hr": max(rates, default=0.0),
            "scan_time_ms": self._scan_time_ms(scan_time),
            "ingestion_ts": now_ms(),
        }
