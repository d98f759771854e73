from typing import Any, Dict, List, Optional
from .product_client import ProductClient
from .normalizer import RadialNormalizer
from .validator import RadialValidator
from ..db.trino_client import TrinoClient
from ..decoding.cursor import take_bytes
from ..decoding.radials import radials
from ..utils.logging import get_logger

logger = get_logger(__name__)

COLUMNS = (
    "product_id",
    "radial_index",
    "azimuth_deg",
    "elevation_deg",
    "width_deg",
    "num_bins",
    "precip_rates_in_per_hr",
    "max_precip_rate_in_per_hr",
    "scan_time_ms",
    "ingestion_ts",
)

class RadialIngestJob:
    def __init__(
        self,
        client: ProductClient,
        normalizer: RadialNormalizer,
        validator: RadialValidator,
        trino: TrinoClient,
        schema: str,
        table: str,
        batch_size: int = 500,
    ):
        self.client = client
        self.normalizer = normalizer
        self.validator = validator
        self.trino = trino
        self.schema = schema
        self.table = table
        self.batch_size = batch_size

    def run(
        self,
        product_id: str,
        scan_time: Optional[str] = None,
        payload: Optional[bytes] = None,
        offset: int = 0,
    ) -> int:
        if payload is None:
            payload = self.client.fetch_product(product_id)

        _, body = take_bytes(payload, offset)
        decoded, tail = radials(body)
        logger.info(f"Decoded {len(decoded)} radials from {product_id} ({len(tail)} trailing bytes)")

        good: List[Dict[str, Any]] = []
        bad_count = 0

        for idx, r in enumerate(decoded):
            n = self.normalizer.normalize(product_id, idx, r, scan_time=scan_time)
            ok, err = self.validator.validate(n)
            if ok:
                good.append(n)
            else:
                bad_count += 1
                logger.debug(f"Radial {idx} rejected: {err}")

        if not good:
            logger.warning("No valid radials to ingest.")
            return 0

        # Insert in batches to keep each statement bounded
        total_batches = (len(good) + self.batch_size - 1) // self.batch_size
        logger.info(f"Inserting {len(good)} radials in {total_batches} batch(es)...")

        for i in range(0, len(good), self.batch_size):
            batch = good[i:i+self.batch_size]
            batch_num = (i // self.batch_size) + 1
            self._insert_batch(batch)
            logger.info(f"  Batch {batch_num}/{total_batches} inserted ({len(batch)} radials)")

        logger.info(f"Ingested {len(good)} radials ({bad_count} invalid skipped)")
        return len(good)

    def _insert_batch(self, batch: List[Dict[str, Any]]) -> None:
        values_sql = []
        for r in batch:
            rates = r.get("precip_rates_in_per_hr") or []
            rates_sql = "ARRAY[" + ",".join(self._sql_double(v) for v in rates) + "]"
            row = [
                self._sql_str(r["product_id"]),
                str(int(r["radial_index"])),
                self._sql_double(r["azimuth_deg"]),
                self._sql_double(r["elevation_deg"]),
                self._sql_double(r["width_deg"]),
                str(int(r["num_bins"])),
                rates_sql,
                self._sql_double(r["max_precip_rate_in_per_hr"]),
                str(int(r["scan_time_ms"])) if r["scan_time_ms"] is not None else "NULL",
                str(int(r["ingestion_ts"])),
            ]
            values_sql.append("(" + ",".join(row) + ")")

        sql = f"""
        INSERT INTO {self.schema}.{self.table}
        ({", ".join(COLUMNS)})
        VALUES {",".join(values_sql)}
        """
        self.trino.execute(sql)

    def _sql_str(self, s: str) -> str:
        if s is None:
            return "NULL"
        escaped = str(s).replace("'", "''")
        return f"'{escaped}'"

    def _sql_double(self, v: float) -> str:
        if v is None:
            return "NULL"
        return f"{float(v):.9e}"
