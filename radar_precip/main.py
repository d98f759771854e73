from pathlib import Path

from radar_precip.config import Settings
from radar_precip.db.trino_client import TrinoClient
from radar_precip.db import ddl

from radar_precip.ingestion.product_client import ProductClient
from radar_precip.ingestion.normalizer import RadialNormalizer
from radar_precip.ingestion.validator import RadialValidator
from radar_precip.ingestion.ingest_job import RadialIngestJob

from radar_precip.utils.logging import get_logger, setup_logging

logger = get_logger(__name__)

def _trino(s: Settings) -> TrinoClient:
    return TrinoClient(
        s.trino_host, s.trino_port, s.trino_user, s.trino_catalog, s.trino_schema,
        password=s.trino_password or None,
    )

def init(s: Settings):
    trino = _trino(s)
    trino.execute(ddl.create_schema(s.trino_schema))
    trino.execute(ddl.create_radials_table(s.trino_schema, s.radials_table))

def ingest(s: Settings) -> int:
    if not s.product_path and not (s.product_base_url and s.product_id):
        raise ValueError(
            "No product source configured: set PRODUCT_PATH, or PRODUCT_BASE_URL and PRODUCT_ID, "
            "to a payload whose radial array starts at RADIAL_ARRAY_OFFSET"
        )

    trino = _trino(s)

    client = ProductClient(s.product_base_url, s.product_token, timeout_s=s.request_timeout_s)
    normalizer = RadialNormalizer()
    validator = RadialValidator()

    payload = None
    product_id = s.product_id
    if s.product_path:
        path = Path(s.product_path)
        payload = path.read_bytes()
        product_id = path.name
        logger.info(f"Read product {path} ({len(payload):,} bytes)")

    job = RadialIngestJob(
        client, normalizer, validator, trino, s.trino_schema, s.radials_table,
        batch_size=s.insert_batch_size,
    )
    return job.run(
        product_id,
        scan_time=s.scan_time or None,
        payload=payload,
        offset=s.radial_array_offset,
    )

def main():
    s = Settings()
    setup_logging(s.log_level)
    init(s)
    ingest(s)

if __name__ == "__main__":
    main()
