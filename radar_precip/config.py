from dataclasses import dataclass
import os

@dataclass(frozen=True)
class Settings:
    # Product source: PRODUCT_PATH, or PRODUCT_BASE_URL + PRODUCT_ID.
    # The payload must already have its outer framing (WMO header, compressed
    # symbology block) removed, so that the radial array starts at
    # RADIAL_ARRAY_OFFSET. Raw Level-III files as published do not qualify.
    product_token: str = os.environ.get("PRODUCT_API_TOKEN", "")
    product_base_url: str = os.environ.get("PRODUCT_BASE_URL", "")
    product_id: str = os.environ.get("PRODUCT_ID", "")
    # Read from disk instead of HTTP when set
    product_path: str = os.environ.get("PRODUCT_PATH", "")
    scan_time: str = os.environ.get("SCAN_TIME", "")
    radial_array_offset: int = int(os.environ.get("RADIAL_ARRAY_OFFSET", "0"))
    request_timeout_s: int = int(os.environ.get("REQUEST_TIMEOUT_S", "30"))

    # Trino
    trino_host: str = os.environ.get("TRINO_HOST", "localhost")
    trino_port: int = int(os.environ.get("TRINO_PORT", "8080"))
    trino_user: str = os.environ.get("TRINO_USER", "pipeline")
    trino_password: str = os.environ.get("TRINO_PASSWORD", "")
    trino_catalog: str = os.environ.get("TRINO_CATALOG", "iceberg")
    trino_schema: str = os.environ.get("TRINO_SCHEMA", "radar")

    # Tables
    radials_table: str = os.environ.get("RADIALS_TABLE", "precip_radials")

    # Pipeline options
    insert_batch_size: int = int(os.environ.get("INSERT_BATCH_SIZE", "500"))
    log_level: str = os.environ.get("LOG_LEVEL", "INFO")
