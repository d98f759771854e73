def create_schema(schema: str) -> str:
    return f"""CREATE SCHEMA IF NOT EXISTS {schema}"""

def create_radials_table(schema: str, table: str) -> str:
    return f"""
    CREATE TABLE IF NOT EXISTS {schema}.{table} (
        product_id VARCHAR,
        radial_index INTEGER,
        azimuth_deg DOUBLE,
        elevation_deg DOUBLE,
        width_deg DOUBLE,
        num_bins INTEGER,
        precip_rates_in_per_hr ARRAY(DOUBLE),
        max_precip_rate_in_per_hr DOUBLE,
        scan_time_ms BIGINT,
        ingestion_ts BIGINT
    )
    WITH (
        format = 'PARQUET',
        location = 's3://iceberg/{schema}/{table}'
    )
    """
