"""
metrics_ingestion -- CSV upload ingestion for KPI samples and staff rows.

Parses upload text, validates each row, and upserts valid rows into the
kernel tables by natural key, collecting per-row errors instead of failing
the whole upload.

Architecture:
    metrics_ingestion/ is a top-level package. Nothing in metrics_kernel/
    imports from ingestion.
"""
