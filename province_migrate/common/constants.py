"""Application constants."""

USER_AGENT = "province-migrate/2.0 (+address-data; contact: configured-email)"
EXIT_SUCCESS = 0
EXIT_HARD_FAIL = 1
JSON_LOG_FIELDS = (
    "timestamp",
    "run_id",
    "stage",
    "region",
    "service_code",
    "event",
    "status",
    "duration_ms",
    "rows_out",
    "error_code",
    "message",
)
