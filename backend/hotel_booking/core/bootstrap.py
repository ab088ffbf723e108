# hotel_booking/core/bootstrap.py
"""
Bootstrap module for application initialization.
Probes the relational store once on startup so a misconfigured DATABASE_URL
shows up in the logs immediately rather than on the first request, and flags
deployments still running on the development signing secret.
"""
import logging
from tortoise import connections

from hotel_booking.config import DEFAULT_SECRET_KEY, Settings, settings

logger = logging.getLogger("uvicorn.error")

_VERSION_QUERIES = {
    "postgres": "SELECT version() AS version",
    "sqlite": "SELECT sqlite_version() AS version",
}


async def log_database_version() -> str | None:
    """
    Log the database server version.

    Returns the version string, or None when the dialect has no known probe.
    Connection errors propagate: the app should not start without its store.
    """
    conn = connections.get("default")
    query = _VERSION_QUERIES.get(conn.capabilities.dialect)
    if query is None:
        logger.warning("[bootstrap] no version probe for dialect %s", conn.capabilities.dialect)
        return None
    rows = await conn.execute_query_dict(query)
    version = rows[0]["version"] if rows else None
    logger.info("[bootstrap] connected to %s: %s", conn.capabilities.dialect, version)
    return version


def warn_on_default_secret(cfg: Settings = settings) -> bool:
    """
    Warn when a non-dev deployment still signs tokens with the built-in secret.

    Returns True when the warning was emitted.
    """
    if cfg.env == "dev" or cfg.secret_key != DEFAULT_SECRET_KEY:
        return False
    logger.warning("[bootstrap] SECRET_KEY is not set (env=%s); tokens are signed with the development secret", cfg.env)
    return True
