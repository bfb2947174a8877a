import logging
import contextvars
from contextlib import contextmanager
from typing import Optional

# Label of the revision step currently running, e.g. "upgrade:9c1f2d7e4a10"
migration_ctx: contextvars.ContextVar[Optional[str]] = contextvars.ContextVar("migration", default=None)


class MigrationFilter(logging.Filter):
    """Stamp records with `migration`; "-" outside of any step."""
    def filter(self, record: logging.LogRecord) -> bool:
        record.migration = migration_ctx.get() or "-"
        return True


def setup_logging(level=logging.INFO) -> None:
    """
    Route log output to stderr with the running revision step in brackets.

    alembic env.py and the seed script call this; a root logger that already
    has handlers is left as it is.
    """
    root = logging.getLogger()
    if root.handlers:
        return

    handler = logging.StreamHandler()
    fmt = "%(asctime)s %(levelname)s [%(migration)s] %(name)s: %(message)s"
    formatter = logging.Formatter(fmt)
    handler.setFormatter(formatter)

    handler.addFilter(MigrationFilter())
    root.setLevel(level)
    root.addHandler(handler)


@contextmanager
def migration_step(label: str):
    """Set the migration step label for log records emitted inside the block."""
    token = migration_ctx.set(label)
    try:
        yield
    finally:
        migration_ctx.reset(token)


def get_migration_step() -> Optional[str]:
    return migration_ctx.get()
