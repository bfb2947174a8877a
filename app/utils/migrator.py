"""
Programmatic access to the cinema schema migrations.

Wraps the Alembic commands so the schema can be brought up or torn down from
Python (tests, seed scripts, deploy hooks) without going through the CLI.
Failures are logged and re-raised exactly as Alembic/the driver raised them.
"""
import logging
from pathlib import Path
from typing import Callable, Optional

from alembic import command
from alembic.config import Config
from alembic.migration import MigrationContext
from alembic.operations import Operations
from alembic.script import ScriptDirectory
from sqlalchemy import create_engine
from sqlalchemy.engine import Connection

from utils.config import settings
from utils.logger import migration_step

logger = logging.getLogger("utils.migrator")

MIGRATIONS_DIR = Path(__file__).resolve().parent.parent / "migrations"


def alembic_config(database_url: Optional[str] = None) -> Config:
    """Alembic config for the bundled script directory, without needing alembic.ini."""
    cfg = Config()
    cfg.set_main_option("script_location", str(MIGRATIONS_DIR))
    # configparser interpolation treats % specially (urlencoded passwords)
    cfg.set_main_option("sqlalchemy.url", (database_url or settings.DATABASE_URL).replace("%", "%%"))
    return cfg


def _run(direction: str, revision: str, database_url: Optional[str]) -> None:
    cfg = alembic_config(database_url)
    engine = create_engine(database_url or settings.DATABASE_URL)
    with migration_step(f"{direction}:{revision}"):
        logger.info("%s to %s started", direction, revision)
        try:
            with engine.begin() as connection:
                cfg.attributes["connection"] = connection
                getattr(command, direction)(cfg, revision)
        except Exception:
            logger.exception("%s to %s failed", direction, revision)
            raise
        finally:
            engine.dispose()
        logger.info("%s to %s finished", direction, revision)


def upgrade(revision: str = "head", database_url: Optional[str] = None) -> None:
    _run("upgrade", revision, database_url)


def downgrade(revision: str = "base", database_url: Optional[str] = None) -> None:
    _run("downgrade", revision, database_url)


def current_revision(database_url: Optional[str] = None) -> Optional[str]:
    """Revision stamped in the database's alembic_version table, or None when unmigrated."""
    engine = create_engine(database_url or settings.DATABASE_URL)
    try:
        with engine.connect() as connection:
            return MigrationContext.configure(connection).get_current_revision()
    finally:
        engine.dispose()


def load_revision(revision_id: str, database_url: Optional[str] = None):
    """Return the imported module of a revision script."""
    script = ScriptDirectory.from_config(alembic_config(database_url))
    return script.get_revision(revision_id).module


def run_operations(connection: Connection, fn: Callable[[], None]) -> None:
    """
    Run a revision's upgrade/downgrade callable against ``connection`` with
    ``alembic.op`` bound to it. Skips the alembic_version bookkeeping, so
    running an upgrade twice hits the database's duplicate-table error.
    """
    ctx = MigrationContext.configure(connection)
    label = f"{fn.__name__}:{getattr(fn, '__module__', '?')}"
    with migration_step(label), Operations.context(ctx):
        logger.info("running %s", fn.__name__)
        try:
            fn()
        except Exception:
            logger.exception("%s failed", fn.__name__)
            raise
