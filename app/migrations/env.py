import logging

from alembic import context
from sqlalchemy import engine_from_config, pool

from database import Base
import model  # noqa: F401  registers the cinema tables on Base.metadata
from utils.config import settings
from utils.logger import migration_step, setup_logging

config = context.config

setup_logging(getattr(logging, settings.LOG_LEVEL, logging.INFO))
logger = logging.getLogger("migrations.env")

target_metadata = Base.metadata

if not config.get_main_option("sqlalchemy.url"):
    config.set_main_option("sqlalchemy.url", settings.DATABASE_URL.replace("%", "%%"))


def _log_step(*, ctx, step, heads, run_args):
    direction = "upgrade" if step.is_upgrade else "downgrade"
    with migration_step(f"{direction}:{step.up_revision_id}"):
        logger.info("applied %s %s, heads now %s", direction, step.up_revision_id, ",".join(sorted(heads)) or "base")


def run_migrations_offline() -> None:
    """Emit the SQL to stdout instead of running it against a database."""
    context.configure(
        url=config.get_main_option("sqlalchemy.url"),
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )

    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    # A caller may hand over an open connection (tests, migrator.upgrade with a shared engine)
    connection = config.attributes.get("connection")
    if connection is not None:
        _run_with_connection(connection)
        return

    connectable = engine_from_config(
        config.get_section(config.config_ini_section, {}),
        prefix="sqlalchemy.",
        poolclass=pool.NullPool,
    )
    with connectable.connect() as connection:
        _run_with_connection(connection)


def _run_with_connection(connection) -> None:
    context.configure(
        connection=connection,
        target_metadata=target_metadata,
        on_version_apply=_log_step,
        render_as_batch=connection.dialect.name == "sqlite",
    )
    with context.begin_transaction():
        context.run_migrations()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
