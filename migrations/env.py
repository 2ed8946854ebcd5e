from logging.config import fileConfig

from alembic import context
from sqlalchemy import engine_from_config, pool

from sampurnan.config import Config
from sampurnan.infrastructure.persistence.migrate import to_sync_url
from sampurnan.infrastructure.persistence.tables import metadata

config = context.config

# Only the alembic CLI uses the ini loggers; the app has already set up logging.
if config.config_file_name is not None and config.attributes.get("configure_logger", True):
    fileConfig(config.config_file_name, disable_existing_loggers=False)

# Plain `alembic upgrade head` from the repo root takes the URL from app config.
if config.get_main_option("sqlalchemy.url") == "sqlite:///sampurnan.db":
    config.set_main_option("sqlalchemy.url", to_sync_url(Config().database.url))

target_metadata = metadata


def run_migrations_offline() -> None:
    context.configure(
        url=config.get_main_option("sqlalchemy.url"),
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
        render_as_batch=True,
    )
    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    connectable = engine_from_config(
        config.get_section(config.config_ini_section, {}),
        prefix="sqlalchemy.",
        poolclass=pool.NullPool,
    )
    with connectable.connect() as connection:
        context.configure(
            connection=connection,
            target_metadata=target_metadata,
            render_as_batch=True,
        )
        with context.begin_transaction():
            context.run_migrations()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
