import asyncio
import sys
from os.path import abspath, dirname
from logging.config import fileConfig

from sqlalchemy import pool
from sqlalchemy.engine import Connection
from sqlalchemy.ext.asyncio import async_engine_from_config
from alembic import context

# 1. Ajout du chemin backend/ pour permettre les imports de 'withapp'
sys.path.insert(0, abspath(dirname(dirname(__file__))))

# 2. Composants with
from withapp.core.config import settings
from withapp.core.database import Base
# Import des modèles pour que Base.metadata soit peuplé
from withapp.shared.models import (  # noqa: F401
    Account, Profile, Question, Vote, Notification, BoardPost,
)

# Objet de configuration Alembic
config = context.config

# 3. Injection dynamique de l'URL, même driver async que l'application
config.set_main_option("sqlalchemy.url", settings.DATABASE_URL)

if config.config_file_name is not None:
    fileConfig(config.config_file_name)

# 4. Définition de la cible des métadonnées
target_metadata = Base.metadata


def run_migrations_offline() -> None:
    """Mode offline : génère des scripts SQL sans connexion directe."""
    url = config.get_main_option("sqlalchemy.url")
    context.configure(
        url=url,
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )

    with context.begin_transaction():
        context.run_migrations()


def do_run_migrations(connection: Connection) -> None:
    context.configure(connection=connection, target_metadata=target_metadata)

    with context.begin_transaction():
        context.run_migrations()


async def run_migrations_online() -> None:
    """Mode online : exécute les migrations via le moteur async."""
    connectable = async_engine_from_config(
        config.get_section(config.config_ini_section, {}),
        prefix="sqlalchemy.",
        poolclass=pool.NullPool,
    )

    async with connectable.connect() as connection:
        await connection.run_sync(do_run_migrations)

    await connectable.dispose()


if context.is_offline_mode():
    run_migrations_offline()
else:
    asyncio.run(run_migrations_online())
