import fcntl
from collections.abc import Iterator
from contextlib import contextmanager

from alembic.config import Config

from alembic import command
from arena.config import config
from arena.utils.logging import logger


@contextmanager
def migration_lock(lock_path: str) -> Iterator[None]:
    """Serialize migrations between app workers starting at the same time."""
    with open(lock_path, "w", encoding="utf-8") as lock_file:
        fcntl.flock(lock_file, fcntl.LOCK_EX)
        try:
            yield
        finally:
            fcntl.flock(lock_file, fcntl.LOCK_UN)


def get_alembic_config() -> Config:
    return Config(config.alembic_config_path)


def alembic_run_migrations(revision: str = "head") -> None:
    with migration_lock(config.migration_lock_path):
        logger.info(f"Upgrading database schema to revision {revision}")
        command.upgrade(get_alembic_config(), revision)
