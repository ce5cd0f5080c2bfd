from pathlib import Path

import pytest
from alembic.config import Config

from arena.utils import alembic as alembic_utils


def test_alembic_run_migrations_upgrades_under_lock(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    lock_path = tmp_path / "migrations.lock"
    upgrades: list[tuple[str | None, str]] = []

    def fake_upgrade(alembic_config: Config, revision: str) -> None:
        assert lock_path.exists()
        upgrades.append((alembic_config.config_file_name, revision))

    monkeypatch.setattr(alembic_utils.config, "migration_lock_path", str(lock_path))
    monkeypatch.setattr(alembic_utils.config, "alembic_config_path", "custom-alembic.ini")
    monkeypatch.setattr(alembic_utils.command, "upgrade", fake_upgrade)

    alembic_utils.alembic_run_migrations()
    alembic_utils.alembic_run_migrations("4c1e7b2a9d30")

    assert upgrades == [("custom-alembic.ini", "head"), ("custom-alembic.ini", "4c1e7b2a9d30")]
