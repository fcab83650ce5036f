"""Tests for the finance database engine module."""

import pytest

from finhealth.infrastructure import db as db_module
from finhealth.infrastructure.container import build_finance_repository
from finhealth.infrastructure.settings import DashboardSettings


@pytest.fixture
def env_dir(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("FINANCE_DB_URL", raising=False)
    monkeypatch.setattr(db_module, "_finance_engine", None)
    return tmp_path


def test_get_env_var_loads_dotenv_file(env_dir):
    """FINANCE_DB_URL may come from a .env file in the working directory."""
    (env_dir / ".env").write_text(
        "FINANCE_DB_URL=sqlite:///from-dotenv.db\n",
        encoding="utf-8",
    )

    assert db_module._get_env_var("FINANCE_DB_URL") == "sqlite:///from-dotenv.db"


def test_get_env_var_prefers_process_environment(env_dir, monkeypatch):
    """An exported variable wins over the .env file."""
    (env_dir / ".env").write_text(
        "FINANCE_DB_URL=sqlite:///from-dotenv.db\n",
        encoding="utf-8",
    )
    monkeypatch.setenv("FINANCE_DB_URL", "sqlite:///exported.db")

    assert db_module._get_env_var("FINANCE_DB_URL") == "sqlite:///exported.db"


def test_get_env_var_raises_without_env_or_file(env_dir):
    """No variable and no .env should raise with the variable name."""
    with pytest.raises(RuntimeError, match="FINANCE_DB_URL"):
        db_module._get_env_var("FINANCE_DB_URL")


def test_get_finance_engine_builds_pooled_engine_once(env_dir, monkeypatch):
    """The engine is built once from FINANCE_DB_URL with a checked pool."""
    db_path = env_dir / "finance.db"
    monkeypatch.setenv("FINANCE_DB_URL", f"sqlite:///{db_path}")

    engine = db_module.get_finance_engine()

    try:
        assert db_module.get_finance_engine() is engine
        assert isinstance(engine.pool, db_module.QueuePool)
        assert engine.pool._pre_ping is True
        assert engine.url.database == str(db_path)
    finally:
        engine.dispose()


def test_repository_reads_through_configured_engine(env_dir, monkeypatch):
    """Settings, adapter and repository wire up against a real database."""
    monkeypatch.setenv("FINANCE_DB_URL", f"sqlite:///{env_dir / 'finance.db'}")
    engine = db_module.get_finance_engine()
    try:
        with engine.begin() as conn:
            conn.exec_driver_sql(
                "CREATE TABLE loans (id INTEGER, user_id TEXT, name TEXT, "
                "monthly_payment NUMERIC, is_active BOOLEAN, due_date TEXT, "
                "created_at TEXT)"
            )
            conn.exec_driver_sql(
                "INSERT INTO loans VALUES "
                "(1, 'u1', 'Car', 1500000, 1, '10', '2024-01-01'), "
                "(2, 'u1', 'Old', 900000, 0, '5', '2023-01-01'), "
                "(3, 'u2', 'Other', 100, 1, '1', '2024-02-01')"
            )

        repository = build_finance_repository(
            settings=DashboardSettings(user_id="u1"),
        )
        loans = repository.fetch_active_loans()
    finally:
        engine.dispose()

    assert [(loan.id, loan.name, loan.due_day) for loan in loans] == [
        ("1", "Car", "10"),
    ]
