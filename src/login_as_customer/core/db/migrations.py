"""Migration runner shared by deployments and the integration tests."""

from pathlib import Path

from alembic.config import Config

from alembic import command

# alembic.ini at the project root
DEFAULT_CONFIG_PATH = Path(__file__).resolve().parents[4] / "alembic.ini"


def run_migrations_sync(config_path: str | Path = DEFAULT_CONFIG_PATH) -> None:
    """Run Alembic migrations synchronously up to head."""
    command.upgrade(Config(str(config_path)), "head")
