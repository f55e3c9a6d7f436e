import yaml
import os
from functools import lru_cache
from typing import Optional, Dict, Any
from pydantic import BaseModel, Field


class DatabaseConfig(BaseModel):
    # In-process SQLite by default; any SQLAlchemy URL works.
    url: str = "sqlite://"
    echo: bool = False
    # Seconds a unit of work waits for the store lock before failing
    lock_timeout: float = 30.0


class WebConfig(BaseModel):
    host: str = "0.0.0.0"
    port: int = 8080


class ScoringConfig(BaseModel):
    """
    Point awards applied by the ScoringEngine.

    Awards are one-time credits: deleting a skill or removing an
    endorsement does not claw them back.
    """
    skill_added_points: int = Field(default=10, ge=0)
    endorsement_given_points: int = Field(default=5, ge=0)
    endorsement_received_points: int = Field(default=15, ge=0)


class RankingConfig(BaseModel):
    leaderboard_limit: int = Field(default=10, ge=0)


class AppConfig(BaseModel):
    database: DatabaseConfig = Field(default_factory=DatabaseConfig)
    web: WebConfig = Field(default_factory=WebConfig)
    scoring: ScoringConfig = Field(default_factory=ScoringConfig)
    ranking: RankingConfig = Field(default_factory=RankingConfig)
    seed_sample_data: bool = False


def _apply_env_overrides(data: Dict[str, Any]) -> Dict[str, Any]:
    """Apply environment variable overrides on top of the YAML data."""
    env_db_url = os.environ.get("DATABASE_URL")
    if env_db_url:
        data.setdefault('database', {})
        data['database']['url'] = env_db_url

    if 'WEB_HOST' in os.environ:
        data.setdefault('web', {})
        data['web']['host'] = os.environ['WEB_HOST']

    if 'WEB_PORT' in os.environ:
        data.setdefault('web', {})
        data['web']['port'] = int(os.environ['WEB_PORT'])

    env_seed = os.environ.get("SEED_SAMPLE_DATA")
    if env_seed is not None:
        data['seed_sample_data'] = env_seed.lower() in ("1", "true", "yes")

    return data


def load_config(config_path: str = "config.yaml") -> AppConfig:
    # If not found at relative path (e.g. running from another directory), try the project root
    if not os.path.exists(config_path):
        base_dir = os.path.dirname(os.path.abspath(__file__))
        config_path = os.path.join(base_dir, "..", "config.yaml")

    data: Dict[str, Any] = {}
    if os.path.exists(config_path):
        with open(config_path, "r") as f:
            data = yaml.safe_load(f) or {}

    for section in ('database', 'web', 'scoring', 'ranking'):
        if data.get(section) is None:
            data.pop(section, None)

    return AppConfig(**_apply_env_overrides(data))


@lru_cache()
def get_config(config_path: Optional[str] = None) -> AppConfig:
    """Load configuration once per process."""
    return load_config(config_path or "config.yaml")
