from dataclasses import dataclass

from core.config_loader import AppConfig
from core.seed import seed_sample_data
from database.database import DatabaseManager
from database.uow import store_uow


@dataclass
class AppContext:
    """Application context container that holds all wired dependencies.

    Services are not held here: ScoringEngine and RankingService are bound
    to an EntityStore per operation, obtained via store_uow(db_manager).
    """
    config: AppConfig
    db_manager: DatabaseManager

    @classmethod
    def build(cls, config: AppConfig) -> "AppContext":
        """Build an AppContext from config and prepare the schema.

        Args:
            config: Loaded application configuration

        Returns:
            Fully wired AppContext instance
        """
        db_manager = DatabaseManager(config.database)
        db_manager.create_all()

        if config.seed_sample_data:
            with store_uow(db_manager) as store:
                seed_sample_data(store)

        return cls(config=config, db_manager=db_manager)

    def close(self) -> None:
        self.db_manager.dispose()
