from pathlib import Path

from pydantic_settings import BaseSettings

from magicstream_seed.seeding.models import SeedMode


class Settings(BaseSettings):
    MONGODB_URI: str = "mongodb://localhost:27017"
    DATABASE_NAME: str = "magic-stream-movies"
    SEED_DATA_DIR: Path = Path("/seed-data")
    SEED_MODE: SeedMode = SeedMode.OVERWRITE
    SERVER_SELECTION_TIMEOUT_MS: int = 5000
    LOG_LEVEL: str = "INFO"

    model_config = {"env_file": ".env"}


settings = Settings()
