from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    ENV: str = "dev"
    LOG_LEVEL: str = "INFO"

    BOOKINGS_STORE_PROVIDER: str | None = None  # "json" | "memory"; None picks by ENV
    BOOKINGS_STORAGE_PATH: str = "./data/bookings.v1.json"
    BOOKINGS_SEED_DEMO: bool = True


settings = Settings()
