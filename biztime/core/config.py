from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # SQLite by default; any SQLAlchemy URL works (postgresql://...)
    DATABASE_URL: str = "sqlite:///./biztime.db"

    LOG_LEVEL: str = "INFO"

    # Echo every SQL statement through the sqlalchemy.engine logger
    SQL_ECHO: bool = False


settings = Settings()
