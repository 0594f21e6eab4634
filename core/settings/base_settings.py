from pydantic_settings import BaseSettings, SettingsConfigDict


class CommerceBaseSettings(BaseSettings):
    """Shared config: one .env file, unknown variables ignored."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )
