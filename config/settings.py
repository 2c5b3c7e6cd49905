from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    # Logging
    log_level: str = "INFO"
    json_logs: bool = False
    log_file: str = ""  # empty = console only

    # Programs (override for devnet / localnet deployments)
    mmm_program_id: str = "mmm3XBJg5gk8XJxEKBvdgptZz6SgK4tXvn36sodowMc"
    token_metadata_program_id: str = "metaqbxxUerdq28cj1RbAWkYQm3ybzjb6a8bt518x1s"


settings = Settings()
