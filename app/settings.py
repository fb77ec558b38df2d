from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    LISTINGS_PATH: str = "/properties"         # página de resultados en el front
    API_PATH: str = "/api/properties"          # endpoint de búsqueda del backend REST

    DEFAULT_PAGE_LIMIT: int = 12
    DISPATCH_DEBOUNCE_MS: int = 300            # solo la llamada de búsqueda, nunca el estado

    CORS_ALLOW_ORIGINS: list[str] = ["*"]
    LOG_LEVEL: str = "INFO"                    # DEBUG para ver claves descartadas

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

settings = Settings()
