from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    APP_NAME: str = "Audio Stream API"
    ENV: str = "dev"
    LOG_LEVEL: str = "INFO"

    # Stores live under DATA_DIR:
    #   <DATA_DIR>/Document/<documentID>.json
    #   <DATA_DIR>/Storage/<storageID>.<fileType>
    DATA_DIR: str = "."
    DOCUMENT_DIR: str = "Document"
    DOCUMENT_SUFFIX: str = ".json"
    STORAGE_DIR: str = "Storage"

    # Server (fixed port, no CLI flags)
    HOST: str = "0.0.0.0"
    PORT: int = 8080


settings = Settings()
