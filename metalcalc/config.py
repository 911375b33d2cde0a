from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    APP_NAME: str = "metalcalc"
    DEFAULT_UNIT: str = "mm"
    DEFAULT_LANGUAGE: str = "en"
    DEFAULT_PRICING_MODEL: str = "per_kg"

    # Optional JSON files merged over the built-in tables
    MATERIAL_CATALOG_PATH: str = ""  # {"steel": 7.85, ...} or {"steel": {"density": 7.85, "names": {...}}}
    PROFILE_CATALOG_PATH: str = ""   # {"HEA 200": 42.3, ...}

    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"


settings = Settings()
