from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="APP_", extra="ignore")

    FEED_URL: str = (
        "https://docs.google.com/spreadsheets/d/e/2PACX-1vR-uxWu_jDNEq9htZeOqQYOgLzrwbGQlYNfvbVbI8Bq8xIxcgebt_E9XyMTmhTbdB6A4plJj2qiIKn-"
        "/pub?gid=0&single=true&output=csv"
    )

    FETCH_TIMEOUT_SECONDS: int = 10
    USER_AGENT: str = (
        "Mozilla/5.0 (X11; Linux x86_64) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/120.0 Safari/537.36"
    )

    # typical match length, start to final whistle (2h30 for football)
    DEFAULT_DURATION_MINUTES: int = 150
    ALL_CATEGORIES: str = "All"

    CREST_BASE_PATH: str = "/escudos"
    LOG_LEVEL: str = "INFO"

settings = Settings()
