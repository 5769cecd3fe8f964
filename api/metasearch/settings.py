from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    API_HOST: str = "0.0.0.0"
    API_PORT: int = 8000
    LOG_LEVEL: str = "INFO"

    USER_AGENT: str = "metasearch/0.1"

    # Per-source budget inside one aggregated search
    SOURCE_TIMEOUT_MS: int = 5000
    HTTP_TIMEOUT_SECONDS: float = 5.0

    MAX_RESULTS: int = 5
    RELATED_TOPICS_LIMIT: int = 4

    WIKIPEDIA_SEARCH_URL: str = "https://en.wikipedia.org/w/api.php"
    WIKIPEDIA_SUMMARY_URL: str = "https://en.wikipedia.org/api/rest_v1/page/summary/"
    WIKIPEDIA_PAGE_URL: str = "https://en.wikipedia.org/wiki/"

    DUCKDUCKGO_URL: str = "https://api.duckduckgo.com/"

    HN_SEARCH_URL: str = "https://hn.algolia.com/api/v1/search"
    HN_ITEM_URL: str = "https://news.ycombinator.com/item"

settings = Settings()
