import os


def _env_flag(name: str, default: str = "false") -> bool:
    return os.environ.get(name, default).lower() in ("1", "true", "yes")


class Settings:
    PROJECT_NAME: str = "vocabtype"
    DEBUG: bool = _env_flag("DEBUG")
    LOG_DIR: str = os.environ.get("LOG_DIR", "log")
    LOG_FILE: str = "vocabtype.log"
    LOG_LEVEL: str = os.environ.get("LOG_LEVEL", "INFO")
    LOG_TO_DB: bool = _env_flag("LOG_TO_DB")
    DB_DIR: str = os.environ.get("DB_DIR", "db")
    DB_FILE: str = "vocabtype.db"
    VOCAB_DIR: str = os.environ.get("VOCAB_DIR", "vocabulary")
    API_PREFIX: str = "/api/vocab"
    MAX_WORDS: int = 50
    DEFAULT_WORD_COUNT: int = 1
    WORDNET_AUTO_DOWNLOAD: bool = _env_flag("WORDNET_AUTO_DOWNLOAD")
    WORDNET_PRELOAD: bool = _env_flag("WORDNET_PRELOAD")
    DEV_API_URL: str = os.environ.get("DEV_API_URL", "http://localhost:5005/vocab")
    ROOT_PATH: str = os.environ.get("ROOT_PATH", "")
    HOST: str = os.environ.get("HOST", "0.0.0.0")
    PORT: int = int(os.environ.get("PORT", "5005"))


settings = Settings()
