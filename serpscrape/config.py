import os
import threading
import tomllib # Python 3.11+
from pathlib import Path
from typing import Literal, Optional

from pydantic import BaseModel, Field, ValidationError
from dotenv import load_dotenv

from serpscrape.exceptions import ConfigurationError
from serpscrape.schema import SearchOptions

# Load environment variables from .env file
load_dotenv()

def get_project_root() -> Path:
    """Get the project root directory"""
    return Path(__file__).resolve().parent.parent

PROJECT_ROOT = get_project_root()

class SearchSettings(BaseModel):
    num_results: int = Field(10, ge=0, description="Desired number of results; the request asks for two more")
    lang: str = Field("en", description="Interface language sent as 'hl'")
    timeout: int = Field(5000, gt=0, description="Request timeout in milliseconds")
    safe: Literal["active", "off"] = Field("active", description="SafeSearch mode")
    region: Optional[str] = Field(None, description="Country code sent as 'gl' when set")
    start: int = Field(0, ge=0, description="Pagination offset")
    unique: bool = Field(False, description="Drop results whose URL was already seen")
    proxy: Optional[str] = Field(None, description="Proxy URL, e.g. http://proxy.local:3128")

    def to_options(self) -> SearchOptions:
        return SearchOptions(**self.model_dump())

class LoggingSettings(BaseModel):
    print_level: str = Field("INFO", description="Level of the stderr sink")
    logfile_level: str = Field("DEBUG", description="Level of the log file sink")
    log_dir: Path = Field(PROJECT_ROOT / "logs", description="Directory for log files")
    file_logging: bool = Field(False, description="Whether to write a log file at all")

class AppConfig(BaseModel):
    search: SearchSettings = Field(default_factory=SearchSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

class Config:
    _instance = None
    _lock = threading.Lock()
    _initialized = False

    def __new__(cls):
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        if not self._initialized:
            with self._lock:
                if not self._initialized:
                    self._app_config: Optional[AppConfig] = None
                    self._load_initial_config()
                    self._initialized = True

    @staticmethod
    def _get_config_path() -> Path:
        env_path = os.getenv("SERPSCRAPE_CONFIG")
        if env_path:
            return Path(env_path)
        return PROJECT_ROOT / "config" / "serpscrape.toml"

    def _load_toml_config(self) -> dict:
        config_path = self._get_config_path()
        if not config_path.exists():
            return {}
        try:
            with config_path.open("rb") as f: return tomllib.load(f)
        except (OSError, tomllib.TOMLDecodeError) as e:
            raise ConfigurationError(f"Failed to read config file {config_path}: {e}") from e

    def _load_initial_config(self):
        raw_config = self._load_toml_config()

        search_conf = dict(raw_config.get("search", {}))
        env_overrides = {
            "lang": os.getenv("SERPSCRAPE_LANG"),
            "region": os.getenv("SERPSCRAPE_REGION"),
            "proxy": os.getenv("SERPSCRAPE_PROXY", os.getenv("PROXY_SERVER")),
            "timeout": os.getenv("SERPSCRAPE_TIMEOUT"),
        }
        for key, value in env_overrides.items():
            if value: search_conf[key] = value

        logging_conf = raw_config.get("logging", {})

        try:
            self._app_config = AppConfig(
                search=SearchSettings(**search_conf),
                logging=LoggingSettings(**logging_conf),
            )
        except ValidationError as e:
            raise ConfigurationError(f"Invalid serpscrape configuration: {e}") from e

    def reload(self) -> None:
        with self._lock:
            self._load_initial_config()

    @property
    def search(self) -> SearchSettings:
        if self._app_config is None: self._load_initial_config()
        assert self._app_config is not None
        return self._app_config.search

    @property
    def logging(self) -> LoggingSettings:
        if self._app_config is None: self._load_initial_config()
        assert self._app_config is not None
        return self._app_config.logging

    @property
    def root_path(self) -> Path: return PROJECT_ROOT

config = Config()
