"""
SERP Extractor Configuration

Controls how raw SERP HTML is turned into a parsed tree and how relative
links are resolved:
- SERP_HTML_PARSER: BeautifulSoup backend, "html.parser" (default) or "lxml"
- SERP_DEFAULT_HOSTNAME: hostname used for relative related-query links

LOG_LEVEL and SERP_LOG_DIR are read by runner.logging_setup.

Set via environment variables or in a .env file.
"""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from serp_extract.exceptions import ConfigurationError

load_dotenv()


SUPPORTED_HTML_PARSERS = ("html.parser", "lxml")

DEFAULT_HOSTNAME = "www.google.com"


@dataclass
class ExtractorConfig:
    """Runtime settings for SerpParser."""

    # BeautifulSoup tree builder
    html_parser: str = "html.parser"

    # Used when parse() is called without a hostname
    default_hostname: Optional[str] = DEFAULT_HOSTNAME

    def __post_init__(self):
        if self.html_parser not in SUPPORTED_HTML_PARSERS:
            raise ConfigurationError(
                f"Unsupported HTML parser '{self.html_parser}'. "
                f"Expected one of: {', '.join(SUPPORTED_HTML_PARSERS)}"
            )

    @classmethod
    def from_env(cls) -> "ExtractorConfig":
        """Build a config from the current environment."""
        return cls(
            html_parser=os.getenv("SERP_HTML_PARSER", "html.parser").strip().lower(),
            default_hostname=os.getenv("SERP_DEFAULT_HOSTNAME", DEFAULT_HOSTNAME) or None,
        )


# Module-level cache
_config_instance = None


def get_config() -> ExtractorConfig:
    """Get or create the cached ExtractorConfig."""
    global _config_instance

    if _config_instance is None:
        _config_instance = ExtractorConfig.from_env()

    return _config_instance


def reload_config() -> ExtractorConfig:
    """Re-read the environment and replace the cached config."""
    global _config_instance

    _config_instance = ExtractorConfig.from_env()
    return _config_instance
