import logging
import os
from urllib.parse import urlparse

import toml

from puppetdashboard_health.aggregator import UNRESPONSIVE_THRESHOLD_SECONDS
from puppetdashboard_health.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_DASHBOARD_URL = "http://127.0.0.1/puppet-dashboard"
DEFAULT_TIMEOUT = 30
DEFAULT_CONFIG_FILE = os.path.join(os.path.expanduser("~"), ".puppetdashboard_health.toml")
URL_ENV_VAR = "PUPPETDASHBOARD_URL"


def validate_url(url):
    parsed = urlparse(url or "")
    if parsed.scheme not in ("http", "https"):
        raise ConfigurationError(f"wrong url given: '{url}' is no http(s) url")
    if not parsed.netloc:
        raise ConfigurationError(f"wrong url given: '{url}' has no host")
    return url


def positive_number(name, value, number_type=int):
    # bool is an int, and int() would cut 7200.9 down
    if isinstance(value, bool):
        raise ConfigurationError(f"{name} must be a number, got '{value}'")
    if number_type is int and isinstance(value, float) and not value.is_integer():
        raise ConfigurationError(f"{name} must be a whole number, got {value}")
    try:
        number = number_type(value)
    except (TypeError, ValueError):
        raise ConfigurationError(f"{name} must be a number, got '{value}'") from None
    if number <= 0:
        raise ConfigurationError(f"{name} must be greater than 0, got {number}")
    return number


class Config:
    """Options for one run.

    Later sources win: defaults, the [main] table of the toml file,
    the PUPPETDASHBOARD_URL environment variable, command line flags.
    """

    def __init__(
        self,
        dashboard_url=DEFAULT_DASHBOARD_URL,
        ssl_verify=True,
        unresponsive_threshold=UNRESPONSIVE_THRESHOLD_SECONDS,
        timeout=DEFAULT_TIMEOUT,
    ):
        self.dashboard_url = validate_url(dashboard_url)
        if not isinstance(ssl_verify, bool):
            raise ConfigurationError(f"ssl_verify must be true or false, got '{ssl_verify}'")
        self.ssl_verify = ssl_verify
        self.unresponsive_threshold = positive_number("unresponsive_threshold", unresponsive_threshold)
        self.timeout = positive_number("timeout", timeout, float)

    def __repr__(self):
        return (
            f"Config(dashboard_url={self.dashboard_url!r}, ssl_verify={self.ssl_verify}, "
            f"unresponsive_threshold={self.unresponsive_threshold}, timeout={self.timeout})"
        )

    @classmethod
    def load(cls, args=None, configuration_file=DEFAULT_CONFIG_FILE, environ=None):
        if environ is None:
            environ = os.environ
        settings = {}

        file_settings = read_toml(configuration_file).get("main", {})
        for key in ("dashboard_url", "ssl_verify", "unresponsive_threshold", "timeout"):
            if key in file_settings:
                settings[key] = file_settings[key]

        if environ.get(URL_ENV_VAR):
            settings["dashboard_url"] = environ[URL_ENV_VAR]

        if args is not None:
            if getattr(args, "url", None):
                settings["dashboard_url"] = args.url
            if getattr(args, "ssl_verify", True) is False:
                settings["ssl_verify"] = False
            if getattr(args, "unresponsive_threshold", None) is not None:
                settings["unresponsive_threshold"] = args.unresponsive_threshold
            if getattr(args, "timeout", None) is not None:
                settings["timeout"] = args.timeout

        return cls(**settings)


def read_toml(configuration_file):
    if not configuration_file or not os.path.exists(configuration_file):
        logger.debug("no configuration file at %s, using defaults" % configuration_file)
        return {}
    try:
        return toml.load(configuration_file)
    except (OSError, toml.TomlDecodeError) as e:
        raise ConfigurationError(f"unable to read '{configuration_file}': {e}") from e
