import json
import logging

import requests
import urllib3

from puppetdashboard_health import nodes
from puppetdashboard_health.exceptions import FetchError, InvalidResponseError

logger = logging.getLogger(__name__)

USER_AGENT_STRING = "Python (puppetdashboard_health)"
NODES_PATH = "nodes.json"


def nodes_url(dashboard_url):
    return "%s/%s" % (dashboard_url.rstrip("/"), NODES_PATH)


def get_json(an_url, ssl_verify=True, timeout=None):
    """Single GET of an_url, decoded. No retries.

    :raises FetchError: connection problems or a non-2xx response.
    :raises InvalidResponseError: the body isn't json.
    """
    headers = {"User-Agent": USER_AGENT_STRING, "Accept": "application/json"}
    if not ssl_verify:
        urllib3.disable_warnings(urllib3.exceptions.InsecureRequestWarning)

    logger.info("fetching %s" % an_url)
    try:
        response = requests.get(an_url, headers=headers, verify=ssl_verify, timeout=timeout)
        response.raise_for_status()
    except requests.exceptions.RequestException as e:
        raise FetchError(f"unable to fetch url '{an_url}': {e}") from e

    try:
        return json.loads(response.text)
    except json.decoder.JSONDecodeError as e:
        logger.debug("json decode error. input: %s" % response.text)
        raise InvalidResponseError(f"unable to decode response of '{an_url}': {e}") from e


def fetch_nodes(config):
    decoded = get_json(nodes_url(config.dashboard_url), ssl_verify=config.ssl_verify, timeout=config.timeout)
    records = nodes.records_from_json(decoded)
    logger.info("dashboard reported %s node(s)" % len(records))
    return records
