import logging
import re

from bs4 import BeautifulSoup as bs
from requests import get


logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10


def get_soup(url, timeout = DEFAULT_TIMEOUT):
    """Return the parsed page at url, or None if it can't be fetched."""
    try:
        logger.debug(f'fetching {url}')
        r = get(url, timeout = timeout)
        r.raise_for_status()
        raw = r.content.decode('utf-8', errors='replace')

        return bs(raw, features='html.parser')
    except Exception as err:
        logger.warning(f'An error occurred fetching {url}: {err}')
        return None


def clean_text(s):
    """Strip, and collapse runs of whitespace to a single space."""
    if s is None:
        return ''
    return re.sub(r'\s+', ' ', s).strip()


def node_text(node):
    if node is None:
        return ''
    return clean_text(node.get_text())
