from typing import Any, Dict, Optional
from urllib.parse import urlsplit

import httpx

from serpscrape.exceptions import RequestError
from serpscrape.logger import logger
from serpscrape.schema import ProxyConfig, SearchOptions
from serpscrape.search.user_agent import random_user_agent

SEARCH_URL = "https://www.google.com/search"
# Pre-accepted consent state; without it EU visitors get the consent interstitial instead of results.
CONSENT_COOKIE = "CONSENT=PENDING+987; SOCS=CAESHAgBEhIaAB"
MAX_REDIRECTS = 5

def build_params(term: str, options: SearchOptions) -> Dict[str, str]:
    params = {
        "q": term,
        "num": str(options.requested_count),
        "hl": options.lang,
        "start": str(options.start),
        "safe": options.safe,
    }
    if options.region:
        params["gl"] = options.region
    return params

def build_headers() -> Dict[str, str]:
    return {
        "User-Agent": random_user_agent(),
        "Accept": "*/*",
        "Cookie": CONSENT_COOKIE,
    }

def resolve_proxy(proxy: str) -> ProxyConfig:
    """
    Splits a proxy URL into scheme, host and port.
    Anything not starting with 'https' is treated as an http proxy; a missing
    port defaults to 443 or 80 accordingly.
    """
    scheme = "https" if proxy.startswith("https") else "http"
    try:
        parts = urlsplit(proxy)
        port = parts.port
    except ValueError as e:
        raise RequestError(f"Invalid proxy URL '{proxy}': {e}") from e
    if not parts.hostname:
        raise RequestError(f"Invalid proxy URL '{proxy}': no host")
    return ProxyConfig(scheme=scheme, host=parts.hostname, port=port or (443 if scheme == "https" else 80))

def build_client_kwargs(options: SearchOptions) -> Dict[str, Any]:
    kwargs: Dict[str, Any] = {
        "timeout": httpx.Timeout(options.timeout / 1000),
        "follow_redirects": True,
        "max_redirects": MAX_REDIRECTS,
    }
    if options.proxy:
        kwargs["proxy"] = resolve_proxy(options.proxy).url
    return kwargs

async def execute(
    term: str,
    options: SearchOptions,
    *,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> str:
    """
    Fetches the result page for `term`.

    Only a final 200 response counts as success. Transport failures, timeouts,
    redirect loops and any other status are raised as RequestError; nothing
    is retried.
    """
    params = build_params(term, options)
    headers = build_headers()
    try:
        client_kwargs = build_client_kwargs(options)
        if transport is not None:
            client_kwargs["transport"] = transport

        logger.debug(f"Requesting {SEARCH_URL} with params {params} (User-Agent: {headers['User-Agent']}, proxy: {client_kwargs.get('proxy', 'none')})")
        async with httpx.AsyncClient(**client_kwargs) as client:
            response = await client.get(SEARCH_URL, params=params, headers=headers)
        if response.status_code != 200:
            raise RequestError(f"Google search request failed: unexpected status code {response.status_code}")
        html = response.text
    except (httpx.HTTPError, httpx.InvalidURL) as e:
        reason = str(e) or e.__class__.__name__
        logger.error(f"Google search request for '{term}' failed: {reason}")
        raise RequestError(f"Google search request failed: {reason}") from e
    except RequestError as e:
        logger.error(f"Google search request for '{term}' failed: {e.message}")
        raise

    logger.info(f"Fetched result page for '{term}' ({len(html)} characters).")
    return html
