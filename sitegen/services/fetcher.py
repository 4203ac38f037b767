"""HTTP access for the live checks.

Every URL, including each redirect hop, is checked for scheme and host before
a request is sent.  Bodies are read in chunks and capped at
:data:`MAX_CONTENT_SIZE`.
"""

import ipaddress
import socket
from typing import List, NamedTuple, Optional, Union
from urllib.parse import urljoin, urlparse

import httpx

MAX_CONTENT_SIZE = 10 * 1024 * 1024  # 10 MB
TIMEOUT = 15  # seconds
MAX_REDIRECTS = 10
ALLOWED_SCHEMES = {"http", "https"}
USER_AGENT = "elitebooker-seo-verifier/1.0"

IPAddress = Union[ipaddress.IPv4Address, ipaddress.IPv6Address]


class FetchedPage(NamedTuple):
    url: str  # after redirects
    status_code: int
    text: str


def _resolve(hostname: str) -> List[IPAddress]:
    try:
        infos = socket.getaddrinfo(hostname, None)
    except socket.gaierror:
        return []

    addresses: List[IPAddress] = []
    for *_, sockaddr in infos:
        # IPv6 zone IDs ("fe80::1%eth0") are not part of the address
        host = str(sockaddr[0]).partition("%")[0]
        try:
            addresses.append(ipaddress.ip_address(host))
        except ValueError:
            continue
    return addresses


def is_internal_host(hostname: str) -> bool:
    """True when *hostname* resolves to a private, loopback, link-local or reserved address."""
    return any(
        addr.is_private or addr.is_loopback or addr.is_link_local or addr.is_reserved
        for addr in _resolve(hostname)
    )


def validate_url(url: str, allow_private: bool = False) -> None:
    """Raise ValueError unless *url* is an http(s) URL on an allowed host.

    Internal hosts are refused unless *allow_private* is set, which a local
    preview server needs.
    """
    parsed = urlparse(url)
    if parsed.scheme not in ALLOWED_SCHEMES:
        raise ValueError(f"Unsupported scheme {parsed.scheme!r} in {url}; expected http or https.")
    if not parsed.hostname:
        raise ValueError(f"No hostname in {url}.")
    if not allow_private and is_internal_host(parsed.hostname):
        raise ValueError(f"Refusing to fetch internal address {parsed.hostname}.")


def build_client(timeout: float = TIMEOUT, **kwargs) -> httpx.AsyncClient:
    """Return the client shared by every check of one verification run."""
    return httpx.AsyncClient(
        follow_redirects=False,
        timeout=timeout,
        headers={"user-agent": USER_AGENT},
        **kwargs,
    )


async def _read_capped(response: httpx.Response) -> str:
    declared = response.headers.get("content-length")
    if declared and int(declared) > MAX_CONTENT_SIZE:
        raise RuntimeError(f"Response from {response.url} is larger than {MAX_CONTENT_SIZE} bytes.")

    body = bytearray()
    async for chunk in response.aiter_bytes():
        body.extend(chunk)
        if len(body) > MAX_CONTENT_SIZE:
            raise RuntimeError(f"Response from {response.url} is larger than {MAX_CONTENT_SIZE} bytes.")
    return bytes(body).decode(errors="replace")


def _redirect_target(response: httpx.Response, current_url: str, allow_private: bool) -> Optional[str]:
    if not response.is_redirect:
        return None
    target = urljoin(current_url, response.headers.get("location", ""))
    validate_url(target, allow_private)
    return target


async def fetch_page(
    client: httpx.AsyncClient,
    url: str,
    accept: str = "text/html,application/xhtml+xml",
    allow_private: bool = False,
) -> FetchedPage:
    """GET *url* through *client*, following redirects, and return the final page.

    Error statuses are returned, not raised, so the caller can report them.

    Raises:
        ValueError: if the URL or a redirect target fails validation.
        httpx.HTTPError: on transport errors.
        RuntimeError: on a redirect loop or an oversized body.
    """
    validate_url(url, allow_private)

    current_url = url
    for _ in range(MAX_REDIRECTS + 1):
        async with client.stream("GET", current_url, headers={"accept": accept}) as response:
            target = _redirect_target(response, current_url, allow_private)
            if target is None:
                text = await _read_capped(response)
                return FetchedPage(url=current_url, status_code=response.status_code, text=text)
        current_url = target

    raise RuntimeError(f"Gave up on {url} after {MAX_REDIRECTS} redirects.")
