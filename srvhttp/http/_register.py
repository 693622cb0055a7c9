import logging
from collections.abc import MutableMapping

import httpx

from srvhttp.dns import AsyncDNSResolver, AsyncSRVResolver, DNSResolver, SRVResolver
from srvhttp.http._schemes import SRVScheme
from srvhttp.http._transport import AsyncSRVTransport, SRVTransport

logger = logging.getLogger(__name__)

Mounts = MutableMapping[str, httpx.BaseTransport | None]
AsyncMounts = MutableMapping[str, httpx.AsyncBaseTransport | None]


def register(
    mounts: Mounts,
    delegate: httpx.BaseTransport | None = None,
    resolver: SRVResolver | None = None,
) -> SRVTransport:
    '''
    Mount a single `SRVTransport` under both `http+srv://` and
    `https+srv://` in an httpx mount table.

    Existing entries for those keys are overwritten, so call this once
    per table. Pass the table to `httpx.Client(mounts=...)` afterwards.

    Parameters
    ----------
    mounts : Mounts
        The mount table to register into, modified in place
    delegate : httpx.BaseTransport | None, optional
        Transport that performs the request once it was rewritten,
        by default a plain `httpx.HTTPTransport`
    resolver : SRVResolver | None, optional
        by default a `DNSResolver` using the system configuration

    Returns
    -------
    SRVTransport
        The instance stored under both keys.

    Example
    -------
    >>> mounts = {}
    >>> register(mounts)
    >>> client = httpx.Client(mounts=mounts)
    >>> client.get('http+srv://simple.service.consul/healthz')
    '''
    transport = SRVTransport(
        resolver=resolver or DNSResolver(),
        delegate=delegate or httpx.HTTPTransport(),
    )
    for scheme in SRVScheme:
        mounts[scheme.mount_key] = transport
    logger.debug(f'Registered SRV transport for {[s.value for s in SRVScheme]}')
    return transport


def register_async(
    mounts: AsyncMounts,
    delegate: httpx.AsyncBaseTransport | None = None,
    resolver: AsyncSRVResolver | None = None,
) -> AsyncSRVTransport:
    '''
    Same as `register` for `httpx.AsyncClient` mount tables.
    '''
    transport = AsyncSRVTransport(
        resolver=resolver or AsyncDNSResolver(),
        delegate=delegate or httpx.AsyncHTTPTransport(),
    )
    for scheme in SRVScheme:
        mounts[scheme.mount_key] = transport
    logger.debug(f'Registered async SRV transport for {[s.value for s in SRVScheme]}')
    return transport
