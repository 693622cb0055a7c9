import contextlib
import dataclasses as dc
import logging
import socket
import ssl

import httpx

from srvhttp.dns import (
    AsyncDNSResolver,
    AsyncSRVResolver,
    DNSResolver,
    ResolverConfig,
    SRVResolver,
)
from srvhttp.http._register import register, register_async

logger = logging.getLogger(__name__)


def _base_limits() -> httpx.Limits:
    return httpx.Limits(
        max_connections=100,
        max_keepalive_connections=20,
        keepalive_expiry=15,
    )


def _base_timeouts() -> httpx.Timeout:
    return httpx.Timeout(
        connect=5.0,
        read=10.0,
        write=10.0,
        pool=5.0,
    )


def get_socket_options() -> list[tuple]:
    '''
    cross platform socket options for TCP connections

    Returns
    -------
    list[SockOpt]
    '''
    opts = []

    if hasattr(socket, "TCP_NODELAY"):
        opts.append((socket.IPPROTO_TCP, socket.TCP_NODELAY, 1))

    if hasattr(socket, "SO_KEEPALIVE"):
        opts.append((socket.SOL_SOCKET, socket.SO_KEEPALIVE, 1))

    if hasattr(socket, "TCP_KEEPIDLE"):
        opts.append((socket.IPPROTO_TCP, socket.TCP_KEEPIDLE, 60))

    if hasattr(socket, "TCP_KEEPINTVL"):
        opts.append((socket.IPPROTO_TCP, socket.TCP_KEEPINTVL, 10))

    return opts


def default_ssl_context() -> ssl.SSLContext:
    '''
    TLS 1.2+ context with hostname verification, offering h2 and
    http/1.1 over ALPN.

    Returns
    -------
    ssl.SSLContext
    '''
    ctx = ssl.create_default_context(purpose=ssl.Purpose.SERVER_AUTH)

    ctx.minimum_version = ssl.TLSVersion.TLSv1_2
    ctx.check_hostname = True
    ctx.verify_mode = ssl.CERT_REQUIRED

    with contextlib.suppress(NotImplementedError):
        ctx.set_alpn_protocols(["h2", "http/1.1"])

    ctx.options |= ssl.OP_NO_COMPRESSION
    return ctx


@dc.dataclass(slots=True)
class ClientConfig:
    '''
    Configuration options for the SRV aware clients.
    '''
    timeout: httpx.Timeout = dc.field(default_factory=_base_timeouts)
    limits: httpx.Limits = dc.field(default_factory=_base_limits)
    http2: bool = True
    follow_redirects: bool = True
    trust_env: bool = False
    retries: int = 1
    resolver: ResolverConfig = dc.field(default_factory=ResolverConfig)

    def transport_options(self) -> dict:
        return dict(
            http2=self.http2,
            socket_options=get_socket_options(),
            verify=default_ssl_context(),
            limits=self.limits,
            trust_env=self.trust_env,
            retries=self.retries,
        )


class SRVClient(httpx.Client):
    '''
    `httpx.Client` that understands `http+srv://` and `https+srv://`.
    Plain `http`/`https` requests go straight to the same underlying
    transport.
    '''

    def __init__(
        self,
        base_url: str | None = None,
        *,
        auth: httpx.Auth | None = None,
        headers: dict[str, str] | None = None,
        config: ClientConfig | None = None,
        resolver: SRVResolver | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._config: ClientConfig = config or ClientConfig()

        delegate = transport or httpx.HTTPTransport(
            **self._config.transport_options()
        )
        mounts: dict[str, httpx.BaseTransport | None] = {}
        self._srv_transport = register(
            mounts,
            delegate=delegate,
            resolver=resolver or DNSResolver(self._config.resolver),
        )

        super().__init__(
            base_url=base_url or '',
            transport=delegate,
            mounts=mounts,
            auth=auth,
            limits=self._config.limits,
            timeout=self._config.timeout,
            headers=headers,
            follow_redirects=self._config.follow_redirects,
            trust_env=self._config.trust_env,
        )


class AsyncSRVClient(httpx.AsyncClient):
    '''
    Async counterpart of `SRVClient`.
    '''

    def __init__(
        self,
        base_url: str | None = None,
        *,
        auth: httpx.Auth | None = None,
        headers: dict[str, str] | None = None,
        config: ClientConfig | None = None,
        resolver: AsyncSRVResolver | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._config: ClientConfig = config or ClientConfig()

        delegate = transport or httpx.AsyncHTTPTransport(
            **self._config.transport_options()
        )
        mounts: dict[str, httpx.AsyncBaseTransport | None] = {}
        self._srv_transport = register_async(
            mounts,
            delegate=delegate,
            resolver=resolver or AsyncDNSResolver(self._config.resolver),
        )

        super().__init__(
            base_url=base_url or '',
            transport=delegate,
            mounts=mounts,
            auth=auth,
            limits=self._config.limits,
            timeout=self._config.timeout,
            headers=headers,
            follow_redirects=self._config.follow_redirects,
            trust_env=self._config.trust_env,
        )
