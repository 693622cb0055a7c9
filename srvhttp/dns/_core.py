import logging
from typing import Protocol, runtime_checkable

import dns.asyncresolver
import dns.rdatatype as rtype
import dns.resolver
from dns.resolver import Answer as DNSAnswer

from srvhttp.dns import _parser as record_parser
from srvhttp.dns._models import ResolverConfig
from srvhttp.dns._records import SRVRecord

logger = logging.getLogger(__name__)


@runtime_checkable
class SRVResolver(Protocol):
    '''
    Anything that maps a service name to an ordered list of SRV records.
    Failures are raised, an empty list means the service has no instances.
    '''
    def resolve(
        self,
        hostname: str,
        lifetime: float | None = None
    ) -> list[SRVRecord]:
        ...


@runtime_checkable
class AsyncSRVResolver(Protocol):
    async def resolve(
        self,
        hostname: str,
        lifetime: float | None = None
    ) -> list[SRVRecord]:
        ...


def _configure(resolver: dns.resolver.Resolver, config: ResolverConfig) -> None:
    if config.nameservers:
        resolver.nameservers = list(config.nameservers)


class DNSResolver:
    '''
    Blocking SRV resolver backed by `dns.resolver.Resolver`.

    Records are returned in the order the nameserver sent them, no
    priority or weight sorting is applied.
    '''

    def __init__(
        self,
        config: ResolverConfig | None = None,
        *,
        resolver: dns.resolver.Resolver | None = None,
    ) -> None:
        self._config = config or ResolverConfig()
        if resolver is None:
            resolver = dns.resolver.Resolver(
                filename=self._config.filename,
                configure=self._config.configure,
            )
            _configure(resolver, self._config)
        self._resolver = resolver

    def _query(self, hostname: str, lifetime: float | None) -> DNSAnswer:
        return self._resolver.resolve(
            qname=hostname,
            rdtype=rtype.SRV,
            lifetime=lifetime if lifetime is not None else self._config.lifetime,
            search=self._config.search,
            tcp=self._config.tcp,
            source_port=self._config.source_port,
        )

    def resolve(
        self,
        hostname: str,
        lifetime: float | None = None
    ) -> list[SRVRecord]:
        '''
        Look up the SRV records for a name.

        Parameters
        ----------
        hostname : str
        lifetime : float | None, optional
            Overrides the configured lifetime for this query, by default None

        Returns
        -------
        list[SRVRecord]
            Empty when the name exists but has no SRV records.

        Raises
        ------
        dns.exception.DNSException
            NXDOMAIN, NoNameservers, Timeout and friends are not caught.
        '''
        try:
            answer = self._query(hostname, lifetime)
        except dns.resolver.NoAnswer:
            logger.debug(f'No SRV answer for {hostname}')
            return []
        return record_parser.parse_answer(answer)

    @property
    def resolver(self) -> dns.resolver.Resolver:
        return self._resolver


class AsyncDNSResolver:
    '''
    The asyncio counterpart of `DNSResolver`, backed by
    `dns.asyncresolver.Resolver`.
    '''

    def __init__(
        self,
        config: ResolverConfig | None = None,
        *,
        resolver: dns.asyncresolver.Resolver | None = None,
    ) -> None:
        self._config = config or ResolverConfig()
        if resolver is None:
            resolver = dns.asyncresolver.Resolver(
                filename=self._config.filename,
                configure=self._config.configure,
            )
            _configure(resolver, self._config)
        self._resolver = resolver

    async def _query(self, hostname: str, lifetime: float | None) -> DNSAnswer:
        return await self._resolver.resolve(
            qname=hostname,
            rdtype=rtype.SRV,
            lifetime=lifetime if lifetime is not None else self._config.lifetime,
            search=self._config.search,
            tcp=self._config.tcp,
            source_port=self._config.source_port,
        )

    async def resolve(
        self,
        hostname: str,
        lifetime: float | None = None
    ) -> list[SRVRecord]:
        try:
            answer = await self._query(hostname, lifetime)
        except dns.resolver.NoAnswer:
            logger.debug(f'No SRV answer for {hostname}')
            return []
        return record_parser.parse_answer(answer)

    @property
    def resolver(self) -> dns.asyncresolver.Resolver:
        return self._resolver
