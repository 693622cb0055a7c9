import asyncio

import dns.rdata
import dns.rdataclass
import dns.rdatatype
import dns.resolver
import pytest

from srvhttp.dns import (
    AsyncDNSResolver,
    DNSResolver,
    ResolverConfig,
    SRVRecord,
    SRVResolver,
    parse_srv_rdata,
)


def _srv(text: str):
    return dns.rdata.from_text(dns.rdataclass.IN, dns.rdatatype.SRV, text)


class _RRSet:
    ttl = 30


class _Answer(list):
    rrset = _RRSet()


class _StubResolver:
    def __init__(self, answer=None, error: Exception | None = None) -> None:
        self.answer = answer
        self.error = error
        self.queries: list[dict] = []

    def resolve(self, **kwargs):
        self.queries.append(kwargs)
        if self.error is not None:
            raise self.error
        return self.answer


class _AsyncStubResolver(_StubResolver):
    async def resolve(self, **kwargs):  # type: ignore[override]
        return _StubResolver.resolve(self, **kwargs)


def test_parse_srv_rdata_keeps_trailing_dot() -> None:
    record = parse_srv_rdata(_srv("10 60 8080 node1.consul."), _Answer())

    assert record == SRVRecord("node1.consul.", 8080, priority=10, weight=60, ttl=30)
    assert record.hostport == "node1.consul.:8080"


def test_parse_without_answer_has_no_ttl() -> None:
    assert parse_srv_rdata(_srv("0 0 443 a.example.")).ttl is None


def test_resolve_keeps_server_order() -> None:
    answer = _Answer([
        _srv("20 0 9090 late.consul."),
        _srv("0 100 8080 early.consul."),
    ])
    resolver = DNSResolver(resolver=_StubResolver(answer))

    records = resolver.resolve("api.service.consul")

    assert [r.target for r in records] == ["late.consul.", "early.consul."]


def test_resolve_queries_srv_with_config() -> None:
    stub = _StubResolver(_Answer())
    config = ResolverConfig(lifetime=3.0, tcp=True)
    resolver = DNSResolver(config, resolver=stub)

    resolver.resolve("api.service.consul")
    resolver.resolve("api.service.consul", lifetime=0.5)

    first, second = stub.queries
    assert first["qname"] == "api.service.consul"
    assert first["rdtype"] == dns.rdatatype.SRV
    assert first["lifetime"] == 3.0
    assert first["tcp"] is True
    assert second["lifetime"] == 0.5


def test_no_answer_is_an_empty_list() -> None:
    resolver = DNSResolver(resolver=_StubResolver(error=dns.resolver.NoAnswer()))

    assert resolver.resolve("service.consul") == []


def test_nxdomain_propagates() -> None:
    failure = dns.resolver.NXDOMAIN()
    resolver = DNSResolver(resolver=_StubResolver(error=failure))

    with pytest.raises(dns.resolver.NXDOMAIN) as info:
        resolver.resolve("missing.consul")

    assert info.value is failure


def test_configured_nameservers() -> None:
    config = ResolverConfig(configure=False, nameservers=["127.0.0.1"])

    resolver = DNSResolver(config)

    servers = [getattr(ns, "address", ns) for ns in resolver.resolver.nameservers]
    assert servers == ["127.0.0.1"]


def test_satisfies_protocol() -> None:
    assert isinstance(DNSResolver(resolver=_StubResolver()), SRVResolver)


def test_async_resolve() -> None:
    answer = _Answer([_srv("0 0 8443 secure-node.internal.")])
    stub = _AsyncStubResolver(answer)
    resolver = AsyncDNSResolver(resolver=stub)

    records = asyncio.run(resolver.resolve("secure.service.consul", lifetime=1.5))

    assert records == [SRVRecord("secure-node.internal.", 8443, ttl=30)]
    assert stub.queries[0]["lifetime"] == 1.5


def test_async_no_answer() -> None:
    resolver = AsyncDNSResolver(
        resolver=_AsyncStubResolver(error=dns.resolver.NoAnswer())
    )

    assert asyncio.run(resolver.resolve("service.consul")) == []
