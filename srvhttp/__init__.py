'''
**srvhttp**
---------

httpx transports for `http+srv://` and `https+srv://` URLs. The host of
such a URL names a service; it is looked up as an SRV record at request
time and the request is sent to the first target returned.

    http+srv://simple.service.consul/healthz
        -> http://ac1e1409.addr.lon.consul.:31883/healthz
'''
from srvhttp.dns import (
    AsyncDNSResolver,
    AsyncSRVResolver,
    DNSResolver,
    ResolverConfig,
    SRVRecord,
    SRVResolver,
)
from srvhttp.http import (
    AsyncSRVClient,
    AsyncSRVTransport,
    ClientConfig,
    NoRecordsFoundError,
    ResolutionFailedError,
    SRVClient,
    SRVError,
    SRVScheme,
    SRVTransport,
    UnrecognizedSchemeError,
    register,
    register_async,
)

__all__ = [
    "AsyncDNSResolver",
    "AsyncSRVResolver",
    "DNSResolver",
    "ResolverConfig",
    "SRVRecord",
    "SRVResolver",
    "AsyncSRVClient",
    "AsyncSRVTransport",
    "ClientConfig",
    "NoRecordsFoundError",
    "ResolutionFailedError",
    "SRVClient",
    "SRVError",
    "SRVScheme",
    "SRVTransport",
    "UnrecognizedSchemeError",
    "register",
    "register_async",
]
