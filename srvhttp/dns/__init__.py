'''
**srvhttp.dns**
-------------

SRV record lookups used by the `+srv` transports. `DNSResolver` and
`AsyncDNSResolver` wrap dnspython; anything with a matching `resolve`
method can stand in for them.
'''
from srvhttp.dns._core import (
    AsyncDNSResolver,
    AsyncSRVResolver,
    DNSResolver,
    SRVResolver,
)
from srvhttp.dns._models import ResolverConfig
from srvhttp.dns._parser import parse_srv_rdata
from srvhttp.dns._records import SRVRecord

__all__ = [
    "AsyncDNSResolver",
    "AsyncSRVResolver",
    "DNSResolver",
    "SRVResolver",
    "ResolverConfig",
    "parse_srv_rdata",
    "SRVRecord",
]
