'''
**srvhttp.http**
---------

The `+srv` transports and the helpers that mount them on httpx clients.
`SRVTransport` / `AsyncSRVTransport` do the rewrite, `register` /
`register_async` put them in a mount table, and `SRVClient` /
`AsyncSRVClient` wire everything with sensible defaults.
'''
from srvhttp.http._client import (
    AsyncSRVClient,
    ClientConfig,
    SRVClient,
    default_ssl_context,
    get_socket_options,
)
from srvhttp.http._errors import (
    NoRecordsFoundError,
    ResolutionFailedError,
    SRVError,
    UnrecognizedSchemeError,
)
from srvhttp.http._register import register, register_async
from srvhttp.http._schemes import SRV_SCHEMES, SRVScheme
from srvhttp.http._transport import AsyncSRVTransport, SRVTransport, rewrite_url

__all__ = [
    'AsyncSRVClient',
    'ClientConfig',
    'SRVClient',
    'default_ssl_context',
    'get_socket_options',
    'NoRecordsFoundError',
    'ResolutionFailedError',
    'SRVError',
    'UnrecognizedSchemeError',
    'register',
    'register_async',
    'SRV_SCHEMES',
    'SRVScheme',
    'AsyncSRVTransport',
    'SRVTransport',
    'rewrite_url',
]
