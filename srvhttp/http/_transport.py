import logging

import httpx

from srvhttp.dns import AsyncSRVResolver, SRVRecord, SRVResolver
from srvhttp.http._errors import NoRecordsFoundError, ResolutionFailedError
from srvhttp.http._schemes import SRVScheme

logger = logging.getLogger(__name__)


def lookup_lifetime(request: httpx.Request) -> float | None:
    '''
    The connect timeout httpx attached to the request, if any. Used to
    bound the SRV lookup.

    Parameters
    ----------
    request : httpx.Request

    Returns
    -------
    float | None
    '''
    timeout = request.extensions.get('timeout') or {}
    return timeout.get('connect')


def select_record(
    hostname: str,
    records: list[SRVRecord],
    request: httpx.Request
) -> SRVRecord:
    if not records:
        logger.debug(f'SRV lookup for {hostname} returned no records')
        raise NoRecordsFoundError(hostname, request=request)
    return records[0]


def rewrite_url(url: httpx.URL, scheme: SRVScheme, record: SRVRecord) -> httpx.URL:
    '''
    Point an SRV url at a concrete target. Path, query and fragment are
    left alone and the target is used verbatim.

    Parameters
    ----------
    url : httpx.URL
    scheme : SRVScheme
    record : SRVRecord

    Returns
    -------
    httpx.URL
    '''
    return url.copy_with(
        scheme=scheme.plain,
        host=record.target,
        port=record.port,
    )


def _apply(request: httpx.Request, scheme: SRVScheme, record: SRVRecord) -> None:
    new_url = rewrite_url(request.url, scheme, record)
    logger.debug(f'{request.url} -> {new_url}')
    request.url = new_url


class SRVTransport(httpx.BaseTransport):
    '''
    Resolves `http+srv://` and `https+srv://` requests through SRV records
    and hands the rewritten request to `delegate`.

    The request is only modified after a record was selected, so a failed
    lookup leaves the caller's URL as it was.
    '''

    def __init__(self, resolver: SRVResolver, delegate: httpx.BaseTransport) -> None:
        self._resolver = resolver
        self._delegate = delegate

    def handle_request(self, request: httpx.Request) -> httpx.Response:
        scheme = SRVScheme.parse(request.url.scheme, request=request)
        hostname = request.url.host
        try:
            records = self._resolver.resolve(
                hostname,
                lifetime=lookup_lifetime(request)
            )
        except Exception as exc:
            logger.debug(f'SRV lookup for {hostname} failed: {exc!r}')
            raise ResolutionFailedError(hostname, exc, request=request) from exc

        record = select_record(hostname, records, request)
        _apply(request, scheme, record)
        return self._delegate.handle_request(request)

    def close(self) -> None:
        self._delegate.close()

    @property
    def resolver(self) -> SRVResolver:
        return self._resolver

    @property
    def delegate(self) -> httpx.BaseTransport:
        return self._delegate


class AsyncSRVTransport(httpx.AsyncBaseTransport):
    '''
    The async flavour of `SRVTransport`. The lookup is awaited on the
    caller's event loop.
    '''

    def __init__(
        self,
        resolver: AsyncSRVResolver,
        delegate: httpx.AsyncBaseTransport
    ) -> None:
        self._resolver = resolver
        self._delegate = delegate

    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        scheme = SRVScheme.parse(request.url.scheme, request=request)
        hostname = request.url.host
        try:
            records = await self._resolver.resolve(
                hostname,
                lifetime=lookup_lifetime(request)
            )
        except Exception as exc:
            logger.debug(f'SRV lookup for {hostname} failed: {exc!r}')
            raise ResolutionFailedError(hostname, exc, request=request) from exc

        record = select_record(hostname, records, request)
        _apply(request, scheme, record)
        return await self._delegate.handle_async_request(request)

    async def aclose(self) -> None:
        await self._delegate.aclose()

    @property
    def resolver(self) -> AsyncSRVResolver:
        return self._resolver

    @property
    def delegate(self) -> httpx.AsyncBaseTransport:
        return self._delegate
