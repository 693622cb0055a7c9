import httpx


class SRVError(httpx.TransportError):
    '''
    Base class for failures raised by the `+srv` transports.

    Parent: httpx.TransportError
    '''


class UnrecognizedSchemeError(SRVError, httpx.UnsupportedProtocol):
    '''
    Raised when a request reaches an SRV transport with a scheme other
    than `http+srv` or `https+srv`.
    '''
    def __init__(self, scheme: str, *, request: httpx.Request | None = None) -> None:
        self.scheme = scheme
        super().__init__(f'Unrecognized SRV scheme: {scheme}', request=request)


class ResolutionFailedError(SRVError):
    '''
    Raised from the resolver's own exception, which is kept on `cause`
    and `__cause__`.
    '''
    def __init__(
        self,
        hostname: str,
        cause: BaseException,
        *,
        request: httpx.Request | None = None
    ) -> None:
        self.hostname = hostname
        self.cause = cause
        super().__init__(f'SRV lookup for {hostname} failed: {cause}', request=request)


class NoRecordsFoundError(SRVError):
    def __init__(self, hostname: str, *, request: httpx.Request | None = None) -> None:
        self.hostname = hostname
        super().__init__(
            f'SRV lookup for {hostname} returned no records',
            request=request
        )
