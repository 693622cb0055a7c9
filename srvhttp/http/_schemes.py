import enum

import httpx

from srvhttp.http._errors import UnrecognizedSchemeError


class SRVScheme(enum.Enum):
    HTTP = 'http+srv'
    HTTPS = 'https+srv'

    @property
    def plain(self) -> str:
        match self:
            case SRVScheme.HTTP:
                return 'http'
            case SRVScheme.HTTPS:
                return 'https'

    @property
    def mount_key(self) -> str:
        return f'{self.value}://'

    @classmethod
    def parse(
        cls,
        scheme: str,
        *,
        request: httpx.Request | None = None
    ) -> 'SRVScheme':
        '''
        Map a URL scheme onto one of the two SRV schemes.

        Parameters
        ----------
        scheme : str
        request : httpx.Request | None, optional
            Attached to the error when the scheme is rejected

        Returns
        -------
        SRVScheme

        Raises
        ------
        UnrecognizedSchemeError
            For anything other than `http+srv` / `https+srv`.
        '''
        match scheme:
            case 'http+srv':
                return cls.HTTP
            case 'https+srv':
                return cls.HTTPS
            case _:
                raise UnrecognizedSchemeError(scheme, request=request)


SRV_SCHEMES: tuple[str, ...] = tuple(s.value for s in SRVScheme)
