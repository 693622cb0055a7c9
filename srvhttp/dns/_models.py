import dataclasses as dc


@dc.dataclass(slots=True)
class ResolverConfig:
    '''
    Options for SRV lookups.
    '''
    filename: str = "/etc/resolv.conf"
    configure: bool = True
    lifetime: float = 5.0
    search: bool | None = None
    source_port: int = 0
    tcp: bool = False
    nameservers: list[str] | None = None
