import dataclasses as dc


@dc.dataclass(slots=True, frozen=True)
class SRVRecord:
    '''
    A single SRV answer. `target` is kept exactly as DNS returned it,
    trailing dot included.
    '''
    target: str
    port: int
    priority: int = 0
    weight: int = 0
    ttl: int | None = None

    @property
    def hostport(self) -> str:
        return f'{self.target}:{self.port}'
