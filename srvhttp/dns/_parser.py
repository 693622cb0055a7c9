from __future__ import annotations

import dns.resolver
from dns.rdtypes.IN.SRV import SRV as R_SRV

from srvhttp.dns._records import SRVRecord


def _ttl(ans: dns.resolver.Answer | None) -> int | None:
    rrset = getattr(ans, "rrset", None)
    return getattr(rrset, "ttl", None)


def parse_srv_rdata(r: R_SRV, ans: dns.resolver.Answer | None = None) -> SRVRecord:
    '''
    Convert a dnspython SRV rdata into an SRVRecord.

    The target name is rendered with `str()`, so absolute names keep
    their trailing dot.

    Parameters
    ----------
    r : R_SRV
    ans : dns.resolver.Answer | None, optional
        The answer the rdata came from, used for the TTL

    Returns
    -------
    SRVRecord
    '''
    return SRVRecord(
        target=str(r.target),
        port=int(r.port),
        priority=int(r.priority),
        weight=int(r.weight),
        ttl=_ttl(ans),
    )


def parse_answer(ans) -> list[SRVRecord]:
    return [parse_srv_rdata(r, ans) for r in ans]
