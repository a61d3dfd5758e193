#
# Copyright contributors to the netprobe project
#
from typing import List
import socket


def resolve_host(name: str) -> List[str]:
    """Return the address literals ``name`` resolves to, in resolver order.

    Raises ``OSError`` (``socket.gaierror``) when the name does not resolve.
    Names the idna codec cannot encode (empty or over-long labels) raise
    ``socket.gaierror`` as well. Duplicates produced by multiple socket
    types are collapsed.
    """
    try:
        infos = socket.getaddrinfo(name, None)
    except UnicodeError as e:
        raise socket.gaierror(socket.EAI_NONAME, f"cannot encode host name: {e}") from e
    addresses: List[str] = []
    for family, _, _, _, sockaddr in infos:
        if family not in (socket.AF_INET, socket.AF_INET6):
            continue
        ip = sockaddr[0]
        if ip not in addresses:
            addresses.append(ip)
    return addresses
