"""Member scanning backends.

Both backends drive the same discovery pipeline and must agree on every type:

    from infield_lib.backends import get_scanner
    scanner = get_scanner("namespace")
"""

from .base import MemberScanner, Param
from .inspect_scanner import InspectScanner
from .namespace_scanner import NamespaceScanner

SCANNERS: dict[str, type[MemberScanner]] = {
    InspectScanner.name: InspectScanner,
    NamespaceScanner.name: NamespaceScanner,
}


def get_scanner(name: str) -> MemberScanner:
    """Instantiate a scanner by name ("inspect" or "namespace")."""
    try:
        return SCANNERS[name]()
    except KeyError:
        raise ValueError(f"Unknown scanner '{name}'. Available: {', '.join(sorted(SCANNERS))}") from None


__all__ = [
    "MemberScanner",
    "Param",
    "InspectScanner",
    "NamespaceScanner",
    "SCANNERS",
    "get_scanner",
]
