"""Cross-backend agreement check.

Two scanners agree on a type when their field sets have the same size and,
for every name, the same description, default value and declared type
(compared structurally with ``==``).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Iterable, Sequence

from ..errors import BackendDisagreementError
from ..strategies import InclusionPolicy, TypeTransformer
from ..types import InputField
from .engine import discover_input_fields

if TYPE_CHECKING:
    from ..backends.base import MemberScanner


def field_set_differences(
    first: Iterable[InputField],
    second: Iterable[InputField],
    labels: tuple[str, str] = ("first", "second"),
) -> list[str]:
    """Describe every way two field sets differ. Empty list means they agree."""
    a = {f.name: f for f in first}
    b = {f.name: f for f in second}
    differences = []

    if len(a) != len(b):
        differences.append(f"size: {labels[0]}={len(a)}, {labels[1]}={len(b)}")
    for name in sorted(a.keys() - b.keys()):
        differences.append(f"'{name}' only in {labels[0]}")
    for name in sorted(b.keys() - a.keys()):
        differences.append(f"'{name}' only in {labels[1]}")

    for name in sorted(a.keys() & b.keys()):
        fa, fb = a[name], b[name]
        for attr in ("description", "default_value", "declared_type"):
            va, vb = getattr(fa, attr), getattr(fb, attr)
            if va != vb:
                differences.append(f"'{name}'.{attr}: {labels[0]}={va!r}, {labels[1]}={vb!r}")
    return differences


def check_backend_agreement(
    type_: Any,
    scanners: Sequence[MemberScanner],
    inclusion_policy: InclusionPolicy,
    type_transformer: TypeTransformer,
) -> set[InputField]:
    """Run discovery with every scanner and require identical results.

    Returns:
        The field set produced by the first scanner.

    Raises:
        BackendDisagreementError: Listing every difference against the first scanner.
    """
    if not scanners:
        raise ValueError("At least one scanner is required")

    reference = discover_input_fields(type_, inclusion_policy, type_transformer, scanners[0])
    differences = []
    for scanner in scanners[1:]:
        fields = discover_input_fields(type_, inclusion_policy, type_transformer, scanner)
        differences.extend(field_set_differences(reference, fields, (scanners[0].name, scanner.name)))

    if differences:
        raise BackendDisagreementError(type_, differences)
    return reference
