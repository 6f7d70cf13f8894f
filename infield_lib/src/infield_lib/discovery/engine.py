"""Input-field discovery pipeline.

    scan -> group -> exclusion veto -> precedence -> synthesis

Usage:
    from infield_lib.backends import InspectScanner
    from infield_lib.discovery import discover_input_fields
    from infield_lib.strategies import DefaultInclusionPolicy, DefaultTypeTransformer

    fields = discover_input_fields(
        Order, DefaultInclusionPolicy("myapp"), DefaultTypeTransformer(), InspectScanner()
    )

    # Or memoized per type:
    discovery = InputFieldDiscovery(InspectScanner())
    fields = discovery.discover(Order)
"""

from __future__ import annotations

import threading
from enum import Enum
from typing import TYPE_CHECKING, Any

from loguru import logger

from ..errors import DuplicateInputFieldError
from ..strategies import DefaultInclusionPolicy, DefaultTypeTransformer, InclusionPolicy, TypeTransformer
from ..types import InputField
from .exclusion import is_excluded
from .grouping import group_members
from .precedence import resolve_metadata
from .synthesis import synthesize_field

if TYPE_CHECKING:
    from ..backends.base import MemberScanner


class NameCollisionPolicy(str, Enum):
    """What to do when two property groups resolve to the same field name."""

    FAIL = "fail"
    KEEP_FIRST = "keep_first"


def discover_input_fields(
    type_: Any,
    inclusion_policy: InclusionPolicy,
    type_transformer: TypeTransformer,
    scanner: MemberScanner,
    *,
    collision_policy: NameCollisionPolicy = NameCollisionPolicy.FAIL,
) -> set[InputField]:
    """Discover the input fields of ``type_``.

    Args:
        type_: Class or parameterised generic alias (``Box[int]``) to inspect.
        inclusion_policy: Members it rejects veto their property group.
        type_transformer: Applied once per group to the declared type.
        scanner: Backend that enumerates candidate members and materializes defaults.
        collision_policy: FAIL raises on duplicate names; KEEP_FIRST keeps the
            group whose property name sorts first and logs the drop.

    Returns:
        Set of InputField, unique by name, unordered.

    Raises:
        AmbiguousPropertyError: Two members of one kind share a property.
        DuplicateInputFieldError: Two groups resolve to one name under FAIL.
        DefaultValueError: The scanner cannot materialize a default.
    """
    members = scanner.scan_members(type_)
    groups = group_members(members)

    fields: dict[str, InputField] = {}
    owners: dict[str, str] = {}
    for property_name in sorted(groups):
        group = groups[property_name]
        if is_excluded(group, inclusion_policy):
            continue

        resolved = resolve_metadata(group)
        if resolved.name in fields:
            if collision_policy is NameCollisionPolicy.FAIL:
                raise DuplicateInputFieldError(resolved.name, owners[resolved.name], property_name)
            logger.warning(
                f"Dropping property '{property_name}': input field '{resolved.name}' "
                f"already declared by property '{owners[resolved.name]}'"
            )
            continue

        fields[resolved.name] = synthesize_field(group, resolved, type_transformer, scanner)
        owners[resolved.name] = property_name

    logger.debug(f"Discovered {len(fields)} input field(s) on {type_!r} with {scanner.name} scanner")
    return set(fields.values())


class InputFieldDiscovery:
    """Memoizing facade over ``discover_input_fields``.

    Results are cached per target type. Thread-safe: uses RLock to protect
    the cache; discovery itself holds no shared state.
    """

    def __init__(
        self,
        scanner: MemberScanner,
        inclusion_policy: InclusionPolicy | None = None,
        type_transformer: TypeTransformer | None = None,
        collision_policy: NameCollisionPolicy = NameCollisionPolicy.FAIL,
        cache: bool = True,
    ):
        self.scanner = scanner
        self.inclusion_policy = inclusion_policy or DefaultInclusionPolicy()
        self.type_transformer = type_transformer or DefaultTypeTransformer()
        self.collision_policy = collision_policy
        self.cache_enabled = cache
        self._cache: dict[Any, frozenset[InputField]] = {}
        self._cache_lock = threading.RLock()

    def discover(self, type_: Any) -> frozenset[InputField]:
        if self.cache_enabled:
            with self._cache_lock:
                cached = self._cache.get(type_)
            if cached is not None:
                return cached

        fields = frozenset(discover_input_fields(
            type_,
            self.inclusion_policy,
            self.type_transformer,
            self.scanner,
            collision_policy=self.collision_policy,
        ))

        if self.cache_enabled:
            with self._cache_lock:
                fields = self._cache.setdefault(type_, fields)
        return fields

    def clear_cache(self) -> None:
        with self._cache_lock:
            self._cache.clear()
