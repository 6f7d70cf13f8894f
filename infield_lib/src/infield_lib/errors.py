"""Exceptions raised by input-field discovery."""


class InputFieldDiscoveryError(Exception):
    """Base class for discovery failures (misconfigured types, bad markers)."""
    pass


class AmbiguousPropertyError(InputFieldDiscoveryError):
    """Raised when two members of the same kind map to one property name."""

    def __init__(self, property_name: str, first, second):
        self.property_name = property_name
        self.members = (first, second)
        super().__init__(
            f"Ambiguous property '{property_name}': {first} and {second} "
            f"are both {first.kind.value}s for it"
        )


class DuplicateInputFieldError(InputFieldDiscoveryError):
    """Raised when two property groups resolve to the same input field name."""

    def __init__(self, name: str, first: str, second: str):
        self.name = name
        self.property_names = (first, second)
        super().__init__(
            f"Input field name '{name}' is declared by both property '{first}' and property '{second}'"
        )


class DefaultValueError(InputFieldDiscoveryError):
    """Raised when a backend cannot turn a raw default into the declared type."""

    def __init__(self, raw: str, declared_type, reason: str):
        self.raw = raw
        self.declared_type = declared_type
        super().__init__(f"Cannot convert default value {raw!r} to {declared_type!r}: {reason}")


class BackendDisagreementError(InputFieldDiscoveryError):
    """Raised when two scanners produce different field sets for the same type."""

    def __init__(self, type_, differences: list[str]):
        self.type = type_
        self.differences = differences
        joined = "\n  ".join(differences)
        super().__init__(f"Scanners disagree on {type_!r}:\n  {joined}")
