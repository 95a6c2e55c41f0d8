"""
Credential wrapper that never renders its value.
"""

import hmac

REDACTED = "REDACTED"


class Secret:
    """
    Opaque holder for an API key.

    Every textual rendering (``str``, ``repr``, ``format``) produces the
    literal ``REDACTED``, so a Secret can sit inside dataclasses, log records
    and exception messages without leaking. The raw value is only available
    through :meth:`reveal`.

    Example:
        >>> key = Secret.from_plaintext("my-rapidapi-key")
        >>> print(key)
        REDACTED
        >>> f"{[key]}"
        '[REDACTED]'
    """

    __slots__ = ("_value",)

    def __init__(self, value: str):
        object.__setattr__(self, "_value", value)

    @classmethod
    def from_plaintext(cls, value: str) -> "Secret":
        """Wrap a plaintext credential. Content and length are not validated."""
        return cls(value)

    def reveal(self) -> str:
        """Return the wrapped credential, for building the auth header only."""
        return self._value

    def __setattr__(self, name, value):
        raise AttributeError("Secret is immutable")

    def __delattr__(self, name):
        raise AttributeError("Secret is immutable")

    def __repr__(self) -> str:
        return REDACTED

    def __str__(self) -> str:
        return REDACTED

    def __format__(self, format_spec: str) -> str:
        return format(REDACTED, format_spec)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Secret):
            return NotImplemented
        return hmac.compare_digest(
            self._value.encode("utf-8"), other._value.encode("utf-8")
        )

    def __hash__(self) -> int:
        return hash((Secret, self._value))

    def __reduce__(self):
        return (type(self), (self._value,))
