"""Schengen membership capability injected into every calculation."""

from __future__ import annotations

from typing import Callable, Iterable

MembershipCheck = Callable[[str], bool]


class SchengenMembership:
    """Case-sensitive allow-list of Schengen country names.

    Instances are callable so any ``Callable[[str], bool]`` can stand in for
    one, e.g. a lambda in tests.
    """

    def __init__(self, countries: Iterable[str] = ()):
        self._countries = frozenset(name for name in countries if name)

    def __call__(self, country: str) -> bool:
        return country in self._countries

    def __contains__(self, country: object) -> bool:
        return country in self._countries

    def __len__(self) -> int:
        return len(self._countries)

    @property
    def countries(self) -> frozenset[str]:
        return self._countries

    def __repr__(self) -> str:
        return f"SchengenMembership({sorted(self._countries)!r})"


def always_schengen(_country: str) -> bool:
    return True


__all__ = ["MembershipCheck", "SchengenMembership", "always_schengen"]
