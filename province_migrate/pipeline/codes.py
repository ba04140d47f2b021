"""Short province codes with deterministic conflict resolution."""

from __future__ import annotations

import unicodedata
from typing import AbstractSet, Iterable, Iterator, Mapping

from province_migrate.common.errors import ContractError
from province_migrate.common.models import AssignedRegion, RegionSummary
from province_migrate.common.text import normalise_words


def _candidates(words: list[str]) -> Iterator[str]:
    initials = "".join(word[0] for word in words)
    yield initials

    if words:
        head = "".join(word[0] for word in words[:-1])
        last = words[-1]
        for length in range(2, len(last) + 1):
            yield head + last[:length]

    suffix = 1
    while True:
        yield f"{initials}{suffix}"
        suffix += 1


def assign_code(name: str, claimed: AbstractSet[str], overrides: Mapping[str, str]) -> str:
    """Pick the first unclaimed code for ``name``.

    Tried in order: the hand-curated override, the initials of every word,
    the initials with a growing slice of the last word, and finally the
    initials followed by 1, 2, 3, ... ``claimed`` is only read; the caller
    records the result before the next call.
    """
    override = overrides.get(unicodedata.normalize("NFC", name))
    if override and override not in claimed:
        return override

    return next(c for c in _candidates(normalise_words(name)) if c and c not in claimed)


def assign_codes(regions: Iterable[RegionSummary], overrides: Mapping[str, str]) -> list[AssignedRegion]:
    claimed: set[str] = set()
    seen_names: set[str] = set()
    assigned: list[AssignedRegion] = []
    for region in regions:
        if not isinstance(region.name, str) or not region.name.strip():
            raise ContractError(f"Province with code {region.service_code!r} has no usable name: {region.name!r}")
        if region.name in seen_names:
            raise ContractError(f"Duplicate province name {region.name!r} (code {region.service_code!r})")
        seen_names.add(region.name)
        code = assign_code(region.name, claimed, overrides)
        claimed.add(code)
        assigned.append(AssignedRegion(service_code=region.service_code, code=code, name=region.name))
    return assigned
