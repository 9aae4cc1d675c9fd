"""Device OS platform registry.

The platform table is fixed. It is folded into the id, name and tag indexes
once at import time and never modified afterwards, so every lookup hands back
the same canonical ``Platform`` instance.
"""
from dataclasses import dataclass
from typing import Dict, Iterable, List, Tuple

from device_platforms.utils.exceptions import (
    UnknownPlatformIdError,
    UnknownPlatformNameError,
    UnknownPlatformTagError,
)


@dataclass(frozen=True)
class Platform:
    """A supported Device OS platform."""
    id: int
    name: str
    tags: Tuple[str, ...]

    def __post_init__(self):
        if not isinstance(self.tags, tuple):
            object.__setattr__(self, 'tags', tuple(self.tags))

    @classmethod
    def from_dict(cls, data: dict) -> "Platform":
        return cls(id=data['id'], name=data['name'], tags=data['tags'])

    def has(self, tag: str) -> bool:
        """Check if the platform is tagged with ``tag``.

        The tag must be known to at least one registered platform, otherwise
        ``UnknownPlatformTagError`` is raised. This holds for unregistered
        instances too.
        """
        if not is_known_platform_tag(tag):
            raise UnknownPlatformTagError(tag)
        return tag in self.tags

    def is_(self, tag: str) -> bool:
        """Alias for ``has()``."""
        return self.has(tag)

    def to_dict(self) -> dict:
        return {'id': self.id, 'name': self.name, 'tags': list(self.tags)}


PLATFORM_DEFINITIONS = [
    {'id': 6, 'name': 'photon', 'tags': ['photon', 'gen2', 'wifi', 'tcp']},
    {'id': 8, 'name': 'p1', 'tags': ['p1', 'gen2', 'wifi', 'tcp']},
    {'id': 10, 'name': 'electron', 'tags': ['electron', 'gen2', 'cellular', 'udp']},
    {'id': 12, 'name': 'argon', 'tags': ['argon', 'gen3', 'wifi', 'mesh', 'ble', 'udp']},
    {'id': 13, 'name': 'boron', 'tags': ['boron', 'gen3', 'cellular', 'mesh', 'ble', 'udp']},
    {'id': 14, 'name': 'xenon', 'tags': ['xenon', 'gen3', 'mesh', 'ble', 'udp']},
    {'id': 22, 'name': 'asom', 'tags': ['asom', 'gen3', 'wifi', 'mesh', 'ble', 'udp']},
    {'id': 23, 'name': 'bsom', 'tags': ['bsom', 'gen3', 'cellular', 'mesh', 'ble', 'udp']},
    {'id': 24, 'name': 'xsom', 'tags': ['xsom', 'gen3', 'mesh', 'ble', 'udp']},
]

PLATFORMS: Tuple[Platform, ...] = tuple(Platform.from_dict(p) for p in PLATFORM_DEFINITIONS)


def _index_by_tag(platforms: Iterable[Platform]) -> Dict[str, Tuple[Platform, ...]]:
    by_tag: Dict[str, List[Platform]] = {}
    for p in platforms:
        for tag in p.tags:
            by_tag.setdefault(tag, []).append(p)
    return {tag: tuple(ps) for tag, ps in by_tag.items()}


_PLATFORMS_BY_ID: Dict[int, Platform] = {p.id: p for p in PLATFORMS}
_PLATFORMS_BY_NAME: Dict[str, Platform] = {p.name: p for p in PLATFORMS}
_PLATFORMS_BY_TAG: Dict[str, Tuple[Platform, ...]] = _index_by_tag(PLATFORMS)


def platform_for_id(platform_id: int) -> Platform:
    """Get platform by ID."""
    try:
        return _PLATFORMS_BY_ID[platform_id]
    except KeyError:
        raise UnknownPlatformIdError(platform_id) from None


def is_known_platform_id(platform_id: int) -> bool:
    return platform_id in _PLATFORMS_BY_ID


def platform_for_name(name: str) -> Platform:
    """Get platform by name."""
    try:
        return _PLATFORMS_BY_NAME[name]
    except KeyError:
        raise UnknownPlatformNameError(name) from None


def is_known_platform_name(name: str) -> bool:
    return name in _PLATFORMS_BY_NAME


def platforms_for_tag(tag: str) -> Tuple[Platform, ...]:
    """Get platforms tagged with ``tag``, in definition order."""
    try:
        return _PLATFORMS_BY_TAG[tag]
    except KeyError:
        raise UnknownPlatformTagError(tag) from None


def is_known_platform_tag(tag: str) -> bool:
    return tag in _PLATFORMS_BY_TAG


def platform_tags() -> Tuple[str, ...]:
    """All known tags, in the order they first appear in the table."""
    return tuple(_PLATFORMS_BY_TAG)
