"""Memoized class descriptions for one source file."""

from ts_api_md.models import ClassDescription


class ClassRegistry:
    """Caches class descriptions by class name.

    Entries are never invalidated: once a class is described it is served
    from here for the lifetime of the registry.
    """

    def __init__(self) -> None:
        """Initialize an empty registry."""
        self._entries: dict[str, ClassDescription] = {}

    def get(self, class_name: str) -> ClassDescription | None:
        """Return the cached description, or None."""
        return self._entries.get(class_name)

    def put(self, class_name: str, description: ClassDescription) -> None:
        """Store a description, keeping the first one stored for a name."""
        self._entries.setdefault(class_name, description)

    def __contains__(self, class_name: object) -> bool:
        return class_name in self._entries

    def __len__(self) -> int:
        return len(self._entries)
