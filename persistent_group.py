class PGroup:
    """
    Persistent set of values. ``add`` and ``delete`` return new groups and
    never touch the one they were called on.
    """

    __slots__ = ("_items",)

    def __init__(self, items=()):
        unique = []
        for item in items:
            if item not in unique:
                unique.append(item)
        self._items = tuple(unique)

    @classmethod
    def _from_unique(cls, items):
        group = cls.__new__(cls)
        group._items = items
        return group

    @property
    def items(self):
        return self._items

    def add(self, item):
        if item in self._items:
            return self
        return self._from_unique(self._items + (item,))

    def delete(self, item):
        if item not in self._items:
            return self
        return self._from_unique(tuple(x for x in self._items if x != item))

    def has(self, item):
        return item in self._items

    __contains__ = has

    def __len__(self):
        return len(self._items)

    def __iter__(self):
        return iter(self._items)

    def __eq__(self, other):
        if not isinstance(other, PGroup):
            return NotImplemented
        return len(self._items) == len(other._items) and all(item in other._items for item in self._items)

    __hash__ = None

    def __repr__(self):
        return f"PGroup({list(self._items)!r})"


class _EmptyGroup:
    def __get__(self, instance, owner):
        return owner()


PGroup.empty = _EmptyGroup()
