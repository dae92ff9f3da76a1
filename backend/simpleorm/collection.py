from simpleorm.paging import clamp_page, page_offset, total_pages


class Collection:
    """An ordered list of models with a single traversal cursor.

    Iterating a Collection moves its one cursor, so iteration is not
    reentrant: nesting two loops over the same Collection, or calling
    ``first()``/``last()``/``seek()`` inside a loop over it, is unsupported.
    Iterate ``list(collection)`` when an independent pass is needed.
    """

    def __init__(self, items=None):
        self._items = list(items) if items is not None else []
        self._position = 0

    def __len__(self):
        return len(self._items)

    def count(self):
        return len(self._items)

    def __getitem__(self, index):
        if isinstance(index, slice):
            return Collection(self._items[index])
        return self._items[index]

    def __setitem__(self, index, model):
        self._items[index] = model

    def __delitem__(self, index):
        del self._items[index]

    def __contains__(self, model):
        return model in self._items

    def append(self, model):
        self._items.append(model)

    def __iter__(self):
        self._position = 0
        return self

    def __next__(self):
        if not self.valid():
            raise StopIteration
        model = self._items[self._position]
        self._position += 1
        return model

    def seek(self, position):
        if not 0 <= position < len(self._items):
            raise IndexError(f"Seek position {position} is out of range")
        self._position = position

    def rewind(self):
        self._position = 0

    def valid(self):
        return 0 <= self._position < len(self._items)

    def key(self):
        return self._position

    def current(self):
        return self._items[self._position] if self.valid() else None

    def next(self):
        self._position += 1

    def first(self):
        if not self._items:
            return None
        self.seek(0)
        return self.current()

    def last(self):
        if not self._items:
            return None
        self.seek(len(self._items) - 1)
        return self.current()

    def get_page(self, number, length):
        """Return page ``number`` (1-based, clamped) of ``length`` elements as a new Collection."""
        number = clamp_page(number, total_pages(len(self._items), length))
        offset = page_offset(number, length)
        return Collection(self._items[offset:offset + length])

    def attributes_to_list(self):
        if not self._items:
            return []
        columns = type(self._items[0]).get_all_columns()
        return [model.attributes_to_dict(columns) for model in self._items]

    def __repr__(self):
        return f"<Collection {self._items!r}>"
