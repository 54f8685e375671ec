from typing import Callable, Generic, Optional, TypeVar

T = TypeVar('T')


class LazyCache(Generic[T]):
    """A derived value rebuilt on first read after each invalidation.

    Invalidation clears ``valid`` and bumps the generation; the builder runs
    once on the next ``get()`` and every later reader reuses that result
    until the next invalidation. A build that is overtaken by an
    invalidation is returned to its caller but never marked valid.
    """

    def __init__(self, builder: Callable[[], T]):
        self._builder = builder
        self._generation = 0
        self.valid = False
        self.data: Optional[T] = None
        self.builds = 0

    def get(self) -> T:
        if self.valid and self.data is not None:
            return self.data
        generation = self._generation
        data = self._builder()
        self.builds += 1
        if generation == self._generation:
            self.data = data
            self.valid = True
        return data

    def invalidate(self) -> None:
        self._generation += 1
        self.valid = False
