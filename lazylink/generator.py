from lazylink.errors import GeneratorExhausted

_missing = object()


class GeneratorSlot:
    """Holds a suspended iterator together with the value it last produced.

    The first step happens eagerly on construction, so the slot always
    knows whether there is a pending value before anyone asks for it.
    """
    __slots__ = '_iterator', '_pending', 'result'

    def __init__(self, iterable=()):
        self._iterator = iter(iterable)
        self._pending = _missing
        self.result = None
        self.step()

    @classmethod
    def finished_slot(cls):
        return cls(())

    @property
    def finished(self):
        return self._pending is _missing

    @property
    def current(self):
        if self._pending is _missing:
            raise GeneratorExhausted('Generator has no pending value')
        return self._pending

    def step(self):
        if self._iterator is None:
            return

        try:
            self._pending = next(self._iterator)
        except StopIteration as ret:
            self._finish(ret.value)
        except BaseException:
            # The generator is dead after raising, so is the slot
            self._finish(None)
            raise

    def close(self):
        iterator = self._iterator
        self._finish(self.result)
        if hasattr(iterator, 'close'):
            iterator.close()

    def _finish(self, result):
        self._iterator = None
        self._pending = _missing
        self.result = result

    def __repr__(self):
        if self.finished:
            return f'<GeneratorSlot finished result={self.result!r}>'
        return f'<GeneratorSlot pending={self._pending!r}>'
