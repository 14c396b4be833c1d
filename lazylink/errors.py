def _message(m):
    @classmethod
    def builder(cls, *args, **format_vars):
        return cls(m.format(**format_vars), *args)
    return builder

class LazyListError(Exception):
    def __init__(self, message, context=None):
        super().__init__(message)
        self.context = context

    def get_info(self, prog='lazylink'):
        message = f'{prog}: {self}'
        if self.context is not None:
            message += f'\n      | {self.context!r}'
        return message


class OutOfRangeError(LazyListError, IndexError):
    index = _message('Index {index} out of range for {size} materialized elements')

class InvalidCursorError(LazyListError):
    at_end = _message('Cannot {action} the end cursor')
    invalidated = _message('Cursor was invalidated by erase or move')

class ForeignNodeError(InvalidCursorError):
    pass

class GeneratorExhausted(LazyListError):
    pass

# Copying a suspended generator is not defined
class NotCopyableError(LazyListError, TypeError):
    pass
