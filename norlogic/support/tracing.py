# Inspired by code suggested by Vincent Fenet,
# https://stackoverflow.com/q/8315389/

import sys
from functools import wraps
import pprint


class trace(object):
    """Implements a decorator @trace(...) on functions that should be traced.
    Parenthesis must be used also when there are no arguments.

    Formulas are rendered with :func:`repr` by default. With ``use_str=True``
    they are rendered in their bracketed debug notation instead.

    >>> import sys
    >>> @trace(stream=sys.stdout)
    ... def double(n):
    ...     return 2 * n
    >>> double(21)
    --> double(21)
    <-- double == 42
    <BLANKLINE>
    42
    """

    cur_indent = 0

    def __init__(self, stream=None, indent_step=2, show_ret=True,
                 pretty=False, use_str=False):
        self.indent_step = indent_step
        self.pretty = pretty
        self.show_ret = show_ret
        self.stream = stream if stream is not None else sys.stdout
        self.use_str = use_str

    def __call__(self, fn):
        @wraps(fn)
        def wrapper(*args, **kwargs):
            indent = ' ' * trace.cur_indent
            L = []
            for a in args:
                L.append(self._format(a))
            for a, b in kwargs.items():
                L.append('%s=%s' % (a, self._format(b)))
            arg_str = ', '.join(L)
            call = f'{fn.__qualname__}({arg_str})'
            self.stream.write(f'{indent}--> {call}\n')
            # The indentation level is shared between all traced functions,
            # so that mutually recursive calls nest properly:
            trace.cur_indent += self.indent_step
            try:
                ret = fn(*args, **kwargs)
            finally:
                trace.cur_indent -= self.indent_step
            if self.show_ret:
                ret_str = self._format(ret)
                result = f'{fn.__qualname__} == {ret_str}\n'
                self.stream.write(f'{indent}<-- {result}\n')
            return ret
        return wrapper

    def _format(self, obj) -> str:
        if self.use_str:
            return str(obj)
        return pprint.pformat(obj) if self.pretty else repr(obj)
