import sys
from typing import Any, Optional
from types import TracebackType

from IPython import get_ipython


class NoTraceException(Exception):
    """An exception that prints an error message and exits without a
    traceback. This is meant for situations that do not require inspection of
    the code, typically incorrect user input such as a variable index outside
    the admissible range. Such situations are considered normal during
    interactive use. This exception comes with a short but informative error
    message for the user.
    """
    pass


def handler(exc: NoTraceException, tb: Optional[TracebackType]) -> None:
    print(f'{type(exc).__name__}: {exc.args[0]}', file=sys.stderr, flush=True)


# Python shell

def excepthook(exc_type: type[BaseException], exc: BaseException,
               tb: Optional[TracebackType]) -> None:
    if isinstance(exc, NoTraceException):
        handler(exc, tb)
    else:
        sys_excepthook(exc_type, exc, tb)


# To be executed at import:

sys_excepthook = sys.excepthook
sys.excepthook = excepthook


# IPython:

def ipy_custom_exc(ipy: Any, exc_type: type[NoTraceException],
                   exc: NoTraceException, tb: TracebackType, tb_offset=None) -> None:
    handler(exc, tb)


# To be executed at import:

ipy = get_ipython()

if ipy is not None:
    ipy.set_custom_exc((NoTraceException,), ipy_custom_exc)
