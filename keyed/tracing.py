import functools
import logging
import reprlib

logger = logging.getLogger(__name__)

TRACE_DEPTH = 0

# reprlib falls back to `<Type instance at 0x...>` when an object's __repr__ raises
_repr = reprlib.Repr()
_repr.maxstring = 80
_repr.maxother = 80


def trace(func):
    """
    Logs calls of `func` as nested blocks on the `keyed.tracing` logger:

        resolve(5) {
          compute(5) {
          return 25
          }
        return 25
        }

    The check happens on every call, so enabling DEBUG on `keyed.tracing`
    at runtime turns tracing on for already-decorated functions.
    """

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        if not logger.isEnabledFor(logging.DEBUG):
            return func(*args, **kwargs)

        global TRACE_DEPTH
        saved_depth = TRACE_DEPTH
        prefix = '  ' * TRACE_DEPTH
        rendered = [_repr.repr(x) for x in args] + [f"{k}={_repr.repr(v)}" for k, v in kwargs.items()]
        logger.debug("%s%s(%s) {", prefix, func.__qualname__, ', '.join(rendered))
        TRACE_DEPTH += 1
        try:
            result = func(*args, **kwargs)
        except Exception as e:
            logger.debug("%s}raise %s", prefix, _repr.repr(e))
            raise
        else:
            logger.debug("%sreturn %s", prefix, _repr.repr(result))
            logger.debug("%s}", prefix)
            return result
        finally:
            TRACE_DEPTH = saved_depth

    return wrapper
