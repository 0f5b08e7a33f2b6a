import math
import numbers

# Keys of these types compare by value; everything else compares by identity.
VALUE_KEY_TYPES = (type(None), bool, int, float, complex, str, bytes)


class _Missing:
    __slots__ = ()
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self):
        return False

    def __repr__(self):
        return 'MISSING'

    def __reduce__(self):
        return (_Missing, ())


MISSING = _Missing()


class Id:
    """Hashable handle comparing the wrapped object by identity."""
    __slots__ = ('_value', '_hash')

    def __init__(self, value):
        self._value = value
        self._hash = hash(id(value))

    @property
    def value(self):
        return self._value

    def __hash__(self):
        return self._hash

    def __eq__(self, other):
        if not isinstance(other, Id):
            return NotImplemented
        return self._value is other._value

    def __repr__(self):
        return f"Id({type(self._value).__name__} at {id(self._value):#x})"


class _NaN:
    """Shared token part for every NaN."""
    __slots__ = ()

    def __repr__(self):
        return 'nan'


_NAN = _NaN()


def is_value_key(key) -> bool:
    # Exact type match: subclasses of str/int (enums, custom records) are identity keys.
    return type(key) in VALUE_KEY_TYPES


def _number_part(x: float):
    return _NAN if math.isnan(x) else x


def key_token(key):
    """
    Returns the hashable token a store uses to look up `key`.

    Numbers share one token space, so `1`, `1.0` and `1+0j` are the same key
    while `True` stays apart from `1`. Identity keys map to an `Id` wrapper.
    """
    if not is_value_key(key):
        return Id(key)

    kind = type(key)
    if kind is float:
        return (numbers.Number, _number_part(key))
    if kind is complex:
        if key.imag == 0:
            return (numbers.Number, _number_part(key.real))
        return (numbers.Number, (complex, _number_part(key.real), _number_part(key.imag)))
    if kind is int:
        return (numbers.Number, key)
    return (kind, key)
