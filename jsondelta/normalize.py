# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

"""Conversion of arbitrary Python values to json tree values.

Supported conversions:
    • None, bool, int, finite float and str are kept as they are
    • Decimal → int when integral, float otherwise
    • Enum → its (converted) value
    • datetime, date, time → ISO 8601 string
    • bytes, bytearray → base64 string
    • mappings → dict with str keys (int keys are stringified)
    • dataclass instances → dict of field name to value
    • named tuples → dict of field name to value
    • list, tuple → list
"""

import base64
import dataclasses
import datetime
import decimal
import enum
import math
from collections.abc import Mapping

from . import log
from .errors import NormalizationError

__all__ = ["normalize"]


def _is_namedtuple(obj):
    return isinstance(obj, tuple) and hasattr(obj, '_asdict') and hasattr(obj, '_fields')


def _normalize_key(key):
    if isinstance(key, str):
        return key
    if isinstance(key, int) and not isinstance(key, bool):
        return str(key)
    raise NormalizationError(
        'Mapping keys need to be strings or integers, got %r' % (key,))


def normalize(obj):
    """Convert a Python value to a json tree value.

    Raises a NormalizationError for values that cannot be represented,
    including containers that (directly or indirectly) contain themselves.
    """
    return _normalize(obj, set())


def _normalize(obj, active):
    if isinstance(obj, enum.Enum):
        return _normalize(obj.value, active)
    if obj is None or isinstance(obj, (bool, str)):
        return obj
    if isinstance(obj, int):
        # Plain int for int subclasses
        return int(obj)
    if isinstance(obj, float):
        if not math.isfinite(obj):
            raise NormalizationError('Cannot represent non-finite float %r' % (obj,))
        return float(obj)
    if isinstance(obj, decimal.Decimal):
        if not obj.is_finite():
            raise NormalizationError('Cannot represent non-finite decimal %r' % (obj,))
        if obj == obj.to_integral_value():
            return int(obj)
        return float(obj)
    if isinstance(obj, (datetime.datetime, datetime.date, datetime.time)):
        return obj.isoformat()
    if isinstance(obj, (bytes, bytearray)):
        return base64.b64encode(bytes(obj)).decode('ascii')

    if isinstance(obj, Mapping):
        converter = _normalize_mapping
    elif dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        converter = _normalize_dataclass
    elif _is_namedtuple(obj):
        converter = _normalize_namedtuple
    elif isinstance(obj, (list, tuple)):
        converter = _normalize_sequence
    else:
        raise NormalizationError(
            'Cannot convert value of type %s to json: %r' % (type(obj).__name__, obj))

    # Track the containers currently being converted to detect cycles
    marker = id(obj)
    if marker in active:
        raise NormalizationError(
            'Circular reference detected in value of type %s' % type(obj).__name__)
    active.add(marker)
    try:
        return converter(obj, active)
    finally:
        active.remove(marker)


def _normalize_mapping(obj, active):
    result = {}
    for k, v in obj.items():
        key = _normalize_key(k)
        if key in result:
            raise NormalizationError('Duplicate key %r after conversion to string' % key)
        result[key] = _normalize(v, active)
    return result


def _normalize_dataclass(obj, active):
    log.debug('Converting dataclass %s', type(obj).__name__)
    return {f.name: _normalize(getattr(obj, f.name), active)
            for f in dataclasses.fields(obj)}


def _normalize_namedtuple(obj, active):
    return {k: _normalize(v, active) for k, v in obj._asdict().items()}


def _normalize_sequence(obj, active):
    return [_normalize(item, active) for item in obj]
