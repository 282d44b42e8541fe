# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.


class JsonDeltaError(ValueError):
    """Base class for errors raised while computing a diff."""


class NormalizationError(JsonDeltaError):
    """A value could not be converted to a json tree.

    Raised for cyclic references, unsupported types, mapping keys
    that are not strings and non-finite floats.
    """


class InvalidRootShapeError(JsonDeltaError):
    """A top-level input did not normalize to a json object."""
