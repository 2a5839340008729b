"""Exceptions raised by the generator"""


class RbTypeGenError(Exception):
    """Base class of the errors reported by rbtypegen"""


class ModelError(RbTypeGenError):
    """The model description can't be turned into a model"""


class GenerationError(RbTypeGenError):
    """A generated file couldn't be written"""
