from .registry import compute_attributes, list_attributes, register_attribute
from . import standard as _standard  # noqa: F401

__all__ = ["compute_attributes", "list_attributes", "register_attribute"]
