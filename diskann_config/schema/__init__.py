"""
Schema Module: Parameter Descriptors and Field Sets
"""

from diskann_config.schema.descriptor import FieldBuilder, ParamDescriptor, declare
from diskann_config.schema.registry import Schema
from diskann_config.schema.base import BASE_FIELDS
from diskann_config.schema.diskann import DISKANN_FIELDS, DISKANN_SCHEMA

__all__ = [
    "FieldBuilder",
    "ParamDescriptor",
    "declare",
    "Schema",
    "BASE_FIELDS",
    "DISKANN_FIELDS",
    "DISKANN_SCHEMA",
]
