"""Data types for the exported script surface"""

from dataclasses import dataclass, field
from typing import NamedTuple, Optional, Union


@dataclass(frozen=True)
class PrimitiveType:
    """Scalar type, keyed by its canonical data type name (e.g. FLOAT_32)"""
    data_type: str


@dataclass(frozen=True)
class VectorType:
    """Short vector of a numeric primitive"""
    data_type: str
    size: int


@dataclass(frozen=True)
class MatrixType:
    """Square rs_matrixNxN"""
    dim: int


@dataclass(frozen=True)
class ObjectType:
    """Runtime object handle (allocation, element, ...)"""
    data_type: str


@dataclass(frozen=True)
class Field:
    """Named member of a record"""
    name: str
    type: 'ExportType'


@dataclass(frozen=True)
class RecordType:
    """Ordered record, used for parameter packets"""
    name: str
    fields: tuple[Field, ...] = ()


ExportType = Union[PrimitiveType, VectorType, MatrixType, ObjectType, RecordType]


class RenderedType(NamedTuple):
    """Type as it appears in generated C++"""
    name: str
    size: int
    is_bool: bool = False


@dataclass
class ExportVar:
    """Exported global variable"""
    name: str
    type: ExportType
    is_const: bool = False
    init: object = None


@dataclass
class ExportForEach:
    """Exported per-element kernel"""
    name: str
    has_in: bool = False
    has_out: bool = False
    has_return: bool = False
    is_dummy_root: bool = False
    params: Optional[RecordType] = None


@dataclass
class ExportFunc:
    """Exported invokable function"""
    name: str
    params: Optional[RecordType] = None


@dataclass
class ExportContext:
    """Complete exported surface of one script, in declaration order"""
    vars: list[ExportVar] = field(default_factory=list)
    foreach_kernels: list[ExportForEach] = field(default_factory=list)
    funcs: list[ExportFunc] = field(default_factory=list)
