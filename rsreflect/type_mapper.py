"""Type mapping from exported script types to C++ types"""

import math
import re
from .types import (
    ExportType, Field, MatrixType, ObjectType, PrimitiveType, RecordType,
    RenderedType, VectorType,
)


class TypeMapper:
    """Maps exported type descriptors to C++ names and sizes"""

    # data type -> (C++ name, size in bytes)
    PRIMITIVE_TYPES = {
        'FLOAT_16': ('half', 2),
        'FLOAT_32': ('float', 4),
        'FLOAT_64': ('double', 8),
        'SIGNED_8': ('int8_t', 1),
        'SIGNED_16': ('int16_t', 2),
        'SIGNED_32': ('int32_t', 4),
        'SIGNED_64': ('int64_t', 8),
        'UNSIGNED_8': ('uint8_t', 1),
        'UNSIGNED_16': ('uint16_t', 2),
        'UNSIGNED_32': ('uint32_t', 4),
        'UNSIGNED_64': ('uint64_t', 8),
        'BOOLEAN': ('bool', 1),
    }

    # Spellings used in script sources
    SOURCE_TYPES = {
        'half': 'FLOAT_16',
        'float': 'FLOAT_32',
        'double': 'FLOAT_64',
        'char': 'SIGNED_8',
        'short': 'SIGNED_16',
        'int': 'SIGNED_32',
        'long': 'SIGNED_64',
        'uchar': 'UNSIGNED_8',
        'ushort': 'UNSIGNED_16',
        'uint': 'UNSIGNED_32',
        'ulong': 'UNSIGNED_64',
        'bool': 'BOOLEAN',
        'int8_t': 'SIGNED_8',
        'int16_t': 'SIGNED_16',
        'int32_t': 'SIGNED_32',
        'int64_t': 'SIGNED_64',
        'uint8_t': 'UNSIGNED_8',
        'uint16_t': 'UNSIGNED_16',
        'uint32_t': 'UNSIGNED_32',
        'uint64_t': 'UNSIGNED_64',
    }

    # Vector element spellings, e.g. uchar4
    VECTOR_ELEMENTS = {
        'FLOAT_16': 'half',
        'FLOAT_32': 'float',
        'FLOAT_64': 'double',
        'SIGNED_8': 'char',
        'SIGNED_16': 'short',
        'SIGNED_32': 'int',
        'SIGNED_64': 'long',
        'UNSIGNED_8': 'uchar',
        'UNSIGNED_16': 'ushort',
        'UNSIGNED_32': 'uint',
        'UNSIGNED_64': 'ulong',
    }

    OBJECT_TYPES = {
        'RS_ELEMENT': 'Element',
        'RS_TYPE': 'Type',
        'RS_ALLOCATION': 'Allocation',
        'RS_SAMPLER': 'Sampler',
        'RS_SCRIPT': 'Script',
    }

    OBJECT_SIZE = 4
    MATRIX_ELEMENT_SIZE = 4

    _VECTOR_RE = re.compile(r'(half|float|double|char|uchar|short|ushort|int|uint|long|ulong)([234])')
    _MATRIX_RE = re.compile(r'rs_matrix([234])x\1')

    @classmethod
    def lookup(cls, name: str) -> ExportType:
        """Resolve a source type name, e.g. 'float4' or 'rs_allocation'"""
        if name in cls.SOURCE_TYPES:
            return PrimitiveType(cls.SOURCE_TYPES[name])

        if m := cls._VECTOR_RE.fullmatch(name):
            return VectorType(cls.SOURCE_TYPES[m.group(1)], int(m.group(2)))

        if m := cls._MATRIX_RE.fullmatch(name):
            return MatrixType(int(m.group(1)))

        if name.upper() in cls.OBJECT_TYPES:
            return ObjectType(name.upper())

        raise KeyError(f"Unknown type: {name}")

    @classmethod
    def render(cls, t: ExportType) -> RenderedType:
        """Convert a type descriptor to its C++ name and byte size"""
        if isinstance(t, PrimitiveType):
            name, size = cls.PRIMITIVE_TYPES[t.data_type]
            return RenderedType(name, size, t.data_type == 'BOOLEAN')

        if isinstance(t, VectorType):
            return RenderedType(f'{cls.VECTOR_ELEMENTS[t.data_type]}{t.size}', cls.alloc_size(t))

        if isinstance(t, MatrixType):
            return RenderedType(f'rs_matrix{t.dim}x{t.dim}', cls.alloc_size(t))

        if isinstance(t, ObjectType):
            kind = cls.OBJECT_TYPES[t.data_type]
            return RenderedType(f'android::sp<const android::renderscriptCpp::{kind}>', cls.OBJECT_SIZE)

        if isinstance(t, RecordType):
            return RenderedType(t.name, cls.alloc_size(t))

        raise TypeError(f"Not an export type: {t!r}")

    @classmethod
    def to_cpp(cls, t: ExportType) -> str:
        """Convert type descriptor to C++ type name"""
        return cls.render(t).name

    @classmethod
    def param_to_cpp(cls, param: Field) -> str:
        """Convert packet field to a C++ parameter declaration"""
        return f'{cls.to_cpp(param.type)} {param.name}'

    @classmethod
    def alloc_size(cls, t: ExportType) -> int:
        """Storage size in bytes, including padding"""
        if isinstance(t, PrimitiveType):
            return cls.PRIMITIVE_TYPES[t.data_type][1]

        if isinstance(t, VectorType):
            element = cls.PRIMITIVE_TYPES[t.data_type][1]
            # 3-element vectors are padded to 4
            return element * (4 if t.size == 3 else t.size)

        if isinstance(t, MatrixType):
            return cls.MATRIX_ELEMENT_SIZE * t.dim * t.dim

        if isinstance(t, ObjectType):
            return cls.OBJECT_SIZE

        if isinstance(t, RecordType):
            offset = 0
            for f in t.fields:
                offset = cls._align(offset, cls.alignment(f.type))
                offset += cls.alloc_size(f.type)
            return cls._align(offset, cls.alignment(t))

        raise TypeError(f"Not an export type: {t!r}")

    @classmethod
    def alignment(cls, t: ExportType) -> int:
        if isinstance(t, (PrimitiveType, VectorType)):
            return cls.alloc_size(t)
        if isinstance(t, RecordType):
            return max((cls.alignment(f.type) for f in t.fields), default=1)
        return 4

    @staticmethod
    def _align(offset: int, alignment: int) -> int:
        return (offset + alignment - 1) // alignment * alignment

    @classmethod
    def init_value(cls, value: object, t: ExportType) -> str:
        """Render a constant initializer as a C++ literal.

        Raises ValueError for values with no C++ literal spelling and
        TypeError for types that cannot be initialized from a literal.
        """
        if cls.render(t).is_bool:
            return 'true' if value else 'false'

        if isinstance(t, VectorType):
            element = PrimitiveType(t.data_type)
            # A scalar initializer splats to every element
            values = value if isinstance(value, tuple) else (value,) * t.size
            return '{' + ', '.join(cls.init_value(v, element) for v in values) + '}'

        if isinstance(t, MatrixType):
            if not isinstance(value, tuple) or len(value) != t.dim * t.dim:
                raise ValueError(f"rs_matrix{t.dim}x{t.dim} needs {t.dim * t.dim} elements")
            element = PrimitiveType('FLOAT_32')
            return '{' + ', '.join(cls.init_value(v, element) for v in value) + '}'

        if isinstance(t, PrimitiveType):
            if t.data_type in ('FLOAT_16', 'FLOAT_32', 'FLOAT_64'):
                f = float(value)
                if not math.isfinite(f):
                    raise ValueError(f"Non-finite initializer: {value!r}")
                return repr(f) if t.data_type == 'FLOAT_64' else f'{f!r}f'
            return str(int(value))

        raise TypeError(f"No literal form for {cls.to_cpp(t)}")
