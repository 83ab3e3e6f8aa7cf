"""
RenderScript C++ Reflection Package

Turns the exported surface of a compiled script into a ScriptC_<name>
C++ class:
  1. Header with typed accessors, forEach_* and invoke_* declarations
  2. Implementation with the embedded bitcode and slot-indexed dispatch
"""

from .types import (
    PrimitiveType, VectorType, MatrixType, ObjectType, Field, RecordType,
    RenderedType, ExportVar, ExportForEach, ExportFunc, ExportContext,
)
from .parser import ExportParser, ParseError
from .type_mapper import TypeMapper
from .embedder import embed_binary
from .slots import SlotTable
from .text_sink import LineBuffer
from .header_generator import HeaderGenerator
from .impl_generator import ImplGenerator
from .reflection import CppReflection, class_name_for

__all__ = [
    'PrimitiveType', 'VectorType', 'MatrixType', 'ObjectType', 'Field', 'RecordType',
    'RenderedType', 'ExportVar', 'ExportForEach', 'ExportFunc', 'ExportContext',
    'ExportParser', 'ParseError', 'TypeMapper', 'embed_binary', 'SlotTable',
    'LineBuffer', 'HeaderGenerator', 'ImplGenerator', 'CppReflection', 'class_name_for',
]
