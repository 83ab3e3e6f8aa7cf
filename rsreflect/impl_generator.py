"""Implementation Generator - generates the ScriptC_* out-of-line definitions"""

from pathlib import Path
from typing import Optional
from .common_generator import (
    CONSTRUCTOR_PARAMS, DUMMY_ROOT_COMMENT, allocation_args, file_preamble,
    foreach_params, method_signature, packet_params,
)
from .embedder import embed_binary
from .slots import ForEachSlot, FuncSlot, SlotTable
from .text_sink import LineBuffer
from .type_mapper import TypeMapper
from .types import RecordType


class ImplGenerator:
    """Generates the class implementation with the embedded bitcode"""

    BITCODE_ARRAY = "__txt"

    def __init__(self, slots: SlotTable, class_name: str, input_file: str,
                 bc_file: Path, base_class: str = ""):
        self.slots = slots
        self.class_name = class_name
        self.input_file = input_file
        self.bc_file = Path(bc_file)
        self.base_class = base_class

    def generate(self) -> LineBuffer:
        """Build the .cpp text. Raises OSError if the bitcode is unreadable."""
        out = LineBuffer(f"{self.class_name}.cpp")
        out.extend(file_preamble(self.input_file))
        out.write(f'#include "{self.class_name}.h"')
        out.write()

        bc_size = self._write_bitcode(out)
        self._write_constructor(out, bc_size)

        out.write(f"{self.class_name}::~{self.class_name}() {{")
        out.write("}")
        out.write()

        for fs in self.slots.foreach_kernels:
            self._write_foreach(out, fs)

        for fs in self.slots.funcs:
            self._write_invoke(out, fs)

        return out

    def _write_bitcode(self, out: LineBuffer) -> int:
        embedded = embed_binary(self.bc_file)
        out.write(f"static const unsigned char {self.BITCODE_ARRAY}[] = {{")
        out.indent()
        out.extend(embedded.lines)
        out.dedent()
        out.write("};")
        out.write()
        return embedded.size

    def _write_constructor(self, out: LineBuffer, bc_size: int) -> None:
        signature = f"{self.class_name}::{self.class_name}({CONSTRUCTOR_PARAMS})"
        if self.base_class:
            out.write(f"{signature} :")
            out.write(
                f"        {self.base_class}(rs, {self.BITCODE_ARRAY}, {bc_size}, "
                f'"{self.class_name}", {len(self.class_name)}, cacheDir, cacheDirLength) {{'
            )
        else:
            out.write(f"{signature} {{")
        out.write("}")
        out.write()

    def _write_foreach(self, out: LineBuffer, fs: ForEachSlot) -> None:
        kernel = fs.kernel
        if fs.slot is None:
            out.write(DUMMY_ROOT_COMMENT)
            out.write()
            return

        out.write(method_signature(f"forEach_{kernel.name}", foreach_params(kernel), self.class_name) + " {")
        out.indent()
        allocations = allocation_args(kernel)
        ain = "ain" if "ain" in allocations else "NULL"
        aout = "aout" if "aout" in allocations else "NULL"
        usr = self._pack_params(out, kernel.params)
        out.write(f"forEach({fs.slot}, {ain}, {aout}, {usr});")
        out.dedent()
        out.write("}")
        out.write()

    def _write_invoke(self, out: LineBuffer, fs: FuncSlot) -> None:
        func = fs.func
        out.write(method_signature(f"invoke_{func.name}", packet_params(func.params), self.class_name) + " {")
        out.indent()
        args = self._pack_params(out, func.params)
        out.write(f"invoke({fs.slot}, {args});")
        out.dedent()
        out.write("}")
        out.write()

    def _pack_params(self, out: LineBuffer, packet: Optional[RecordType]) -> str:
        """Serialize a parameter packet; returns the `data, size` argument pair"""
        if packet is None:
            return "NULL, 0"
        size = TypeMapper.alloc_size(packet)
        out.write(f"FieldPacker __fp({size});")
        for f in packet.fields:
            out.write(f"__fp.add({f.name});")
        return f"__fp.getData(), {size}"
