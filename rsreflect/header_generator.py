"""Header Generator - generates the ScriptC_* class declaration"""

from .common_generator import (
    CONSTRUCTOR_PARAMS, DUMMY_ROOT_COMMENT, file_preamble, foreach_params,
    method_signature, packet_params,
)
from .slots import SlotTable, VarSlot
from .text_sink import LineBuffer
from .type_mapper import TypeMapper


class HeaderGenerator:
    """Generates the public class declaration for a reflected script"""

    def __init__(self, slots: SlotTable, class_name: str, input_file: str, base_class: str = ""):
        self.slots = slots
        self.class_name = class_name
        self.input_file = input_file
        self.base_class = base_class

    def generate(self) -> LineBuffer:
        out = LineBuffer(f"{self.class_name}.h")
        out.extend(file_preamble(self.input_file))
        out.write('#include "RenderScript.h"')
        out.write("using namespace android::renderscriptCpp;")
        out.write()

        if self.base_class:
            out.write(f"class {self.class_name} : public {self.base_class} {{")
        else:
            out.write(f"class {self.class_name} {{")

        out.write("private:")
        out.indent()
        for vs in self.slots.vars:
            if not vs.var.is_const:
                out.write(f"{TypeMapper.to_cpp(vs.var.type)} __{vs.var.name};")
        out.dedent()

        out.write("public:")
        out.indent()
        out.write(f"{self.class_name}({CONSTRUCTOR_PARAMS});")
        out.write(f"virtual ~{self.class_name}();")
        out.write()

        for vs in self.slots.vars:
            self._var_accessors(out, vs)

        for fs in self.slots.foreach_kernels:
            if fs.slot is None:
                out.write(DUMMY_ROOT_COMMENT)
                continue
            out.write(method_signature(f"forEach_{fs.kernel.name}", foreach_params(fs.kernel)) + ";")

        for fs in self.slots.funcs:
            out.write(method_signature(f"invoke_{fs.func.name}", packet_params(fs.func.params)) + ";")

        out.dedent()
        out.write("};")
        return out

    def _var_accessors(self, out: LineBuffer, vs: VarSlot) -> None:
        var = vs.var
        ctype = TypeMapper.to_cpp(var.type)

        if not var.is_const:
            out.write(f"void set_{var.name}({ctype} v) {{")
            out.write(f"    setVar({vs.slot}, &v, sizeof(v));")
            out.write(f"    __{var.name} = v;")
            out.write("}")

        out.write(f"{ctype} get_{var.name}() const {{")
        if var.is_const:
            out.write(f"    return {TypeMapper.init_value(var.init, var.type)};")
        else:
            out.write(f"    return __{var.name};")
        out.write("}")
        out.write()
