"""Pieces shared by the header and implementation generators"""

from typing import Optional
from .types import ExportForEach, RecordType
from .type_mapper import TypeMapper

RUNTIME_NAMESPACE = "android::renderscriptCpp"
DEFAULT_BASE_CLASS = f"{RUNTIME_NAMESPACE}::ScriptC"
ALLOCATION = f"android::sp<const {RUNTIME_NAMESPACE}::Allocation>"
CONSTRUCTOR_PARAMS = f"android::sp<{RUNTIME_NAMESPACE}::RS> rs, const char *cacheDir, size_t cacheDirLength"
DUMMY_ROOT_COMMENT = "// No forEach_root(...)"


def file_preamble(input_file: str) -> list[str]:
    return [
        "/*",
        " * This file is auto-generated. DO NOT MODIFY!",
        f" * The source Renderscript file: {input_file}",
        " */",
        "",
    ]


def allocation_args(kernel: ExportForEach) -> tuple[str, ...]:
    """Allocation parameter names for a kernel, from its in/out flags"""
    if kernel.has_in and (kernel.has_out or kernel.has_return):
        return ("ain", "aout")
    if kernel.has_in:
        return ("ain",)
    return ("aout",)


def packet_params(packet: Optional[RecordType]) -> list[str]:
    if packet is None:
        return []
    return [TypeMapper.param_to_cpp(f) for f in packet.fields]


def foreach_params(kernel: ExportForEach) -> list[str]:
    params = [f"{ALLOCATION} {a}" for a in allocation_args(kernel)]
    return params + packet_params(kernel.params)


def method_signature(name: str, params: list[str], class_name: str = "") -> str:
    """`void name(params)`, qualified with `class_name::` for definitions"""
    qualifier = f"{class_name}::" if class_name else ""
    return f"void {qualifier}{name}({', '.join(params)})"
