"""Slot assignment shared by the header and implementation passes"""

from dataclasses import dataclass, field
from typing import Optional
from .types import ExportContext, ExportForEach, ExportFunc, ExportVar


@dataclass(frozen=True)
class VarSlot:
    slot: int
    var: ExportVar


@dataclass(frozen=True)
class ForEachSlot:
    """Kernel slot; the dummy root has slot None and is never emitted"""
    slot: Optional[int]
    kernel: ExportForEach


@dataclass(frozen=True)
class FuncSlot:
    slot: int
    func: ExportFunc


@dataclass
class SlotTable:
    """Declaration-order slot numbers for every exported symbol.

    Built once per run. Variables are numbered over the full sequence,
    constants included, so a constant still consumes a slot even though
    it never gets a setter. Kernel slots skip the dummy root.
    """
    vars: list[VarSlot] = field(default_factory=list)
    foreach_kernels: list[ForEachSlot] = field(default_factory=list)
    funcs: list[FuncSlot] = field(default_factory=list)

    @classmethod
    def build(cls, context: ExportContext) -> 'SlotTable':
        table = cls()
        table.vars = [VarSlot(i, v) for i, v in enumerate(context.vars)]

        slot = 0
        for kernel in context.foreach_kernels:
            if kernel.is_dummy_root:
                table.foreach_kernels.append(ForEachSlot(None, kernel))
            else:
                table.foreach_kernels.append(ForEachSlot(slot, kernel))
                slot += 1

        table.funcs = [FuncSlot(i, f) for i, f in enumerate(context.funcs)]
        return table
