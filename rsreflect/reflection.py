"""Reflection driver - turns an exported script surface into a ScriptC_* class"""

import os
import re
import sys
from pathlib import Path
from .common_generator import DEFAULT_BASE_CLASS
from .header_generator import HeaderGenerator
from .impl_generator import ImplGenerator
from .slots import SlotTable
from .text_sink import LineBuffer
from .types import ExportContext

CLASS_PREFIX = "ScriptC_"


def strip_rs(input_file: str) -> str:
    """Script name without directory or .rs suffix, usable as an identifier"""
    name = Path(input_file).name
    if name.endswith(".rs"):
        name = name[:-len(".rs")]
    return re.sub(r'\W', '_', name)


def class_name_for(input_file: str) -> str:
    return CLASS_PREFIX + strip_rs(input_file)


def write_files(output_dir: Path, buffers: list[LineBuffer]) -> list[Path]:
    """Write every buffer into output_dir, all or nothing.

    Each buffer is staged as a hidden sibling and only renamed into place
    once every file has been written successfully.
    """
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    staged: list[tuple[Path, Path]] = []
    try:
        for buf in buffers:
            tmp = output_dir / f".{buf.filename}.tmp"
            staged.append((tmp, output_dir / buf.filename))
            buf.write_to(tmp)
        for tmp, final in staged:
            os.replace(tmp, final)
    except OSError:
        for tmp, _ in staged:
            tmp.unlink(missing_ok=True)
        raise

    return [final for _, final in staged]


class CppReflection:
    """Generates the C++ ScriptC_<name>.h/.cpp pair for one script"""

    def __init__(self, context: ExportContext, base_class: str = DEFAULT_BASE_CLASS):
        self.context = context
        self.base_class = base_class
        self.class_name = ""
        self.output_paths: list[Path] = []

    def reflect(self, output_dir: Path, input_file: str, bc_file: Path) -> bool:
        """Generate and write both files.

        Returns False, writing nothing, if the bitcode file cannot be read.
        Write failures propagate as OSError.
        """
        self.class_name = class_name_for(input_file)
        source_name = Path(input_file).name

        # Both passes read the same table, so slot numbers cannot diverge
        slots = SlotTable.build(self.context)

        header = HeaderGenerator(slots, self.class_name, source_name, self.base_class).generate()
        try:
            impl = ImplGenerator(slots, self.class_name, source_name, bc_file, self.base_class).generate()
        except OSError:
            print(f"Error: could not read file {bc_file}", file=sys.stderr)
            return False

        self.output_paths = write_files(output_dir, [header, impl])
        return True
