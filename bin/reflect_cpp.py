#!/usr/bin/env python3
"""
RenderScript C++ Reflection Generator

Reads the exported surface of a script and its compiled bitcode and generates:
  1. ScriptC_<name>.h   - class declaration with accessors and dispatch methods
  2. ScriptC_<name>.cpp - definitions with the bitcode embedded as a byte array

Usage:
    python reflect_cpp.py mono.exports --bitcode mono.bc --output-dir generated/
    python reflect_cpp.py mono.exports -b mono.bc -i mono.rs --base-class ""
"""

import argparse
import sys
import time
from pathlib import Path

# Add parent directory to path so rsreflect package can be found
sys.path.insert(0, str(Path(__file__).parent.parent))

from rsreflect import CppReflection, ExportParser, ParseError
from rsreflect.common_generator import DEFAULT_BASE_CLASS


def main(argv=None):
    start_time = time.perf_counter()

    parser = argparse.ArgumentParser(description="Generate C++ reflection for a RenderScript script")
    parser.add_argument("exports", help="Path to the export description")
    parser.add_argument("--input", "-i", default="", help="Script source file name (default: <exports stem>.rs)")
    parser.add_argument("--bitcode", "-b", required=True, help="Compiled bitcode to embed")
    parser.add_argument("--output-dir", "-o", default="generated", help="Output directory")
    parser.add_argument("--base-class", default=DEFAULT_BASE_CLASS, help="Base class; empty for a standalone class")
    args = parser.parse_args(argv)

    exports_path = Path(args.exports)
    input_file = args.input or f"{exports_path.stem}.rs"

    try:
        context = ExportParser(exports_path.read_text()).parse()
    except (OSError, ParseError) as err:
        print(f"Error: {err}", file=sys.stderr)
        return 1

    reflection = CppReflection(context, args.base_class)
    if not reflection.reflect(Path(args.output_dir), input_file, Path(args.bitcode)):
        return 1

    for path in reflection.output_paths:
        print(f"Generated: {path}")

    elapsed = time.perf_counter() - start_time
    print(f"Generation completed in {elapsed*1000:.2f} ms")
    return 0


if __name__ == "__main__":
    sys.exit(main())
