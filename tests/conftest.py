import sys
from collections.abc import Callable
from pathlib import Path

import pytest

PROJECT_DIR = Path(__file__).resolve().parent.parent
if str(PROJECT_DIR) not in sys.path:
    sys.path.insert(0, str(PROJECT_DIR))

from rsreflect import (  # noqa: E402
    ExportContext, ExportForEach, ExportFunc, ExportVar, Field, RecordType, TypeMapper,
)


@pytest.fixture
def make_packet() -> Callable[..., RecordType]:
    def _make_packet(name: str, *params: tuple[str, str]) -> RecordType:
        fields = tuple(Field(name=n, type=TypeMapper.lookup(t)) for t, n in params)
        return RecordType(name=name, fields=fields)

    return _make_packet


@pytest.fixture
def make_var() -> Callable[..., ExportVar]:
    def _make_var(name: str, type_name: str, *, init: object = None) -> ExportVar:
        return ExportVar(
            name=name,
            type=TypeMapper.lookup(type_name),
            is_const=init is not None,
            init=init,
        )

    return _make_var


@pytest.fixture
def bitcode(tmp_path: Path) -> Callable[[bytes], Path]:
    def _bitcode(data: bytes) -> Path:
        path = tmp_path / "script.bc"
        path.write_bytes(data)
        return path

    return _bitcode


@pytest.fixture
def sample_context(make_var, make_packet) -> ExportContext:
    """Mixed surface: constants interleaved with mutables, a dummy root, packets"""
    return ExportContext(
        vars=[
            make_var("count", "int"),
            make_var("debug", "bool", init=True),
            make_var("gain", "float"),
            make_var("limit", "uint", init=255),
            make_var("tint", "float4"),
        ],
        foreach_kernels=[
            ExportForEach(name="root", is_dummy_root=True),
            ExportForEach(name="invert", has_in=True, has_out=True),
            ExportForEach(name="fill", has_out=True),
            ExportForEach(name="scan", has_in=True),
            ExportForEach(
                name="blur", has_in=True, has_return=True,
                params=make_packet("blur_params", ("float", "radius"), ("int", "passes")),
            ),
        ],
        funcs=[
            ExportFunc(name="reset"),
            ExportFunc(name="setup", params=make_packet("setup_params", ("float", "g"), ("char", "c"), ("double", "d"))),
        ],
    )
