import pytest

from rsreflect import MatrixType, ObjectType, PrimitiveType, RenderedType, TypeMapper, VectorType


@pytest.mark.parametrize(
    ("source", "expected"),
    [
        ("half", RenderedType("half", 2)),
        ("float", RenderedType("float", 4)),
        ("double", RenderedType("double", 8)),
        ("char", RenderedType("int8_t", 1)),
        ("short", RenderedType("int16_t", 2)),
        ("int", RenderedType("int32_t", 4)),
        ("long", RenderedType("int64_t", 8)),
        ("uchar", RenderedType("uint8_t", 1)),
        ("ushort", RenderedType("uint16_t", 2)),
        ("uint", RenderedType("uint32_t", 4)),
        ("ulong", RenderedType("uint64_t", 8)),
        ("uint32_t", RenderedType("uint32_t", 4)),
        ("bool", RenderedType("bool", 1, True)),
    ],
)
def test_primitive_types_render_to_fixed_width_names(source: str, expected: RenderedType) -> None:
    assert TypeMapper.render(TypeMapper.lookup(source)) == expected


def test_only_bool_is_flagged_boolean() -> None:
    flagged = [name for name in TypeMapper.SOURCE_TYPES if TypeMapper.render(TypeMapper.lookup(name)).is_bool]
    assert flagged == ["bool"]


@pytest.mark.parametrize(
    ("source", "size"),
    [("float2", 8), ("float3", 16), ("float4", 16), ("uchar3", 4), ("double4", 32), ("short2", 4)],
)
def test_vectors_keep_source_spelling_and_pad_three_to_four(source: str, size: int) -> None:
    t = TypeMapper.lookup(source)

    assert isinstance(t, VectorType)
    assert TypeMapper.render(t) == RenderedType(source, size)


def test_matrix_and_object_types() -> None:
    assert TypeMapper.lookup("rs_matrix3x3") == MatrixType(3)
    assert TypeMapper.render(MatrixType(4)) == RenderedType("rs_matrix4x4", 64)

    alloc = TypeMapper.lookup("rs_allocation")
    assert alloc == ObjectType("RS_ALLOCATION")
    assert TypeMapper.render(alloc) == RenderedType(
        "android::sp<const android::renderscriptCpp::Allocation>", 4
    )


@pytest.mark.parametrize("source", ["string", "float5", "rs_matrix2x3", "bool4", "rs_mesh"])
def test_unknown_types_raise_key_error(source: str) -> None:
    with pytest.raises(KeyError):
        TypeMapper.lookup(source)


def test_record_layout_uses_natural_alignment(make_packet) -> None:
    # float @0, char @4, double @8
    packet = make_packet("p", ("float", "g"), ("char", "c"), ("double", "d"))

    assert TypeMapper.alloc_size(packet) == 16
    assert TypeMapper.render(packet) == RenderedType("p", 16)


def test_record_size_is_rounded_to_its_alignment(make_packet) -> None:
    assert TypeMapper.alloc_size(make_packet("p", ("int", "a"), ("char", "b"))) == 8
    assert TypeMapper.alloc_size(make_packet("p", ("char", "a"), ("char", "b"))) == 2
    assert TypeMapper.alloc_size(make_packet("p", ("char", "a"), ("float3", "v"))) == 32


def test_param_to_cpp(make_packet) -> None:
    packet = make_packet("p", ("uint", "n"), ("float4", "color"))

    assert [TypeMapper.param_to_cpp(f) for f in packet.fields] == ["uint32_t n", "float4 color"]


@pytest.mark.parametrize(
    ("value", "source", "literal"),
    [
        (True, "bool", "true"),
        (False, "bool", "false"),
        (0, "bool", "false"),
        (42, "int", "42"),
        (-7, "long", "-7"),
        (255, "uchar", "255"),
        (2.5, "float", "2.5f"),
        (1, "float", "1.0f"),
        (0.25, "double", "0.25"),
        ((1, 2), "int2", "{1, 2}"),
        ((0.5, 1.0, 2.0), "float3", "{0.5f, 1.0f, 2.0f}"),
        (1.0, "float4", "{1.0f, 1.0f, 1.0f, 1.0f}"),
        (3, "uchar2", "{3, 3}"),
        ((1, 0, 0, 1), "rs_matrix2x2", "{1.0f, 0.0f, 0.0f, 1.0f}"),
    ],
)
def test_init_value_literals(value: object, source: str, literal: str) -> None:
    assert TypeMapper.init_value(value, TypeMapper.lookup(source)) == literal


def test_render_rejects_non_types() -> None:
    with pytest.raises(TypeError):
        TypeMapper.render(PrimitiveType)


@pytest.mark.parametrize(
    ("value", "source"),
    [
        (float("inf"), "float"),
        (float("-inf"), "half"),
        (float("nan"), "double"),
        ((1.0, float("nan")), "float2"),
        ((1, 0, 0), "rs_matrix2x2"),
        (1.0, "rs_matrix3x3"),
    ],
)
def test_init_value_rejects_values_without_a_literal(value: object, source: str) -> None:
    with pytest.raises(ValueError):
        TypeMapper.init_value(value, TypeMapper.lookup(source))


@pytest.mark.parametrize("source", ["rs_allocation", "rs_element"])
def test_init_value_rejects_object_types(source: str) -> None:
    with pytest.raises(TypeError):
        TypeMapper.init_value(0, TypeMapper.lookup(source))


def test_init_value_rejects_records(make_packet) -> None:
    with pytest.raises(TypeError):
        TypeMapper.init_value((1,), make_packet("p", ("int", "a")))
