"""Parser for script export descriptions"""

import re
from typing import Optional
from .types import ExportContext, ExportForEach, ExportFunc, ExportVar, Field, RecordType
from .type_mapper import TypeMapper


class ParseError(ValueError):
    """Malformed export description"""


class ExportParser:
    """Parses the exported surface of a script.

    One declaration per `;`:

        var int count;
        const float scale = 2.5;
        foreach root() default;
        foreach blur(in, out, float radius);
        invoke setup(float gain, int seed);
    """

    ALLOCATION_FLAGS = ('in', 'out', 'return')

    def __init__(self, content: str):
        self.content = self._strip_comments(content)

    def _strip_comments(self, content: str) -> str:
        content = re.sub(r'//.*$', '', content, flags=re.MULTILINE)
        content = re.sub(r'/\*.*?\*/', '', content, flags=re.DOTALL)
        return content

    def parse(self) -> ExportContext:
        result = ExportContext()
        for decl in self.content.split(';'):
            decl = ' '.join(decl.split())
            if not decl:
                continue

            if m := re.fullmatch(r'var\s+(\w+)\s+(\w+)', decl):
                result.vars.append(ExportVar(name=m.group(2), type=self._type(m.group(1))))
            elif m := re.fullmatch(r'const\s+(\w+)\s+(\w+)\s*=\s*(.+)', decl):
                result.vars.append(self._parse_const(m.group(1), m.group(2), m.group(3)))
            elif m := re.fullmatch(r'foreach\s+(\w+)\s*\(([^)]*)\)\s*(default)?', decl):
                result.foreach_kernels.append(self._parse_foreach(m.group(1), m.group(2), m.group(3) is not None))
            elif m := re.fullmatch(r'invoke\s+(\w+)\s*\(([^)]*)\)', decl):
                name = m.group(1)
                result.funcs.append(ExportFunc(name=name, params=self._parse_packet(name, m.group(2).split(','))))
            else:
                raise ParseError(f"Unrecognized declaration: {decl}")
        return result

    def _parse_const(self, type_name: str, name: str, init: str) -> ExportVar:
        var = ExportVar(name=name, type=self._type(type_name), is_const=True, init=self._parse_literal(init))
        try:
            TypeMapper.init_value(var.init, var.type)
        except (TypeError, ValueError) as err:
            raise ParseError(f"Bad initializer for {name}: {err}") from err
        return var

    def _parse_foreach(self, name: str, args: str, is_default: bool) -> ExportForEach:
        kernel = ExportForEach(name=name, is_dummy_root=is_default)
        params = []
        for arg in args.split(','):
            arg = arg.strip()
            if arg in self.ALLOCATION_FLAGS:
                setattr(kernel, f'has_{arg}', True)
            elif arg:
                params.append(arg)
        kernel.params = self._parse_packet(name, params)
        return kernel

    def _parse_packet(self, name: str, params: list[str]) -> Optional[RecordType]:
        fields = []
        for p in params:
            p = p.strip()
            if not p:
                continue
            parts = p.rsplit(None, 1)
            if len(parts) != 2:
                raise ParseError(f"Parameter needs a type and a name: {p}")
            fields.append(Field(name=parts[1], type=self._type(parts[0])))

        if not fields:
            return None
        return RecordType(name=f'{name}_params', fields=tuple(fields))

    def _type(self, name: str):
        try:
            return TypeMapper.lookup(name)
        except KeyError as err:
            raise ParseError(f"Unknown type: {name}") from err

    def _parse_literal(self, text: str) -> object:
        text = text.strip()
        if text in ('true', 'false'):
            return text == 'true'
        if text.startswith('{') and text.endswith('}'):
            return tuple(self._parse_literal(v) for v in text[1:-1].split(',') if v.strip())
        try:
            return int(text, 0)
        except ValueError:
            pass
        try:
            return float(text.rstrip('fF'))
        except ValueError as err:
            raise ParseError(f"Bad initializer: {text}") from err
