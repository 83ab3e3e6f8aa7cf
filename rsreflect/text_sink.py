"""Indentation-aware line buffer for generated sources"""

from pathlib import Path


class LineBuffer:
    """Ordered lines for one output file, with an explicit indent level"""

    INDENT = "    "

    def __init__(self, filename: str):
        self.filename = filename
        self.lines: list[str] = []
        self.indent_level = 0

    def write(self, line: str = "") -> None:
        if line:
            self.lines.append(self.INDENT * self.indent_level + line)
        else:
            self.lines.append("")

    def extend(self, lines) -> None:
        for line in lines:
            self.write(line)

    def indent(self) -> None:
        self.indent_level += 1

    def dedent(self) -> None:
        if self.indent_level == 0:
            raise ValueError("Indent level is already 0")
        self.indent_level -= 1

    def clear(self) -> None:
        self.lines.clear()
        self.indent_level = 0

    def render(self) -> str:
        return "\n".join(self.lines) + "\n"

    def write_to(self, path: Path) -> Path:
        """Flush the buffer to `path`"""
        path = Path(path)
        path.write_text(self.render(), encoding="utf-8")
        return path
