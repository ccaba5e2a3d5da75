from io import BytesIO

from . import Line, Lines

__all__ = ["YAML"]


class YAML(BytesIO):
    """Shows the indent view of a sequence as nested YAML.

    Every line is a mapping with its 1-indexed `line` number (what pointers
    refer to), `text` and `label`. A line followed by a deeper line carries a
    `block` sequence of its children. Nothing here is read back; loading the
    output with `ruamel.yaml` is how the test harness checks the nesting.
    """

    def encode(self, lines: Lines) -> BytesIO:
        self.seek(0)
        self.truncate()
        if not lines:
            self.write(b"--- []\n...\n")
            return self
        self.write(b"---\n")
        for index, line in enumerate(lines):
            indent = b"    " * line.indent
            self._line(indent, index, line)
            if index + 1 < len(lines) and lines[index + 1].indent > line.indent:
                self.write(indent)
                self.write(b"  block:\n")
        self.write(b"...\n")
        return self

    def _line(self, indent: bytes, index: int, line: Line) -> None:
        self.write(indent)
        self.write(b"- line: %d\n" % (index + 1))
        self.write(indent)
        self.write(b"  text: ")
        self._quoted(line.text)
        self.write(indent)
        self.write(b"  label: ")
        self._quoted(line.label.value)

    def _quoted(self, text: str) -> None:
        self.write(b'"')
        for char in text:
            match char:
                case "\\":
                    self.write(b"\\\\")
                case '"':
                    self.write(b'\\"')
                case "\t":
                    self.write(b"\\t")
                case "\x85":
                    self.write(b"\\N")
                case "\u2028":
                    self.write(b"\\L")
                case "\u2029":
                    self.write(b"\\P")
                case _ if char < " " or char == "\x7f":
                    self.write(b"\\x%02x" % ord(char))
                case _:
                    self.write(char.encode())
        self.write(b'"\n')
