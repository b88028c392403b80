from __future__ import annotations

NEWLINE = 0x0A


class IOMixin:
    # ===== Byte output =====

    def _write(self):
        self.stdout.write(bytes((self.state.cell,)))
        flush = getattr(self.stdout, 'flush', None)
        if flush is not None:
            flush()

    # ===== Byte input =====

    def _read_byte(self):
        data = self.stdin.read(1)
        if not data:
            return None
        if isinstance(data, str):
            # text streams; characters above U+00FF raise UnicodeEncodeError
            data = data.encode('latin-1')
        return data[0]

    def _discard_line(self):
        while True:
            value = self._read_byte()
            if value is None or value == NEWLINE:
                return

    def _read(self):
        value = self._read_byte()
        if value is None:
            # end of input
            if self.options.eof_value is not None:
                self.state.tape[self.state.pointer] = self.options.eof_value & 0xFF
            return

        self.state.tape[self.state.pointer] = value
        if self.options.line_input and value != NEWLINE:
            self._discard_line()
