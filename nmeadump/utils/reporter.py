import sys


class Reporter:
    """Writes the diagnostic dump, one category-marked line at a time."""

    MARKERS = {
        'ok': '✅',
        'fragment': '📡',
        'warning': '⚠️',
        'error': '❌',
        'unimplemented': '🚧',
    }

    def __init__(self, stream=None, use_markers=True):
        self.stream = stream
        self.use_markers = use_markers
        self.warning_count = 0
        self.error_count = 0

    def _marker(self, category):
        return f"{self.MARKERS[category]} " if self.use_markers else ""

    def _write(self, text=""):
        print(text, file=self.stream if self.stream is not None else sys.stdout)

    def ok(self, line):
        self._write(f"{self._marker('ok')}{line}")

    def fragment(self, line):
        self._write(f"{self._marker('fragment')}{line}")

    def title(self, name):
        self._write(f"\t{name}")

    def field(self, name, value):
        self._write(f"\t{name:<30} : {value}")

    def end(self):
        self._write()

    def unimplemented(self, label):
        self._write(f"{self._marker('unimplemented')}{label}")
        self._write("\tnot implemented")
        self._write()

    def warning(self, text):
        self.warning_count += 1
        self._write(f"\t{self._marker('warning')}warning: {text}")

    def error(self, line, reason):
        """Report a line that was dropped."""
        self.error_count += 1
        self._write(f"{self._marker('error')}{line}")
        self._write(f"\terror: {reason}")
        self._write()

    def decode_error(self, reason):
        self.error_count += 1
        self._write(f"\t{self._marker('error')}error: {reason}")
        self._write()
