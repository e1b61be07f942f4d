from nmeadump.config import Config
from nmeadump.exceptions import MessageDecodeError, SentenceParseError
from nmeadump.renderers import MESSAGE_REGISTRY, SENTENCE_REGISTRY
from nmeadump.utils import AISDecoder, FragmentBuffer, LineKind, NMEAParser, Reporter


class DumpService:
    """Service class for dumping a stream of NMEA sentences."""

    def __init__(self, config=Config, reporter=None, decoder=None,
                 sentence_registry=SENTENCE_REGISTRY, message_registry=MESSAGE_REGISTRY):
        self.config = config
        self.reporter = reporter if reporter is not None else Reporter(use_markers=config.USE_MARKERS)
        self.decoder = decoder if decoder is not None else AISDecoder()
        self.sentence_registry = sentence_registry
        self.message_registry = message_registry

        # The only in-flight AIS collection
        self.fragments = FragmentBuffer(self.reporter)

        self.line_count = 0
        self.sentence_count = 0
        self.fragment_count = 0
        self.message_count = 0
        self.unimplemented_count = 0

    def process(self, lines):
        """Dump every line until the source is exhausted."""
        for line in lines:
            self.process_line(line)
        self.finish()

    def finish(self):
        """End of input: a partial collection is dropped without a warning."""
        self.fragments.clear()

    def process_line(self, raw_line):
        """Process a single line of input."""
        line = raw_line.strip()
        if not line:
            return
        if self.config.COMMENT_PREFIX and line.startswith(self.config.COMMENT_PREFIX):
            return

        self.line_count += 1
        kind = NMEAParser.classify(line)
        if kind is LineKind.SENTENCE:
            self._dump_sentence(line)
        elif kind is LineKind.FRAGMENT:
            self._collect_fragment(line)
        else:
            self.reporter.error(line, "ignoring unrecognized line.")

    def _parse(self, line):
        try:
            return NMEAParser.parse(line)
        except SentenceParseError as e:
            self.reporter.error(line, f"{e.reason}: {e}")
            return None

    def _dump_sentence(self, line):
        sentence = self._parse(line)
        if sentence is None:
            return

        self.sentence_count += 1
        if sentence.sentence_id in self.sentence_registry:
            self.reporter.ok(line)
        if not self.sentence_registry.dispatch(sentence.sentence_id, sentence, self.reporter, label=line):
            self.unimplemented_count += 1

    def _collect_fragment(self, line):
        self.reporter.fragment(line)
        sentence = self._parse(line)
        if sentence is None:
            return

        self.fragment_count += 1
        assembled = self.fragments.accept(sentence)
        if assembled is not None:
            self._dump_message(assembled)

    def _dump_message(self, assembled):
        try:
            message = self.decoder.decode(assembled)
        except MessageDecodeError as decode_error:
            self.reporter.decode_error(str(decode_error))
            return

        self.message_count += 1
        msg_type = message.msg_type
        if not self.message_registry.dispatch(msg_type, message, self.reporter,
                                              label=f"message_{int(msg_type):02d}"):
            self.unimplemented_count += 1

    def get_stats(self):
        """Get service statistics."""
        return {
            "line_count": self.line_count,
            "sentence_count": self.sentence_count,
            "fragment_count": self.fragment_count,
            "message_count": self.message_count,
            "unimplemented_count": self.unimplemented_count,
            "warning_count": self.reporter.warning_count,
            "error_count": self.reporter.error_count,
            "buffer_stats": self.fragments.get_stats()
        }
