class NMEADumpError(Exception):
    """Base class for all errors raised while dumping a stream."""


class SentenceParseError(NMEADumpError):
    """A raw line could not be turned into a sentence."""

    reason = 'parse error'

    def __init__(self, message, line=None):
        super().__init__(message)
        self.line = line


class UnknownSentenceType(SentenceParseError):
    reason = 'unknown sentence'


class ChecksumMismatch(SentenceParseError):
    reason = 'checksum error'


class MalformedField(SentenceParseError):
    reason = 'malformed field'


class MessageDecodeError(NMEADumpError):
    """An assembled AIS payload could not be decoded."""
