"""
Tests for the line-by-line dump driver
"""
from types import SimpleNamespace
from unittest.mock import Mock

import pytest

from nmeadump.exceptions import MessageDecodeError
from nmeadump.services import DumpService

from .conftest import (
    GGA_BODY, HDT_BODY, TXT_BODY, TYPE_1_PAYLOAD, TYPE_5_PAYLOADS,
    corrupt, fragment_line, sentence_line,
)


class TestDumpServiceWithStubDecoder:
    """Driver behaviour with the message decoder stubbed out"""

    @pytest.fixture
    def decoder(self):
        decoder = Mock()
        decoder.decode.return_value = SimpleNamespace(msg_type=27)
        return decoder

    @pytest.fixture
    def service(self, reporter, decoder):
        return DumpService(reporter=reporter, decoder=decoder)

    def test_standalone_sentence_does_not_touch_buffer(self, service, decoder, output):
        service.fragments.accept = Mock()

        service.process([sentence_line(GGA_BODY)])

        service.fragments.accept.assert_not_called()
        decoder.decode.assert_not_called()
        text = output.getvalue()
        assert text.startswith(sentence_line(GGA_BODY))
        assert "\tGGA\n" in text
        assert "Num Satellites" in text
        assert service.sentence_count == 1

    def test_fragments_are_reassembled_before_decoding(self, service, decoder):
        service.process_line(fragment_line(2, 1, "xxx"))
        decoder.decode.assert_not_called()
        assert len(service.fragments) == 1

        service.process_line(fragment_line(2, 2, "yyy"))

        decoder.decode.assert_called_once()
        assembled = decoder.decode.call_args[0][0]
        assert assembled.payload == "xxxyyy"
        assert len(service.fragments) == 0
        assert service.message_count == 1

    def test_unregistered_message_type_is_reported_as_not_implemented(self, service, output):
        service.process([fragment_line(1, 1, "xxx")])

        text = output.getvalue()
        assert "position_report_for_long_range_applications" in text
        assert "message_27\n\tnot implemented" in text
        assert service.unimplemented_count == 1

    def test_end_of_input_drops_partial_collection_silently(self, service, decoder, reporter, output):
        service.process([fragment_line(2, 1, "xxx")])

        assert len(service.fragments) == 0
        decoder.decode.assert_not_called()
        assert reporter.warning_count == 0
        assert "warning" not in output.getvalue()

    def test_tag_switch_warns_once_and_dispatches_new_fragment(self, service, decoder, reporter):
        service.process([
            fragment_line(2, 1, "xxx", tag="VDM"),
            fragment_line(1, 1, "zzz", tag="VDO"),
        ])

        assert reporter.warning_count == 1
        decoder.decode.assert_called_once()
        assert decoder.decode.call_args[0][0].payload == "zzz"

    def test_unimplemented_sentence_does_not_halt_processing(self, service, output):
        service.process([sentence_line(TXT_BODY), sentence_line(HDT_BODY)])

        text = output.getvalue()
        assert "\tTXT\n" in text
        assert sentence_line(TXT_BODY) + "\n\tnot implemented" in text
        assert "\tHDT\n" in text
        assert "274.070" in text
        assert service.unimplemented_count == 1
        assert service.sentence_count == 2

    def test_unrecognized_line_is_reported_and_dropped(self, service, reporter, output):
        service.process_line(fragment_line(2, 1, "xxx"))

        service.process_line("hello world")

        assert reporter.error_count == 1
        assert "hello world\n\terror: ignoring unrecognized line." in output.getvalue()
        assert len(service.fragments) == 1

    def test_blank_and_comment_lines_are_skipped(self, service, output):
        service.process(["", "   \r\n", "# a comment", "\t# indented comment"])

        assert service.line_count == 0
        assert output.getvalue() == ""

    def test_parse_failure_is_reported(self, service, reporter, output):
        line = corrupt(sentence_line(GGA_BODY))

        service.process_line(line)

        assert reporter.error_count == 1
        assert "error: checksum error" in output.getvalue()
        assert service.sentence_count == 0

    def test_unknown_sentence_is_reported(self, service, output):
        service.process_line(sentence_line("GPXYZ,1"))

        assert "error: unknown sentence" in output.getvalue()

    def test_corrupted_fragment_leaves_collection_intact(self, service, decoder):
        service.process([
            fragment_line(2, 1, "xxx"),
            corrupt(fragment_line(2, 2, "bad")),
            fragment_line(2, 2, "yyy"),
        ])

        decoder.decode.assert_called_once()
        assert decoder.decode.call_args[0][0].payload == "xxxyyy"

    def test_decode_failure_is_reported(self, service, decoder, reporter, output):
        decoder.decode.side_effect = MessageDecodeError("boom")

        service.process([fragment_line(1, 1, "xxx"), sentence_line(HDT_BODY)])

        assert reporter.error_count == 1
        assert "error: boom" in output.getvalue()
        assert len(service.fragments) == 0
        assert service.message_count == 0
        assert service.sentence_count == 1

    def test_get_stats(self, service):
        service.process([
            sentence_line(GGA_BODY),
            fragment_line(2, 1, "xxx"),
            fragment_line(2, 2, "yyy"),
            "garbage",
        ])

        stats = service.get_stats()

        assert stats['line_count'] == 4
        assert stats['sentence_count'] == 1
        assert stats['fragment_count'] == 2
        assert stats['message_count'] == 1
        assert stats['error_count'] == 1
        assert stats['buffer_stats']['assembled_messages'] == 1


class TestDumpServiceWithPyais:
    """End to end through the real AIS decoder"""

    @pytest.fixture
    def service(self, reporter):
        return DumpService(reporter=reporter)

    def test_single_fragment_position_report(self, service, output):
        service.process([fragment_line(1, 1, TYPE_1_PAYLOAD, channel="B", seq_id="")])

        text = output.getvalue()
        assert "\tposition_report_class_a\n" in text
        assert "MMSI" in text
        assert "Nav Status" in text
        assert service.message_count == 1

    def test_two_fragment_static_data(self, service, output, reporter):
        service.process([
            fragment_line(2, 1, TYPE_5_PAYLOADS[0], seq_id="4"),
            fragment_line(2, 2, TYPE_5_PAYLOADS[1], seq_id="4", fill_bits=2),
        ])

        text = output.getvalue()
        assert "\tstatic_and_voyage_related_data\n" in text
        assert "Destination" in text
        assert "Callsign" in text
        assert reporter.error_count == 0
