import pytest

from cinesphere.platform.exception.exceptions import MalformedRecordError
from cinesphere.service.booking.domain.value_object.booking_record import BookingRecord


pytestmark = pytest.mark.unit


class TestBookingRecordParse:
    def test_parse_splits_on_first_and_last_separator(self):
        record = BookingRecord.parse('5003|PVR Phoenix|2025-12-15|10:30 AM|The AI Architect|A1,C3')

        assert record.booking_id == 5003
        assert record.showtime_key == 'PVR Phoenix|2025-12-15|10:30 AM|The AI Architect'
        assert record.seat_ids == ('A1', 'C3')

    def test_seat_ids_are_trimmed_and_empties_dropped(self):
        record = BookingRecord.parse('5003|T|2025-12-15|10:30 AM|M| A1 ,,C3,')

        assert record.seat_ids == ('A1', 'C3')

    def test_empty_seat_list(self):
        record = BookingRecord.parse('5003|T|2025-12-15|10:30 AM|M|')

        assert record.seat_ids == ()

    @pytest.mark.parametrize(
        'line',
        [
            'garbage',
            '5003|only-one-separator',
            'abc|T|2025-12-15|10:30 AM|M|A1',
            '-5|T|2025-12-15|10:30 AM|M|A1',
            '5²|T|2025-12-15|10:30 AM|M|A1',
            '٥٠|T|2025-12-15|10:30 AM|M|A1',
            '5003|T|2025-12-15|M|A1',
            '5003|T|2025-12-15|10:30 AM|M|extra|A1',
        ],
    )
    def test_malformed_lines_raise(self, line):
        with pytest.raises(MalformedRecordError) as exc_info:
            BookingRecord.parse(line)

        assert exc_info.value.line == line

    def test_to_line_inverts_parse(self):
        line = '5010|Gopalan Cinemas|2025-12-16|09:00 PM|Eternal Sun|A1,B2,C3'

        assert BookingRecord.parse(line).to_line() == line
