from lead_capture.workflows.leads.meeting_status import PRE_BOOKED_SCENARIO, status_label, update_meeting_status
from lead_capture.workflows.leads.models import LeadSubmission, MeetingUpdate
from lead_capture.workflows.leads.row_mapper import map_row


def _seed(table, schema, **fields):
    return table.append_row(map_row(LeadSubmission(**fields), schema, timestamp="T"))


def _cell(table, schema, row, field):
    return table.read_cell(row, schema.col(field))


def test_status_labels():
    assert status_label("completed") == "SHOWED"
    assert status_label("no_show") == "NO-SHOW"
    assert status_label("rescheduled") == "RESCHEDULED"
    assert status_label("") == "RESCHEDULED"


def test_two_updates_append_two_summary_entries(table, schema):
    row = _seed(table, schema, conversation_summary="Booked at booth.")
    first = MeetingUpdate(row_number=row, meeting_status="no_show", meeting_notes="Sent follow-up",
                          update_timestamp="2026-02-19T10:00")
    second = MeetingUpdate(row_number=row, meeting_status="completed", meeting_notes="Great call",
                           update_timestamp="2026-02-20T09:00")

    assert update_meeting_status(table, first, schema).ok
    assert update_meeting_status(table, second, schema).ok

    summary = _cell(table, schema, row, "conversation_summary")
    assert summary.split("\n") == [
        "Booked at booth.",
        "[Meeting NO-SHOW — 2026-02-19T10:00] Sent follow-up",
        "[Meeting SHOWED — 2026-02-20T09:00] Great call",
    ]


def test_empty_summary_gets_no_leading_newline(table, schema):
    row = _seed(table, schema)
    update_meeting_status(table, MeetingUpdate(row_number=row, meeting_status="completed", update_timestamp="ts"), schema)
    assert _cell(table, schema, row, "conversation_summary") == "[Meeting SHOWED — ts]"


def test_next_steps_appended_with_updater(table, schema):
    row = _seed(table, schema, next_steps="Send deck")
    update_meeting_status(table, MeetingUpdate(row_number=row, meeting_status="completed", updated_by="Dana"), schema)
    update_meeting_status(table, MeetingUpdate(row_number=row, meeting_status="moved"), schema)
    assert _cell(table, schema, row, "next_steps") == (
        "Send deck; Meeting status: SHOWED (updated by Dana); "
        "Meeting status: RESCHEDULED (updated by unknown)"
    )


def test_quality_overwritten_only_when_given(table, schema):
    row = _seed(table, schema, meeting_quality="2")
    update_meeting_status(table, MeetingUpdate(row_number=row, meeting_status="completed"), schema)
    assert _cell(table, schema, row, "meeting_quality") == "2"
    update_meeting_status(table, MeetingUpdate(row_number=row, meeting_status="completed", deal_potential=5), schema)
    assert _cell(table, schema, row, "meeting_quality") == "5"


def test_scenario_marked_pre_booked(table, schema):
    row = _seed(table, schema, scenario="Walk-up")
    result = update_meeting_status(table, MeetingUpdate(row_number=row, meeting_status="completed"), schema)
    assert _cell(table, schema, row, "scenario") == PRE_BOOKED_SCENARIO
    assert result.value == {"row": row, "meeting_status": "completed"}


def test_header_row_and_missing_row_rejected(table, schema):
    for bad in (1, 0, -3, None, "abc", ""):
        result = update_meeting_status(table, MeetingUpdate(row_number=bad, meeting_status="completed"), schema)
        assert not result.ok
        assert result.error == "Invalid row number"
    assert table.rows == [schema.headers]


def test_row_number_parsed_leniently():
    assert MeetingUpdate(row_number="7").row_number == 7
    assert MeetingUpdate(row_number=" 12th").row_number == 12
    assert MeetingUpdate(row_number=3.9).row_number == 3


def test_table_failure_reported_as_result(table, schema):
    result = update_meeting_status(table, MeetingUpdate(row_number=99, meeting_status="completed"), schema)
    assert not result.ok
    assert result.error
