from __future__ import annotations

import httpx
import pytest

from aeries_client import ClientConfig
from aeries_client.errors import NetworkError, ParseError, ValidationError

from conftest import BASE_URL, Recorder

API = BASE_URL + "api/"


@pytest.mark.parametrize(
    ("call", "expected"),
    [
        (lambda c: c.get_schools(), "v3/schools/"),
        (lambda c: c.get_school(990), "v3/schools/990/"),
        (lambda c: c.get_school_terms(990), "v3/schools/990/terms/"),
        (lambda c: c.get_school_calendar(990), "v3/schools/990/calendar/"),
        (lambda c: c.get_school_bell_schedule(990), "v3/schools/990/bellschedule/"),
        (lambda c: c.get_school_bell_schedule(990, "20180312"), "v3/schools/990/bellschedule/20180312/"),
        (lambda c: c.get_school_absence_codes(990, "A"), "v3/schools/990/AbsenceCodes/A/"),
        (lambda c: c.get_codes("STU", "LF"), "v3/codes/STU/LF/"),
        (lambda c: c.get_students_in_grade_extended(990, 9), "v3/schools/990/students/grade/9/extended/"),
        (lambda c: c.get_student_by_number(990, 1234), "v3/schools/990/students/sn/1234/"),
        (lambda c: c.get_student_extended(990, 99400001), "v3/schools/990/students/99400001/extended/"),
        (
            lambda c: c.get_student_data_changes("student", 2018, 3, 24, 18, 35),
            "v2/StudentDataChanges/student/2018/3/24/18/35/",
        ),
        (lambda c: c.get_tests_by_id(99400001), "v2/students/99400001/tests/"),
        (lambda c: c.get_district_supplemental(990), "v3/schools/990/districtsupplemental/"),
        (lambda c: c.get_assertive_discipline_by_id(990, 5), "v3/schools/990/assertivediscipline/5/"),
        (lambda c: c.get_student_groups(), "v3/schools/all/StudentGroups/"),
        (lambda c: c.get_student_groups(None), "v3/schools/all/StudentGroups/"),
        (lambda c: c.get_student_enrollment(), "v3/enrollment/0/"),
        (lambda c: c.get_student_enrollment_at_school(990, None), "v3/schools/990/enrollment/0/"),
        (
            lambda c: c.get_student_enrollment_at_school_for_year(990, None, 2017),
            "v3/schools/990/enrollment/0/year/2017/",
        ),
        (lambda c: c.get_attendance_history(990), "v3/schools/990/attendancehistory/summary/"),
        (
            lambda c: c.get_attendance_history_by_year(990, "2017-2018"),
            "v3/schools/990/attendancehistory/summary/year/2017-2018/",
        ),
        (lambda c: c.get_course_details(), "v3/courses/"),
        (lambda c: c.get_course_details("0001"), "v3/courses/0001/"),
        (lambda c: c.get_class_roster(990, 12), "v1/schools/990/sections/12/students/"),
        (lambda c: c.get_staff_teachers(77), "v2/staff/77/"),
        (lambda c: c.get_gradebooks_by_staff_id(77), "v3/staff/77/gradebooks/"),
        (lambda c: c.get_gradebook_assignment_by_unique_id(5), "v3/gradebooks/assignments/5/"),
        (lambda c: c.get_gradebook_student_info(3, "F", None), "v3/gradebooks/3/F/students/"),
        (
            lambda c: c.get_gradebook_assignment_scores(3, 4, 99400001),
            "v3/gradebooks/3/assignments/4/scores/99400001/",
        ),
    ],
)
def test_accessor_paths(make_client, call, expected) -> None:
    rec = Recorder(200, [])
    call(make_client(rec))
    assert rec.urls == [API + expected]


def test_programs_code_filter_goes_to_query(make_client) -> None:
    rec = Recorder(200, [])
    client = make_client(rec)
    client.get_programs_by_id(990, 0, 144)
    client.get_programs_by_id(990, 0)

    assert rec.urls == [
        API + "v3/schools/990/students/0/programs/?code=144",
        API + "v3/schools/990/students/0/programs/",
    ]


def test_attendance_by_date_range_query(make_client) -> None:
    rec = Recorder(200, [])
    make_client(rec).get_attendance_by_date_range(990, "20180101", "20180131")

    assert rec.urls == [API + "v3/schools/990/attendance/?startDate=20180101&endDate=20180131"]


def test_callback_invoked_once(make_client) -> None:
    calls = []
    client = make_client(Recorder(200, {"SchoolCode": 990}))

    result = client.get_school(990, callback=lambda *args: calls.append(args))

    assert calls == [(None, {"SchoolCode": 990}, 200)]
    assert result.body == {"SchoolCode": 990}


def test_invalid_year_is_rejected_without_request(make_client) -> None:
    rec = Recorder(200, [])
    calls = []
    client = make_client(rec)

    result = client.get_student_enrollment_at_school_for_year(990, 0, 1899, callback=lambda *a: calls.append(a))

    assert rec.requests == []
    assert len(calls) == 1
    error, body, status = calls[0]
    assert isinstance(error, ValidationError)
    assert str(error) == "Please enter a valid School Year."
    assert body is None
    assert status == 500
    assert result.error is error


def test_config_is_replaced_wholesale(make_client) -> None:
    rec = Recorder(200, [])
    client = make_client(rec)
    client.config = ClientConfig(base_url="https://other.example.test/aeries/", certificate="new-cert")
    client.get_schools()

    assert client.certificate == "new-cert"
    assert client.url == "https://other.example.test/aeries/"
    assert client.api_version == "v3"
    assert rec.urls == ["https://other.example.test/aeries/api/v3/schools/"]
    assert rec.requests[0].headers["AERIES-CERT"] == "new-cert"


def test_from_options_mirrors_constructor_options() -> None:
    cfg = ClientConfig.from_options(certificate="abc", url=BASE_URL, verify_certs=False)
    assert cfg == ClientConfig(base_url=BASE_URL, certificate="abc", verify_certs=False)
    assert ClientConfig.from_options().verify_certs is True


def test_year_span_is_rejected_without_request(make_client) -> None:
    rec = Recorder(200, [])
    calls = []
    client = make_client(rec)

    result = client.get_student_enrollment_at_school_for_year(
        990, 0, "2017-2018", callback=lambda *a: calls.append(a)
    )

    assert rec.requests == []
    assert len(calls) == 1
    assert isinstance(calls[0][0], ValidationError)
    assert calls[0][1:] == (None, 500)
    assert result.status_code == 500


def test_missing_year_is_rejected(make_client) -> None:
    rec = Recorder(200, [])
    result = make_client(rec).get_student_enrollment_at_school_for_year(990, 0, None)

    assert isinstance(result.error, ValidationError)
    assert rec.requests == []


def _boom(request: httpx.Request) -> httpx.Response:
    raise httpx.ConnectError("connection refused", request=request)


@pytest.mark.parametrize(
    ("handler", "error_type", "body", "status"),
    [
        (Recorder(200, content=b"not json"), ParseError, "not json", 200),
        (Recorder(404), None, None, 404),
        (_boom, NetworkError, None, 500),
    ],
)
def test_callback_invoked_once_for_every_outcome(make_client, handler, error_type, body, status) -> None:
    calls = []
    make_client(handler).get_schools(callback=lambda *a: calls.append(a))

    assert len(calls) == 1
    error, got_body, got_status = calls[0]
    if error_type is None:
        assert error is None
    else:
        assert isinstance(error, error_type)
    assert got_body == body
    assert got_status == status


@pytest.mark.parametrize("handler", [Recorder(200, {"a": 1}), Recorder(200, content=b"not json")])
def test_raising_callback_is_not_called_again(make_client, handler) -> None:
    calls = []

    def _callback(*args):
        calls.append(args)
        raise RuntimeError("callback failed")

    with pytest.raises(RuntimeError):
        make_client(handler).get_schools(callback=_callback)

    assert len(calls) == 1
