"""Resource accessors for the Aeries SIS REST API.

Each accessor fixes a path template and hands it to the client's request
core. Optional identifiers default to ``None`` and are then left out of
the path, so ``get_attendance(990)`` and ``get_attendance(990, 12345)``
address the school-wide and the single-student endpoint respectively.

All accessors accept ``callback=(error, body, status_code)`` as their last
argument; it is invoked exactly once with the outcome.
"""
from __future__ import annotations

from .errors import ValidationError
from .result import ApiCallback

Id = int | str
MIN_SCHOOL_YEAR = 1900


class EndpointsMixin:
    """Accessors only; the concrete client supplies ``_get`` and ``_reject``."""

    # --- schools ---
    def get_schools(self, *, callback: ApiCallback | None = None):
        return self._get("v3", "schools", callback=callback)

    def get_school(self, school_code: Id, *, callback: ApiCallback | None = None):
        return self._get("v3", "schools", school_code, callback=callback)

    def get_school_terms(self, school_code: Id, *, callback: ApiCallback | None = None):
        return self._get("v3", "schools", school_code, "terms", callback=callback)

    def get_school_calendar(self, school_code: Id, *, callback: ApiCallback | None = None):
        return self._get("v3", "schools", school_code, "calendar", callback=callback)

    def get_school_bell_schedule(
            self, school_code: Id, day: Id | None = None, *, callback: ApiCallback | None = None
    ):
        return self._get("v3", "schools", school_code, "bellschedule", day, callback=callback)

    def get_school_absence_codes(
            self, school_code: Id, code: str | None = None, *, callback: ApiCallback | None = None
    ):
        return self._get("v3", "schools", school_code, "AbsenceCodes", code, callback=callback)

    def get_codes(self, table: str, field: str, *, callback: ApiCallback | None = None):
        """Code values for one field of an Aeries table."""
        return self._get("v3", "codes", table, field, callback=callback)

    # --- students ---
    def get_students(self, school_code: Id, *, callback: ApiCallback | None = None):
        return self._get("v3", "schools", school_code, "students", callback=callback)

    def get_students_in_grade(self, school_code: Id, grade: Id, *, callback: ApiCallback | None = None):
        return self._get("v3", "schools", school_code, "students", "grade", grade, callback=callback)

    def get_student_by_number(self, school_code: Id, student_number: Id, *, callback: ApiCallback | None = None):
        return self._get("v3", "schools", school_code, "students", "sn", student_number, callback=callback)

    def get_student_by_id(self, school_code: Id, student_id: Id, *, callback: ApiCallback | None = None):
        return self._get("v3", "schools", school_code, "students", student_id, callback=callback)

    def get_student_extended(self, school_code: Id, student_id: Id, *, callback: ApiCallback | None = None):
        return self._get("v3", "schools", school_code, "students", student_id, "extended", callback=callback)

    def get_students_in_grade_extended(
            self, school_code: Id, grade: Id, *, callback: ApiCallback | None = None
    ):
        return self._get(
            "v3", "schools", school_code, "students", "grade", grade, "extended", callback=callback
        )

    def get_student_by_number_extended(
            self, school_code: Id, student_number: Id, *, callback: ApiCallback | None = None
    ):
        return self._get(
            "v3", "schools", school_code, "students", "sn", student_number, "extended", callback=callback
        )

    def get_student_data_changes(
            self,
            data_area: str,
            year: int,
            month: int,
            day: int,
            hour: int,
            minute: int,
            *,
            callback: ApiCallback | None = None,
    ):
        """Changes in one data area since a point in time.

        ``data_area`` is one of student, contact, program, test, class or
        enrollment.
        """
        return self._get(
            "v2", "StudentDataChanges", data_area, year, month, day, hour, minute, callback=callback
        )

    def get_contacts(self, school_code: Id, *, callback: ApiCallback | None = None):
        return self._get("v3", "schools", school_code, "contacts", callback=callback)

    def get_contacts_by_id(self, school_code: Id, student_id: Id, *, callback: ApiCallback | None = None):
        return self._get("v3", "schools", school_code, "contacts", student_id, callback=callback)

    def get_programs_by_id(
            self,
            school_code: Id,
            student_id: Id = 0,
            code: Id | None = None,
            *,
            callback: ApiCallback | None = None,
    ):
        """Programs for a student (0 for every student), optionally filtered by program code."""
        params = {"code": code} if code else None
        return self._get(
            "v3", "schools", school_code, "students", student_id, "programs", params=params, callback=callback
        )

    def get_tests_by_id(self, student_id: Id, *, callback: ApiCallback | None = None):
        """State and local standardized test history (not SAT/ACT/IB/AP)."""
        return self._get("v2", "students", student_id, "tests", callback=callback)

    def get_college_tests_by_id(
            self, school_code: Id, student_id: Id | None = None, *, callback: ApiCallback | None = None
    ):
        return self._get("v3", "schools", school_code, "collegetestscores", student_id, callback=callback)

    def get_assertive_discipline_by_id(
            self, school_code: Id, student_id: Id | None = None, *, callback: ApiCallback | None = None
    ):
        return self._get("v3", "schools", school_code, "assertivediscipline", student_id, callback=callback)

    def get_district_supplemental(
            self, school_code: Id, student_id: Id | None = None, *, callback: ApiCallback | None = None
    ):
        return self._get("v3", "schools", school_code, "districtsupplemental", student_id, callback=callback)

    def get_fees_and_fines_by_id(
            self, school_code: Id, student_id: Id | None = None, *, callback: ApiCallback | None = None
    ):
        return self._get("v3", "schools", school_code, "fees", student_id, callback=callback)

    def get_student_picture_by_id(
            self, school_code: Id, student_id: Id | None = None, *, callback: ApiCallback | None = None
    ):
        return self._get("v3", "schools", school_code, "studentpictures", student_id, callback=callback)

    def get_student_groups(self, school_code: Id | None = "all", *, callback: ApiCallback | None = None):
        if school_code is None:
            school_code = "all"
        return self._get("v3", "schools", school_code, "StudentGroups", callback=callback)

    def get_student_enrollment(self, student_id: Id | None = 0, *, callback: ApiCallback | None = None):
        if student_id is None:
            student_id = 0
        return self._get("v3", "enrollment", student_id, callback=callback)

    def get_student_enrollment_at_school(
            self, school_code: Id, student_id: Id | None = 0, *, callback: ApiCallback | None = None
    ):
        if student_id is None:
            student_id = 0
        return self._get("v3", "schools", school_code, "enrollment", student_id, callback=callback)

    def get_student_enrollment_at_school_for_year(
            self,
            school_code: Id,
            student_id: Id | None,
            year: int,
            *,
            callback: ApiCallback | None = None,
    ):
        """Enrollment limited to one academic year (2017 for 2017-2018)."""
        if student_id is None:
            student_id = 0
        try:
            year_num = int(year)
        except (TypeError, ValueError):
            year_num = None
        if year_num is None or year_num < MIN_SCHOOL_YEAR:
            return self._reject(ValidationError("Please enter a valid School Year."), callback=callback)
        return self._get(
            "v3", "schools", school_code, "enrollment", student_id, "year", year, callback=callback
        )

    # --- attendance ---
    def get_attendance(self, school_code: Id, student_id: Id | None = None, *, callback: ApiCallback | None = None):
        return self._get("v3", "schools", school_code, "attendance", student_id, callback=callback)

    def get_attendance_by_date_range(
            self,
            school_code: Id,
            start_date: str,
            end_date: str,
            student_id: Id | None = None,
            *,
            callback: ApiCallback | None = None,
    ):
        """Attendance between two dates, both given as YYYYMMDD."""
        return self._get(
            "v3",
            "schools",
            school_code,
            "attendance",
            student_id,
            params={"startDate": start_date, "endDate": end_date},
            callback=callback,
        )

    def get_attendance_history(
            self, school_code: Id, student_id: Id | None = None, *, callback: ApiCallback | None = None
    ):
        return self._get(
            "v3", "schools", school_code, "attendancehistory", "summary", student_id, callback=callback
        )

    def get_attendance_history_by_year(self, school_code: Id, year: str, *, callback: ApiCallback | None = None):
        """``year`` is an academic year span such as ``"2017-2018"``."""
        return self._get(
            "v3", "schools", school_code, "attendancehistory", "summary", "year", year, callback=callback
        )

    # --- grades ---
    def get_student_grades(self, school_code: Id, student_id: Id | None = None, *, callback: ApiCallback | None = None):
        return self._get("v3", "schools", school_code, "gpas", student_id, callback=callback)

    def get_report_cards(self, school_code: Id, student_id: Id | None = None, *, callback: ApiCallback | None = None):
        return self._get("v3", "schools", school_code, "reportcard", student_id, callback=callback)

    def get_report_card_marking_periods(self, school_code: Id, *, callback: ApiCallback | None = None):
        return self._get("v3", "schools", school_code, "reportcardmarkingperiods", callback=callback)

    def get_graduation_requirements(self, school_code: Id, *, callback: ApiCallback | None = None):
        return self._get("v3", "schools", school_code, "graduationrequirements", callback=callback)

    def get_graduation_summary(
            self, school_code: Id, student_id: Id | None = None, *, callback: ApiCallback | None = None
    ):
        return self._get("v3", "schools", school_code, "graduationstatussummary", student_id, callback=callback)

    def get_graduation_summary_by_grade(self, school_code: Id, grade: Id, *, callback: ApiCallback | None = None):
        return self._get(
            "v3", "schools", school_code, "graduationstatussummary", "grade", grade, callback=callback
        )

    def get_transcript(self, school_code: Id, student_id: Id | None = None, *, callback: ApiCallback | None = None):
        return self._get("v3", "schools", school_code, "transcript", student_id, callback=callback)

    # --- scheduling and staff ---
    def get_class_schedule(self, school_code: Id, student_id: Id | None = None, *, callback: ApiCallback | None = None):
        return self._get("v3", "schools", school_code, "classes", student_id, callback=callback)

    def get_course_details(self, course_id: Id | None = None, *, callback: ApiCallback | None = None):
        return self._get("v3", "courses", course_id, callback=callback)

    def get_course_data_changes(
            self, year: int, month: int, day: int, hour: int, minute: int, *, callback: ApiCallback | None = None
    ):
        return self._get("v2", "CourseDataChanges", year, month, day, hour, minute, callback=callback)

    def get_staff_details(self, staff_id: Id | None = None, *, callback: ApiCallback | None = None):
        return self._get("v3", "staff", staff_id, callback=callback)

    def get_staff_data_changes(
            self, year: int, month: int, day: int, hour: int, minute: int, *, callback: ApiCallback | None = None
    ):
        return self._get("v2", "StaffDataChanges", year, month, day, hour, minute, callback=callback)

    def get_teachers(self, school_code: Id, teacher_id: Id | None = None, *, callback: ApiCallback | None = None):
        return self._get("v3", "schools", school_code, "teachers", teacher_id, callback=callback)

    def get_staff_teachers(self, staff_id: Id, *, callback: ApiCallback | None = None):
        """Teacher records linked to one staff id."""
        return self._get("v2", "staff", staff_id, callback=callback)

    def get_section(self, school_code: Id, section_number: Id | None = None, *, callback: ApiCallback | None = None):
        return self._get("v3", "schools", school_code, "sections", section_number, callback=callback)

    def get_section_data_changes(
            self, year: int, month: int, day: int, hour: int, minute: int, *, callback: ApiCallback | None = None
    ):
        return self._get("v2", "sectiondatachanges", year, month, day, hour, minute, callback=callback)

    def get_class_roster(self, school_code: Id, section_number: Id, *, callback: ApiCallback | None = None):
        return self._get("v1", "schools", school_code, "sections", section_number, "students", callback=callback)

    def get_class_roster_changes(
            self, year: int, month: int, day: int, hour: int, minute: int, *, callback: ApiCallback | None = None
    ):
        return self._get("v2", "sectionrosterdatachanges", year, month, day, hour, minute, callback=callback)

    # --- gradebooks ---
    def get_gradebooks_by_staff_id(self, staff_id: Id, *, callback: ApiCallback | None = None):
        return self._get("v3", "staff", staff_id, "gradebooks", callback=callback)

    def get_gradebooks_by_section(self, school_code: Id, section_number: Id, *, callback: ApiCallback | None = None):
        return self._get(
            "v3", "schools", school_code, "sections", section_number, "gradebooks", callback=callback
        )

    def get_gradebook_by_id(self, gradebook_id: Id, *, callback: ApiCallback | None = None):
        return self._get("v3", "gradebooks", gradebook_id, callback=callback)

    def get_gradebook_assignments(
            self, gradebook_id: Id, assignment_id: Id | None = None, *, callback: ApiCallback | None = None
    ):
        return self._get("v3", "gradebooks", gradebook_id, "assignments", assignment_id, callback=callback)

    def get_gradebook_assignment_by_unique_id(self, unique_id: Id, *, callback: ApiCallback | None = None):
        return self._get("v3", "gradebooks", "assignments", unique_id, callback=callback)

    def get_gradebook_final_marks(self, gradebook_id: Id, *, callback: ApiCallback | None = None):
        return self._get("v3", "gradebooks", gradebook_id, "finalmarks", callback=callback)

    def get_gradebook_student_info(
            self,
            gradebook_id: Id,
            gradebook_term: str,
            student_id: Id | None = None,
            *,
            callback: ApiCallback | None = None,
    ):
        return self._get(
            "v3", "gradebooks", gradebook_id, gradebook_term, "students", student_id, callback=callback
        )

    def get_gradebook_assignment_scores(
            self,
            gradebook_id: Id,
            assignment_id: Id,
            student_id: Id | None = None,
            *,
            callback: ApiCallback | None = None,
    ):
        return self._get(
            "v3", "gradebooks", gradebook_id, "assignments", assignment_id, "scores", student_id,
            callback=callback,
        )

    def get_gradebook_assignment_scores_by_unique_id(
            self, unique_id: Id, student_id: Id | None = None, *, callback: ApiCallback | None = None
    ):
        return self._get(
            "v3", "gradebooks", "assignments", unique_id, "scores", student_id, callback=callback
        )
