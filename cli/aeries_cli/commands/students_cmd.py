from __future__ import annotations

import typer

from .. import console
from ..output import run_call

app = typer.Typer(help="Student records, contacts, programs, attendance, grades and enrollment.")

BASE_URL_OPT = typer.Option(None, "--base-url", help="Override base URL.")
STUDENT_OPT = typer.Option(None, "--student", help="Student ID (omit for every student).")


@app.command("list")
def list_students(
        school_code: int = typer.Argument(..., help="School code."),
        grade: int | None = typer.Option(None, "--grade", help="Only students in this grade."),
        extended: bool = typer.Option(False, "--extended", help="Extended student records."),
        base_url: str | None = BASE_URL_OPT,
):
    if grade is None:
        if extended:
            console.err("--extended requires --grade.")
            raise typer.Exit(code=2)
        run_call(base_url, lambda c: c.get_students(school_code))
    elif extended:
        run_call(base_url, lambda c: c.get_students_in_grade_extended(school_code, grade))
    else:
        run_call(base_url, lambda c: c.get_students_in_grade(school_code, grade))


@app.command("show")
def show_student(
        school_code: int = typer.Argument(..., help="School code."),
        student: int = typer.Argument(..., help="Student ID, or student number with --by-number."),
        by_number: bool = typer.Option(False, "--by-number", help="Look up by student number."),
        extended: bool = typer.Option(False, "--extended", help="Extended student record."),
        base_url: str | None = BASE_URL_OPT,
):
    if by_number:
        if extended:
            run_call(base_url, lambda c: c.get_student_by_number_extended(school_code, student))
        else:
            run_call(base_url, lambda c: c.get_student_by_number(school_code, student))
    elif extended:
        run_call(base_url, lambda c: c.get_student_extended(school_code, student))
    else:
        run_call(base_url, lambda c: c.get_student_by_id(school_code, student))


@app.command("contacts")
def contacts(
        school_code: int = typer.Argument(..., help="School code."),
        student: int | None = STUDENT_OPT,
        base_url: str | None = BASE_URL_OPT,
):
    if student is None:
        run_call(base_url, lambda c: c.get_contacts(school_code))
    else:
        run_call(base_url, lambda c: c.get_contacts_by_id(school_code, student))


@app.command("programs")
def programs(
        school_code: int = typer.Argument(..., help="School code."),
        student: int = typer.Option(0, "--student", help="Student ID (0 for every student)."),
        code: str | None = typer.Option(None, "--code", help="Program code filter, e.g. 144."),
        base_url: str | None = BASE_URL_OPT,
):
    run_call(base_url, lambda c: c.get_programs_by_id(school_code, student, code))


@app.command("attendance")
def attendance(
        school_code: int = typer.Argument(..., help="School code."),
        student: int | None = STUDENT_OPT,
        start_date: str | None = typer.Option(None, "--from", help="Start date YYYYMMDD."),
        end_date: str | None = typer.Option(None, "--to", help="End date YYYYMMDD."),
        base_url: str | None = BASE_URL_OPT,
):
    if (start_date is None) != (end_date is None):
        console.err("Use --from and --to together.")
        raise typer.Exit(code=2)
    if start_date is not None:
        run_call(base_url, lambda c: c.get_attendance_by_date_range(school_code, start_date, end_date, student))
    else:
        run_call(base_url, lambda c: c.get_attendance(school_code, student))


@app.command("grades")
def grades(
        school_code: int = typer.Argument(..., help="School code."),
        student: int | None = STUDENT_OPT,
        base_url: str | None = BASE_URL_OPT,
):
    run_call(base_url, lambda c: c.get_student_grades(school_code, student))


@app.command("enrollment")
def enrollment(
        school_code: int = typer.Argument(..., help="School code."),
        student: int = typer.Option(0, "--student", help="Student ID (0 for every student)."),
        year: int | None = typer.Option(None, "--year", help="Academic year, e.g. 2017 for 2017-2018."),
        base_url: str | None = BASE_URL_OPT,
):
    if year is None:
        run_call(base_url, lambda c: c.get_student_enrollment_at_school(school_code, student))
    else:
        run_call(base_url, lambda c: c.get_student_enrollment_at_school_for_year(school_code, student, year))
