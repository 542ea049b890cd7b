from __future__ import annotations

import typer

from ..output import run_call

app = typer.Typer(help="School information: terms, calendar, bell schedule and codes.")

BASE_URL_OPT = typer.Option(None, "--base-url", help="Override base URL.")


@app.command("list")
def list_schools(base_url: str | None = BASE_URL_OPT):
    run_call(base_url, lambda c: c.get_schools())


@app.command("show")
def show_school(
        school_code: int = typer.Argument(..., help="School code."),
        base_url: str | None = BASE_URL_OPT,
):
    run_call(base_url, lambda c: c.get_school(school_code))


@app.command("terms")
def school_terms(
        school_code: int = typer.Argument(..., help="School code."),
        base_url: str | None = BASE_URL_OPT,
):
    run_call(base_url, lambda c: c.get_school_terms(school_code))


@app.command("calendar")
def school_calendar(
        school_code: int = typer.Argument(..., help="School code."),
        base_url: str | None = BASE_URL_OPT,
):
    run_call(base_url, lambda c: c.get_school_calendar(school_code))


@app.command("bell-schedule")
def bell_schedule(
        school_code: int = typer.Argument(..., help="School code."),
        day: str | None = typer.Option(None, "--day", help="Limit to one schedule day."),
        base_url: str | None = BASE_URL_OPT,
):
    run_call(base_url, lambda c: c.get_school_bell_schedule(school_code, day))


@app.command("absence-codes")
def absence_codes(
        school_code: int = typer.Argument(..., help="School code."),
        code: str | None = typer.Option(None, "--code", help="Single absence code."),
        base_url: str | None = BASE_URL_OPT,
):
    run_call(base_url, lambda c: c.get_school_absence_codes(school_code, code))


@app.command("codes")
def codes(
        table: str = typer.Argument(..., help="Aeries table, e.g. STU."),
        field: str = typer.Argument(..., help="Field in the table, e.g. LF."),
        base_url: str | None = BASE_URL_OPT,
):
    run_call(base_url, lambda c: c.get_codes(table, field))
