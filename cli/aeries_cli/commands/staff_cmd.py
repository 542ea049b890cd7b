from __future__ import annotations

import typer

from ..output import run_call

app = typer.Typer(help="Staff and teacher records.")

BASE_URL_OPT = typer.Option(None, "--base-url", help="Override base URL.")


@app.command("show")
def show_staff(
        staff_id: int | None = typer.Argument(None, help="Staff ID (omit for all staff)."),
        base_url: str | None = BASE_URL_OPT,
):
    run_call(base_url, lambda c: c.get_staff_details(staff_id))


@app.command("teachers")
def teachers(
        school_code: int = typer.Argument(..., help="School code."),
        teacher: int | None = typer.Option(None, "--teacher", help="Teacher number."),
        base_url: str | None = BASE_URL_OPT,
):
    run_call(base_url, lambda c: c.get_teachers(school_code, teacher))


@app.command("gradebooks")
def gradebooks(
        staff_id: int = typer.Argument(..., help="Staff ID."),
        base_url: str | None = BASE_URL_OPT,
):
    run_call(base_url, lambda c: c.get_gradebooks_by_staff_id(staff_id))
