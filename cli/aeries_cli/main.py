from __future__ import annotations

import typer

from .commands import raw_cmd, settings_cmd
from .commands.schools_cmd import app as schools_app
from .commands.staff_cmd import app as staff_app
from .commands.students_cmd import app as students_app
from .logging_ import setup_logging


def _build_app() -> typer.Typer:
    app = typer.Typer(
        name="aeries",
        help="Aeries SIS API command line client",
        no_args_is_help=True,
    )

    app.add_typer(settings_cmd.app, name="settings")
    app.add_typer(schools_app, name="schools")
    app.add_typer(students_app, name="students")
    app.add_typer(staff_app, name="staff")
    app.command("url")(raw_cmd.url)
    app.command("get")(raw_cmd.get)

    @app.callback()
    def _main(
            verbose: bool = typer.Option(False, "-v", "--verbose", help="Verbose logs."),
    ):
        setup_logging(verbose)

    return app


app = _build_app()
