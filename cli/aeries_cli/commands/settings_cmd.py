from __future__ import annotations

import os

import typer

from .. import console
from ..config import config_path, default_config, load_config, normalize_base_url, save_config

app = typer.Typer(help="Manage local CLI settings (~/.config/aeries/config.toml).")


@app.command("init")
def init_settings(
        force: bool = typer.Option(False, "--force", help="Overwrite existing config."),
        base_url: str = typer.Option(
            ...,
            "--base-url",
            prompt="Aeries URL",
            help="Aeries base URL like https://demo.aeries.net/aeries/",
        ),
        certificate: str = typer.Option(
            "",
            "--certificate",
            prompt="API certificate",
            hide_input=True,
            help="Aeries API certificate (sent as AERIES-CERT).",
        ),
        verify_certs: bool = typer.Option(True, "--verify-certs/--no-verify-certs", help="Validate TLS certificates."),
):
    path = config_path()
    if os.path.exists(path) and not force:
        console.info(f"Config already exists: {path}")
        console.info("Use --force to overwrite.")
        return

    cfg = default_config()
    cfg.base_url = normalize_base_url(base_url, warn=True)
    if not cfg.base_url:
        console.err("Base URL cannot be empty.")
        raise typer.Exit(code=2)
    cfg.certificate = certificate.strip()
    cfg.verify_certs = verify_certs
    saved = save_config(cfg)
    console.ok(f"Config written: {saved}")


@app.command("show")
def show_settings():
    cfg = load_config()
    cert_state = "(set)" if (cfg.certificate or "").strip() else "(empty)"
    console.console.print(
        f"base_url={cfg.base_url} certificate={cert_state} verify_certs={str(cfg.verify_certs).lower()}",
        markup=False,
    )


@app.command("get")
def get_setting(
        key: str = typer.Argument(..., help="Setting key (base_url, verify_certs)."),
):
    cfg = load_config()
    k = key.strip().lower()
    if k == "base_url":
        console.console.print(cfg.base_url, markup=False)
        return
    if k == "verify_certs":
        console.console.print(str(cfg.verify_certs).lower())
        return
    console.err(f"Unknown setting: {key}")
    raise typer.Exit(code=2)


@app.command("set")
def set_setting(
        base_url: str | None = typer.Option(None, "--base-url", help="Set Aeries base URL."),
        certificate: str | None = typer.Option(None, "--certificate", help="Set API certificate."),
        verify_certs: bool | None = typer.Option(
            None, "--verify-certs/--no-verify-certs", help="Validate TLS certificates."
        ),
):
    cfg = load_config()
    if base_url is not None:
        cfg.base_url = normalize_base_url(base_url, warn=True)
    if certificate is not None:
        cfg.certificate = certificate.strip()
    if verify_certs is not None:
        cfg.verify_certs = verify_certs
        if not verify_certs:
            console.warn("TLS certificate validation disabled for Aeries requests.")
    saved = save_config(cfg)
    console.ok(f"Settings updated: {saved}")
