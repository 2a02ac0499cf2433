import os
import sys
import typer
from pathlib import Path
from paytrack.config import settings
from paytrack.domain.exceptions import PaytrackError
from paytrack.domain.formatting import format_hours, format_money
from paytrack.logging import logger, get_run_id

app = typer.Typer(no_args_is_help=True)

@app.callback()
def main():
    """
    Personal payroll tracker CLI.
    """
    pass

@app.command(name="doctor")
def doctor():
    """
    Check system configuration and environment health.
    """
    logger.info("Running doctor check...")

    failures: list[str] = []
    passed = 0

    print("\n🩺 Paytrack Doctor\n")

    # ── Check 1: Environment / Interpreter ──────────────────────────────────
    print("[Environment]")
    print(f"  Python: {sys.version.split()[0]}")
    print(f"  Prefix: {sys.prefix}")
    print(f"  Run ID: {get_run_id()}")
    passed += 1

    # ── Check 2: Default rates ───────────────────────────────────────────────
    print("\n[Configuration]")
    print(f"  DEFAULT_HOURLY_RATE:  {settings.DEFAULT_HOURLY_RATE}")
    print(f"  DEFAULT_OT_RATE:      {settings.DEFAULT_OT_RATE}")
    print(f"  API_URL:              {settings.API_URL}")
    if settings.DEFAULT_HOURLY_RATE >= 0 and settings.DEFAULT_OT_RATE >= 0:
        print("  Rates:                ✅ Non-negative")
        passed += 1
    else:
        print("  Rates:                ❌ Negative default rate")
        failures.append("DEFAULT_HOURLY_RATE / DEFAULT_OT_RATE must be >= 0; check .env")

    # ── Check 3: Image export backend ────────────────────────────────────────
    print("\n[Export]")
    try:
        import PIL  # noqa: F401
        print("  Pillow:               ✅ Installed")
    except ImportError:
        print("  Pillow:               ⚠️  Missing (statement export disabled; pip install paytrack[export])")
    passed += 1

    # ── Check 4: Data directory / DB writability ─────────────────────────────
    print("\n[Database]")
    data_dir = settings.data_dir
    db_file = settings.db_path
    if settings.DATABASE_URL:
        print(f"  DATABASE_URL          ✅ Custom: {settings.DATABASE_URL}")
        passed += 1
    elif db_file.exists():
        if os.access(db_file, os.W_OK):
            print(f"  {db_file}   ✅ Exists and writable")
            passed += 1
        else:
            print(f"  {db_file}   ❌ Exists but NOT writable")
            failures.append(f"{db_file} exists but is not writable; check file permissions")
    elif data_dir.exists() and os.access(data_dir, os.W_OK):
        print(f"  {db_file}   ✅ Does not exist yet; {data_dir}/ is writable (db init can create it)")
        passed += 1
    else:
        print(f"  {data_dir}/   ❌ Missing or not writable: {Path(data_dir).absolute()}")
        failures.append(f"{data_dir}/ must exist and be writable; run `mkdir {data_dir}`")

    # ── Summary ──────────────────────────────────────────────────────────────
    total = passed + len(failures)
    print(f"\n{'─' * 50}")
    if failures:
        print(f"Result: {passed}/{total} checks passed\n")
        for msg in failures:
            print(f"  ❌ {msg}")
        print()
        raise typer.Exit(code=1)
    else:
        print(f"Result: {passed}/{total} checks passed, all good ✅")
        print()


db_app = typer.Typer(help="Database management commands.")
app.add_typer(db_app, name="db")

@db_app.command("init")
def init():
    """Create the key-value table."""
    from paytrack.db import init_db
    try:
        init_db()
        logger.info("Database initialized successfully.")
        print("✅ Database initialized.")
    except Exception as e:
        logger.error(f"Failed to initialize database: {e}")
        print(f"❌ Failed: {e}")
        raise typer.Exit(code=1)


def _run(action):
    """Run ``action(service)`` inside one UnitOfWork; domain errors exit 1."""
    from paytrack.db import init_db
    from paytrack.infra.db.uow import UnitOfWork
    from paytrack.services.payroll_service import PayrollService
    init_db()
    try:
        with UnitOfWork() as uow:
            return action(PayrollService(uow))
    except PaytrackError as e:
        logger.error(e.message)
        print(f"❌ {e.message}")
        raise typer.Exit(code=1)


def _print_statement(view) -> None:
    st = view.statement
    print(f"\n{st.title}  (rates {view.rates.hourly_rate:g}/h, OT {view.rates.ot_rate:g}/h)\n")
    header = f"{'Date':<6} {'Work':>6} {'OT':>6} {'Regular':>12} {'OT Pay':>12} {'Extra':>12} {'Total':>12}"
    print(header)
    print("─" * len(header))
    for r in st.rows:
        mark = " *" if r.flagged else ""
        print(
            f"{r.label:<6} {format_hours(r.work_hr):>6} {format_hours(r.ot_hr):>6} "
            f"{format_money(r.regular_pay):>12} {format_money(r.ot_pay):>12} "
            f"{format_money(r.extra):>12} {format_money(r.daily_total):>12}{mark}"
        )
    t = st.totals
    print("─" * len(header))
    print(
        f"{'Total':<6} {format_hours(t.total_work_hr):>6} {format_hours(t.total_ot_hr):>6} "
        f"{format_money(t.total_regular_pay):>12} {format_money(t.total_ot_pay):>12} "
        f"{format_money(t.total_extra_pay):>12} {format_money(t.grand_total):>12}"
    )
    print(f"\nBalance: {view.balance_display}")


entry_app = typer.Typer(help="Record, show and delete daily entries.")
app.add_typer(entry_app, name="entry")

@entry_app.command("set")
def entry_set(
    date: str = typer.Argument(..., help="Day as YYYY-MM-DD"),
    work: str = typer.Option("0", "--work", help="Regular hours"),
    ot: str = typer.Option("0", "--ot", help="Overtime hours"),
    extra: str = typer.Option("0", "--extra", help="Flat extra pay"),
    remark: str = typer.Option("", "--remark", help="Free-text note; non-blank flags the day"),
):
    """Record (or wholly replace) the entry for one day."""
    from paytrack.api.schemas.entries import EntrySubmit
    payload = EntrySubmit(work_hr=work, ot_hr=ot, extra=extra, remark=remark)
    view = _run(lambda svc: svc.submit_entry(date, payload))
    print(f"✅ Saved {date}. {view.period.title} balance: {view.balance_display}")

@entry_app.command("delete")
def entry_delete(date: str = typer.Argument(..., help="Day as YYYY-MM-DD")):
    """Delete the entry for one day (no-op if there is none)."""
    view = _run(lambda svc: svc.delete_entry(date))
    print(f"✅ Cleared {date}. {view.period.title} balance: {view.balance_display}")

@entry_app.command("show")
def entry_show(date: str = typer.Argument(..., help="Day as YYYY-MM-DD")):
    """Show the stored entry for one day."""
    e = _run(lambda svc: svc.get_entry(date))
    print(f"{e.date}: work {format_hours(e.work_hr)}h, OT {format_hours(e.ot_hr)}h, extra {format_money(e.extra)}")
    if e.flagged:
        print(f"  Remark: {e.remark}")


rates_app = typer.Typer(help="Show or change pay rates.")
app.add_typer(rates_app, name="rates")

@rates_app.command("show")
def rates_show():
    """Print the current rates."""
    rates = _run(lambda svc: svc.get_rates())
    print(f"Hourly rate: {rates.hourly_rate:g}")
    print(f"OT rate:     {rates.ot_rate:g}")

@rates_app.command("set")
def rates_set(
    hourly: str = typer.Argument(..., help="Pay per regular hour"),
    ot: str = typer.Argument(..., help="Pay per overtime hour"),
):
    """Replace both rates; past days are re-priced."""
    from datetime import date as date_type
    from paytrack.api.schemas.settings import RateSettingsUpdate
    today = date_type.today()
    payload = RateSettingsUpdate(hourly_rate=hourly, ot_rate=ot)
    view = _run(lambda svc: svc.update_rates(payload, today.year, today.month))
    print(f"✅ Rates set to {view.rates.hourly_rate:g} / {view.rates.ot_rate:g}")


month_app = typer.Typer(help="Monthly statement.")
app.add_typer(month_app, name="month")

@month_app.command("show")
def month_show(year: int, month: int):
    """Print the statement table for one month."""
    view = _run(lambda svc: svc.get_month(year, month))
    _print_statement(view)


@app.command("export")
def export(
    year: int,
    month: int,
    out: Path | None = typer.Option(None, "--out", help="Output file or directory"),
):
    """Save the statement for one month as a PNG."""
    filename, content = _run(lambda svc: svc.export_statement(year, month))
    target = out or Path(filename)
    if target.is_dir():
        target = target / filename
    target.write_bytes(content)
    print(f"✅ Statement written to {target}")


if __name__ == "__main__":
    app()
