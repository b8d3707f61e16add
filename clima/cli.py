"""
CLIMA Command Line Interface (CLI)
==================================

This file provides the interactive terminal program you run like:

    python -m clima.cli --csv "data/world_temp_2000-2016.csv"

It offers two ways of working:
- A REPL loop (Read-Eval-Print Loop): one command per analysis, e.g.
  `a1 lowest "United States" 1`
- A guided run (`--guided`): walks through every analysis in order (A1 to
  C1), asking for each parameter and writing every result to its task file

The CLI DOES NOT modify your dataset file. It only loads it once and runs the
analyses over that in-memory copy.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional
import argparse, logging, shlex
from .analyzer import ClimateAnalyzer, TaskResult, TASKS, LOWEST, HIGHEST
from .errors import IngestError, NotFound, RangeError
from .writer import WriterConfig, export_csv, export_json, write_result

HELP = """
CLIMA commands (grouped)
------------------------

1) Single country
   a1 lowest|highest "<Country>" <month>     (example: a1 lowest "Canada" 1)
   a2 lowest|highest "<Country>" <year>      (example: a2 highest "Canada" 2010)
   a3 "<Country>" <low> <high>               (example: a3 "Canada" -5 5)
   a4 lowest|highest "<Country>"             (example: a4 lowest "Canada")

2) All countries
   b1 lowest|highest <month>                 (example: b1 highest 7)
   b2 lowest|highest
   b3 <low> <high>                           (example: b3 10 10.5)
   c1 <month> <year1> <year2>                (example: c1 1 2000 2016)

   Months are numeric: 1 = Jan ... 12 = Dec

3) Output (last result)
   show [n]
   save                                      (append to data/task<ID>_climate_info.csv)
   export csv|json "<path>"
   report "<out.docx>"

4) Other
   help
   stats
   quit
"""

# Order of the guided run
GUIDED_SEQUENCE = [
    ("A1", LOWEST), ("A1", HIGHEST),
    ("A2", LOWEST), ("A2", HIGHEST),
    ("A3", None),
    ("A4", LOWEST), ("A4", HIGHEST),
    ("B1", LOWEST), ("B1", HIGHEST),
    ("B2", LOWEST), ("B2", HIGHEST),
    ("B3", None),
    ("C1", None),
]

# parameter name -> (prompt, converter, what to say when conversion fails)
PARAMS: Dict[str, tuple] = {
    "country": ("Please enter a [Country]", str, "a country name"),
    "month": ("Please enter a [Month] in numeric form (1 = Jan, 12 = Dec)", int, "an integer"),
    "year": ("Please enter a [Year]", int, "an integer"),
    "year1": ("Please enter a [First Year]", int, "an integer"),
    "year2": ("Please enter a [Second Year]", int, "an integer"),
    "low": ("Please enter a [Lower Temperature]", float, "a number"),
    "high": ("Please enter a [Higher Temperature]", float, "a number"),
}

@dataclass
class Session:
    """Holds the analyzer, output settings and the last result shown."""
    analyzer: ClimateAnalyzer
    writer: WriterConfig = field(default_factory=WriterConfig)
    last: Optional[TaskResult] = None

def _convert(name: str, raw: str):
    _, conv, expected = PARAMS[name]
    try:
        return conv(raw)
    except ValueError:
        raise ValueError(f"Invalid input for {name} '{raw}' (must be {expected})")

def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the CLIMA CLI.

    1) Load dataset
    2) Start an interactive REPL (or the guided run)
    """
    ap = argparse.ArgumentParser(prog="clima")
    ap.add_argument("--csv", required=True, help="Path to the temperature CSV")
    ap.add_argument("--out-dir", default="data", help="Directory for task output files")
    ap.add_argument("--guided", action="store_true", help="Run every analysis in order, prompting for inputs")
    ap.add_argument("--log-level", default="WARNING", help="Logging level (DEBUG, INFO, WARNING, ...)")
    args = ap.parse_args(argv)

    logging.basicConfig(level=args.log_level.upper(), format="%(levelname)s %(name)s: %(message)s")

    print("Loading dataset...")
    try:
        analyzer = ClimateAnalyzer.from_csv(args.csv)
    except IngestError as e:
        print(f"Error: {e}")
        raise SystemExit(1)
    session = Session(analyzer=analyzer, writer=WriterConfig(out_dir=args.out_dir))

    if args.guided:
        try:
            run_guided(session)
        except EOFError:
            print("\nInput closed, stopping.")
        return

    print(f"Loaded {len(analyzer.records)} records. Type 'help' for commands.")
    while True:
        try:
            line = input("clima> ")
        except EOFError:
            break
        stripped = line.strip()
        if not stripped:
            continue
        if stripped.lower() in ("quit", "exit"):
            break
        try:
            handle(session, stripped)
        except NotFound as e:
            print(f"No data: {e}")
        except (RangeError, ValueError) as e:
            print(f"Invalid input: {e}")
        except (OSError, ImportError) as e:
            # the session and its last result survive a failed save/export/report
            print(f"Error: {e}")

def handle(session: Session, line: str) -> None:
    """Handle one CLI command line.

    This parses the command and calls the appropriate analyzer method.
    """
    parts = shlex.split(line)
    cmd = parts[0].lower()

    if cmd == "help":
        print(HELP)
        return

    if cmd == "stats":
        recs = session.analyzer.records
        countries = {r.country.casefold() for r in recs}
        years = sorted({r.year for r in recs})
        print(f"Records: {len(recs)} | Countries: {len(countries)} | Years: {years[0]}-{years[-1]}")
        return

    if cmd.upper() in TASKS:
        task = TASKS[cmd.upper()]
        args = parts[1:]
        variant = None
        if task.variants:
            if not args:
                raise ValueError(f"{task.task_id} needs a variant: lowest | highest")
            variant = args.pop(0)
        if len(args) != len(task.params):
            raise ValueError(f"{task.task_id} expects: {' '.join('<' + p + '>' for p in task.params) or 'no parameters'}")
        params = {name: _convert(name, raw) for name, raw in zip(task.params, args)}
        session.analyzer.command_log.append(line)
        session.last = session.analyzer.run_task(task.task_id, variant, **params)
        print(session.last.caption)
        _print_rows(session.last.records)
        return

    if cmd in ("show", "save", "export", "report") and session.last is None:
        print("Nothing to output yet: run an analysis first.")
        return

    if cmd == "show":
        n = int(parts[1]) if len(parts) >= 2 else 10
        _print_rows(session.last.records[:n]); return

    if cmd == "save":
        path = write_result(session.last, session.writer)
        print(f"Appended {len(session.last.records)} records to {path}")
        return

    if cmd == "export":
        # export <csv|json> "<path>"
        if len(parts) < 3:
            print('Usage: export csv "out.csv"  OR  export json "out.json"')
            return
        fmt, out_path = parts[1].lower(), parts[2]
        exporters: Dict[str, Callable] = {"csv": export_csv, "json": export_json}
        if fmt not in exporters:
            print("Unknown export format. Use: csv or json")
            return
        exporters[fmt](session.last.records, out_path)
        print(f"Exported {fmt.upper()} to {out_path}")
        return

    if cmd == "report":
        # report "<path.docx>"
        from .report import generate_docx_report, ReportConfig
        if len(parts) < 2:
            print('Usage: report "out.docx"')
            return
        cfg = ReportConfig(
            dataset_file=session.analyzer.dataset_path,
            command_log=session.analyzer.command_log,
        )
        generate_docx_report(session.last.records, parts[1], caption=session.last.caption, config=cfg)
        print(f"Report written to {parts[1]}")
        return

    print("Unknown command. Type 'help'.")

def run_guided(session: Session, ask: Callable[[str], str] = input) -> None:
    """Walk through every analysis, re-asking until each one succeeds."""
    for task_id, variant in GUIDED_SEQUENCE:
        task = TASKS[task_id]
        print(f"{task_id} ) " + task.title.format(variant=variant or ""))
        done = False
        while not done:
            try:
                params = {}
                for i, name in enumerate(task.params, start=1):
                    params[name] = _convert(name, ask(f"{i} ) {PARAMS[name][0]} : ").strip())
                result = session.analyzer.run_task(task_id, variant, **params)
                write_result(result, session.writer)
                done = True
            except NotFound as e:
                print(f"{e}, try again")
            except (RangeError, ValueError) as e:
                print(f"Invalid input: {e}, try again")
            print()
    print("Done!")

def _print_rows(rows):
    if not rows:
        print("(no records)")
    for r in rows:
        print(f"  {r}")

if __name__ == "__main__":
    main()
