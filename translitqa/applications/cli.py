"""
Command-line runner for the transliteration case table.

Runs the same executor as the pytest suite, without pytest: each worker thread
owns a Playwright instance and opens a fresh browser context per case.
"""

import argparse
import logging
import sys
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import List, Optional

from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import sync_playwright
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from translitqa import load_runtime_config
from translitqa.core.components.transform.classifier import CaseClassifier
from translitqa.core.components.writers.result_sink import CsvResultSink
from translitqa.core.executor import CaseExecutor
from translitqa.core.pipelines import CaseLoadError, load_test_cases
from translitqa.di import get_injector
from translitqa.types.configuration import SuiteRuntimeConfig
from translitqa.types.test_case import ResultRecord, TestCase

logger = logging.getLogger(__name__)
console = Console()


@dataclass
class CaseOutcome:
    case: TestCase
    record: Optional[ResultRecord] = None
    error: Optional[str] = None


def run_cases(
    cases: List[TestCase],
    executor: CaseExecutor,
    config: SuiteRuntimeConfig,
) -> List[CaseOutcome]:
    """Run ``cases`` sequentially in one browser, one context per case."""
    outcomes = []
    with sync_playwright() as playwright:
        browser = playwright.chromium.launch(headless=config.browser.headless)
        try:
            for case in cases:
                outcomes.append(_run_one(browser, case, executor, config))
        finally:
            browser.close()
    return outcomes


def _run_one(browser, case: TestCase, executor: CaseExecutor, config: SuiteRuntimeConfig) -> CaseOutcome:
    context = None
    try:
        context = browser.new_context(
            viewport={
                "width": config.browser.viewport_width,
                "height": config.browser.viewport_height,
            }
        )
        if config.browser.default_timeout_ms is not None:
            context.set_default_timeout(config.browser.default_timeout_ms)

        page = context.new_page()
        page.goto(config.base_url)
        return CaseOutcome(case=case, record=executor.execute(page, case))
    except (PlaywrightError, OSError) as e:
        logger.exception(f"{case.case_id}: case aborted")
        return CaseOutcome(case=case, error=str(e))
    finally:
        if context is not None:
            try:
                context.close()
            except PlaywrightError as e:
                logger.warning(f"{case.case_id}: could not close browser context: {e}")


def run_parallel(
    cases: List[TestCase],
    executor: CaseExecutor,
    config: SuiteRuntimeConfig,
    workers: int,
) -> List[CaseOutcome]:
    workers = max(1, min(workers, len(cases) or 1))
    # Header creation happens once, before any worker can append.
    executor.sink.ensure_header()

    if workers == 1:
        return run_cases(cases, executor, config)

    batches = [cases[i::workers] for i in range(workers)]
    with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="case-worker") as pool:
        futures = [pool.submit(run_cases, batch, executor, config) for batch in batches]

        # Batch i holds positions i, i + workers, ...; slot outcomes back by position.
        outcomes: List[Optional[CaseOutcome]] = [None] * len(cases)
        for i, future in enumerate(futures):
            outcomes[i::workers] = future.result()

    return outcomes


def print_summary(outcomes: List[CaseOutcome], results_path: str) -> None:
    table = Table(title="Transliteration cases")
    table.add_column("TC ID", style="bold")
    table.add_column("Category")
    table.add_column("Status")
    table.add_column("Actual Output")
    table.add_column("Remarks")

    for outcome in outcomes:
        if outcome.record is None:
            table.add_row(
                outcome.case.case_id,
                outcome.case.category.value,
                "[magenta]ERROR[/magenta]",
                "",
                escape(outcome.error or ""),
            )
            continue
        record = outcome.record
        status = "[green]PASS[/green]" if record.passed else "[red]FAIL[/red]"
        table.add_row(
            record.case_id,
            outcome.case.category.value,
            status,
            escape(record.actual_output),
            escape(record.remark),
        )

    console.print(table)

    passed = sum(1 for o in outcomes if o.record is not None and o.record.passed)
    errored = sum(1 for o in outcomes if o.record is None)
    failed = len(outcomes) - passed - errored
    console.print(
        f"[bold]{len(outcomes)}[/bold] cases: "
        f"[green]{passed} passed[/green], [red]{failed} failed[/red], "
        f"[magenta]{errored} errored[/magenta]"
    )
    console.print(f"Results appended to {results_path}")


def exit_code_for(outcomes: List[CaseOutcome], strict: bool) -> int:
    if any(o.record is None for o in outcomes):
        return 1
    if strict and any(not o.record.passed for o in outcomes):
        return 1
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Run the transliteration case table against the live web app",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Run every case with fixed settle waits
  %(prog)s --cases test_cases.csv

  # Poll for stable output and use four browsers
  %(prog)s --stage fast --workers 4

  # Run two cases with a visible browser
  %(prog)s --case Pos_0001 --case Pos_UI_0002 --headed
        """,
    )

    parser.add_argument("--stage", help="Runtime stage (default, fast, unit-test)")
    parser.add_argument("--cases", help="Input case table (default from stage config)")
    parser.add_argument("--results", help="Results table to append to")
    parser.add_argument("--base-url", help="Root URL of the application under test")
    parser.add_argument(
        "--case",
        action="append",
        dest="case_ids",
        metavar="CASE_ID",
        help="Only run this case id (repeatable)",
    )
    parser.add_argument(
        "--workers", type=int, default=1, help="Parallel browser workers (default: 1)"
    )
    parser.add_argument(
        "--headed", action="store_true", help="Show the browser window"
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Exit non-zero when any case has a FAIL verdict",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable verbose logging"
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    args = build_parser().parse_args(argv)

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    try:
        config = load_runtime_config(args.stage).with_overrides(
            base_url=args.base_url,
            cases_file=args.cases,
            results_file=args.results,
            strict_verdicts=True if args.strict else None,
            headless=False if args.headed else None,
        )
    except ValueError as e:
        console.print(f"[red]❌ {e}[/red]")
        return 2

    injector = get_injector(config=config, force_new=True)

    try:
        cases = load_test_cases(config.paths.cases_file, injector.get(CaseClassifier))
    except CaseLoadError as e:
        console.print(f"[red]❌ {e}[/red]")
        return 2

    if args.case_ids:
        wanted = set(args.case_ids)
        cases = [case for case in cases if case.case_id in wanted]
        missing = wanted - {case.case_id for case in cases}
        if missing:
            console.print(f"[yellow]⚠️  Unknown case ids: {', '.join(sorted(missing))}[/yellow]")

    if not cases:
        console.print("[yellow]No cases to run[/yellow]")
        return 0

    console.print(f"🚀 Running {len(cases)} cases against {config.base_url}")
    executor = injector.get(CaseExecutor)
    outcomes = run_parallel(cases, executor, config, args.workers)

    print_summary(outcomes, str(injector.get(CsvResultSink).path))
    return exit_code_for(outcomes, config.strict_verdicts)


if __name__ == "__main__":
    sys.exit(main())
