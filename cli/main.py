import argparse
import asyncio
import logging
import signal
import sys

from cli import install as installer
from cli.output import render_header, render_json, render_target_ip, render_text
from core.config import settings
from core.errors import ScanError
from core.ports import expand
from core.resolver import resolve
from pipeline.orchestrator import Scanner

log = logging.getLogger(__name__)


def _positive_int(value: str) -> int:
    try:
        n = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {value!r}") from None
    if n < 1:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {value!r}")
    return n


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="clapscan", description="Simple async TCP connect scanner")
    p.add_argument("target", help="target hostname or IP (single)")
    p.add_argument("-p", "--ports", default=settings.default_ports, help='ports spec: e.g. "22,80,443" or "1-1024"')
    p.add_argument(
        "-c", "--concurrency", type=_positive_int, default=settings.concurrency,
        help="number of simultaneous connect tasks",
    )
    p.add_argument("--timeout-ms", type=_positive_int, default=settings.timeout_ms, help="timeout per connect in milliseconds")
    p.add_argument("--json", action="store_true", default=False, help="output JSON")
    p.add_argument("-v", "--verbose", action="count", default=0, help="more logging (repeat for debug)")
    return p


def _configure_logging(verbose: int) -> None:
    level = logging.getLevelName(settings.log_level)
    if verbose == 1:
        level = min(level, logging.INFO)
    elif verbose > 1:
        level = logging.DEBUG
    logging.basicConfig(level=level, stream=sys.stderr, format="%(asctime)s %(levelname)s %(name)s: %(message)s")


def _emit(line: str, as_json: bool) -> None:
    # stdout stays pure JSON in --json mode
    if as_json:
        log.info(line)
    else:
        print(line)


async def _scan(args: argparse.Namespace) -> int:
    ports = expand(args.ports)
    _emit(render_header(args.target, len(ports)), args.json)

    ip = await resolve(args.target)
    _emit(render_target_ip(ip), args.json)

    scanner = Scanner()
    loop = asyncio.get_running_loop()
    try:
        loop.add_signal_handler(signal.SIGINT, scanner.cancel)
        handles_sigint = True
    except (NotImplementedError, RuntimeError):
        handles_sigint = False
    try:
        report = await scanner.scan(ip, ports, args.concurrency, args.timeout_ms / 1000.0, target=args.target)
    finally:
        if handles_sigint:
            loop.remove_signal_handler(signal.SIGINT)

    if args.json:
        print(render_json(report))
    else:
        for line in render_text(report):
            print(line)
    return 0


def _run_install(flag: str) -> int:
    try:
        if flag == "--install":
            target = installer.install()
            print(f"clapscan installed to {target}")
            print("To uninstall, run: clapscan --uninstall")
        elif installer.uninstall():
            print("clapscan uninstalled")
        else:
            print("clapscan not found in install directory")
    except OSError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


def main(argv=None) -> int:
    argv = sys.argv[1:] if argv is None else list(argv)
    # handled before argparse, which would demand a target
    for flag in ("--install", "--uninstall"):
        if flag in argv:
            return _run_install(flag)

    args = build_parser().parse_args(argv)
    _configure_logging(args.verbose)
    try:
        return asyncio.run(_scan(args))
    except ScanError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        # loops without add_signal_handler (Windows) cannot hand back a partial report
        print("scan interrupted", file=sys.stderr)
        return 130


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
