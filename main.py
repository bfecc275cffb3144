# main.py
from __future__ import annotations

import argparse
from pathlib import Path
from typing import Sequence

from benchmark import DEFAULT_SIZES, format_report, keyspace_report, run_benchmark
from config import DEFAULT_PATH, ConfigRecord, load_config, save_config
from debug import Debug
from errors import ConfigurationError
from machine import build_machine
from utilities import ask, confirm, prompt_config

# ────────────────────────────────────────────────────────────────────────
#  0. Logging
# ────────────────────────────────────────────────────────────────────────


debug = Debug()
debug.toggle_global(False)


# ────────────────────────────────────────────────────────────────────────
#  1. Config acquisition
# ────────────────────────────────────────────────────────────────────────


def acquire_config(args: argparse.Namespace) -> ConfigRecord:
    """Load the record from disk or build one through the prompts."""
    cfg_path = Path(args.config) if args.config else DEFAULT_PATH

    if not args.interactive and cfg_path.exists():
        if args.config:                        # --config FILE  (no question)
            return load_config(cfg_path)
        if confirm(f"Found '{cfg_path}'.  Load it?"):
            return load_config(cfg_path)

    cfg = prompt_config()
    build_machine(cfg)                         # fail before offering to save
    if confirm("Save config?"):
        save_config(cfg, cfg_path)
        print(f"✅  Wrote {cfg_path}")
    return cfg


# ────────────────────────────────────────────────────────────────────────
#  2. Commands
# ────────────────────────────────────────────────────────────────────────


def encipher(cfg: ConfigRecord, text: str) -> str:
    """One message, one fresh machine."""
    return build_machine(cfg).transform(text)


def benchmark(cfg: ConfigRecord, sizes: Sequence[int] = DEFAULT_SIZES) -> None:
    print(format_report(cfg, run_benchmark(cfg, sizes)))


def keyspace(cfg: ConfigRecord) -> None:
    bits, a, r, p = keyspace_report(cfg)
    print(f"Keyspace: {bits:.3f} bits (A = {a}, R = {r}, P = {p})")


def repl(cfg: ConfigRecord) -> None:
    while True:
        cmd = ask("\nCommand (encrypt/decrypt/benchmark/keyspace/exit): ").lower()
        if cmd in {"exit", "quit", ""}:
            break
        if cmd in {"encrypt", "decrypt"}:
            print("Result:", encipher(cfg, ask("Message: ")))
        elif cmd == "benchmark":
            benchmark(cfg)
        elif cmd == "keyspace":
            keyspace(cfg)
        else:
            print("Unknown command.")


# ────────────────────────────────────────────────────────────────────────
#  3. CLI helpers
# ────────────────────────────────────────────────────────────────────────


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Encrypt or decrypt with the rotor-block machine")
    p.add_argument("-m", "--message", metavar="TEXT", help="Text to encipher. If omitted, an interactive loop starts.")
    p.add_argument("--config", metavar="FILE", help=f"Load machine settings from JSON (default: {DEFAULT_PATH}).")
    p.add_argument("--interactive", action="store_true", help="Ignore any JSON file and run the interactive prompt chain.")
    p.add_argument("--benchmark", action="store_true", help="Print keyspace and timing report, then exit.")
    p.add_argument("--sizes", type=int, nargs="+", default=list(DEFAULT_SIZES), help="Text sizes for --benchmark.")
    return p.parse_args(argv)


# ────────────────────────────────────────────────────────────────────────
#  4. Main entry point
# ────────────────────────────────────────────────────────────────────────


def main(argv: Sequence[str] | None = None) -> None:
    args = parse_args(argv)
    try:
        cfg = acquire_config(args)
        build_machine(cfg)
    except (ConfigurationError, OSError) as exc:
        raise SystemExit(f"Failed to load configuration: {exc}") from exc

    if args.benchmark:
        benchmark(cfg, args.sizes)
        return

    # one-shot mode ------------------------------------------------------
    if args.message is not None:
        cipher = encipher(cfg, args.message)
        print("Encrypted:", cipher)
        print("Decrypted:", encipher(cfg, cipher))
        return

    # interactive loop ---------------------------------------------------
    print(f"\nLoaded '{cfg.alphabet}' machine: {len(cfg.blocks)} blocks, {cfg.pair_count} plug pairs.")
    print("Type blank line to quit.")
    repl(cfg)


if __name__ == "__main__":
    main()
