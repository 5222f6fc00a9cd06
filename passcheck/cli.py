"""Command line front end for the passcheck wordlist generator."""

import argparse
import json
import logging
import os
import sys
from typing import Dict, List, Optional, Sequence

from .generator import generate_and_store
from .policy import PolicyConfig, build_rules, load_policy_config
from .storage import DEFAULT_EXPORT_NAME, DEFAULT_STORE_PATH, JsonFileStore, load_wordlist, write_export
from .tokenizer import PROFILE_FIELDS


PREVIEW_DEFAULT = 20
LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


def supports_ansi() -> bool:
    return sys.stdout.isatty() and os.environ.get("NO_COLOR") is None


def paint(text: str, tone: int) -> str:
    if not supports_ansi():
        return text
    return f"\033[38;5;{tone}m{text}\033[0m"


def load_profile_from_json(stdin_data: str) -> Dict[str, str]:
    try:
        loaded = json.loads(stdin_data)
    except json.JSONDecodeError as exc:
        raise ValueError(f"Invalid JSON input: {exc}") from exc
    if not isinstance(loaded, dict):
        raise ValueError("Profile JSON must be an object.")

    def collect(value) -> List[str]:
        if value is None:
            return []
        if isinstance(value, str):
            return [value]
        if isinstance(value, list):
            items: List[str] = []
            for item in value:
                items.extend(collect(item))
            return items
        if isinstance(value, dict):
            items = []
            for _, val in value.items():
                items.extend(collect(val))
            return items
        return [str(value)]

    profile: Dict[str, str] = {}
    for key, value in loaded.items():
        parts = [part for part in collect(value) if part.strip()]
        if parts:
            profile[key] = ", ".join(parts)
    return profile


def parse_field_pairs(pairs: Sequence[str]) -> Dict[str, str]:
    fields: Dict[str, str] = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep or not key.strip():
            raise ValueError(f"Expected KEY=VALUE, got {pair!r}.")
        fields[key.strip()] = value
    return fields


def read_profile(args: argparse.Namespace) -> Dict[str, str]:
    profile: Dict[str, str] = {}
    if args.profile == "-":
        stdin_data = sys.stdin.read()
        if stdin_data.strip():
            profile = load_profile_from_json(stdin_data)
    elif args.profile:
        try:
            with open(args.profile, "r", encoding="utf-8") as handle:
                profile = load_profile_from_json(handle.read())
        except OSError as exc:
            raise ValueError(f"Cannot read profile {args.profile}: {exc}") from exc
    profile.update(parse_field_pairs(args.field))
    return profile


def policy_from_args(args: argparse.Namespace) -> PolicyConfig:
    config = load_policy_config(args.config) if args.config else PolicyConfig()
    if args.min_length is not None:
        if args.min_length < 0:
            raise ValueError("minimum length cannot be negative.")
        config.min_length = args.min_length
    if args.min_words is not None:
        if args.min_words < 0:
            raise ValueError("minimum word count cannot be negative.")
        config.min_words = args.min_words
    for flag in ("require_uppercase", "require_lowercase", "require_number", "require_symbol",
                 "require_words", "block_blacklist"):
        value = getattr(args, flag)
        if value is not None:
            setattr(config, flag, value)
    return config


def cmd_generate(args: argparse.Namespace) -> int:
    if args.preview < 0:
        raise ValueError("preview count cannot be negative.")
    profile = read_profile(args)
    store = JsonFileStore(args.store)
    words = generate_and_store(profile, store)
    if not words:
        if not profile:
            print("No profile fields supplied. Stored an empty wordlist.", file=sys.stderr)
        else:
            print("No tokens of 3+ characters in the profile. Stored an empty wordlist.", file=sys.stderr)
        return 0
    if args.output:
        write_export(words, args.output)
    for word in words[: args.preview]:
        print(word)
    print(f"\nGenerated {len(words)} candidates.")
    print(f"- stored in: {args.store}")
    if args.output:
        print(f"- exported to: {args.output}")
    return 0


def cmd_show(args: argparse.Namespace) -> int:
    words = load_wordlist(JsonFileStore(args.store))
    print(f"Total variations: {len(words)}")
    if not words:
        print("No wordlist found. Run 'passcheck generate' first.")
    for word in words:
        print(word)
    return 0


def cmd_export(args: argparse.Namespace) -> int:
    words = load_wordlist(JsonFileStore(args.store))
    if not words:
        print("No wordlist found. Nothing to export.", file=sys.stderr)
        return 1
    write_export(words, args.output)
    print(f"Wrote {len(words)} lines to {args.output}")
    return 0


def cmd_check(args: argparse.Namespace) -> int:
    config = policy_from_args(args)
    failed = 0
    for rule in build_rules(config):
        passed = rule.test(args.password)
        if not passed:
            failed += 1
        mark = paint("PASS", 34) if passed else paint("FAIL", 160)
        print(f"[{mark}] {rule.label}")
    return 0 if failed == 0 else 2


def cmd_fields(args: argparse.Namespace) -> int:
    for name, label in PROFILE_FIELDS:
        print(f"{name:<22} {label}")
    return 0


def add_bool_flag(parser: argparse.ArgumentParser, name: str, help_text: str) -> None:
    dest = name.replace("-", "_")
    parser.add_argument(f"--{name}", dest=dest, action="store_true", default=None, help=help_text)
    parser.add_argument(f"--no-{name}", dest=dest, action="store_false", default=None, help=argparse.SUPPRESS)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="passcheck",
        description="Build a personal-attribute wordlist and check passwords against a policy.",
    )
    parser.add_argument("--log-level", choices=LOG_LEVELS, default="WARNING", help="Logging verbosity (default: WARNING).")
    sub = parser.add_subparsers(dest="command")

    gen = sub.add_parser("generate", help="Generate a wordlist from a JSON profile.")
    gen.add_argument("-p", "--profile", help='JSON profile file, or "-" for stdin.')
    gen.add_argument("-f", "--field", action="append", default=[], metavar="KEY=VALUE", help="Profile field; repeatable.")
    gen.add_argument("--store", default=DEFAULT_STORE_PATH, help=f'Store file (default: "{DEFAULT_STORE_PATH}").')
    gen.add_argument("--preview", type=int, default=PREVIEW_DEFAULT, help="Print the first N candidates.")
    gen.add_argument("-o", "--output", help="Also export the wordlist as plain text to this file.")
    gen.set_defaults(handler=cmd_generate)

    show = sub.add_parser("show", help="Print the stored wordlist.")
    show.add_argument("--store", default=DEFAULT_STORE_PATH, help="Store file.")
    show.set_defaults(handler=cmd_show)

    export = sub.add_parser("export", help="Write the stored wordlist as newline-separated text.")
    export.add_argument("--store", default=DEFAULT_STORE_PATH, help="Store file.")
    export.add_argument("-o", "--output", default=DEFAULT_EXPORT_NAME, help=f'Output file (default: "{DEFAULT_EXPORT_NAME}").')
    export.set_defaults(handler=cmd_export)

    check = sub.add_parser("check", help="Check a password against the policy rules.")
    check.add_argument("password", help="Password to check.")
    check.add_argument("--config", help="JSON policy settings file.")
    check.add_argument("--min-length", type=int, help="Override minimum length.")
    check.add_argument("--min-words", type=int, help="Override minimum word count.")
    add_bool_flag(check, "require-uppercase", "Require an uppercase letter (--no-... to disable).")
    add_bool_flag(check, "require-lowercase", "Require a lowercase letter (--no-... to disable).")
    add_bool_flag(check, "require-number", "Require a digit (--no-... to disable).")
    add_bool_flag(check, "require-symbol", "Require a symbol (--no-... to disable).")
    add_bool_flag(check, "require-words", "Require several words (--no-... to disable).")
    add_bool_flag(check, "block-blacklist", "Reject common weak passwords (--no-... to disable).")
    check.set_defaults(handler=cmd_check)

    fields = sub.add_parser("fields", help="List the known profile fields.")
    fields.set_defaults(handler=cmd_fields)
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level), format="[%(levelname)s] %(message)s")

    if not getattr(args, "handler", None):
        parser.print_help()
        return 0

    try:
        return args.handler(args)
    except (ValueError, RuntimeError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
