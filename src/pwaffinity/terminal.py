#!/usr/bin/env python3
"""
pwaffinity - Password affinity checker
Nearest-centroid distance of password character-class masks, plus MD5.
"""

import argparse
import logging
import os
import sys
from getpass import getpass
from typing import List, Optional

import pyperclip

from .analyzer import PasswordAnalyzer
from .errors import PwAffinityError
from .logger import analysis_logger
from .md5 import md5_file, md5_hexdigest

CENTERS_ENV = "PWAFFINITY_CENTERS"

DEMO_PASSWORDS = [
    "password",
    "Password123",
    "P@ssw0rd!",
    "aaaaaaaa",
    "ThisIsAVeryLongPassword123!!!",
    "LamarHHTT9527!",
]

def print_banner():
    """Display application banner."""
    banner = """
    ╔═══════════════════════════════════════╗
    ║          P W A F F I N I T Y          ║
    ║    Password Affinity Checker v1.0     ║
    ╚═══════════════════════════════════════╝
    """
    print(banner)

def build_analyzer(centers_path: Optional[str]) -> PasswordAnalyzer:
    """Analyzer from an explicit path, the environment, or the sample set."""
    path = centers_path or os.environ.get(CENTERS_ENV)
    if path:
        return PasswordAnalyzer.from_file(path)
    return PasswordAnalyzer.from_default()

def print_distances(analyzer: PasswordAnalyzer, passwords: List[str]):
    for pwd in passwords:
        print(f"{pwd} -> distance = {analyzer.distance(pwd)}")

def copy_to_clipboard(text: str):
    try:
        pyperclip.copy(text)
        print("✓ Digest copied to clipboard")
    except pyperclip.PyperclipException as e:
        print(f"Clipboard unavailable: {e}")

def interactive_menu(analyzer: PasswordAnalyzer):
    """Interactive command-line interface."""
    while True:
        print("\n" + "="*50)
        print("MAIN MENU")
        print("="*50)
        print("1. Check password distance")
        print("2. Compute MD5 of text")
        print("3. Run demo passwords")
        print("4. Exit")

        choice = input("\nSelect option (1-4): ").strip()

        if choice == "1":
            password = getpass("Password: ")
            result = analyzer.analyze(password)
            print(f"\nMask: {' '.join(str(code) for code in result.fingerprint)}")
            print(f"Distance: {result.distance}")

        elif choice == "2":
            text = input("Text: ")
            digest = md5_hexdigest(text)
            print(f"\nMD5: {digest}")
            copy = input("\nCopy digest to clipboard? (y/n): ").lower()
            if copy == 'y':
                copy_to_clipboard(digest)

        elif choice == "3":
            print_distances(analyzer, DEMO_PASSWORDS)

        elif choice == "4":
            print("Goodbye!")
            break

        else:
            print("Invalid choice. Please try again.")

def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="pwaffinity",
        description="Password affinity distance and MD5 utility",
    )
    p.add_argument(
        "--centers",
        default=None,
        help=f"Reference center file (default: ${CENTERS_ENV} or bundled sample)",
    )
    p.add_argument("--log-file", default=None, help="Append analysis events to this file")
    p.add_argument("-v", "--verbose", action="store_true", help="Log individual queries")

    sub = p.add_subparsers(dest="command")

    dist = sub.add_parser("distance", help="Print the distance of each password")
    dist.add_argument("passwords", nargs="+")

    sub.add_parser("demo", help="Run the built-in demo passwords")

    md5 = sub.add_parser("md5", help="Print the MD5 digest of text or a file")
    md5.add_argument("text", nargs="?", default=None)
    md5.add_argument("--file", default=None, help="Hash this file instead of text")
    md5.add_argument("--copy", action="store_true", help="Copy the digest to the clipboard")
    return p

def main(argv=None):
    """Main application entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    level = logging.DEBUG if args.verbose else logging.INFO
    previous_level = analysis_logger.logger.level
    analysis_logger.logger.setLevel(level)
    handler = None
    if args.log_file:
        handler = analysis_logger.add_file_handler(args.log_file, level)
    try:
        return run(parser, args)
    finally:
        if handler is not None:
            analysis_logger.remove_handler(handler)
        analysis_logger.logger.setLevel(previous_level)

def run(parser: argparse.ArgumentParser, args: argparse.Namespace) -> int:
    """Execute the parsed command."""
    if args.command == "md5":
        if args.file:
            try:
                digest = md5_file(args.file)
            except OSError as e:
                print(f"Error: {e}", file=sys.stderr)
                return 1
        elif args.text is not None:
            digest = md5_hexdigest(args.text)
        else:
            parser.error("md5 needs TEXT or --file")
        print(digest)
        if args.copy:
            copy_to_clipboard(digest)
        return 0

    try:
        analyzer = build_analyzer(args.centers)
    except PwAffinityError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    if args.command == "distance":
        print_distances(analyzer, args.passwords)
    elif args.command == "demo":
        print_distances(analyzer, DEMO_PASSWORDS)
    else:
        print_banner()
        print(f"Loaded {len(analyzer.centers)} reference centers.")
        interactive_menu(analyzer)
    return 0

if __name__ == "__main__":
    sys.exit(main())
