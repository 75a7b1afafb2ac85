#!/usr/bin/env python3
# =============================================================
# signal_writer/cli.py
# -------------------------------------------------------------
# Run one generation cycle from the terminal.
#
#   signal-writer "Subject withdrawal rate exceeds expectation" \
#       --site "Site 202" --severity High --save-dir out/
#
# Prints the document (or the error text) to stdout.
# Exit codes: 0 ok, 1 cycle failed, 2 form not submittable.
# =============================================================

from __future__ import annotations
import argparse
import sys
from pathlib import Path
from typing import List, Optional

from signal_writer.export import save_document
from signal_writer.settings import settings
from signal_writer.signal import FormState, Severity, SignalGenerator, build_prompt


def _make_client(use_echo: bool):
    if use_echo or not settings.use_anthropic:
        from signal_writer.generate.clients.echo_dev_client import EchoDevClient
        return EchoDevClient()
    from signal_writer.generate.clients.anthropic_client import AnthropicClient
    return AnthropicClient()


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Turn an atypicality description into a clinical signal.")
    p.add_argument("description", help=f"Brief description (max {settings.MAX_WORDS} words)")
    p.add_argument("--site", default=None, help='Site identifier(s), e.g. "Site 101" or "Sites 101 and 102"')
    p.add_argument("--severity", default=Severity.MEDIUM.value, type=Severity.parse,
                   help="High, Medium or Low (default: Medium)")
    out = p.add_mutually_exclusive_group()
    out.add_argument("--output", "-o", type=Path, help="Write the document to this file")
    out.add_argument("--save-dir", type=Path, help=f"Write {settings.EXPORT_FILENAME} into this directory")
    p.add_argument("--prompt-only", action="store_true", help="Print the built prompt and exit")
    p.add_argument("--echo", action="store_true", help="Use the offline echo client")
    return p.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    form = FormState(
        description=args.description,
        site_info=args.site,
        severity=args.severity,
        max_words=settings.MAX_WORDS,
        max_chars=settings.MAX_CHARS,
    )

    if args.prompt_only:
        print(build_prompt(form.description, form.site, form.severity))
        return 0

    if not form.can_submit:
        print(
            f"!! description must be non-empty, at most {form.max_words} words "
            f"and {form.max_chars} characters (got {form.word_count} words, {len(form.description)} characters)",
            file=sys.stderr,
        )
        return 2

    gen = SignalGenerator(model_client=_make_client(args.echo))
    result = gen.run(form)
    print(result.text)
    if not result.ok:
        return 1

    if args.output:
        save_document(result.text, args.output.parent, args.output.name)
    elif args.save_dir:
        save_document(result.text, args.save_dir)
    return 0


if __name__ == "__main__":
    sys.exit(main())
