#!/usr/bin/env python3
"""
CLI entrypoint for cs2mmd.

Usage:
  cs2mmd <root> [flags]

Flags:
  --namespaces         group blocks by top-level subdirectory
  --profile PATH       YAML/JSON profile (repeatable)
  --output PATH        destination (default: <root>/uml.mmd)
  --verbose
"""
from __future__ import annotations

import argparse
import logging
import os
from dataclasses import replace
from typing import List, Optional

from app.config import DEFAULT_CONFIG, GeneratorConfig
from utils.logging_config import configure_logging

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cs2mmd",
        description="Generate a Mermaid class diagram from C# and XAML sources",
    )
    parser.add_argument('root', nargs='?', help='Directory to scan recursively')
    parser.add_argument('--namespaces', action='store_true',
                        help='Wrap each top-level subdirectory in a namespace block')
    parser.add_argument('--profile', action='append', default=[], metavar='PATH',
                        help='YAML or JSON profile overriding defaults (repeatable)')
    parser.add_argument('--output', '-o', metavar='PATH',
                        help='Output file (default: <root>/uml.mmd)')
    parser.add_argument('--verbose', '-v', action='store_true',
                        help='Log skipped lines and dropped edges')
    return parser


def load_config(args: argparse.Namespace) -> GeneratorConfig:
    from types_profiles.registry import load_profiles

    cfg = load_profiles(args.profile, base=DEFAULT_CONFIG)
    if args.namespaces:
        cfg = replace(cfg, group_namespaces=True)
    return cfg


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(verbose=args.verbose)

    if not args.root:
        print("no directory to search")
        return 0
    if not os.path.isdir(args.root):
        print(f"❌ Not a directory: {args.root}")
        return 1

    from core.pipeline import BuildPipeline

    try:
        cfg = load_config(args)
        pipe = BuildPipeline(config=cfg)
        artifacts = pipe.build(args.root)
        out_path = pipe.generate(artifacts, args.output)
    except (RuntimeError, ValueError, OSError) as e:
        logger.error("Generation failed: %s", e)
        print(f"❌ generation failed: {e}")
        return 1

    print(f"{out_path} created")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
