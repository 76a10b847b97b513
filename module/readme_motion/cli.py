"""readme-motion command line.

  readme-motion --init                   scaffold motion.config.json
  readme-motion --config <file>          render the SVGs it describes
"""

from __future__ import annotations

import argparse
from dataclasses import replace
from pathlib import Path
from typing import List, Optional

from readme_motion.core.config import CONFIG_FILENAME, THEMES_FILENAME, load_config, write_sample_config
from readme_motion.core.errors import ConfigError
from readme_motion.core.logging_setup import configure_logging, get_logger
from readme_motion.core.theme import load_theme_table
from readme_motion.render import render_config


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="readme-motion",
        description="Render animated SVG widgets for README files.",
    )
    parser.add_argument("--init", action="store_true", help=f"Scaffold a sample {CONFIG_FILENAME}")
    parser.add_argument("--config", help="Render SVGs defined in the given config")
    parser.add_argument("--themes", help=f"Theme table JSON (default: {THEMES_FILENAME} next to the config)")
    parser.add_argument("--out-dir", help="Override the config's outDir")
    parser.add_argument("--force", action="store_true", help="Overwrite an existing config with --init")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def cmd_init(args: argparse.Namespace) -> int:
    path = write_sample_config(Path.cwd() / CONFIG_FILENAME, force=args.force)
    get_logger().info("wrote %s", path)
    return 0


def cmd_render(args: argparse.Namespace) -> int:
    cfg_path = Path(args.config).expanduser().resolve()
    cfg = load_config(cfg_path)
    if args.out_dir:
        cfg = replace(cfg, out_dir=str(Path(args.out_dir).expanduser().resolve()))
    if args.themes:
        themes_path = Path(args.themes).expanduser().resolve()
        if not themes_path.exists():
            raise ConfigError(f"Theme file not found: {themes_path}")
    else:
        themes_path = cfg_path.parent / THEMES_FILENAME
    themes = load_theme_table(themes_path)
    written = render_config(cfg, themes, base_dir=cfg_path.parent)
    get_logger().info("rendered %d of %d item(s)", len(written), len(cfg.items))
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    log = configure_logging(verbose=args.verbose)

    if not args.init and not args.config:
        parser.print_help()
        return 0
    try:
        if args.init:
            return cmd_init(args)
        return cmd_render(args)
    except (ConfigError, OSError) as exc:
        log.error("%s", exc)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
