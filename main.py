"""
markdown-forms - Render markdown documents with form controls to HTML.
"""

from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from typing import List, Optional

from internal.config.manager import ConfigManager
from lib.logging_utils import initLogging
from lib.markdown_forms import FormsMarkdown, MarkdownFormsError

# Configure basic logging first
logging.basicConfig(format="%(asctime)s - %(name)s - %(levelname)s - %(message)s", level=logging.WARNING)
logger = logging.getLogger(__name__)


class FormsRenderApp:
    """Renders markdown files using the loaded configuration."""

    def __init__(self, configPath: str = "config.toml", configDirs: Optional[List[str]] = None):
        """Initialize configuration, logging and the markdown renderer."""
        self.configManager = ConfigManager(configPath, configDirs)
        initLogging(self.configManager.getLoggingConfig())
        self.markdown = FormsMarkdown(self.configManager.getMarkdownConfig())

    def renderFile(self, path: Optional[str]) -> str:
        """Render one markdown file, or stdin when path is None or '-'."""
        if path is None or path == "-":
            return self.markdown.render(sys.stdin.read())

        with open(path, "rt", encoding="utf-8") as f:
            source = f.read()
        logger.info(f"Rendering {path}")
        return self.markdown.render(source)

    def run(self, paths: List[str], output: Optional[str] = None) -> None:
        """Render all paths and write the concatenated HTML."""
        parts = [self.renderFile(path) for path in (paths or [None])]
        html = "".join(parts)

        if output is None:
            sys.stdout.write(html)
            return

        with open(output, "wt", encoding="utf-8") as f:
            f.write(html)
        logger.info(f"Wrote {len(html)} characters to {output}")


def parse_arguments(argv: Optional[List[str]] = None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description="Render markdown with form controls to HTML")
    parser.add_argument(
        "files",
        nargs="*",
        help="Markdown files to render (default: stdin)",
    )
    parser.add_argument(
        "-c",
        "--config",
        default="config.toml",
        help="Path to configuration file (default: config.toml)",
    )
    parser.add_argument(
        "--config-dir",
        action="append",
        help="Directory to search for .toml config files recursively (can be specified multiple times)",
    )
    parser.add_argument(
        "-o",
        "--output",
        help="Write HTML to this file instead of stdout",
    )
    parser.add_argument(
        "--print-config",
        action="store_true",
        help="Pretty-print loaded configuration and exit",
    )
    args = parser.parse_args(argv)
    args.config = os.path.abspath(args.config)

    if args.config_dir:
        args.config_dir = [os.path.abspath(dirPath) for dirPath in args.config_dir]

    return args


def prettyPrintConfig(configManager: ConfigManager):
    """Pretty-print the loaded configuration."""
    print(json.dumps(configManager.config, indent=2, ensure_ascii=False, sort_keys=True))


def main(argv: Optional[List[str]] = None):
    """Main entry point."""
    args = parse_arguments(argv)

    try:
        if args.print_config:
            prettyPrintConfig(ConfigManager(args.config, args.config_dir))
            sys.exit(0)

        app = FormsRenderApp(configPath=args.config, configDirs=args.config_dir)
        app.run(args.files, args.output)
    except KeyboardInterrupt:
        logger.info("Rendering stopped by user")
    except (OSError, MarkdownFormsError) as e:
        logger.error(f"Rendering failed: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
