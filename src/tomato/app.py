from __future__ import annotations

import argparse
import logging
import sys

from tomato.controllers.generate_controller import GenerateController
from tomato.core.managers.config_manager import config_manager
from tomato.core.managers.output_manager import OutputManager
from tomato.core.utils.configure_logging import configure_logger
from tomato.core.utils.path_utils import STYLESHEET_SUFFIX
from tomato.errors import TomatoError
from tomato.model import Language

logger = logging.getLogger(__name__)

# Command line flag -> configuration key it overrides.
CONFIG_OVERRIDES = {
    "view_dir": "paths.input_dir",
    "out_file": "paths.output_file",
    "language": "generator.language",
    "base_class": "generator.view_base_class",
    "factory": "generator.view_factory",
    "import_location": "generator.import_location",
    "debug_ids": "generator.force_debug_ids",
    "log_level": "debug.level",
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tomato",
        description="Compile .htmto templates into generated view classes and a stylesheet.",
    )
    parser.add_argument("-i", "--in", dest="view_dir", help="Folder searched recursively for templates.")
    parser.add_argument("-o", "--out", dest="out_file", help="File the generated views are written to.")
    parser.add_argument("--language", help="Language of the generated views (default: ts).")
    parser.add_argument("--base-class", help="Runtime base class the views extend.")
    parser.add_argument("--factory", help="Runtime function creating generic element views.")
    parser.add_argument("--import-location", help="Module the runtime is imported from.")
    parser.add_argument("--debug-ids", action="store_true", default=None,
                        help="Give every generated view a debug-id attribute.")
    parser.add_argument("--log-level", help="Logging level (DEBUG, INFO, WARNING, ...).")
    parser.add_argument("--no-progress", action="store_true", help="Hide the progress bar.")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Entrypoint for running the compiler from the command line."""
    args = build_parser().parse_args(argv)

    # CLI > settings.json
    for dest, key_path in CONFIG_OVERRIDES.items():
        value = getattr(args, dest)
        if value is not None:
            config_manager.set_nested(key_path, value)

    configure_logger(config_manager.get_nested("debug.level", "INFO"))

    view_dir = config_manager.get_nested("paths.input_dir", "views")
    out_file = config_manager.get_nested("paths.output_file", "gen/views.ts")
    suffix = config_manager.get_nested("output.stylesheet_suffix", STYLESHEET_SUFFIX)

    try:
        language = Language.from_name(config_manager.get_nested("generator.language", "ts"))
        controller = GenerateController(OutputManager(stylesheet_suffix=suffix))
        stats = controller.generate(
            view_dir=view_dir,
            out_file=out_file,
            language=language,
            options=config_manager.generator_options(),
            force_debug_ids=bool(config_manager.get_nested("generator.force_debug_ids", False)),
            show_progress=not args.no_progress,
        )
    except TomatoError as e:
        logger.error("Generation failed: %s", e.format())
        print(f"❌ Error: {e.format()}")
        return 1

    if stats["written"]:
        print(
            f"✅ Generated {stats['views_generated']} views into {stats['output_file']} "
            f"and {stats['stylesheet_file']} in {stats['duration_s']}s."
        )
    else:
        print(f"✅ {stats['output_file']} is up to date ({stats['views_generated']} views).")
    return 0


if __name__ == "__main__":
    sys.exit(main())
