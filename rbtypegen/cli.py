"""Command line interface for generating the Ruby types of an SDK"""

import argparse
import logging
import time
from pathlib import Path
from typing import Optional, Sequence

from .errors import RbTypeGenError
from .loader import ModelLoader
from .names import RubyNames
from .types_generator import TypesGenerator

logger = logging.getLogger(__name__)


def setup_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Generate Ruby SDK types from a model description")
    parser.add_argument("model_file", help="Path to the JSON model description")
    parser.add_argument("--output-dir", "-o", default="generated", help="Output directory")
    parser.add_argument("--module", "-m", default="Sdk", help="Ruby module of the SDK, may contain '::'")
    parser.add_argument("--module-path", default="", help="Directory of the module (derived from --module)")
    parser.add_argument("--base-class", default="Struct", help="Class extended by structs without a base")
    parser.add_argument(
        "--require",
        dest="requires",
        action="append",
        default=[],
        help="Extra file to require from the generated source (repeatable)",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Log debug messages")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    start_time = time.perf_counter()

    parser = setup_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    names = RubyNames(
        module_name=args.module,
        module_path=args.module_path or None,
        base_struct_name=args.base_class,
    )
    try:
        model = ModelLoader(Path(args.model_file).read_text(encoding="utf-8")).load()
        path = TypesGenerator(model, names, args.requires).generate(args.output_dir)
    except OSError as exception:
        logger.error("Can't read model file %s: %s", args.model_file, exception)
        return 1
    except RbTypeGenError as exception:
        logger.error("%s", exception, exc_info=args.verbose)
        return 1

    print(f"Generated: {path}")
    elapsed = time.perf_counter() - start_time
    print(f"Generation completed in {elapsed*1000:.2f} ms")
    return 0
