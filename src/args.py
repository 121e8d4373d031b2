"""Argument parsing functionality for projgrammar."""

import argparse

from identifiers.models import DEFAULT_CONDITION_TAG


def _add_common_options(parser):
    parser.add_argument("--loglevel",
                        dest="LOG_LEVEL",
                        help="Set the logging level",
                        action="store",
                        type=str.upper,
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'])
    parser.add_argument("--logfile",
                        dest="LOG_FILE",
                        help="Log output file",
                        action="store",
                        type=str)
    parser.add_argument("-q", "--quiet",
                        dest="QUIET",
                        help="Do not output log records to console.",
                        action="store_true")
    parser.add_argument("-c", "--config",
                        dest="CONFIG",
                        help="Path to configuration file (YAML)",
                        action="store",
                        type=str)
    parser.add_argument("--set",
                        dest="CONFIG_SET",
                        help="Set configuration override (KEY=VALUE format, can be used multiple times)",
                        action="append",
                        type=str,
                        default=[])
    parser.add_argument("--error-on-warnings",
                        dest="ERROR_ON_WARNINGS",
                        help="Exit with a non-zero status code when a result is empty or unrepresentable.",
                        action="store_true")


def _add_component_fields(parser, with_variant=True):
    parser.add_argument("--vendor", dest="VENDOR", default="", help="Component vendor (Cvendor)")
    parser.add_argument("--class", dest="CCLASS", default="", help="Component class (Cclass)")
    parser.add_argument("--bundle", dest="BUNDLE", default="", help="Component bundle (Cbundle)")
    parser.add_argument("--group", dest="GROUP", default="", help="Component group (Cgroup)")
    parser.add_argument("--sub", dest="SUB", default="", help="Component sub group (Csub)")
    if with_variant:
        parser.add_argument("--variant", dest="VARIANT", default="", help="Component variant (Cvariant)")
        parser.add_argument("--version", dest="VERSION", default="", help="Component version (Cversion)")


def parse_args(argv=None):
    """Parses the arguments passed to the program."""
    parser = argparse.ArgumentParser(
        prog="projgrammar",
        description=(
            "projgrammar - component, compiler and context string grammars"
        ),
        add_help=True,
    )
    _add_common_options(parser)
    sub = parser.add_subparsers(dest="command", metavar="COMMAND")
    sub.required = True

    p = sub.add_parser("component-id", help="Build a component identifier")
    _add_component_fields(p)
    p.add_argument("--flavor",
                   dest="FLAVOR",
                   help="Identifier flavor (default: full)",
                   choices=["full", "aggregate", "partial", "condition"],
                   default="full")
    p.add_argument("--tag", dest="TAG", default=DEFAULT_CONDITION_TAG, help="Condition expression tag (condition flavor)")

    p = sub.add_parser("decompose", help="Split a component identifier into attributes")
    p.add_argument("component_id", help="Component identifier, e.g. ARM::CMSIS:CORE@5.6.0")

    p = sub.add_parser("package-id", help="Build a pack identifier")
    p.add_argument("--vendor", dest="VENDOR", default="", help="Pack vendor")
    p.add_argument("--name", dest="NAME", default="", help="Pack name")
    p.add_argument("--version", dest="VERSION", default="", help="Pack version")

    p = sub.add_parser("compiler-compatible", help="Check whether two compiler ids are compatible")
    p.add_argument("first", help="Compiler id, e.g. GCC@>=10.3.1")
    p.add_argument("second", help="Compiler id, e.g. GCC@12.2.0")

    p = sub.add_parser("compiler-intersect", help="Intersect two compiler ids")
    p.add_argument("first", help="Compiler id")
    p.add_argument("second", help="Compiler id")

    p = sub.add_parser("context", help="Parse a context entry <project>.<build-type>+<target-type>")
    p.add_argument("entry", help="Context entry")

    p = sub.add_parser("affixes", help="Show toolchain output file affixes")
    p.add_argument("compiler", help="Compiler id, e.g. AC6@6.18.0")

    return parser.parse_args(argv)
