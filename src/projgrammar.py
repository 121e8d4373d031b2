"""projgrammar - build-configuration string grammars.

Command-line front end for the identifier codec, the compiler version range
engine and the context entry parser. Results are printed as JSON.

    Returns:
        int: Exit code
"""
import json
import logging
import sys

from args import parse_args
from cli_config import (
    apply_set_overrides,
    apply_toolchain_overrides,
    configured_log_level,
    load_config,
)
from common.logging_utils import Timer, configure_logging, extra_context, is_debug_enabled
from constants import ExitCodes
from context import parse_context_entry
from identifiers import (
    ComponentDescriptor,
    decompose_component_id,
    format_package_id,
    get_component_aggregate_id,
    get_component_id,
    get_condition_id,
    get_partial_component_id,
)
from toolchain import (
    IntersectionOutcome,
    are_compilers_compatible,
    compilers_intersection,
    expand_compiler_id,
    get_output_affixes,
)

logger = logging.getLogger(__name__)

_ID_FLAVORS = {
    "full": get_component_id,
    "aggregate": get_component_aggregate_id,
    "partial": get_partial_component_id,
    "condition": get_condition_id,
}


def _component_id(args):
    component = ComponentDescriptor(
        vendor=args.VENDOR,
        cclass=args.CCLASS,
        bundle=args.BUNDLE,
        group=args.GROUP,
        sub=args.SUB,
        variant=args.VARIANT,
        version=args.VERSION,
        tag=args.TAG,
    )
    return {"id": _ID_FLAVORS[args.FLAVOR](component)}, True


def _decompose(args):
    attrs = decompose_component_id(args.component_id)
    return {
        "attributes": attrs.as_dict(),
        "variant_owner": attrs.variant_owner.value,
        "ambiguous_variant": attrs.ambiguous_variant,
    }, not attrs.ambiguous_variant


def _package_id(args):
    return {"id": format_package_id(args.VENDOR, args.NAME, args.VERSION)}, True


def _compiler_compatible(args):
    compatible = are_compilers_compatible(args.first, args.second)
    return {"compatible": compatible}, compatible


def _compiler_intersect(args):
    result = compilers_intersection(args.first, args.second)
    payload = {"outcome": result.outcome.value, "intersection": result.value}
    if result.outcome is IntersectionOutcome.UNREPRESENTABLE:
        payload["min_version"] = result.min_version
        payload["max_version"] = result.max_version
    return payload, bool(result)


def _context(args):
    ctx = parse_context_entry(args.entry)
    return {"project": ctx.project, "build_type": ctx.build_type, "target_type": ctx.target_type}, True


def _affixes(args):
    elf_suffix, lib_prefix, lib_suffix = get_output_affixes(args.compiler)
    spec = expand_compiler_id(args.compiler)
    return {
        "compiler": spec.name,
        "elf_suffix": elf_suffix,
        "lib_prefix": lib_prefix,
        "lib_suffix": lib_suffix,
    }, True


COMMANDS = {
    "component-id": _component_id,
    "decompose": _decompose,
    "package-id": _package_id,
    "compiler-compatible": _compiler_compatible,
    "compiler-intersect": _compiler_intersect,
    "context": _context,
    "affixes": _affixes,
}


def main(argv=None):
    """Main function of the program."""
    args = parse_args(argv)

    cfg = load_config(getattr(args, "CONFIG", None))
    try:
        cfg = apply_set_overrides(cfg, getattr(args, "CONFIG_SET", []))
    except ValueError as e:
        sys.stderr.write(f"ERROR: {e}\n")
        return ExitCodes.USAGE_ERROR.value

    level = getattr(args, "LOG_LEVEL", None) or configured_log_level(cfg)
    configure_logging(level=level, logfile=getattr(args, "LOG_FILE", None), quiet=getattr(args, "QUIET", False))
    apply_toolchain_overrides(cfg)

    with Timer() as t:
        payload, ok = COMMANDS[args.command](args)
    if is_debug_enabled(logger):
        logger.debug(
            "Command finished",
            extra=extra_context(
                event="function_exit",
                component="cli",
                action=args.command,
                outcome="ok" if ok else "warning",
                duration_ms=t.duration_ms(),
            ),
        )

    sys.stdout.write(json.dumps(payload, indent=2) + "\n")
    if not ok:
        logger.warning("%s produced no usable result", args.command)
        if args.ERROR_ON_WARNINGS:
            return ExitCodes.EXIT_WARNINGS.value
    return ExitCodes.SUCCESS.value


def cli():
    """Console script entry point."""
    sys.exit(main())


if __name__ == "__main__":
    cli()
