"""Build output types and toolchain specific output file affixes."""
from __future__ import annotations

import dataclasses
import logging
from dataclasses import dataclass, field
from typing import Tuple

from constants import Constants, GRAMMAR, OutputTypeNames

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class OutputType:
    """Whether an output is generated and under which file name."""
    on: bool = False
    filename: str = ""


@dataclass(frozen=True)
class OutputTypes:
    """Output types selectable for a build context."""
    bin: OutputType = field(default_factory=OutputType)
    elf: OutputType = field(default_factory=OutputType)
    hex: OutputType = field(default_factory=OutputType)
    lib: OutputType = field(default_factory=OutputType)
    cmse: OutputType = field(default_factory=OutputType)


_OUTPUT_FIELDS = {
    OutputTypeNames.BIN.value: "bin",
    OutputTypeNames.ELF.value: "elf",
    OutputTypeNames.HEX.value: "hex",
    OutputTypeNames.LIB.value: "lib",
    OutputTypeNames.CMSE.value: "cmse",
}


def set_output_type(type_string: str, types: OutputTypes) -> OutputTypes:
    """Return ``types`` with the output named by ``type_string`` switched on.

    Unknown type strings leave the selection unchanged.
    """
    attr = _OUTPUT_FIELDS.get(type_string)
    if attr is None:
        logger.debug("Ignoring unknown output type '%s'", type_string)
        return types
    current = getattr(types, attr)
    return dataclasses.replace(types, **{attr: dataclasses.replace(current, on=True)})


def get_output_affixes(compiler: str) -> Tuple[str, str, str]:
    """Return ``(elf_suffix, lib_prefix, lib_suffix)`` for a compiler id.

    The version clause of the compiler id is ignored.
    """
    name = compiler.partition(GRAMMAR.prefix_cversion)[0]
    return Constants.TOOLCHAIN_AFFIXES.get(
        name,
        (Constants.DEFAULT_ELF_SUFFIX, Constants.DEFAULT_LIB_PREFIX, Constants.DEFAULT_LIB_SUFFIX),
    )
