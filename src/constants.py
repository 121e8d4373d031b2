"""Constants used in the project."""

import os
from dataclasses import dataclass
from enum import Enum


class ExitCodes(Enum):
    """Exit codes for the program.

    Args:
        Enum (int): Exit codes for the program.
    """

    SUCCESS = 0
    FILE_ERROR = 1
    USAGE_ERROR = 2
    EXIT_WARNINGS = 3


class OutputTypeNames(Enum):
    """Build output types that can be switched on for a context.

    Args:
        Enum (string): Output type keyword as written in project files.
    """

    BIN = "bin"
    ELF = "elf"
    HEX = "hex"
    LIB = "lib"
    CMSE = "cmse-lib"


class AccessSequence(Enum):
    """Access sequence names that may be expanded in project files.

    Args:
        Enum (string): Access sequence keyword.
    """

    SOLUTION = "Solution"
    PROJECT = "Project"
    COMPILER = "Compiler"
    BUILD_TYPE = "BuildType"
    TARGET_TYPE = "TargetType"
    DNAME = "Dname"
    PNAME = "Pname"
    BNAME = "Bname"
    SOLUTION_DIR = "SolutionDir"
    PROJECT_DIR = "ProjectDir"
    OUT_DIR = "OutDir"
    BIN = OutputTypeNames.BIN.value
    ELF = OutputTypeNames.ELF.value
    HEX = OutputTypeNames.HEX.value
    LIB = OutputTypeNames.LIB.value
    CMSE = OutputTypeNames.CMSE.value


@dataclass(frozen=True)
class Grammar:
    """Delimiters shared by the identifier codec, compiler ids and context entries."""

    suffix_cvendor: str = "::"
    prefix_cbundle: str = "&"
    prefix_cgroup: str = ":"
    prefix_csub: str = ":"
    prefix_cvariant: str = "&"
    prefix_cversion: str = "@"
    suffix_pack_vendor: str = "::"
    prefix_pack_version: str = "@"
    segment_separator: str = ":"
    min_version_marker: str = ">="
    any_version: str = "0.0.0"
    build_type_separator: str = "."
    target_type_separator: str = "+"


GRAMMAR = Grammar()


class Constants:  # pylint: disable=too-few-public-methods
    """General constants used in the project.
    Data holder for configuration constants; not intended to provide behavior.
    """

    LOG_FORMAT = "[%(levelname)s] %(message)s"
    ENV_LOG_LEVEL = "PROJGRAMMAR_LOG_LEVEL"
    DEFAULT_LOG_LEVEL = "INFO"
    CONFIG_FILE_NAMES = ["projgrammar.yml", "projgrammar.yaml"]
    USER_CONFIG_DIR = os.path.join("~", ".config", "projgrammar")

    DEFAULT_ELF_SUFFIX = ".elf"
    DEFAULT_LIB_PREFIX = ""
    DEFAULT_LIB_SUFFIX = ".a"

    # compiler name -> (elf suffix, lib prefix, lib suffix)
    TOOLCHAIN_AFFIXES = {
        "AC6": (".axf", "", ".lib"),
        "GCC": (".elf", "lib", ".a"),
        "IAR": (".out", "", ".a"),
    }
