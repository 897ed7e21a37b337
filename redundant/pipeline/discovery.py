"""
Input directory handling and source discovery.

Every check returns a problem value instead of raising, so the run can stop
at the first bad entry and report it:

    problem = ensure_input_dir(path, extensions)
    entries, problem = list_entries(path, extensions)
    source, problem = open_source(entry, input_dir=path, extensions=extensions)

Entries are visited in directory-listing order (not sorted).
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

from redundant.loaders import infer_doc_type_from_path, load_lines_by_type

logger = logging.getLogger(__name__)


# ------------------------------
# Problems
# ------------------------------

ENVIRONMENT = "environment"
SOURCE = "source"
OUTPUT = "output"


@dataclass(frozen=True)
class RunProblem:
    """Why a run stopped, and what the user should do about it."""
    kind: str
    message: str
    remedy: str = ""

    def describe(self) -> str:
        return f"{self.message}\n{self.remedy}" if self.remedy else self.message


@dataclass
class Source:
    """One input document, already read into lines."""
    identifier: str
    path: Path
    doc_type: str
    lines: List[str] = field(default_factory=list)


def _dir_label(input_dir: Path) -> str:
    return f"{input_dir.as_posix().rstrip('/')}/"


def _ext_label(extensions: Sequence[str]) -> str:
    return " or ".join(extensions) if extensions else "txt"


def try_again_msg(input_dir: Path, extensions: Sequence[str]) -> str:
    return (
        "Please review this problem. Before trying again, make sure "
        f"{_dir_label(input_dir)} is a valid directory and your files are in "
        f"{_ext_label(extensions)} format."
    )


def usage_msg(input_dir: Path, extensions: Sequence[str]) -> str:
    exts = _ext_label(extensions)
    return (
        f"Before starting, save your plain text to the {_dir_label(input_dir)} directory. "
        f"Only {exts} files are accepted."
    )


# ------------------------------
# Input directory
# ------------------------------

def ensure_input_dir(input_dir: Path, extensions: Sequence[str]) -> Optional[RunProblem]:
    """
    None when input_dir is a usable directory. A missing directory is created
    (once) so the user has somewhere to put files, but the run still stops.
    """
    label = _dir_label(input_dir)
    if input_dir.exists():
        if input_dir.is_dir():
            return None
        return RunProblem(ENVIRONMENT, f"{label} is not a directory.", try_again_msg(input_dir, extensions))

    try:
        input_dir.mkdir()
    except OSError as e:
        logger.warning("could not create %s: %s", label, e)
        return RunProblem(
            ENVIRONMENT,
            f"Could not create the {label} directory:\n{e}\n"
            f"Please review this problem. Then, manually create the {label} directory.",
            usage_msg(input_dir, extensions),
        )
    logger.info("created missing input directory %s", label)
    return RunProblem(ENVIRONMENT, f"Created the {label} directory.", usage_msg(input_dir, extensions))


def list_entries(
    input_dir: Path,
    extensions: Sequence[str],
) -> Tuple[List[os.DirEntry], Optional[RunProblem]]:
    try:
        with os.scandir(input_dir) as it:
            return list(it), None
    except OSError as e:
        return [], RunProblem(
            ENVIRONMENT,
            f"Could not list the contents of {_dir_label(input_dir)}:\n{e}",
            try_again_msg(input_dir, extensions),
        )


# ------------------------------
# Sources
# ------------------------------

def source_identifier(file_name: str) -> str:
    """File name without its extension ("thread-12.txt" -> "thread-12")."""
    stem, dot, _ext = file_name.rpartition(".")
    return stem if dot else file_name


def open_source(
    entry: os.DirEntry,
    *,
    input_dir: Path,
    extensions: Sequence[str],
) -> Tuple[Optional[Source], Optional[RunProblem]]:
    """
    Classify one directory entry and read it.
    Returns (source, None) or (None, problem); the caller aborts on a problem.
    """
    name = entry.name
    label = f"{_dir_label(input_dir)}{name}"
    again = try_again_msg(input_dir, extensions)

    try:
        is_file = entry.is_file(follow_symlinks=False)
    except OSError as e:
        return None, RunProblem(SOURCE, f"Error when checking the type of {label}:\n{e}", again)
    if not is_file:
        return None, RunProblem(SOURCE, f"Error: {label} is not a regular file.", again)

    identifier = source_identifier(name)
    if not identifier:
        return None, RunProblem(
            SOURCE,
            f"Error: After removing the extension, file name {label} becomes too short.",
            again,
        )

    # Extensions match exactly: "A.TXT" is not a txt file.
    path = Path(entry.path)
    _stem, dot, ext = name.rpartition(".")
    if not dot or ext not in extensions:
        return None, RunProblem(SOURCE, f"Error: {label} is not a {_ext_label(extensions)} file.", again)

    doc_type = infer_doc_type_from_path(path)
    try:
        lines = load_lines_by_type(path, doc_type)
    except OSError as e:
        return None, RunProblem(SOURCE, f"Error opening {label}:\n{e}", again)

    logger.debug("opened %s (%s, %d lines)", label, doc_type, len(lines))
    return Source(identifier=identifier, path=path, doc_type=doc_type, lines=lines), None
