"""Harvest script templating.

A script template is an ordinary shell script with three placeholders:

    ${WORKING_DIRECTORY}     harvester install directory
    ${UPLOADS_FOLDER}        where this session's uploaded files are
    ${HARVESTED_DATA_PATH}   where this session's harvested RDF goes

Replacement is literal text substitution. Any other `${...}` is left alone so
the shell can expand it when the script runs.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Tuple

from .models import ScriptPaths
from .utils import PathLike

logger = logging.getLogger(__name__)


WORKING_DIRECTORY_TOKEN = "${WORKING_DIRECTORY}"
UPLOADS_FOLDER_TOKEN = "${UPLOADS_FOLDER}"
HARVESTED_DATA_PATH_TOKEN = "${HARVESTED_DATA_PATH}"


def _replacements(paths: ScriptPaths) -> List[Tuple[str, str]]:
    return [
        (WORKING_DIRECTORY_TOKEN, paths.working_directory),
        (UPLOADS_FOLDER_TOKEN, paths.uploads_folder),
        (HARVESTED_DATA_PATH_TOKEN, paths.harvested_data_path),
    ]


def read_script_template(path: PathLike, log: Optional[logging.Logger] = None) -> Optional[str]:
    """Read a script template as raw text, or return None if it can't be read."""
    log = log or logger
    try:
        # newline="" keeps \r\n and \r exactly as they are on disk.
        with open(path, "r", encoding="utf-8", newline="") as fh:
            return fh.read()
    except (OSError, UnicodeDecodeError) as exc:
        log.exception("Could not read script template %s: %s", path, exc)
        return None


def apply_substitutions(text: str, paths: ScriptPaths) -> str:
    """Replace every occurrence of the three known placeholders in `text`."""
    for token, value in _replacements(paths):
        text = text.replace(token, value)
    return text


def render_script(
    script_template_path: PathLike,
    paths: ScriptPaths,
    log: Optional[logging.Logger] = None,
) -> Optional[str]:
    """Read a script template and fill in its placeholders.

    Returns None when the template can't be read; callers treat that as
    "template unavailable".
    """
    contents = read_script_template(script_template_path, log=log)
    if contents is None:
        return None
    return apply_substitutions(contents, paths)
