"""CSV file harvest job.

A `CsvFileHarvestJob` is created per request. It takes a catalog `JobType`,
the requesting session's id and the configured roots, resolves every path it
will need once, and then:
- validates uploads against the job type's CSV template, and
- renders the job type's script template with this session's directories.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

from ..catalog import lookup_job_type
from ..config import HarvestSettings
from ..models import JobType, ScriptPaths
from ..templating import render_script
from ..utils import PathLike, dir_string
from ..validation import validate_upload
from .base import FileHarvestJob

logger = logging.getLogger(__name__)


ADDITIONS_FILE_NAME = "additions.rdf.xml"

TEMPLATE_DOWNLOAD_HELP = "Click here to download a template file to assist you with harvesting the data."

TEMPLATE_FILL_IN_HELP = (
    "<p>A CSV, or <b>C</b>omma-<b>S</b>eparated <b>V</b>alues file, is a method of storing tabular data "
    "in plain text.  The first line of a CSV file contains header information, while each subsequent "
    "line contains a data record.</p>\n"
    "<p>The template we provide contains only the header, which you will then fill in accordingly.  "
    "For example, if the template contains the text \"firstName,lastName\", then you might add two "
    "more lines, \"John,Doe\" and \"Jane,Public\".</p>\n"
)


class CsvFileHarvestJob(FileHarvestJob):
    """Harvest of one CSV job type for one session."""

    def __init__(
        self,
        job_type: JobType,
        session_id: str,
        settings: HarvestSettings,
        namespace: Optional[str] = None,
    ) -> None:
        session_id = (session_id or "").strip()
        if not session_id:
            raise ValueError("session_id is required to build a harvest job")
        if "/" in session_id or "\\" in session_id or ".." in session_id:
            raise ValueError(f"session_id must not contain path separators or '..': {session_id!r}")

        self._job_type = job_type
        self._session_id = session_id
        self._settings = settings
        self._namespace = namespace

        self._template_file_path = Path(settings.template_root, job_type.template_file_name).as_posix()
        self._script_file_path = Path(settings.script_root, job_type.script_file_name).as_posix()
        self._harvested_data_path = dir_string(settings.output_root, session_id)
        self._uploads_path = dir_string(settings.uploads_root, session_id)

    @property
    def job_type(self) -> JobType:
        return self._job_type

    @property
    def session_id(self) -> str:
        return self._session_id

    @property
    def namespace(self) -> Optional[str]:
        return self._namespace

    @property
    def template_file_path(self) -> str:
        return self._template_file_path

    @property
    def script_file_path(self) -> str:
        return self._script_file_path

    @property
    def harvested_data_path(self) -> str:
        return self._harvested_data_path

    @property
    def uploads_path(self) -> str:
        return self._uploads_path

    @property
    def additions_file_path(self) -> str:
        return self._harvested_data_path + ADDITIONS_FILE_NAME

    @property
    def page_header(self) -> str:
        return f"Harvest {self._job_type.friendly_name} data from CSV file(s)"

    @property
    def link_header(self) -> str:
        return self._job_type.link_header

    @property
    def rdf_types_for_links(self) -> List[str]:
        # Fresh list each call; callers may modify it.
        return list(self._job_type.rdf_types_for_links)

    @property
    def template_download_help(self) -> str:
        return TEMPLATE_DOWNLOAD_HELP

    @property
    def template_fill_in_help(self) -> str:
        return TEMPLATE_FILL_IN_HELP

    @property
    def no_new_data_message(self) -> str:
        return self._job_type.no_new_data_message

    def script_paths(self) -> ScriptPaths:
        """Values substituted into this job's script template."""
        return ScriptPaths(
            working_directory=self._settings.working_directory,
            uploads_folder=self._uploads_path,
            harvested_data_path=self._harvested_data_path,
        )

    def validate_upload(self, path: PathLike) -> Optional[str]:
        """Validate an uploaded CSV against this job type's template."""
        return validate_upload(path, self._template_file_path)

    def get_script(self) -> Optional[str]:
        """Render this job type's script template for this session."""
        script = render_script(self._script_file_path, self.script_paths())
        if script is None:
            logger.warning("Script template unavailable for job %s: %s", self._job_type.key, self._script_file_path)
        return script


def job_for_key(
    key: Optional[str],
    session_id: str,
    settings: HarvestSettings,
    namespace: Optional[str] = None,
) -> Optional[CsvFileHarvestJob]:
    """Build a harvest job from an external job key, or return None if unknown."""
    job_type = lookup_job_type(key)
    if job_type is None:
        return None
    return CsvFileHarvestJob(job_type, session_id, settings, namespace=namespace)
