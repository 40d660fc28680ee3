"""Path configuration for harvest jobs.

All filesystem locations the engine needs come from one explicit settings
object instead of global lookups. Only two roots are configured; the rest are
fixed subpaths under them:

- template files:   <harvester_root>/files/
- script templates: <harvester_root>/scripts/
- harvested output: <file_harvest_root>/harvested-data/csv/
- uploads:          <file_harvest_root>/uploads/

`HarvestSettings.from_env()` reads the roots from the environment, loading a
local `.env` first when present.
"""

from __future__ import annotations

import os
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, field_validator

from .utils import dir_string


TEMPLATE_FILES_SUBPATH = "files"
HARVESTER_SCRIPTS_SUBPATH = "scripts"
HARVESTED_DATA_SUBPATH = "harvested-data/csv"
UPLOADS_SUBPATH = "uploads"


class HarvestSettings(BaseModel):
    """Configured roots for template, script, upload and output locations."""

    model_config = ConfigDict(frozen=True)

    harvester_root: str
    file_harvest_root: str

    @field_validator("harvester_root", "file_harvest_root")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("must be a non-empty path")
        return value

    @property
    def working_directory(self) -> str:
        return dir_string(self.harvester_root)

    @property
    def template_root(self) -> str:
        return dir_string(self.harvester_root, TEMPLATE_FILES_SUBPATH)

    @property
    def script_root(self) -> str:
        return dir_string(self.harvester_root, HARVESTER_SCRIPTS_SUBPATH)

    @property
    def output_root(self) -> str:
        return dir_string(self.file_harvest_root, HARVESTED_DATA_SUBPATH)

    @property
    def uploads_root(self) -> str:
        return dir_string(self.file_harvest_root, UPLOADS_SUBPATH)

    @classmethod
    def from_env(cls, dotenv_path: Optional[str] = None) -> "HarvestSettings":
        """Load settings from environment variables.

        Environment variables:
          - HARVESTER_ROOT (required): harvester install directory.
          - FILE_HARVEST_ROOT (optional): root for uploads and harvested data.
            Defaults to HARVESTER_ROOT.

        Raises:
            ValueError: If HARVESTER_ROOT is missing or empty.
        """
        load_dotenv(dotenv_path=dotenv_path)

        harvester_root = os.getenv("HARVESTER_ROOT", "").strip()
        if not harvester_root:
            raise ValueError(
                "HARVESTER_ROOT is required but not set. "
                "Please set it in your .env file or environment variables."
            )
        file_harvest_root = os.getenv("FILE_HARVEST_ROOT", "").strip() or harvester_root

        return cls(harvester_root=harvester_root, file_harvest_root=file_harvest_root)
