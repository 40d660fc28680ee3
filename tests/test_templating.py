"""
Tests for script template rendering.
"""

import logging

from harvest_engine.models import ScriptPaths
from harvest_engine.templating import apply_substitutions, read_script_template, render_script


PATHS = ScriptPaths(
    working_directory="/opt/harvester/",
    uploads_folder="/data/uploads/abc123/",
    harvested_data_path="/data/harvested-data/csv/abc123/",
)


def test_all_tokens_replaced_and_text_preserved(write_file):
    template = write_file(
        "CSVtoRDFgrant.sh",
        "#!/bin/bash\r\n"
        "cd ${WORKING_DIRECTORY}\r\n"
        "IN=${UPLOADS_FOLDER}\n"
        "OUT=${HARVESTED_DATA_PATH}additions.rdf.xml # again: ${UPLOADS_FOLDER}\n",
    )

    script = render_script(template, PATHS)

    assert script == (
        "#!/bin/bash\r\n"
        "cd /opt/harvester/\r\n"
        "IN=/data/uploads/abc123/\n"
        "OUT=/data/harvested-data/csv/abc123/additions.rdf.xml # again: /data/uploads/abc123/\n"
    )
    for token in ("${WORKING_DIRECTORY}", "${UPLOADS_FOLDER}", "${HARVESTED_DATA_PATH}"):
        assert token not in script


def test_template_without_tokens_is_unchanged(write_file):
    text = "#!/bin/sh\necho hello\r\n\tdone\n"
    template = write_file("plain.sh", text)
    assert render_script(template, PATHS) == text


def test_unknown_tokens_left_verbatim():
    text = "echo ${HOME} ${WORKING_DIRECTORY} ${working_directory}"
    assert apply_substitutions(text, PATHS) == "echo ${HOME} /opt/harvester/ ${working_directory}"


def test_missing_template_returns_none_and_logs(tmp_path, caplog):
    with caplog.at_level(logging.ERROR, logger="harvest_engine"):
        assert render_script(tmp_path / "missing.sh", PATHS) is None
    assert "missing.sh" in caplog.text


def test_read_script_template_reads_whole_file(write_file):
    template = write_file("s.sh", "line one\nline two")
    assert read_script_template(template) == "line one\nline two"


def test_undecodable_template_returns_none_and_logs(tmp_path, caplog):
    template = tmp_path / "broken.sh"
    template.write_bytes(b"#!/bin/sh\necho \xff\xfe ${WORKING_DIRECTORY}\n")

    with caplog.at_level(logging.ERROR, logger="harvest_engine"):
        assert render_script(template, PATHS) is None

    assert "broken.sh" in caplog.text
    assert any(r.levelno == logging.ERROR for r in caplog.records)
