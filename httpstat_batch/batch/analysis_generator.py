"""Emits the standalone analysis script for a results file."""
import logging
import shutil
import stat
from importlib import resources
from pathlib import Path
from typing import Union

from ..const import DEFAULT_QUERY_COMMAND
from .constants import BatchConstants


# Configure logging
logger = logging.getLogger(__name__)


class AnalysisGenerator:
    """Writes a copy of the packaged analysis script next to a results file."""

    def __init__(self, query_command: str = DEFAULT_QUERY_COMMAND):
        self.query_command = query_command

    def jq_available(self) -> bool:
        """Whether the JSON query tool is on PATH right now."""
        return shutil.which(self.query_command) is not None

    @staticmethod
    def script_path_for(output_file: Union[Path, str]) -> Path:
        """
        Name the analysis script after the results file.

        ``results.json`` becomes ``analyze_results.sh`` in the same directory;
        a name without the ``.json`` suffix is used whole.
        """
        output_file = Path(output_file)
        base = output_file.name
        if base.endswith(BatchConstants.RESULTS_SUFFIX):
            base = base[:-len(BatchConstants.RESULTS_SUFFIX)]
        return output_file.with_name(
            f"{BatchConstants.ANALYSIS_SCRIPT_PREFIX}{base}{BatchConstants.ANALYSIS_SCRIPT_SUFFIX}"
        )

    @staticmethod
    def template_text() -> str:
        """Return the packaged analysis script."""
        template = resources.files(__package__).joinpath("templates").joinpath(BatchConstants.ANALYSIS_SCRIPT_TEMPLATE)
        return template.read_text(encoding='utf-8')

    def emit(self, output_file: Union[Path, str]) -> Path:
        """
        Write the analysis script for a results file and mark it executable.

        Args:
            output_file: Results file the script is named after.

        Returns:
            Path of the written script.
        """
        script_path = self.script_path_for(output_file)
        script_path.write_text(self.template_text(), encoding='utf-8')
        mode = script_path.stat().st_mode
        script_path.chmod(mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
        logger.info(f"Created analysis script: {script_path}")
        return script_path
