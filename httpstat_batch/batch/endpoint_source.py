"""Resolves the list of endpoints to probe."""
import logging
from pathlib import Path
from typing import List, Optional, Union

from .constants import BatchConstants
from .exceptions import EndpointsFileNotFoundError, NoEndpointsError


# Configure logging
logger = logging.getLogger(__name__)


class EndpointSource:
    """Resolves endpoints from a single URL, an endpoints file, or a generated sample file."""

    def __init__(self, sample_file: Union[Path, str] = "endpoints.txt"):
        self.sample_file = Path(sample_file)

    def resolve(self, endpoints_file: Optional[Union[Path, str]] = None,
                single_endpoint: Optional[str] = None) -> List[str]:
        """
        Determine the endpoints to test.

        Args:
            endpoints_file: File with one endpoint per line.
            single_endpoint: A single endpoint; takes precedence over the file.

        Returns:
            Ordered list of endpoints.

        Raises:
            EndpointsFileNotFoundError: If endpoints_file does not exist.
            NoEndpointsError: If no endpoints remain after filtering.
        """
        if single_endpoint:
            endpoints = [single_endpoint]
        elif endpoints_file:
            path = Path(endpoints_file)
            if not path.is_file():
                raise EndpointsFileNotFoundError(f"Endpoints file '{path}' not found")
            endpoints = self.read_endpoints_file(path)
        else:
            logger.warning(f"No endpoints specified, creating sample {self.sample_file}")
            endpoints = self.read_endpoints_file(self.create_sample_endpoints())

        if not endpoints:
            raise NoEndpointsError("No valid endpoints found")
        return endpoints

    @staticmethod
    def read_endpoints_file(path: Union[Path, str]) -> List[str]:
        """
        Read endpoints from a file, skipping blank lines and comments.

        Args:
            path: Path to the endpoints file.

        Returns:
            Endpoints in file order.
        """
        endpoints = []
        with open(path, 'r', encoding='utf-8') as f:
            for line in f:
                line = line.strip()
                if not line or line.startswith(BatchConstants.COMMENT_PREFIX):
                    continue
                endpoints.append(line)
        logger.debug(f"Read {len(endpoints)} endpoints from {path}")
        return endpoints

    def create_sample_endpoints(self) -> Path:
        """Write the sample endpoints file and return its path."""
        self.sample_file.write_text("\n".join(BatchConstants.SAMPLE_ENDPOINTS) + "\n", encoding='utf-8')
        return self.sample_file
