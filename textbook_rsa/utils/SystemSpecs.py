"""Utility class for system specifications and resource management."""

import multiprocessing
from .EnvironmentManager import EnvironmentManager, EnvironmentVariables


class SystemSpecs:
    """Utility class for determining how many worker processes key generation may use."""

    @staticmethod
    def get_num_parallel_processes() -> int:
        """
        Calculate the number of parallel processes to use for batch key generation.

        Returns the number of CPU cores divided by the PARALLELISM_DIVISOR
        environment variable (default 2), with a minimum of 1.

        Returns:
            int: Number of parallel processes to use
        """
        parallelism_divisor = EnvironmentManager.get_int(
            EnvironmentVariables.PARALLELISM_DIVISOR
        )
        if parallelism_divisor <= 0:
            parallelism_divisor = 1
        return multiprocessing.cpu_count() // parallelism_divisor or 1  # default to 1 if only 1 core available
