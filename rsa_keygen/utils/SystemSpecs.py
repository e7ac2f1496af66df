"""Utility class for system specifications and resource management."""

import multiprocessing
from .EnvironmentManager import EnvironmentManager, EnvironmentVariables


class SystemSpecs:
    """Utility class for determining system specifications and resource allocation."""

    @staticmethod
    def get_num_parallel_processes() -> int:
        """
        Calculate the number of worker processes available for key generation.

        Returns the number of CPU cores divided by the PARALLELISM_DIVISOR
        environment variable (default 2), with a minimum of 1.

        Returns:
            int: Number of parallel processes to use
        """
        parallelism_divisor = max(
            EnvironmentManager.get_int(EnvironmentVariables.PARALLELISM_DIVISOR), 1
        )
        return multiprocessing.cpu_count() // parallelism_divisor or 1

    @staticmethod
    def get_num_workers(task_count: int) -> int:
        """Size a pool for task_count independent tasks without idle workers."""
        return max(min(task_count, SystemSpecs.get_num_parallel_processes()), 1)
