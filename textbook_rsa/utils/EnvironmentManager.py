"""Typed access to the environment variables that configure key generation."""

import logging
import os
from enum import Enum
from typing import Any, Optional, cast

from ..protocol_constants import PRIME_BIT_SIZE, PRIMALITY_TEST_ROUNDS

logger = logging.getLogger(__name__)


class EnvVarType(Enum):
    """Types of environment variables."""
    INT = "int"
    STRING = "str"


class EnvironmentVariables(Enum):
    """
    Enum of known environment variables used by the key generator and the demo.

    Each enum value is a tuple of (env_var_name, default_value, type).
    """
    PRIME_BIT_SIZE = ("PRIME_BIT_SIZE", PRIME_BIT_SIZE, EnvVarType.INT)
    PRIMALITY_TEST_ROUNDS = ("PRIMALITY_TEST_ROUNDS", PRIMALITY_TEST_ROUNDS, EnvVarType.INT)
    TRACE_LEVEL = ("TRACE_LEVEL", "summary", EnvVarType.STRING)
    RANDOM_SEED = ("RANDOM_SEED", None, EnvVarType.INT)
    PARALLELISM_DIVISOR = ("PARALLELISM_DIVISOR", 2, EnvVarType.INT)

    def __init__(self, env_name: str, default_value: Any, var_type: EnvVarType):
        self.env_name = env_name
        self.default_value = default_value
        self.var_type = var_type


class EnvironmentManager:
    """Static utility class for environment variable management."""

    @staticmethod
    def get_value(env_var: EnvironmentVariables, override_default: Any = None) -> Any:
        """
        Get a value from an environment variable with appropriate type conversion.

        Args:
            env_var: The environment variable to retrieve
            override_default: Optional value to override the default defined in the enum

        Returns:
            The value of the environment variable or the default with appropriate type
        """
        default = override_default if override_default is not None else env_var.default_value

        value = os.environ.get(env_var.env_name)
        if value is None or value == "":
            return default

        if env_var.var_type == EnvVarType.INT:
            try:
                return int(value)
            except ValueError:
                logger.warning(
                    "Ignoring %s=%r: not an integer, using %r",
                    env_var.env_name, value, default,
                )
                return default
        return value

    @staticmethod
    def get_int(env_var: EnvironmentVariables, default=None) -> int:
        """
        Get an integer value from an environment variable.

        Args:
            env_var: The environment variable to retrieve
            default: Optional value to override the default defined in the enum

        Returns:
            int: The value of the environment variable or the default
        """
        return cast(int, EnvironmentManager.get_value(env_var, default))

    @staticmethod
    def get_optional_int(env_var: EnvironmentVariables) -> Optional[int]:
        """Like get_int, but keeps a missing value as None instead of a default."""
        return cast(Optional[int], EnvironmentManager.get_value(env_var))

    @staticmethod
    def get_string(env_var: EnvironmentVariables, default=None) -> str:
        """
        Get a string value from an environment variable.

        Args:
            env_var: The environment variable to retrieve
            default: Optional value to override the default defined in the enum

        Returns:
            str: The value of the environment variable or the default
        """
        return cast(str, EnvironmentManager.get_value(env_var, default))
