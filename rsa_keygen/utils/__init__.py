"""Utility modules for key generation."""

from .SystemSpecs import SystemSpecs
from .EnvironmentManager import EnvironmentManager, EnvironmentVariables
from .Validator import Validator

__all__ = ["SystemSpecs", "EnvironmentManager", "EnvironmentVariables", "Validator"]
