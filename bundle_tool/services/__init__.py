# bundle_tool/services/__init__.py
"""Business logic services for bundle-tool"""

from .size_reporter import (
    AssetSize,
    measure_file_sizes_before_build,
    print_file_sizes_after_build,
    remove_file_name_hash,
)
from .deployment_advisor import DeploymentAdvice, advise, print_advice
from .build_service import BuildService, BuildReport

__all__ = [
    "AssetSize",
    "measure_file_sizes_before_build",
    "print_file_sizes_after_build",
    "remove_file_name_hash",
    "DeploymentAdvice",
    "advise",
    "print_advice",
    "BuildService",
    "BuildReport",
]
