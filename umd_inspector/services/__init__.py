"""Service layer: log scanning, completeness checks and submission building."""

from .artifacts import collect_artifacts, encode_artifact
from .aux_info import AuxInfoExtractor, get_umd_aux_info
from .categories import UMD_TYPE_TO_CATEGORY, lookup_category
from .checksums import compute_image_hashes
from .completeness import CompletenessChecker, check_all_output_files_exist
from .config import ConfigurationService, ValidationResult
from .errors import (
    AppError,
    ConfigurationError,
    ErrorCategory,
    ErrorHandlingService,
    ErrorSeverity,
    FileSystemError,
    LogParseError,
    UserFriendlyError,
    ValidationError,
    get_error_service,
    handle_error,
)
from .output_files import ARTIFACT_SUFFIXES, OutputFiles
from .submission import (
    UmdImageCreatorOutput,
    build_fragment,
    merge_fragment,
    populate,
)
from .volume_descriptor import VolumeDescriptorExtractor, get_pvd

__all__ = [
    "ARTIFACT_SUFFIXES",
    "AppError",
    "AuxInfoExtractor",
    "CompletenessChecker",
    "ConfigurationError",
    "ConfigurationService",
    "ErrorCategory",
    "ErrorHandlingService",
    "ErrorSeverity",
    "FileSystemError",
    "LogParseError",
    "OutputFiles",
    "UMD_TYPE_TO_CATEGORY",
    "UmdImageCreatorOutput",
    "UserFriendlyError",
    "ValidationError",
    "ValidationResult",
    "VolumeDescriptorExtractor",
    "build_fragment",
    "check_all_output_files_exist",
    "collect_artifacts",
    "compute_image_hashes",
    "encode_artifact",
    "get_error_service",
    "get_pvd",
    "get_umd_aux_info",
    "handle_error",
    "lookup_category",
    "merge_fragment",
    "populate",
]
