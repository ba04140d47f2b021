"""Failures that stop a migration run.

Anything raised from here ends the run with a non-zero exit. Problems with a
single province never surface as these; the pipeline logs them and moves on.
"""


class PipelineError(Exception):
    """Base class; ``error_code`` is what ends up in the run log."""

    error_code = "PIPELINE_ERROR"


class ConfigError(PipelineError):
    """Bundled or overlay YAML is missing, malformed or has duplicate codes."""

    error_code = "CONFIG_ERROR"


class ContractError(PipelineError):
    """The directory returned a payload or province list we cannot code."""

    error_code = "CONTRACT_ERROR"


class StageError(PipelineError):
    """The province list could not be fetched or the index could not be written."""

    error_code = "STAGE_ERROR"
