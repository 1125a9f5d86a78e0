"""Configuration management for deploydoc."""

import tomllib
from pathlib import Path

import tomli_w
from pydantic import BaseModel, Field

from .constants import CONFIG_FILE_NAME


class ExecutionConfig(BaseModel):
    """Configuration for running step commands."""

    shell: str = Field(default="sh", description="Shell used to run each step")
    working_dir: Path | None = Field(
        default=None, description="Working directory for steps (default: current directory)"
    )
    show_commands: bool = Field(default=True, description="Log each step's commands")
    output_to_stderr: bool = Field(
        default=False, description="Send step stdout to stderr (set by --json)"
    )


class DeployDocConfig(BaseModel):
    """Root configuration for deploydoc."""

    execution: ExecutionConfig = Field(default_factory=ExecutionConfig)


def load_config(path: Path) -> DeployDocConfig:
    """Load config from a deploydoc.toml file.

    A relative ``working_dir`` is resolved against the config file's directory.

    Args:
        path: Path to the config file

    Returns:
        Loaded configuration, or defaults if the file doesn't exist
    """
    if not path.exists():
        return DeployDocConfig()
    with open(path, "rb") as f:
        data = tomllib.load(f)
    config = DeployDocConfig.model_validate(data)

    working_dir = config.execution.working_dir
    if working_dir is not None and not working_dir.is_absolute():
        config.execution.working_dir = (path.parent / working_dir).resolve()
    return config


def write_config_template(directory: Path) -> Path:
    """Write default deploydoc.toml template.

    Args:
        directory: Directory to write the config file into

    Returns:
        Path to the written config file
    """
    config_path = directory / CONFIG_FILE_NAME
    template = {
        "execution": {
            "shell": "sh",
            "working_dir": ".",
            "show_commands": True,
        },
    }
    with open(config_path, "wb") as f:
        tomli_w.dump(template, f)
    return config_path
