"""Configuration management for devbranch."""

import tomllib
from pathlib import Path

import tomli_w
from pydantic import BaseModel, Field, ValidationError

from .constants import CONFIG_FILENAME


class ConfigError(Exception):
    """Configuration file could not be loaded."""


class GitSettings(BaseModel):
    """Trunk and remote used to sync before branching."""

    trunk: str = "master"
    remote: str = "origin"


class PathsSettings(BaseModel):
    """Repository-relative paths touched by branch initialization."""

    stale_dir: str = Field(
        default="production", description="Directory removed from new dev branches"
    )
    workflow_file: str = Field(
        default=".github/workflows/pcb.yml",
        description="Workflow file holding the build-variant marker",
    )
    commit_template: str = Field(
        default=".github/.commit-msg-template",
        description="Template providing the Signed-off-by line",
    )


class MarkerSettings(BaseModel):
    """Build-variant marker rewritten in the workflow file."""

    key: str = "kibot_variant"
    from_token: str = "CHECKED"
    to_token: str = "PRELIMINARY"


class CommitSettings(BaseModel):
    """Commit message composition."""

    subject: str = Field(
        default="Initialize development branch for version {version}",
        description="Subject line; {version} is replaced with Major.Minor.Revision",
    )
    default_signer: str = "Unknown <unknown@example.com>"


class DevBranchConfig(BaseModel):
    """Root configuration for devbranch."""

    git: GitSettings = Field(default_factory=GitSettings)
    paths: PathsSettings = Field(default_factory=PathsSettings)
    marker: MarkerSettings = Field(default_factory=MarkerSettings)
    commit: CommitSettings = Field(default_factory=CommitSettings)

    @property
    def default_signed_off_by(self) -> str:
        """Fallback Signed-off-by line used when the template lacks one."""
        return f"Signed-off-by: {self.commit.default_signer}"


def load_config(repo_root: Path) -> DevBranchConfig:
    """Load config from .devbranch.toml in the repository root.

    Args:
        repo_root: Repository root directory

    Returns:
        Loaded configuration, or defaults if the file doesn't exist

    Raises:
        ConfigError: If the file is not valid TOML or fails validation
    """
    config_path = repo_root / CONFIG_FILENAME
    if not config_path.exists():
        return DevBranchConfig()
    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
        return DevBranchConfig.model_validate(data)
    except (tomllib.TOMLDecodeError, UnicodeDecodeError) as e:
        raise ConfigError(f"Invalid TOML in {config_path}: {e}") from e
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration in {config_path}: {e}") from e


def write_config_template(repo_root: Path) -> Path:
    """Write default .devbranch.toml template.

    Args:
        repo_root: Repository root directory

    Returns:
        Path to the written config file
    """
    config_path = repo_root / CONFIG_FILENAME
    template = DevBranchConfig().model_dump()
    with open(config_path, "wb") as f:
        tomli_w.dump(template, f)
    return config_path
