"""FormForge configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_SUBMIT_LABEL = "Submit"


@dataclass
class FormForgeConfig:
    """Settings shared by the CLI and applications that load forms from files.

    Attributes:
        forms_path: Directory holding form description files
        log_level: Name of the logging level, e.g. "DEBUG"
        submit_label: Label of the submit button synthesised for forms without buttons
    """

    forms_path: Path
    log_level: str = DEFAULT_LOG_LEVEL
    submit_label: str = DEFAULT_SUBMIT_LABEL

    @classmethod
    def from_env(cls, base_path: Path | None = None) -> FormForgeConfig:
        """Create config from environment variables.

        Resolution order for the forms directory:
        1. FORMFORGE_FORMS_PATH env var
        2. Default: {base_path}/forms, with the working directory as base

        FORMFORGE_LOG_LEVEL and FORMFORGE_SUBMIT_LABEL override the other
        defaults.
        """
        forms_path = os.environ.get("FORMFORGE_FORMS_PATH")
        if forms_path:
            path = Path(forms_path)
        else:
            path = (base_path or Path.cwd()) / "forms"

        return cls(
            forms_path=path,
            log_level=os.environ.get("FORMFORGE_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper(),
            submit_label=os.environ.get("FORMFORGE_SUBMIT_LABEL") or DEFAULT_SUBMIT_LABEL,
        )
