"""spec-command configuration."""

from dataclasses import dataclass
from pathlib import Path
from typing import Dict, FrozenSet, List, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_API_REFERENCE_PATH = Path(__file__).parent / "data" / "api_reference.json"

MOTORS_SECTION = "spec-command.mnemonic.motors"
COUNTERS_SECTION = "spec-command.mnemonic.counters"
CODE_SNIPPETS_SECTION = "spec-command.editor.codeSnippets"
PREVIEW_SECTION = "spec-command.showReferenceManualInPreview"
API_REFERENCE_SECTION = "spec-command.apiReferencePath"


class SpecCommandSettings(BaseSettings):
    """User configuration consumed by the registry.

    Resolution order: programmatic, environment vars, .env files, defaults.
    List values are given as JSON in the environment, e.g.
    SPEC_COMMAND_MNEMONIC_MOTORS='["th # theta", "tth # two theta"]'.
    """

    mnemonic_motors: List[str] = Field(
        default_factory=list, description="Motor mnemonics, 'name # description'"
    )
    mnemonic_counters: List[str] = Field(
        default_factory=list, description="Counter mnemonics, 'name # description'"
    )
    editor_code_snippets: List[str] = Field(
        default_factory=list,
        description="User snippet templates, appended after the built-in ones",
    )
    show_reference_manual_in_preview: bool = Field(
        default=True, description="Open the reference manual as rendered Markdown"
    )
    api_reference_path: Path = Field(
        default=DEFAULT_API_REFERENCE_PATH,
        description="JSON file holding the built-in API reference database",
    )

    # Bounded wait for the built-in database in interactive commands
    reference_wait_attempts: int = Field(default=5, ge=0)
    reference_wait_interval_seconds: float = Field(default=0.05, gt=0)

    model_config = SettingsConfigDict(env_prefix="SPEC_COMMAND_", env_file=".env")


# Configuration section affected by each settings field
FIELD_SECTIONS: Dict[str, str] = {
    "mnemonic_motors": MOTORS_SECTION,
    "mnemonic_counters": COUNTERS_SECTION,
    "editor_code_snippets": CODE_SNIPPETS_SECTION,
    "show_reference_manual_in_preview": PREVIEW_SECTION,
    "api_reference_path": API_REFERENCE_SECTION,
}


@dataclass(frozen=True)
class ConfigurationChangeEvent:
    """Notification that some configuration sections changed."""

    sections: FrozenSet[str]

    def affects_configuration(self, section: str) -> bool:
        """True if `section` or any section below it changed.

        'spec-command.mnemonic' is affected by a change to
        'spec-command.mnemonic.motors'.
        """
        return any(s == section or s.startswith(section + ".") for s in self.sections)

    @classmethod
    def between(
        cls, old: SpecCommandSettings, new: SpecCommandSettings
    ) -> "ConfigurationChangeEvent":
        """Compute the sections that differ between two settings objects."""
        return cls(
            frozenset(
                section
                for name, section in FIELD_SECTIONS.items()
                if getattr(old, name) != getattr(new, name)
            )
        )


# Global settings instance
_settings: Optional[SpecCommandSettings] = None


def get_settings() -> SpecCommandSettings:
    """Get the global settings instance."""
    global _settings
    if _settings is None:
        _settings = SpecCommandSettings()
    return _settings


def set_settings(settings: Optional[SpecCommandSettings]) -> None:
    """Set (or with None, reset) the global settings instance."""
    global _settings
    _settings = settings
