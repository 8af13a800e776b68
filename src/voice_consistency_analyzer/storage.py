"""
Profile Storage

Persist a voice profile and the raw samples it was built from as JSON
documents. The analysis engine is stateless; this is the caller's side.
"""

import json
import logging
from pathlib import Path
from typing import Optional

from pydantic import TypeAdapter, ValidationError

from .config import Settings, get_settings
from .voice.models import Profile

logger = logging.getLogger(__name__)

_profile_adapter = TypeAdapter(Profile)
_samples_adapter = TypeAdapter(list[str])


class ProfileStore:
    """
    JSON-file store for one voice profile and its samples.

    Usage:
        store = ProfileStore.from_settings()
        store.save(profile, samples)
        profile = store.load_profile()
    """

    def __init__(self, profile_path: str | Path, samples_path: str | Path):
        self.profile_path = Path(profile_path)
        self.samples_path = Path(samples_path)

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "ProfileStore":
        settings = settings or get_settings()
        return cls(settings.profile_path, settings.samples_path)

    def exists(self) -> bool:
        return self.profile_path.exists()

    def save(self, profile: Profile, samples: list[str]) -> None:
        """Write the profile and the samples used to build it."""
        self.profile_path.parent.mkdir(parents=True, exist_ok=True)
        self.samples_path.parent.mkdir(parents=True, exist_ok=True)

        self.profile_path.write_text(profile.to_json(), encoding="utf-8")
        self.samples_path.write_text(json.dumps(samples, indent=2), encoding="utf-8")
        logger.info("Saved voice profile to %s", self.profile_path)

    def load_profile(self) -> Optional[Profile]:
        """Load the saved profile, or None if missing or unreadable."""
        return self._load(self.profile_path, _profile_adapter)

    def load_samples(self) -> Optional[list[str]]:
        """Load the saved samples, or None if missing or unreadable."""
        return self._load(self.samples_path, _samples_adapter)

    def clear(self) -> None:
        """Delete the saved profile and samples."""
        for path in (self.profile_path, self.samples_path):
            if path.exists():
                path.unlink()
                logger.info("Removed %s", path)

    def _load(self, path: Path, adapter: TypeAdapter):
        if not path.exists():
            return None
        try:
            return adapter.validate_json(path.read_bytes())
        except ValidationError as e:
            logger.warning("Ignoring malformed %s: %s", path, e)
            return None


def load_profile_file(path: str | Path) -> Profile:
    """
    Load a profile from an explicit JSON file.

    Raises:
        ValueError: if the file does not hold a valid profile
    """
    try:
        return _profile_adapter.validate_json(Path(path).read_bytes())
    except ValidationError as e:
        raise ValueError(f"Not a valid voice profile: {path}") from e
