"""Client-local view state that survives restarts."""

import json
import logging
from pathlib import Path

logger = logging.getLogger(__name__)

DEFAULT_SECTION = "dashboard"


class ViewState:
    """Remembers the last-viewed section in a small JSON file."""

    def __init__(self, path):
        self.path = Path(path)
        self._section = None

    @property
    def section(self):
        if self._section is None:
            self._section = self._load()
        return self._section

    @section.setter
    def section(self, name):
        self._section = name
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps({"section": name}))

    def _load(self):
        try:
            data = json.loads(self.path.read_text())
        except FileNotFoundError:
            return DEFAULT_SECTION
        except (OSError, ValueError) as exc:
            logger.warning(
                "Ignoring unreadable view state %s: %s", self.path, exc
            )
            return DEFAULT_SECTION
        if isinstance(data, dict) and isinstance(data.get("section"), str):
            return data["section"]
        return DEFAULT_SECTION
