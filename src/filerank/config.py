import json
import sys
from pathlib import Path
from typing import Optional

from filerank.dictionary import Dictionary, UnionDictionary, WordSetDictionary
from filerank.hunspell_dictionary import HunspellDictionary
from filerank.ranking import Ranker

class ConfigManager:
    def __init__(self, config_dir: Optional[Path] = None):
        if config_dir is None:
            config_dir = Path.home() / ".config" / "filerank"
        self.config_dir = Path(config_dir)
        self.config_file = self.config_dir / "settings.json"

        # Default settings
        self.defaults = {
            "language": "en_US",
            "use_hunspell": True,
            "extra_words": [],
        }
        self.settings = dict(self.defaults)
        self.load()

    def load(self):
        if self.config_file.exists():
            try:
                with open(self.config_file, "r", encoding="utf-8") as f:
                    data = json.load(f)
                if not isinstance(data, dict):
                    raise ValueError("settings must be a JSON object")
                self.settings.update(data)
            except (OSError, ValueError) as e:
                print(f"WARNING: Failed to load config {self.config_file}: {e}. Using defaults.", file=sys.stderr)

    def save(self):
        try:
            self.config_dir.mkdir(parents=True, exist_ok=True)
            with open(self.config_file, "w", encoding="utf-8") as f:
                json.dump(self.settings, f, indent=4)
        except OSError as e:
            print(f"WARNING: Failed to save config {self.config_file}: {e}", file=sys.stderr)

    def get(self, key):
        return self.settings.get(key, self.defaults.get(key))

    def set(self, key, value):
        self.settings[key] = value
        self.save()


def build_dictionary(config: ConfigManager) -> Dictionary:
    members = [WordSetDictionary(config.get("extra_words") or [])]
    if config.get("use_hunspell"):
        members.append(HunspellDictionary(config.get("language")))
    return UnionDictionary(members)


def build_ranker(config: Optional[ConfigManager] = None) -> Ranker:
    if config is None:
        config = ConfigManager()
    return Ranker(build_dictionary(config))
