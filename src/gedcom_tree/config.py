import yaml
from pathlib import Path

CONFIG_PATH = Path(__file__).resolve().parents[2] / "config" / "gedcom_tree.yml"

DEFAULT_TREE_LABELS = {
    "root_label": "Family Tree",
    "couple_label": "Couple",
    "family_label": "Family",
}


class GTConfig:
    def __init__(self, data):
        self.paths = data.get("paths", {}) or {}
        self.logging = data.get("logging", {}) or {}
        self.tree = {**DEFAULT_TREE_LABELS, **(data.get("tree", {}) or {})}
        self.debug = data.get("debug", False)


def load_config(path: Path = CONFIG_PATH) -> 'GTConfig':
    # Installed copies have no project-level config directory.
    if not path.exists():
        return GTConfig({})

    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    return GTConfig(data)

_config_cache = None

def get_config() -> 'GTConfig':
    global _config_cache
    if _config_cache is None:
        _config_cache = load_config()
    return _config_cache
