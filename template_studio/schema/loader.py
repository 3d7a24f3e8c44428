"""Template loader - YAML template documents and JSON style presets.

Templates round-trip through YAML so they can be reviewed, version-controlled
and edited by hand.  Style presets use the JSON shape shared with the web
editor's import/export so presets move between tools unchanged.
"""

import json
import logging
from pathlib import Path

import yaml

from .models import StylePreset, TemplateState

logger = logging.getLogger(__name__)


def save_template(template: TemplateState, path: str | Path) -> None:
    """Serialize a TemplateState to a YAML file."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    data = template.to_dict()
    with open(path, "w", encoding="utf-8") as f:
        yaml.dump(data, f, default_flow_style=False, sort_keys=False,
                  allow_unicode=True, width=120)
    logger.debug("Wrote template %s to %s", template.id, path)


def load_template(path: str | Path) -> TemplateState:
    """Deserialize a TemplateState from a YAML (or JSON) file."""
    path = Path(path)
    with open(path, encoding="utf-8") as f:
        # YAML is a superset of JSON, so .json documents load the same way
        data = yaml.safe_load(f)
    logger.debug("Read template from %s", path)
    return TemplateState.from_dict(data)


def dump_style_preset(preset: StylePreset) -> str:
    return json.dumps(preset.to_dict(), indent=2, ensure_ascii=False)


def parse_style_preset(text: str) -> StylePreset:
    return StylePreset.from_dict(json.loads(text))


def save_style_preset(preset: StylePreset, path: str | Path) -> None:
    """Write a StylePreset as JSON."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(dump_style_preset(preset), encoding="utf-8")
    logger.debug("Wrote style preset %s to %s", preset.id, path)


def load_style_preset(path: str | Path) -> StylePreset:
    """Read a StylePreset from a JSON file."""
    return parse_style_preset(Path(path).read_text(encoding="utf-8"))
