import json

import pytest

from readme_motion.core.config import load_config, sample_config, write_sample_config
from readme_motion.core.errors import ConfigError
from readme_motion.core.models import WidgetType
from readme_motion.render import render_config


def test_load_missing_config(tmp_path):
    with pytest.raises(ConfigError, match="not found"):
        load_config(tmp_path / "motion.config.json")


def test_load_invalid_json(tmp_path):
    path = tmp_path / "motion.config.json"
    path.write_text("{", encoding="utf-8")
    with pytest.raises(ConfigError):
        load_config(path)


def test_load_defaults(tmp_path):
    path = tmp_path / "motion.config.json"
    path.write_text(json.dumps({"items": [{"type": "badge"}]}), encoding="utf-8")
    cfg = load_config(path)
    assert cfg.theme == "dark"
    assert cfg.out_dir == "assets"
    assert cfg.easter_egg is None
    assert len(cfg.items) == 1


def test_sample_covers_every_widget_type():
    types = {item["type"] for item in sample_config()["items"]}
    assert types == {t.value for t in WidgetType}


def test_scaffold_refuses_overwrite(tmp_path):
    path = tmp_path / "motion.config.json"
    write_sample_config(path)
    with pytest.raises(ConfigError, match="already exists"):
        write_sample_config(path)
    write_sample_config(path, force=True)


def test_scaffold_renders_end_to_end(tmp_path):
    path = write_sample_config(tmp_path / "motion.config.json")
    written = render_config(load_config(path), base_dir=tmp_path)
    assert len(written) == 6
    assert all(p.parent == tmp_path / "assets" for p in written)
