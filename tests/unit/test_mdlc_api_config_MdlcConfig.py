"""Unit tests for mdlc.api.config.MdlcConfig."""

import pytest

from mdlc.api.config.MdlcConfig import MdlcConfig
from tests.unit.conftest import write_config

pytestmark = pytest.mark.config


def test_missing_file_gives_defaults(mdlc_home):
    config = MdlcConfig.load()

    assert MdlcConfig.get_config_path() == mdlc_home / "config.json"
    assert config.check.workers == 8
    assert config.check.per_host_limit == 2
    assert config.check.timeout_secs == 10.0
    assert config.check.retries == 2
    assert config.check.run_timeout_secs is None
    assert config.check.ignored_schemes == ["mailto", "tel", "javascript", "data"]
    assert config.walk.extensions == [".md", ".markdown"]
    assert config.log.level == "INFO"


def test_partial_file_keeps_other_defaults(mdlc_home):
    write_config(mdlc_home, {"check": {"workers": 3, "ignored_schemes": ["FTP:", " tel "]}})
    config = MdlcConfig.load()

    assert config.check.workers == 3
    assert config.check.ignored_schemes == ["ftp", "tel"]
    assert config.check.retries == 2


def test_unknown_key_is_rejected(mdlc_home):
    write_config(mdlc_home, {"check": {"wrokers": 3}})
    with pytest.raises(ValueError, match="check.wrokers"):
        MdlcConfig.load()


def test_out_of_range_value_is_rejected(mdlc_home):
    write_config(mdlc_home, {"check": {"per_host_limit": 0}})
    with pytest.raises(ValueError, match="check.per_host_limit"):
        MdlcConfig.load()


def test_invalid_json_is_rejected(mdlc_home):
    (mdlc_home / "config.json").write_text("{not json")
    with pytest.raises(ValueError, match="Invalid JSON"):
        MdlcConfig.load()


def test_non_object_is_rejected(mdlc_home):
    (mdlc_home / "config.json").write_text("[1, 2]")
    with pytest.raises(ValueError, match="JSON object"):
        MdlcConfig.load()


def test_with_check_overrides_skips_none_and_revalidates():
    config = MdlcConfig()

    assert config.with_check_overrides(workers=None) is config

    updated = config.with_check_overrides(workers=2, retries=None, ignored_schemes=["Mailto"])
    assert updated.check.workers == 2
    assert updated.check.retries == 2
    assert updated.check.ignored_schemes == ["mailto"]
    assert config.check.workers == 8

    with pytest.raises(ValueError):
        config.with_check_overrides(workers=0)


def test_project_root_is_made_absolute(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    config = MdlcConfig().with_check_overrides(project_root="site")
    assert config.check.project_root == str(tmp_path / "site")


def test_to_dict_has_all_sections():
    assert set(MdlcConfig().to_dict()) == {"check", "walk", "log"}
