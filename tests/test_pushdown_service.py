import importlib.util
import io
import logging
from pathlib import Path

import pytest

from hangul_pushdown.domain.enums import Choseong, Jongseong, Jungseong
from hangul_pushdown.domain.hangul_unicode import NotHangulSyllableError
from hangul_pushdown.services.pushdown_service import PushdownService
from hangul_pushdown.services.settings_store import SettingsStore


@pytest.fixture
def store(tmp_path: Path) -> SettingsStore:
    return SettingsStore(tmp_path / "settings.yaml")


@pytest.fixture
def script_module():
    """Load utils/pushdown_text.py by path (utils/ is a scripts folder, not a package)."""
    path = Path(__file__).resolve().parents[1] / "utils" / "pushdown_text.py"
    spec = importlib.util.spec_from_file_location("pushdown_text", path)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def test_service_uses_stored_preference(store):
    service = PushdownService(store)
    assert service.extended_default is False
    assert service.pushdown("좋아") == "좋아"

    store.set_extended(True)
    assert service.extended_default is True
    assert service.pushdown("좋아") == "조하"


def test_service_explicit_flag_wins(store):
    store.set_extended(True)
    service = PushdownService(store)
    assert service.pushdown("굳이", extended=False) == "굳이"
    assert service.pushdown("굳이", extended=True) == "구디"


def test_service_logs_rewrites(store, caplog):
    service = PushdownService(store)
    with caplog.at_level(logging.DEBUG, logger="hangul_pushdown.services.pushdown_service"):
        service.pushdown("국어", extended=False)
    assert any("2 rewritten" in r.getMessage() for r in caplog.records)


def test_service_decompose(store):
    service = PushdownService(store)
    s = service.decompose("닭")
    assert (s.choseong, s.jungseong, s.jongseong) == (
        Choseong.Tikeut, Jungseong.A, Jongseong.RieulKiyeok,
    )
    with pytest.raises(NotHangulSyllableError):
        service.decompose("?")


def test_script_transforms_arguments(script_module, tmp_path: Path):
    out = io.StringIO()
    rc = script_module.main(["--settings", str(tmp_path / "s.yaml"), "닭이", "국어"], stdout=out)
    assert rc == 0
    assert out.getvalue() == "달기 구거\n"


def test_script_reads_stdin(script_module, tmp_path: Path):
    out = io.StringIO()
    rc = script_module.main(
        ["--settings", str(tmp_path / "s.yaml"), "--extended"],
        stdin=io.StringIO("싫어\n"),
        stdout=out,
    )
    assert rc == 0
    assert out.getvalue() == "실허\n"


def test_script_save_default(script_module, tmp_path: Path):
    settings = tmp_path / "s.yaml"
    script_module.main(["--settings", str(settings), "--extended", "--save-default", "좋아"],
                       stdout=io.StringIO())
    assert SettingsStore(settings).get_extended() is True

    out = io.StringIO()
    script_module.main(["--settings", str(settings), "좋아"], stdout=out)
    assert out.getvalue() == "조하\n"


def test_script_decompose(script_module, tmp_path: Path):
    out = io.StringIO()
    script_module.main(["--settings", str(tmp_path / "s.yaml"), "--decompose", "닭 a"], stdout=out)
    assert out.getvalue() == "닭\tㄷ ㅏ ㄺ\n"


def test_script_save_default_needs_a_mode(script_module, tmp_path: Path, capsys):
    settings = tmp_path / "s.yaml"
    with pytest.raises(SystemExit) as excinfo:
        script_module.main(["--settings", str(settings), "--save-default", "좋아"],
                           stdout=io.StringIO())
    assert excinfo.value.code == 2
    assert "--save-default" in capsys.readouterr().err
    assert not settings.exists()


def test_script_save_default_conservative(script_module, tmp_path: Path):
    settings = tmp_path / "s.yaml"
    SettingsStore(settings).set_extended(True)
    script_module.main(["--settings", str(settings), "--conservative", "--save-default", "좋아"],
                       stdout=io.StringIO())
    assert SettingsStore(settings).get_extended() is False
