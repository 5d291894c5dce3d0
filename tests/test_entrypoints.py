import importlib
import importlib.util
import sys
from pathlib import Path


def load_launcher():
    spec = importlib.util.spec_from_file_location(
        "brew_livecheck", Path(__file__).resolve().parents[1] / "brew-livecheck.py"
    )
    module = importlib.util.module_from_spec(spec)
    sys.modules[spec.name] = module
    spec.loader.exec_module(module)
    return module


def test_launcher_reexports_main_flow():
    launcher = load_launcher()
    main_flow = importlib.import_module("livecheck_cli.main_flow")
    assert launcher.main is main_flow.main
    assert launcher.run is main_flow.run


def test_package_facade_exports():
    pkg = importlib.import_module("livecheck_cli")
    main_flow = importlib.import_module("livecheck_cli.main_flow")
    assert pkg.main is main_flow.main
    assert issubclass(pkg.UsageError, pkg.LivecheckError)


def test_launcher_version(monkeypatch, capsys):
    launcher = load_launcher()
    main_flow = importlib.import_module("livecheck_cli.main_flow")
    monkeypatch.setattr(main_flow, "pkg_version", lambda name: "1.2.3")
    assert launcher.main(["-V"]) == 0
    assert capsys.readouterr().out.strip() == "1.2.3"
