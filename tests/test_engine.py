import io
import json

from livecheck_cli.engine import ListingEngine
from livecheck_cli.units import Cask, Formula, Tap


def test_text_listing(tmp_path):
    out = io.StringIO()
    tap = Tap("acme/tools", tmp_path)
    ListingEngine(out).run_checks([Cask("gadget", tap), Formula("wget")])
    assert out.getvalue() == "gadget\nwget\n"


def test_full_names(tmp_path):
    out = io.StringIO()
    tap = Tap("acme/tools", tmp_path)
    ListingEngine(out).run_checks([Cask("gadget", tap)], full_name=True, quiet=True)
    assert out.getvalue() == "acme/tools/gadget\n"


def test_json_listing(tmp_path):
    out = io.StringIO()
    ListingEngine(out).run_checks([Formula("wget"), Cask("firefox")], json=True)
    assert json.loads(out.getvalue()) == [{"formula": "wget"}, {"cask": "firefox"}]


def test_defaults_to_stdout(capsys):
    ListingEngine().run_checks([Formula("wget")])
    assert capsys.readouterr().out == "wget\n"
