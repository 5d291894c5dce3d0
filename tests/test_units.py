from livecheck_cli.units import Cask, Formula, Kind, Tap


def test_canonical_identifier_per_kind(tmp_path):
    tap = Tap("acme/tools", tmp_path)
    assert Formula("wget", tap).canonical_identifier() == "wget"
    assert Cask("firefox", tap).canonical_identifier() == "firefox"
    assert Formula("wget").kind is Kind.FORMULA
    assert Cask("firefox").kind is Kind.CASK


def test_tap_autobump_reads_file(tmp_path):
    (tmp_path / ".github").mkdir()
    (tmp_path / ".github" / "autobump.txt").write_text(
        "foo\n\n# comment\n bar \n", encoding="utf-8"
    )
    assert Tap("acme/tools", tmp_path).autobump() == frozenset({"foo", "bar"})


def test_tap_autobump_missing_file(tmp_path):
    assert Tap("acme/tools", tmp_path).autobump() == frozenset()


def test_tap_equality_ignores_path(tmp_path):
    assert Tap("acme/tools", tmp_path) == Tap("acme/tools", tmp_path / "elsewhere")
    assert str(Tap("acme/tools", tmp_path)) == "acme/tools"


def test_tap_file_listings_are_recursive_and_sorted(tmp_path):
    (tmp_path / "Formula" / "w").mkdir(parents=True)
    (tmp_path / "Formula" / "w" / "wget.rb").write_text("", encoding="utf-8")
    (tmp_path / "Formula" / "curl.rb").write_text("", encoding="utf-8")
    (tmp_path / "Formula" / "README.md").write_text("", encoding="utf-8")
    files = Tap("acme/tools", tmp_path).formula_files()
    assert [p.name for p in files] == ["curl.rb", "wget.rb"]
    assert Tap("acme/tools", tmp_path).cask_files() == []


def test_tap_core_and_member_directories(tmp_path):
    core = Tap("homebrew/core", tmp_path)
    assert core.is_core
    assert not Tap("acme/tools", tmp_path).is_core
    assert core.formula_dir == tmp_path / "Formula"
    assert core.cask_dir == tmp_path / "Casks"
    assert core.formula_files() == []
