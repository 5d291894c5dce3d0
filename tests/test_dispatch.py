import pytest

from livecheck_cli.errors import UsageError
from livecheck_cli.selection import NO_CANDIDATES_MESSAGE, dispatch, has_candidates
from livecheck_cli.units import Cask, Formula


def test_empty_without_exclusions_is_usage_error():
    with pytest.raises(UsageError) as exc:
        has_candidates([], skipped_autobump=False)
    assert str(exc.value) == NO_CANDIDATES_MESSAGE


def test_empty_after_exclusions_is_nothing_to_do():
    assert has_candidates([], skipped_autobump=True) is False


@pytest.mark.parametrize("skipped", [True, False])
def test_non_empty_always_has_candidates(skipped):
    assert has_candidates([Formula("wget")], skipped_autobump=skipped) is True


def test_engine_called_once_with_candidates_and_options(engine):
    units = [Cask("alfred"), Formula("wget")]
    dispatch(units, {"quiet": True}, engine)
    assert engine.calls == [(units, {"quiet": True})]
