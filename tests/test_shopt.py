import pytest

from nshkit.shopt import SHOPT_COUNT, Shopt, shopt_from_string, string_from_shopt


@pytest.mark.parametrize("opt", list(Shopt))
def test_round_trip(opt):
    assert shopt_from_string(string_from_shopt(opt)) is opt
    assert string_from_shopt(int(opt)) == opt.option


def test_known_names():
    assert shopt_from_string("nullglob") is Shopt.NULLGLOB
    assert shopt_from_string("xpg_echo") is Shopt.XPG_ECHO
    assert string_from_shopt(0) == "ast_print"


def test_unknown_name():
    assert shopt_from_string("nope") is None
    assert shopt_from_string("NULLGLOB") is None


def test_out_of_range_index():
    assert string_from_shopt(SHOPT_COUNT) is None
    assert string_from_shopt(-1) is None


def test_every_index_maps_to_an_option():
    names = [string_from_shopt(i) for i in range(SHOPT_COUNT)]
    assert names == [
        "ast_print",
        "dotglob",
        "expand_aliases",
        "extglob",
        "nocaseglob",
        "nullglob",
        "sourcepath",
        "xpg_echo",
    ]
    assert [shopt_from_string(name) for name in names] == list(Shopt)