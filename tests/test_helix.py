import pytest

from grace.helix import OFFSETS, RESET, TripleHelix


def _helix(sequences, num_pep=3):
    return TripleHelix(
        num_pep=num_pep,
        num_aa=len(sequences[0]),
        sequences=list(sequences) + [""] * (3 - len(sequences)),
    )


def test_defaults_match_initial_state():
    helix = TripleHelix()
    assert helix.xaa_pos == -1
    assert helix.nterm == "initial" and helix.cterm == "initial"
    assert len(helix.tm) == 3 and len(helix.tm[0][0][0]) == OFFSETS


@pytest.mark.parametrize("xaa_pos", [-1, 0, 1, 2])
def test_each_position_has_exactly_one_role(xaa_pos):
    helix = TripleHelix(xaa_pos=xaa_pos)
    for position in range(12):
        roles = [helix.is_xaa(position), helix.is_yaa(position), helix.is_gly(position)]
        assert roles.count(True) == 1


def test_gly_first_frame_sets_xaa_pos_one():
    helix = _helix(["GPOGPOGPOGPO"])
    assert helix.determine_repetition() is True
    assert helix.xaa_pos == 1
    assert all(helix.is_gly(p) for p in range(0, 12, 3))
    assert all(helix.is_xaa(p) for p in range(1, 12, 3))
    assert all(helix.is_yaa(p) for p in range(2, 12, 3))


def test_gly_third_frame_sets_xaa_pos_zero():
    helix = _helix(["POGPOGPOGPOG"])
    assert helix.determine_repetition() is True
    assert helix.xaa_pos == 0
    assert helix.is_gly(2) and helix.is_xaa(0) and helix.is_yaa(1)


def test_gly_second_frame_sets_xaa_pos_two():
    helix = _helix(["OGPOGPOGPOGP"])
    assert helix.determine_repetition() is True
    assert helix.xaa_pos == 2
    assert helix.is_gly(1)


def test_lowercase_gly_is_not_counted_and_warns():
    helix = _helix(["gpogpogpogpo"])
    with pytest.warns(RuntimeWarning, match="Gly every third residue"):
        assert helix.determine_repetition() is False
    assert helix.xaa_pos == -1


def test_dissect_lists_strands_and_registers():
    helix = _helix(["GPOGPO", "GAAGAA", "GKKGKK"])
    helix.best_register = [0, 1, 2, 0]
    text = helix.dissect()
    assert "numPep = 3" in text
    assert "GAAGAA" in text
    assert "Best register = 0,1,2.0" in text
    assert "termination: initial initial" in text


def test_user_output_without_color_has_no_escapes():
    helix = _helix(["GPKGPK", "GPEGPE", "GPOGPO"])
    helix.best_register = [0, 1, 2, 0]
    helix.sec_register = [1, 0, 2, 0]
    text = helix.user_output(False)
    assert "\x1b" not in text
    assert "0: GPKGPK" in text
    assert "1:  GPEGPE" in text
    assert "2:   GPOGPO" in text
    assert "WARNING" not in text


def test_user_output_colors_lysine():
    helix = _helix(["GPKGPK", "GPEGPE", "GPOGPO"])
    helix.best_register = [0, 1, 2, 0]
    helix.sec_register = [1, 0, 2, 0]
    text = helix.user_output(True)
    assert "\x1b[1m\x1b[34mK" + RESET in text


def test_user_output_warns_on_homotrimer_best_register():
    helix = _helix(["GPOGPO", "GPOGPO", "GPOGPO"])
    helix.best_register = [0, 0, 0, 0]
    text = helix.user_output(False)
    assert "WARNING: The most stable register/composition" in text


def test_user_output_lists_every_canonical_register():
    helix = _helix(["GPOGPO", "GPOGPO", "GPOGPO"])
    helix.tm[1][2][0][0] = 42.5
    text = helix.user_output(False)
    assert text.count("} = ") == 27
    assert "{120} = 42.5" in text


def test_single_peptide_output_has_no_second_register():
    helix = _helix(["GPOGPO"], num_pep=1)
    text = helix.user_output(False)
    assert "second most stable" not in text
    assert "{000} = 0" in text