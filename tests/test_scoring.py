import pytest

from grace.energy_params import ScoringParameters, aa_index
from grace.helix import TripleHelix
from grace.scoring import score_helix


def make_helix(strands, nterm="ac", cterm="am", exp_tm=0.0):
    helix = TripleHelix(
        num_pep=len(strands),
        num_aa=len(strands[0]),
        sequences=list(strands) + [""] * (3 - len(strands)),
        nterm=nterm,
        cterm=cterm,
        exp_tm=exp_tm,
    )
    helix.determine_repetition()
    return helix


def all_tms(helix):
    peptides = range(helix.num_pep)
    return [helix.tm[a][b][c][0] for a in peptides for b in peptides for c in peptides]


def rich_parameters():
    params = ScoringParameters()
    for letter, value in zip("POEKDR", (1.2, 0.8, -0.4, 0.3, -0.9, 0.5)):
        params.propensity_x[aa_index(letter)] = value
        params.propensity_y[aa_index(letter)] = value / 2
    params.axial[aa_index("K")][aa_index("E")] = 2.0
    params.axial[aa_index("O")][aa_index("D")] = -1.5
    params.lateral[aa_index("E")][aa_index("K")] = 1.5
    params.lateral[aa_index("D")][aa_index("R")] = -1.0
    params.lateral[aa_index("R")][aa_index("E")] = 0.7
    return params


STRANDS = ["GPOGEKGPOGPO", "GKDGPOGERGPO", "GPRGDOGPKGEO"]


def test_zero_parameters_give_zero_everywhere():
    scored = score_helix(ScoringParameters(), make_helix(["GPP" * 4] * 3))
    assert all(tm == 0 for tm in all_tms(scored))
    assert scored.high_tm == 0
    assert scored.specificity == 0
    # Ties go to the last register scored.
    assert scored.best_register == [2, 2, 2, 0]


def test_tm_is_propensity_plus_pairwise():
    scored = score_helix(rich_parameters(), make_helix(STRANDS))
    for a in range(3):
        for b in range(3):
            for c in range(3):
                assert scored.tm[a][b][c][0] == pytest.approx(
                    scored.propensity[a][b][c][0] + scored.pairwise[a][b][c][0]
                )


def test_best_and_second_best_are_the_top_two():
    scored = score_helix(rich_parameters(), make_helix(STRANDS))
    ranked = sorted(all_tms(scored), reverse=True)
    assert scored.high_tm == pytest.approx(ranked[0])
    assert scored.sec_tm == pytest.approx(ranked[1])
    assert scored.specificity == pytest.approx(ranked[0] - ranked[1])
    best = scored.best_register
    assert scored.tm[best[0]][best[1]][best[2]][0] == pytest.approx(scored.high_tm)
    assert scored.best_propensity + scored.best_pairwise == pytest.approx(scored.high_tm)


def test_correct_composition_uses_every_peptide():
    scored = score_helix(rich_parameters(), make_helix(STRANDS))
    assert sorted(scored.cc_register[:3]) == [0, 1, 2]
    cc = scored.cc_register
    assert scored.tm[cc[0]][cc[1]][cc[2]][0] == pytest.approx(scored.cc_tm)
    assert scored.cc_tm <= scored.high_tm


def test_two_peptide_composition_excludes_homotrimers():
    scored = score_helix(rich_parameters(), make_helix(STRANDS[:2]))
    assert len(set(scored.cc_register[:3])) > 1


def test_propensity_favours_strand_with_bonus():
    params = ScoringParameters()
    params.propensity_x[aa_index("P")] = 1.0
    scored = score_helix(params, make_helix(["GPAGPAGPAGPA", "GAAGAAGAAGAA", "GAAGAAGAAGAA"]))
    assert scored.best_register == [0, 0, 0, 0]
    assert scored.high_tm > scored.sec_tm


def test_frame_shift_cell_follows_termination():
    params = ScoringParameters()
    params.frame_shift[2][2] = 7.0
    capped = score_helix(params, make_helix(["GPP" * 4] * 3))
    assert all(tm == pytest.approx(7.0) for tm in all_tms(capped))
    uncapped = score_helix(params, make_helix(["GPP" * 4] * 3, nterm="n", cterm="c"))
    assert all(tm == 0 for tm in all_tms(uncapped))


@pytest.mark.parametrize("residue, bonus", [("Y", 3.0), ("W", 2.8)])
def test_aromatic_termination_bonus(residue, bonus):
    plain = score_helix(ScoringParameters(), make_helix(["PPG" * 4] * 3))
    capped = score_helix(ScoringParameters(), make_helix([residue + "PG" + "PPG" * 3] * 3))
    assert capped.high_tm - plain.high_tm == pytest.approx(bonus)


def test_stabilising_and_destabilising_pairs():
    positive = ScoringParameters()
    for row in positive.axial:
        row[:] = [1.0] * len(row)
    negative = ScoringParameters()
    for row in negative.lateral:
        row[:] = [-1.0] * len(row)
    helix = make_helix(STRANDS)
    assert score_helix(positive, helix).best_pairwise > 0
    assert score_helix(negative, helix).best_pairwise < 0


def test_single_peptide_keeps_unset_second_register():
    scored = score_helix(ScoringParameters(), make_helix(["GPP" * 4]))
    assert scored.sec_tm == -1000
    assert scored.specificity == 1000
    assert scored.sec_register == [6, 6, 6, 11]
    assert scored.cc_register == [0, 0, 0, 12]


def test_deviation_for_unobserved_transition():
    params = ScoringParameters(a=50.0)
    unobserved = score_helix(params, make_helix(["GPP" * 4] * 3, exp_tm=-10))
    assert unobserved.deviation == pytest.approx(unobserved.cc_tm - 10)
    cold = score_helix(ScoringParameters(), make_helix(["GPP" * 4] * 3, exp_tm=-10))
    assert cold.deviation == 0
    observed = score_helix(params, make_helix(["GPP" * 4] * 3, exp_tm=20))
    assert observed.deviation == pytest.approx(observed.cc_tm - 20)


def test_input_helix_is_left_untouched():
    helix = make_helix(STRANDS)
    score_helix(rich_parameters(), helix)
    assert helix.high_tm == 0
    assert all(tm == 0 for tm in all_tms(helix))


def test_invalid_residue_raises():
    with pytest.raises(ValueError):
        score_helix(ScoringParameters(), make_helix(["GPP1PPGPPGPP"] * 3))


def test_no_peptides_raises():
    with pytest.raises(ValueError):
        score_helix(ScoringParameters(), TripleHelix(num_pep=0, num_aa=12))