import pytest

from utok.tokenization.lattice import LatticeConsistencyError, TokenLattice


def test_viterbi_prefers_higher_total_score():
    lattice = TokenLattice("ab")
    lattice.insert(0, 1, -1.0, 10)
    lattice.insert(1, 1, -1.0, 11)
    lattice.insert(0, 2, -1.5, 12)
    assert lattice.tokens() == ["ab"]
    assert lattice.token_ids() == [12]
    assert lattice.nodes[1].backtrace_score == pytest.approx(-1.5)


def test_viterbi_tie_keeps_first_scanned_candidate():
    lattice = TokenLattice("ab")
    lattice.insert(0, 1, -1.0, 10)
    lattice.insert(1, 1, -1.0, 11)
    lattice.insert(0, 2, -2.0, 12)
    assert lattice.token_ids() == [10, 11]

    lattice = TokenLattice("ab")
    lattice.insert(0, 2, -2.0, 12)
    lattice.insert(0, 1, -1.0, 10)
    lattice.insert(1, 1, -1.0, 11)
    assert lattice.token_ids() == [12]


def test_sentinels_and_arena_links():
    lattice = TokenLattice("xy", bos_token_id=7, eos_token_id=8)
    lattice.insert(0, 1, -1.0, 1)
    lattice.insert(1, 1, -1.0, 2)
    path = lattice.viterbi()
    assert [node.token_id for node in path] == [1, 2]
    assert lattice.nodes[0].token_id == 7
    assert lattice.nodes[1].token_id == 8
    assert lattice.nodes[1].prev == path[-1].node_id
    assert path[0].prev == 0


def test_empty_input_has_empty_path():
    lattice = TokenLattice("")
    assert lattice.tokens() == []


def test_missing_predecessor_is_reported():
    lattice = TokenLattice("ab")
    lattice.insert(1, 1, -1.0, 3)
    with pytest.raises(LatticeConsistencyError):
        lattice.viterbi()


def test_insert_rejects_out_of_range_spans():
    lattice = TokenLattice("ab")
    with pytest.raises(ValueError):
        lattice.insert(1, 2, -1.0, 0)
    with pytest.raises(ValueError):
        lattice.insert(0, 0, -1.0, 0)
