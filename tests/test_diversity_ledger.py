import pytest

from americanopairing.exceptions import DuplicatePlayerException, UnknownPlayerException
from americanopairing.models.tournament import DiversityLedger

PLAYERS = ["A", "B", "C", "D", "E", "F", "G", "H"]


def test_new_ledger_is_empty():
    ledger = DiversityLedger(PLAYERS)
    assert len(ledger) == 8
    assert "A" in ledger
    assert "Z" not in ledger
    assert ledger.partnership_count() == 0
    assert not ledger.has_partnered("A", "B")
    assert not ledger.has_opposed("A", "C")


def test_record_played_is_symmetric():
    ledger = DiversityLedger(PLAYERS)
    ledger.record_played(("A", "B"), ("C", "D"))

    assert ledger.has_partnered("A", "B")
    assert ledger.has_partnered("B", "A")
    assert ledger.has_partnered("C", "D")
    assert not ledger.has_partnered("A", "C")

    for a in ("A", "B"):
        for b in ("C", "D"):
            assert ledger.has_opposed(a, b)
            assert ledger.has_opposed(b, a)
    assert not ledger.has_opposed("A", "B")
    assert not ledger.has_opposed("A", "E")


def test_partners_and_opponents_accumulate():
    ledger = DiversityLedger(PLAYERS)
    ledger.record_played(("A", "B"), ("C", "D"))
    ledger.record_played(("A", "C"), ("E", "F"))
    ledger.record_played(("A", "B"), ("G", "H"))

    assert ledger.partners_of("A") == {"B", "C"}
    assert ledger.opponents_of("A") == {"C", "D", "E", "F", "G", "H"}
    # A/B recorded twice but counted once
    assert ledger.partnership_count() == 5


def test_to_dict_lists_sorted_relations():
    ledger = DiversityLedger(PLAYERS[:4])
    ledger.record_played(("B", "A"), ("D", "C"))
    data = ledger.to_dict()
    assert data["partners"]["A"] == ["B"]
    assert data["opponents"]["A"] == ["C", "D"]


def test_unknown_player_raises():
    ledger = DiversityLedger(PLAYERS)
    with pytest.raises(UnknownPlayerException):
        ledger.index_of("Z")
    with pytest.raises(UnknownPlayerException):
        ledger.record_played(("A", "Z"), ("C", "D"))


def test_duplicate_player_rejected():
    with pytest.raises(DuplicatePlayerException):
        DiversityLedger(["A", "B", "A", "C"])
