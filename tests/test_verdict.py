from hash_index import HashIndex
from models import VerdictOutcome
from verdict import judge


def _collect(clues, *texts):
    for text in texts:
        clues.add(text)
    return clues


def test_two_supporting_clues_succeed(clues, index):
    _collect(clues, "A porta do jardim esta aberta.", "O mordomo e canhoto.",
             "O assassino deixou um bilhete.")
    verdict = judge("Mordomo", clues, index)
    assert verdict.support == 2
    assert verdict.outcome is VerdictOutcome.SUCCESS
    assert verdict.succeeded
    assert verdict.valid


def test_no_supporting_clue_fails(clues, index):
    _collect(clues, "Ha rastros de cafe.")
    verdict = judge("Mordomo", clues, index)
    assert verdict.support == 0
    assert verdict.outcome is VerdictOutcome.FAILURE


def test_single_clue_is_not_enough(clues, index):
    _collect(clues, "A porta do jardim esta aberta.")
    verdict = judge("Jardineiro", clues, index)
    assert verdict.support == 1
    assert not verdict.succeeded


def test_threshold_is_configurable(clues, index):
    _collect(clues, "A porta do jardim esta aberta.")
    assert judge("Jardineiro", clues, index, threshold=1).succeeded


def test_accused_name_is_stripped_but_case_sensitive(clues, index):
    _collect(clues, "O mordomo e canhoto.", "O assassino deixou um bilhete.")
    assert judge("  Mordomo\n", clues, index).support == 2
    assert judge("mordomo", clues, index).support == 0


def test_empty_accusation_is_invalid(clues, index):
    _collect(clues, "O mordomo e canhoto.", "O assassino deixou um bilhete.")
    verdict = judge("   ", clues, index)
    assert verdict.valid is False
    assert verdict.support == 0
    assert verdict.outcome is VerdictOutcome.FAILURE


def test_judging_does_not_mutate_inputs(clues, index):
    _collect(clues, "O mordomo e canhoto.")
    before = (list(clues), len(index))
    judge("Mordomo", clues, index)
    assert (list(clues), len(index)) == before


def test_shadowed_mapping_decides_support(clues):
    index = HashIndex(10)
    index.insert("bilhete", "Mordomo")
    index.insert("bilhete", "Cozinheira")
    clues.add("bilhete")
    assert judge("Cozinheira", clues, index, threshold=1).succeeded
    assert judge("Mordomo", clues, index, threshold=1).support == 0


def test_accused_name_is_not_split_on_inner_whitespace(clues, index):
    _collect(clues, "O mordomo e canhoto.", "O assassino deixou um bilhete.")
    verdict = judge("Mordomo extra", clues, index)
    assert verdict.accused == "Mordomo extra"
    assert verdict.support == 0
    assert verdict.valid


def test_multi_word_suspect_names_match(clues):
    index = HashIndex(10)
    index.insert("luva", "Dona Clara")
    clues.add("luva")
    assert judge(" Dona Clara ", clues, index, threshold=1).succeeded
