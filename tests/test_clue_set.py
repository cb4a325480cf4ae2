from clue_set import ClueSet, count_matching, insert_clue, iter_in_order
from hash_index import HashIndex


def test_in_order_is_sorted_and_unique(clues):
    for text in ["Ha rastros de cafe.", "A arma e de prata.", "O mordomo e canhoto.",
                 "A arma e de prata.", "Ha rastros de cafe."]:
        clues.add(text)
    assert list(clues) == ["A arma e de prata.", "Ha rastros de cafe.", "O mordomo e canhoto."]
    assert len(clues) == 3


def test_add_reports_whether_a_node_was_created(clues):
    assert clues.add("b") is True
    assert clues.add("b") is False
    assert "b" in clues
    assert "c" not in clues


def test_reinsert_leaves_tree_unchanged():
    root = None
    for text in ["m", "c", "x", "a"]:
        root = insert_clue(root, text)
    before = list(iter_in_order(root))
    assert insert_clue(root, "c") is root
    assert list(iter_in_order(root)) == before


def test_enumeration_can_be_repeated(clues):
    clues.add("z")
    clues.add("y")
    assert list(clues) == list(clues) == ["y", "z"]


def test_empty_set():
    clues = ClueSet()
    assert list(clues) == []
    assert len(clues) == 0
    assert clues.root is None


def test_count_matching_counts_distinct_resolved_clues(clues, index):
    for text in ["A porta do jardim esta aberta.", "O mordomo e canhoto.",
                 "O assassino deixou um bilhete.", "A vitima usava um lenco."]:
        clues.add(text)
    assert clues.count_matching("Mordomo", index) == 2
    assert clues.count_matching("Jardineiro", index) == 1
    assert clues.count_matching("Cozinheira", index) == 0
    assert clues.count_matching("mordomo", index) == 0


def test_count_matching_on_empty_tree(index):
    assert count_matching(None, "Mordomo", index) == 0


def test_count_matching_visits_every_node():
    index = HashIndex(10)
    texts = ["d", "b", "f", "a", "c", "e", "g"]
    for text in texts:
        index.insert(text, "Same")
    clues = ClueSet()
    for text in texts:
        clues.add(text)
    assert clues.count_matching("Same", index) == len(texts)


def test_allocation_failure_leaves_tree_intact(clues, monkeypatch):
    clues.add("a")

    def _fail(**kwargs):
        raise MemoryError

    monkeypatch.setattr("clue_set.ClueRecord", _fail)
    assert clues.add("b") is False
    assert list(clues) == ["a"]
    assert len(clues) == 1
