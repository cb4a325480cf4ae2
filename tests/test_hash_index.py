import pytest

from hash_index import HashIndex


def test_bucket_is_sum_of_char_codes_modulo_size():
    index = HashIndex(10)
    assert index.bucket_of("ab") == (97 + 98) % 10
    assert index.bucket_of("") == 0


def test_lookup_returns_inserted_suspect(index):
    assert index.lookup("O mordomo e canhoto.") == "Mordomo"
    assert index.lookup("Ha rastros de cafe.") == "Cozinheira"
    assert index.lookup("A arma e de prata.") == "Bibliotecario"


def test_lookup_unknown_clue_is_none(index):
    assert index.lookup("A vitima usava um lenco.") is None
    assert "A vitima usava um lenco." not in index


def test_colliding_keys_share_a_chain_newest_first():
    index = HashIndex(10)
    index.insert("ab", "Alice")
    index.insert("ba", "Bruno")
    assert index.bucket_of("ab") == index.bucket_of("ba")
    assert index.chain(index.bucket_of("ab")) == [("ba", "Bruno"), ("ab", "Alice")]
    assert index.lookup("ab") == "Alice"
    assert index.lookup("ba") == "Bruno"


def test_reinserting_shadows_without_removing():
    index = HashIndex(10)
    index.insert("clue", "First")
    index.insert("clue", "Second")
    assert index.lookup("clue") == "Second"
    assert len(index) == 2
    assert index.chain(index.bucket_of("clue")) == [("clue", "Second"), ("clue", "First")]


def test_single_bucket_still_resolves_every_key():
    index = HashIndex.from_pairs([("x", "X"), ("y", "Y"), ("z", "Z")], bucket_count=1)
    assert index.chain_lengths() == [3]
    assert [index.lookup(k) for k in "xyz"] == ["X", "Y", "Z"]


def test_suspects_lists_distinct_reachable_names(index):
    assert index.suspects() == ["Bibliotecario", "Cozinheira", "Jardineiro", "Mordomo"]


def test_zero_buckets_rejected():
    with pytest.raises(ValueError):
        HashIndex(0)


def test_allocation_failure_is_soft(monkeypatch):
    index = HashIndex(10)
    index.insert("keep", "Kept")

    def _fail(**kwargs):
        raise MemoryError

    monkeypatch.setattr("hash_index.HashBucketEntry", _fail)
    assert index.insert("lost", "Nobody") is False
    assert index.lookup("lost") is None
    assert index.lookup("keep") == "Kept"
    assert len(index) == 1
