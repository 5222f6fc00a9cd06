import json

import pytest

from passcheck.generator import (
    PAIR_TOKEN_LIMIT,
    SUFFIXES,
    CandidateSet,
    augment,
    combine_pairs,
    generate_and_store,
    generate_password_list,
    leet_bang,
)
from passcheck.storage import STORAGE_KEY, MemoryStore


@pytest.fixture
def jane():
    return {"firstName": "Jane", "lastName": "Doe"}


def test_pairs_for_first_and_last_name(jane):
    words = generate_password_list(jane)
    for expected in ("JaneDoe", "janedoe", "DoeJane", "doejane"):
        assert expected in words
    assert "JaneJane" not in words
    assert "DoeDoe" not in words


def test_suffix_completeness():
    words = generate_password_list({"pet_names": "Tiger"})
    for variant in ("tiger", "Tiger", "TIGER"):
        for suffix in SUFFIXES:
            assert variant + suffix in words
    assert "tiger123" in words
    assert "Tiger2025" in words
    assert "TIGER!" in words
    assert "71g3r!" in words
    assert "71g3r" in words
    assert len([w for w in words if w.startswith("71g3r")]) == 2
    # 3 forms + leet + 27 suffixed + leet bang
    assert len(words) == 3 + 1 + 27 + 1


def test_augment_counts():
    assert len(augment("Tiger")) == 27
    assert augment("Tiger")[0] == "tiger123"
    assert leet_bang("Tiger") == "71g3r!"


def test_output_sorted_and_unique(jane):
    words = generate_password_list({**jane, "city": "Springfield", "pet_names": "Tiger, Biscuit"})
    assert all(a < b for a, b in zip(words, words[1:]))


def test_deterministic(jane):
    assert generate_password_list(jane) == generate_password_list(dict(jane))


def test_insertion_order_does_not_matter():
    a = {"first_name": "Jane", "last_name": "Doe", "city": "Paris", "pet_names": "Rex", "car": "Mustang", "hobbies": "chess"}
    b = dict(reversed(list(a.items())))
    assert generate_password_list(a) == generate_password_list(b)


def test_empty_records():
    assert generate_password_list({}) == []
    assert generate_password_list({"first_name": "", "last_name": None}) == []


def test_short_tokens_never_used():
    words = generate_password_list({"first_name": "Jo", "last_name": "Doe"})
    assert not any("jo" in w.lower() for w in words)
    assert "Doe" in words


def test_combine_pairs_needs_two_tokens():
    assert combine_pairs([]) == []
    assert combine_pairs(["Jane"]) == []


def test_combine_pairs_caps_at_five_tokens():
    tokens = ["Aaa", "Bbb", "Ccc", "Ddd", "Eee", "Fff", "Ggg"]
    pairs = combine_pairs(tokens)
    assert PAIR_TOKEN_LIMIT == 5
    assert len(pairs) == 5 * 4 * 2
    assert "AaaEee" in pairs
    assert not any("Fff" in p or "fff" in p for p in pairs)
    assert not any("Ggg" in p or "ggg" in p for p in pairs)


def test_sixth_token_not_paired():
    record = {"keywords": "Alpha Bravo Charlie Delta Echo Foxtrot"}
    words = generate_password_list(record)
    assert "AlphaEcho" in words
    assert "AlphaFoxtrot" not in words
    assert "foxtrotalpha" not in words
    assert "Foxtrot123" in words


def test_candidate_set_phases():
    candidates = CandidateSet()
    assert candidates.check_or_add("b") is False
    assert candidates.check_or_add("b") is True
    candidates.update(["a", "c", "a"])
    assert len(candidates) == 3
    assert "a" in candidates
    assert candidates.finalize() == ["a", "b", "c"]


def test_sort_is_by_code_point():
    words = generate_password_list({"first_name": "Zed"})
    assert words.index("ZED") < words.index("Zed") < words.index("zed")


def test_generate_and_store_writes_once(jane):
    store = MemoryStore()
    words = generate_and_store(jane, store)
    assert json.loads(store.get(STORAGE_KEY)) == words
