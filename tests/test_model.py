import json
import math
from pathlib import Path

import pytest

from seroost.model import Doc, Model, compute_idf, compute_tf


@pytest.fixture
def model():
    m = Model()
    m.add_document("a.txt", 100.0, ["cat", "dog", "cat"])
    m.add_document("b.txt", 200.0, ["dog", "bird"])
    return m


def test_add_document_counts(model):
    doc = model.docs[Path("a.txt")]
    assert doc.tf == {"cat": 2, "dog": 1}
    assert doc.count == 3
    assert model.df == {"cat": 1, "dog": 2, "bird": 1}


def test_readding_document_does_not_double_count(model):
    model.add_document("a.txt", 150.0, ["cat"])
    assert model.df == {"cat": 1, "dog": 1, "bird": 1}
    assert model.docs[Path("a.txt")].count == 1
    assert len(model.docs) == 2


def test_remove_document_decrements_df(model):
    model.remove_document("b.txt")
    assert Path("b.txt") not in model.docs
    assert model.df["dog"] == 1
    assert model.df["bird"] == 0


def test_remove_unknown_document_is_noop(model):
    before = dict(model.df)
    model.remove_document("missing.txt")
    assert model.df == before
    assert len(model.docs) == 2


def test_requires_reindexing(model):
    assert model.requires_reindexing("new.txt", 0.0) is True
    assert model.requires_reindexing("a.txt", 100.0) is False
    assert model.requires_reindexing("a.txt", 50.0) is False
    assert model.requires_reindexing("a.txt", 100.5) is True


def test_compute_tf():
    doc = Doc(tf={"a": 1}, count=2, last_modified=0.0)
    assert compute_tf("a", doc) == pytest.approx(0.5)
    assert compute_tf("b", doc) == 0.0


def test_compute_tf_empty_doc_is_nan():
    doc = Doc(tf={}, count=0, last_modified=0.0)
    result = compute_tf("a", doc)
    assert math.isnan(result) is True
    assert str(result) == "nan"


def test_compute_idf():
    assert compute_idf("a", 10, {"a": 1}) == pytest.approx(1.0)
    assert compute_idf("a", 4, {"a": 4}) == 0.0
    assert compute_idf("missing", 1, {}) == 0.0


def test_search_ranks_matching_document_first(model):
    result = model.search_query(["cat"])
    assert [path for path, _ in result] == [Path("a.txt"), Path("b.txt")]
    assert result[0][1] > 0
    assert result[1][1] == 0.0


def test_search_term_in_all_documents_ranks_zero(model):
    result = model.search_query(["dog"])
    assert len(result) == 2
    assert all(rank == 0.0 for _, rank in result)


def test_search_results_sorted_descending(model):
    model.add_document("c.txt", 300.0, ["bird", "bird", "cat"])
    result = model.search_query(["bird", "cat"])
    ranks = [rank for _, rank in result]
    assert ranks == sorted(ranks, reverse=True)
    assert len(result) == 3


def test_search_skips_nan_ranks(model):
    model.add_document("empty.txt", 1.0, [])
    result = model.search_query(["cat"])
    paths = [path for path, _ in result]
    assert Path("empty.txt") not in paths
    assert len(paths) == 2


def test_search_empty_model():
    assert Model().search_query(["cat"]) == []


def test_dict_round_trip(model):
    model.docs[Path("a.txt")].last_modified = 1234.5
    data = json.loads(json.dumps(model.to_dict()))
    restored = Model.from_dict(data)
    assert restored == model


def test_to_dict_time_format(model):
    model.docs[Path("a.txt")].last_modified = 12.5
    data = model.to_dict()
    assert data["docs"]["a.txt"]["last_modified"] == {
        "secs_since_epoch": 12,
        "nanos_since_epoch": 500_000_000,
    }


def test_from_dict_malformed():
    with pytest.raises(ValueError):
        Model.from_dict({"docs": {}})