"""TF-IDF document index."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from os import PathLike
from pathlib import Path
from typing import Any, Iterable, Union

PathArg = Union[str, "PathLike[str]"]


@dataclass
class Doc:
    """Term frequencies of one indexed document."""

    tf: dict[str, int]
    count: int
    last_modified: float


def _time_to_dict(timestamp: float) -> dict[str, int]:
    secs = math.floor(timestamp)
    nanos = round((timestamp - secs) * 1_000_000_000)
    if nanos >= 1_000_000_000:
        secs += 1
        nanos -= 1_000_000_000
    return {"secs_since_epoch": secs, "nanos_since_epoch": nanos}


def _time_from_dict(data: dict[str, Any]) -> float:
    return data["secs_since_epoch"] + data["nanos_since_epoch"] / 1_000_000_000


def compute_tf(term: str, doc: Doc) -> float:
    """Share of the document's terms that are ``term``."""
    m = doc.tf.get(term, 0)
    if doc.count == 0:
        return math.nan
    return m / doc.count


def compute_idf(term: str, n: int, df: dict[str, int]) -> float:
    """Base-10 inverse document frequency of ``term`` among ``n`` documents."""
    m = df.get(term, 1)
    if m == 0:
        return math.nan if n == 0 else math.inf
    ratio = n / m
    if ratio == 0:
        return -math.inf
    return math.log10(ratio)


@dataclass
class Model:
    """Index of documents with their term and document frequencies."""

    docs: dict[Path, Doc] = field(default_factory=dict)
    df: dict[str, int] = field(default_factory=dict)

    def remove_document(self, file_path: PathArg) -> None:
        """Drop a document and its contribution to the document frequencies."""
        doc = self.docs.pop(Path(file_path), None)
        if doc is None:
            return
        for term in doc.tf:
            if term in self.df:
                self.df[term] -= 1

    def requires_reindexing(self, file_path: PathArg, last_modified: float) -> bool:
        """Whether the file is unknown or changed since it was indexed."""
        doc = self.docs.get(Path(file_path))
        if doc is None:
            return True
        return doc.last_modified < last_modified

    def add_document(
        self, file_path: PathArg, last_modified: float, terms: Iterable[str]
    ) -> None:
        """Index a document from its terms, replacing any earlier version."""
        path = Path(file_path)
        self.remove_document(path)

        tf: dict[str, int] = {}
        count = 0
        for term in terms:
            tf[term] = tf.get(term, 0) + 1
            count += 1

        for term in tf:
            self.df[term] = self.df.get(term, 0) + 1

        self.docs[path] = Doc(tf=tf, count=count, last_modified=last_modified)

    def search_query(self, tokens: Iterable[str]) -> list[tuple[Path, float]]:
        """Rank all documents against the tokens, best first."""
        tokens = list(tokens)
        n = len(self.docs)
        result = []
        for path, doc in self.docs.items():
            rank = 0.0
            for token in tokens:
                rank += compute_tf(token, doc) * compute_idf(token, n, self.df)
            if not math.isnan(rank):
                result.append((path, rank))
        result.sort(key=lambda item: item[1])
        result.reverse()
        return result

    def to_dict(self) -> dict[str, Any]:
        """A JSON-ready representation of the index."""
        return {
            "docs": {
                str(path): {
                    "tf": dict(doc.tf),
                    "count": doc.count,
                    "last_modified": _time_to_dict(doc.last_modified),
                }
                for path, doc in self.docs.items()
            },
            "df": dict(self.df),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Model":
        """Rebuild an index from the output of :meth:`to_dict`."""
        try:
            docs = {
                Path(path): Doc(
                    tf={str(k): int(v) for k, v in doc["tf"].items()},
                    count=int(doc["count"]),
                    last_modified=_time_from_dict(doc["last_modified"]),
                )
                for path, doc in data["docs"].items()
            }
            df = {str(k): int(v) for k, v in data["df"].items()}
        except (KeyError, TypeError, AttributeError) as err:
            raise ValueError(f"malformed index data: {err}") from err
        return cls(docs=docs, df=df)