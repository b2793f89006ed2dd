# seroost

A small library for ranking documents against a search query. It has two
parts:

- `seroost.english_stemmer`: the Snowball English stemmer. It reduces words
  to their stems, so that "running" and "run" count as one term.
- `seroost.model`: a term-frequency / inverse-document-frequency model that
  indexes documents and ranks them against a query.

The stemmer is built on the Snowball runtime in `seroost.snowball_env`
(`SnowballEnv`, a text buffer with cursors and editing operations, and
`Among`, an entry of the suffix tables searched by `find_among` and
`find_among_b`). The prelude, region marking and step 1 rules of the English
algorithm live in `seroost.english_rules`; steps 2 to 5, the exception lists
and the postlude live in `seroost.english_stemmer`.

## Installation

```
pip install .
```

The package needs no third-party libraries. To run the tests:

```
pip install ".[test]"
pytest
```

## Stemming

```python
from seroost.english_stemmer import stem

stem("generously")   # "generous"
stem("skies")        # "sky"
stem("running")      # "run"
```

`stem` expects lower-case input; its letter classes cover `a` to `y`.
To stem text already held in a `SnowballEnv`, call `stem_env(env)`; the
result is left in `env.current`.

## Indexing and searching

`Model` holds one `Doc` (term counts, total term count and modification time)
for each indexed path, along with the document frequency of every term. You
supply the terms of each document and of each query, for example stemmed
words:

```python
from seroost.english_stemmer import stem
from seroost.model import Model

def terms(text):
    return [stem(word.lower()) for word in text.split()]

model = Model()
model.add_document("notes/cats.txt", 1700000000.0, terms("cats chase mice"))
model.add_document("notes/dogs.txt", 1700000000.0, terms("dogs chase cats"))

for path, rank in model.search_query(terms("mice")):
    print(path, rank)
```

A document's rank is the sum, over the query terms, of `compute_tf(term, doc)`
(the term's share of the document) times `compute_idf(term, n, df)` (the
base-10 logarithm of the number of documents over the term's document
frequency). `search_query` returns `(path, rank)` pairs as `pathlib.Path`
and float, highest rank first. Results whose rank is not a number, such as
documents with no terms, are left out.

`requires_reindexing(path, last_modified)` returns true when a path is not
indexed or its stored modification time is older than the one given.
`add_document` replaces any earlier entry for the same path, and
`remove_document` takes a path out of the index and lowers the document
frequencies of its terms.

## Saving an index

`to_dict()` and `Model.from_dict()` turn an index into plain dictionaries
that the `json` module can write, and back. Modification times are stored as
`{"secs_since_epoch": ..., "nanos_since_epoch": ...}`. `from_dict` raises
`ValueError` on data of the wrong shape.

```python
import json

with open("index.json", "w", encoding="utf-8") as fh:
    json.dump(model.to_dict(), fh)

with open("index.json", encoding="utf-8") as fh:
    model = Model.from_dict(json.load(fh))
```

## What it does not do

This is a library only. It has no command to run, no HTTP server or web
interface, and it does not walk directories or read text, XML or PDF files.
It also has no tokenizer: splitting text into terms is up to the caller, as
in the example above.