# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
from __future__ import annotations

import re
import unicodedata

from sklearn.feature_extraction.text import TfidfVectorizer
from sklearn.pipeline import FeatureUnion

WHITESPACE_RE = re.compile(r"\s+")
WORD_TOKEN_PATTERN = r"(?u)\b\w+\b"


def _safe_text(value: object) -> str:
    return str(value or "")


def normalize_text(value: object) -> str:
    """Fold unicode, strip diacritics, lowercase and collapse whitespace."""
    decomposed = unicodedata.normalize("NFKD", _safe_text(value))
    stripped = "".join(char for char in decomposed if not unicodedata.combining(char))
    return WHITESPACE_RE.sub(" ", stripped.lower()).strip()


def build_featurizer(
    *,
    word_ngrams: tuple[int, int] = (1, 2),
    char_ngrams: tuple[int, int] = (3, 3),
    norm: str | None = None,
    use_idf: bool = True,
    min_df: int = 1,
    max_features: int | None = None,
) -> FeatureUnion:
    # Tree learners split one column at a time, so rows are left unnormalized by default.
    return FeatureUnion(
        transformer_list=[
            (
                "word_tfidf",
                TfidfVectorizer(
                    analyzer="word",
                    preprocessor=normalize_text,
                    token_pattern=WORD_TOKEN_PATTERN,
                    ngram_range=word_ngrams,
                    norm=norm,
                    use_idf=use_idf,
                    min_df=min_df,
                    max_features=max_features,
                ),
            ),
            (
                "char_tfidf",
                TfidfVectorizer(
                    analyzer="char_wb",
                    preprocessor=normalize_text,
                    ngram_range=char_ngrams,
                    norm=norm,
                    use_idf=use_idf,
                    min_df=min_df,
                    max_features=max_features,
                ),
            ),
        ]
    )


def vocabulary_size(featurizer: FeatureUnion) -> int:
    return sum(len(vectorizer.vocabulary_) for _name, vectorizer in featurizer.transformer_list)


def vocabulary_terms(featurizer: FeatureUnion) -> set[str]:
    terms: set[str] = set()
    for _name, vectorizer in featurizer.transformer_list:
        terms.update(vectorizer.vocabulary_)
    return terms
