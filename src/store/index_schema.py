"""News index settings and mappings."""

from __future__ import annotations

from typing import Any

NEWS_TEXT_ANALYZER = "news_text"
KEYWORD_LOWERCASE_NORMALIZER = "keyword_lowercase"

NEWS_INDEX_SETTINGS: dict[str, Any] = {
    "analysis": {
        "analyzer": {
            NEWS_TEXT_ANALYZER: {
                "type": "custom",
                "tokenizer": "standard",
                "filter": ["lowercase", "stop", "english_stemmer"],
            }
        },
        "filter": {
            "english_stemmer": {"type": "stemmer", "language": "english"},
        },
        "normalizer": {
            KEYWORD_LOWERCASE_NORMALIZER: {"type": "custom", "filter": ["lowercase"]},
        },
    }
}

NEWS_INDEX_MAPPINGS: dict[str, Any] = {
    "dynamic": "strict",
    "properties": {
        "id": {"type": "keyword"},
        "url": {"type": "keyword", "ignore_above": 2048},
        "title": {
            "type": "text",
            "analyzer": NEWS_TEXT_ANALYZER,
            "fields": {"keyword": {"type": "keyword", "ignore_above": 256}},
        },
        "description": {"type": "text", "analyzer": NEWS_TEXT_ANALYZER},
        "llm_summary": {"type": "text", "analyzer": NEWS_TEXT_ANALYZER},
        "source_name": {
            "type": "text",
            "analyzer": NEWS_TEXT_ANALYZER,
            "fields": {
                "keyword": {"type": "keyword", "normalizer": KEYWORD_LOWERCASE_NORMALIZER}
            },
        },
        "category": {
            "type": "text",
            "analyzer": NEWS_TEXT_ANALYZER,
            "fields": {
                "keyword": {"type": "keyword", "normalizer": KEYWORD_LOWERCASE_NORMALIZER}
            },
        },
        "publication_date": {"type": "date"},
        "location": {"type": "geo_point"},
        "relevance_score": {"type": "float"},
        "latitude": {"type": "float"},
        "longitude": {"type": "float"},
    },
}

NEWS_INDEX_SCHEMA: dict[str, Any] = {
    "settings": NEWS_INDEX_SETTINGS,
    "mappings": NEWS_INDEX_MAPPINGS,
}
