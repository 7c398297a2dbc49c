"""TF-IDF indexing and query package.

- text: word splitting and validation
- query: plus/minus query parsing
- stats: term frequency, inverse document frequency and rating helpers
- server: the inverted index and ranker
- paginator: page windows over result lists
- request_queue: rolling request history
"""
