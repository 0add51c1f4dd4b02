"""
Benchmark suite for jsoncheck validation throughput.

Compares jsoncheck against established JSON decoders on documents that all of
them accept:
- Python standard library json
- orjson (C-optimized)
- ujson (ultra-fast JSON)

Also times the rejection path, where only jsoncheck reports a typed error.
"""
