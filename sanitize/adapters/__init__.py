"""
Adapters — the only code that touches the real process.

Everything under ``sanitize.core`` is pure data; adapters apply it.
"""
