"""Shift engine package.

The package is structured around one normalized schema:
- `models.py` defines the `Shift` record and the totals built from it.
- `sources/` contains one connector per schedule source.
- `normalize.py` holds the shared pay and ordering rules.
- `overlap.py`, `aggregate.py` and `next_shift.py` derive everything else.
- `pipeline.py` runs the whole thing for one payload.
"""
