"""Demonstration data — nested dictionaries versus tuple-keyed ones.

Pure transforms only; rendering lives in :mod:`ax_tuple.cli.demo`.
"""

from ax_tuple.demo.sales import SAMPLE_SALES, SalesRecord

__all__: list[str] = ["SAMPLE_SALES", "SalesRecord"]
