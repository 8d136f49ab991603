"""Public smoke tests for basic module wiring.

Keep these minimal and free of any real-world data.
"""

from __future__ import annotations


def test_imports() -> None:
    import larder
    import larder.application.receipts
    import larder.cli.main
    import larder.receipt.normalization
    import larder.runtime

    assert larder is not None
    assert larder.application.receipts is not None
    assert larder.cli.main is not None
    assert larder.receipt.normalization is not None
    assert larder.runtime is not None
