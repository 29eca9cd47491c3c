"""Test our exceptions."""

import pytest

from pyawc.exceptions import UnexpectedStatus


def test_unexpected_status():
    """Test that the status code is carried along."""
    with pytest.raises(UnexpectedStatus, match="unexpected status code: 500"):
        raise UnexpectedStatus(500)
    assert UnexpectedStatus(418).status_code == 418
