import logging

import pytest

from polyinterp.core.exceptions import InterpolationError, InvalidInputError, UnknownMethodError


class TestExceptions:
    """Test cases for the exception hierarchy."""
    @pytest.mark.parametrize("error_class", [InvalidInputError, UnknownMethodError])
    def test_hierarchy(self, error_class):
        error = error_class("bad")
        assert isinstance(error, InterpolationError)
        assert isinstance(error, ValueError)
        assert str(error) == "bad"

    def test_errors_are_logged(self, caplog):
        with caplog.at_level(logging.ERROR, logger="polyinterp.core.exceptions"):
            InvalidInputError("too few nodes")
        assert "too few nodes" in caplog.text
