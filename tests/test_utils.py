"""Unit tests for the Rich output helpers (crudscaffold.utils)."""

from __future__ import annotations

import pytest

from crudscaffold.utils import (
    print_error,
    print_source,
    print_success,
    print_summary_table,
    print_warning,
)


class TestRichOutputHelpers:
    @pytest.mark.unit
    def test_print_summary_table(self, capsys):
        print_summary_table({"api": "api/widget.js", "view": "views/widget/view.js"}, title="Files")
        out = capsys.readouterr().out
        assert "Files" in out
        assert "api/widget.js" in out
        assert "views/widget/view.js" in out

    @pytest.mark.unit
    def test_print_source(self, capsys):
        print_source("api/widget.js", "export default {}\n")
        out = capsys.readouterr().out
        assert "api/widget.js" in out
        assert "export default {}" in out

    @pytest.mark.unit
    @pytest.mark.parametrize("helper", [print_success, print_error, print_warning])
    def test_message_helpers(self, capsys, helper):
        helper("hello there")
        assert "hello there" in capsys.readouterr().out
