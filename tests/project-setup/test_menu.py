import io

import pytest

from create_filecoin_app.menu import MenuConfig, select_option

_OPTIONS = [("Alpha", "a"), ("Beta", "b"), ("Gamma", "c")]


def _inputs(*answers):
    remaining = list(answers)

    def input_fn(_prompt):
        if not remaining:
            raise EOFError
        return remaining.pop(0)
    return input_fn


def _config(*answers):
    return MenuConfig(input_fn=_inputs(*answers), output=io.StringIO())


@pytest.mark.unit
class TestSelectOption:

    def test_returns_value_of_chosen_option(self):
        assert select_option("Pick one:", _OPTIONS, config=_config("2")) == "b"

    def test_empty_input_picks_default(self):
        assert select_option("Pick one:", _OPTIONS, default=3, config=_config("")) == "c"

    def test_reprompts_on_invalid_choice(self):
        config = _config("0", "x", "4", "1")

        assert select_option("Pick one:", _OPTIONS, config=config) == "a"
        assert config.output.getvalue().count("Invalid choice") == 3

    def test_displays_numbered_options_and_default(self):
        config = _config("1")

        select_option("Pick one:", _OPTIONS, config=config)

        shown = config.output.getvalue()
        assert "Pick one:" in shown
        assert "1) Alpha [default]" in shown
        assert "3) Gamma" in shown

    def test_closed_input_exits_cleanly(self):
        with pytest.raises(SystemExit) as exc_info:
            select_option("Pick one:", _OPTIONS, config=_config())

        assert exc_info.value.code == 0
