import pytest


@pytest.fixture
def decision_graph():
    return {
        "Start": {"Decide", "OhOkay"},
        "Decide": {"DoOneThing", "StillNo"},
        "DoOneThing": {"DoAnother"},
        "OhOkay": {"StillNo"},
        "DoAnother": {"WellThatWasFun"},
        "StillNo": {"WellThatWasFun"},
        "WellThatWasFun": {"Bye"},
    }
