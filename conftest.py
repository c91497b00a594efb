import pytest

from side_pose_matcher.config.enums import Alliance


def pytest_addoption(parser):
    parser.addoption(
        "--level",
        action="store",
        default="full",
        choices=["quick", "full"],
        help="Set the testing level: 'quick' or 'full'.",
    )


# These parameter names match up with the parameter names for
# test functions detected by pytest, and we test such functions
# with all values in the below sets.
# For example, a function with the parameter name known_alliance
# will be tested once with Alliance.BLUE and once with Alliance.RED.
# The key type is a tuple so several parameter names can share one value set.
parameter_values = {
    ("known_alliance",): {
        "quick": [Alliance.BLUE],
        "full": [Alliance.BLUE, Alliance.RED],
    },
    ("alliance",): {
        "quick": [Alliance.BLUE, Alliance.UNKNOWN],
        "full": [Alliance.BLUE, Alliance.RED, Alliance.UNKNOWN],
    },
}


def pytest_generate_tests(metafunc):
    for param_set, cases in parameter_values.items():
        for param in param_set:
            if param in metafunc.fixturenames:
                metafunc.parametrize(param, cases[metafunc.config.getoption("level")])
