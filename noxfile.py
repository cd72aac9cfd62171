import os

import nox
from laminci.nox import run, run_pre_commit

# we'd like to aggregate coverage information across sessions
# and for this the code needs to be located in the same
# directory in every github action runner
nox.options.default_venv_backend = "none"

CI = os.environ.get("CI")


@nox.session
def lint(session: nox.Session) -> None:
    run_pre_commit(session)


@nox.session
def install(session):
    run(session, f"uv pip install {'--system' if CI else ''} --no-cache-dir -e .[dev]")


@nox.session
@nox.parametrize("group", ["unit", "sampling"])
def test(session, group):
    coverage_args = "--cov=anyuid --cov-config=pyproject.toml --cov-append --cov-report=term-missing"
    if group == "unit":
        run(session, f"pytest {coverage_args} ./tests -m 'not sampling' --durations=20")
    elif group == "sampling":
        run(session, f"pytest {coverage_args} ./tests -m sampling --durations=20")
