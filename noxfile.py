"""
Nox sessions for tx3-sdk.

Sessions:
  - lint   : ruff + mypy over the package and tests
  - tests  : pytest across the supported Python versions

Pass extra args to pytest like:
  nox -s tests -- -k "witness" -vv
"""

from __future__ import annotations

import nox

nox.options.reuse_venv = True
nox.options.stop_on_first_error = False

PY_PATHS = ["tx3_sdk", "tests"]

TEST_PYTHONS = ["3.10", "3.11", "3.12", "3.13"]


@nox.session(name="lint", python="3.12")
def lint(session: nox.Session) -> None:
    """Static analysis: ruff, mypy."""
    session.install("ruff>=0.6.0", "mypy>=1.10.0")
    session.install("-e", ".")
    session.run("ruff", "check", *PY_PATHS)
    session.run("mypy", "--pretty", "--show-error-codes", "--ignore-missing-imports", "tx3_sdk")


@nox.session(name="tests", python=TEST_PYTHONS)
def tests(session: nox.Session) -> None:
    """Unit tests; the TRP server is mocked with respx."""
    session.install("-e", ".[test]")
    session.run("pytest", "-q", *session.posargs)
